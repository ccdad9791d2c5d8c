"""
Serialization Utilities

Provides to/from JSON utilities for atlas metadata (the metadata.json
entry of a container).

- `serialize_metadata` / `deserialize_metadata` convert between
  AtlasMetadata and plain dicts.
- `metadata_to_json` / `metadata_from_json` add the UTF-8 JSON layer.
- Validation runs before deserialization; the glyph table is keyed by
  the decimal text of each code point.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..models.atlas import AtlasMetadata, Origin
from ..models.glyph import GlyphMetadata
from ..schemas.validator import (
    LEGACY_SCHEMA_VERSION,
    METADATA_SCHEMA_VERSION,
    ValidationError,
    validate_metadata,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Dict Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_metadata(metadata: AtlasMetadata) -> dict[str, Any]:
    """
    Serialize AtlasMetadata to a dictionary.

    The output always carries the current schema_version and will pass
    validation.

    Args:
        metadata: AtlasMetadata instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    glyphs = {
        str(code_point): glyph.to_dict()
        for code_point, glyph in sorted(metadata.glyph_metadata.items())
    }
    return {
        "schema_version": METADATA_SCHEMA_VERSION,
        "dimensions": metadata.dimensions,
        "columns": metadata.columns,
        "rows": metadata.rows,
        "padding": metadata.padding,
        "slot_glyph_size": metadata.slot_glyph_size,
        "glyph_size": metadata.glyph_size,
        "origin": metadata.origin.value,
        "glyph_metadata": glyphs,
    }


def deserialize_metadata(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = True,
) -> AtlasMetadata:
    """
    Deserialize AtlasMetadata from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first
        strict: Run full jsonschema validation (only when validate=True)

    Returns:
        AtlasMetadata instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If a field is out of range for the models
    """
    if validate:
        version = validate_metadata(data, strict=strict)
        if version == LEGACY_SCHEMA_VERSION:
            logger.warning(
                "Reading unversioned atlas metadata as schema v0 "
                f"(current v{METADATA_SCHEMA_VERSION})"
            )

    glyphs = {}
    for glyph_data in data["glyph_metadata"].values():
        glyph = GlyphMetadata.from_dict(glyph_data)
        glyphs[glyph.code_point] = glyph

    return AtlasMetadata(
        dimensions=data["dimensions"],
        columns=data["columns"],
        rows=data["rows"],
        padding=data["padding"],
        slot_glyph_size=data["slot_glyph_size"],
        glyph_size=data["glyph_size"],
        glyph_metadata=glyphs,
        origin=Origin(data.get("origin", Origin.TOP_LEFT.value)),
    )


# ─────────────────────────────────────────────────────────────────────────────
# JSON Utilities
# ─────────────────────────────────────────────────────────────────────────────

def metadata_to_json(metadata: AtlasMetadata, *, indent: int | None = 2) -> bytes:
    """
    Encode AtlasMetadata as UTF-8 JSON.

    Args:
        metadata: Metadata to encode
        indent: JSON indent (None for compact output)

    Returns:
        Encoded bytes for the metadata entry
    """
    data = serialize_metadata(metadata)
    return json.dumps(data, indent=indent, ensure_ascii=False).encode("utf-8")


def metadata_from_json(raw: bytes, *, strict: bool = True) -> AtlasMetadata:
    """
    Decode AtlasMetadata from UTF-8 JSON.

    Args:
        raw: Bytes of the metadata entry
        strict: Run full jsonschema validation

    Returns:
        AtlasMetadata instance

    Raises:
        ValidationError: If the bytes are not valid JSON, fail schema
            validation, or hold out-of-range values
    """
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise ValidationError(f"metadata is not valid JSON: {e}", errors=[str(e)]) from e

    try:
        return deserialize_metadata(data, validate=True, strict=strict)
    except (KeyError, TypeError, ValueError, RecursionError) as e:
        raise ValidationError(f"metadata has invalid values: {e}", errors=[str(e)]) from e
