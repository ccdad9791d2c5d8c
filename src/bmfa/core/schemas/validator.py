"""
Schema Validation Utilities

Validates metadata.json payloads before they are turned into models.

Versioning:
    METADATA_SCHEMA_VERSION is written into every metadata.json.
    Changelog:
      v0: Unversioned layout (no schema_version, no origin, no row/column)
      v1: Adds schema_version, origin and optional per-glyph row/column

    A payload without schema_version is read as v0; it may not carry the
    v1-only fields. Payloads newer than METADATA_SCHEMA_VERSION are
    rejected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

METADATA_SCHEMA_VERSION = 1
LEGACY_SCHEMA_VERSION = 0

REQUIRED_FIELDS = (
    "dimensions", "columns", "rows", "padding",
    "slot_glyph_size", "glyph_size", "glyph_metadata",
)
REQUIRED_GLYPH_FIELDS = ("code_point", "x_min", "y_min", "width", "height", "y_offset")

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when metadata fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def schema_version_of(data: dict[str, Any]) -> int:
    """Get the declared schema version, treating a missing one as legacy v0."""
    return data.get("schema_version", LEGACY_SCHEMA_VERSION)


def validate_metadata(data: Any, *, strict: bool = True) -> int:
    """
    Validate atlas metadata against the schema.

    Args:
        data: Decoded metadata.json payload
        strict: If True, also run full jsonschema validation

    Returns:
        The schema version the payload was validated as

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"metadata must be a JSON object, got {type(data).__name__}"
        )

    missing = [f for f in REQUIRED_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = schema_version_of(data)
    if isinstance(version, bool) or not isinstance(version, int):
        raise ValidationError(
            f"schema_version must be an integer: {version!r}",
            path="schema_version"
        )
    if version > METADATA_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported metadata schema version: {version} "
            f"(newest supported {METADATA_SCHEMA_VERSION})",
            path="schema_version"
        )
    if version == LEGACY_SCHEMA_VERSION:
        _validate_legacy(data)

    for name in REQUIRED_FIELDS[:-1]:
        value = data[name]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(
                f"Invalid {name}: {value!r} (must be non-negative integer)",
                path=name
            )

    table = data["glyph_metadata"]
    if not isinstance(table, dict):
        raise ValidationError("glyph_metadata must be a dict", path="glyph_metadata")
    for key, glyph in table.items():
        _validate_glyph(key, glyph, f"glyph_metadata.{key}")

    if strict:
        schema = _load_schema("atlas_metadata")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e

    return version


def _validate_legacy(data: dict[str, Any]) -> None:
    """Reject v1-only fields in an unversioned payload."""
    if data.get("origin", "TopLeft") != "TopLeft":
        raise ValidationError(
            "origin other than TopLeft requires an explicit schema_version",
            path="origin"
        )
    table = data.get("glyph_metadata")
    if isinstance(table, dict):
        for key, glyph in table.items():
            if isinstance(glyph, dict) and ("row" in glyph or "column" in glyph):
                raise ValidationError(
                    "glyph grid positions require an explicit schema_version",
                    path=f"glyph_metadata.{key}"
                )


def _validate_glyph(key: Any, data: Any, path: str) -> None:
    """Validate one glyph table entry."""
    if not isinstance(data, dict):
        raise ValidationError("glyph entry must be a dict", path=path)

    missing = [f for f in REQUIRED_GLYPH_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Glyph missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    code_point = data["code_point"]
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        raise ValidationError(
            f"Invalid code_point: {code_point!r} (must be integer)",
            path=f"{path}.code_point"
        )
    if str(key) != str(code_point):
        raise ValidationError(
            f"Glyph key {key!r} does not match code_point {code_point}",
            path=path
        )

    for name in REQUIRED_GLYPH_FIELDS[1:]:
        value = data[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"Invalid {name}: {value!r} (must be a number)",
                path=f"{path}.{name}"
            )

    for name in ("row", "column"):
        value = data.get(name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"Invalid {name}: {value!r} (must be integer)",
                path=f"{path}.{name}"
            )
