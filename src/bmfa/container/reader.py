"""
Module: container.reader

Purpose:
    Read a .bmfa container into an Atlas. Opens the zip archive, decodes
    the metadata and image entries, and hands both to the builder.

Key Functions:
    - load(): Read from a file path
    - from_reader(): Read from a seekable binary stream

Failure order (first failure wins):
    source cannot be opened      -> SOURCE_NOT_FOUND
    not a zip archive            -> CONTAINER_UNREADABLE
    no metadata entry            -> METADATA_ENTRY_MISSING
    metadata fails to decode     -> METADATA_CORRUPT
    no image entry               -> IMAGE_ENTRY_MISSING
    image fails to decode/match  -> IMAGE_CORRUPT

Dependencies:
    - zipfile (std)
    - bmfa.core.utils.serialization: metadata JSON
    - bmfa.imaging.raster: PNG decode
    - bmfa.builder: build_atlas
"""

from __future__ import annotations

import logging
import zipfile
import zlib
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Optional, Union

from bmfa.builder import build_atlas
from bmfa.core.errors import BmfaError, ErrorKind
from bmfa.core.models import Atlas
from bmfa.core.schemas.validator import ValidationError
from bmfa.core.utils.serialization import metadata_from_json
from bmfa.imaging.raster import RasterError, decode_png

from .config import ContainerConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def from_reader(stream: BinaryIO, config: Optional[ContainerConfig] = None) -> Atlas:
    """
    Read a font atlas from a seekable binary stream.

    Args:
        stream: Stream positioned anywhere in a zip container
        config: Entry names and validation options

    Returns:
        Atlas with canonical (top-left) image bytes

    Raises:
        BmfaError: On any failure, with the kind of the first failing step
    """
    config = config or DEFAULT_CONFIG

    try:
        archive = zipfile.ZipFile(stream, "r")
    except (zipfile.BadZipFile, OSError, EOFError, NotImplementedError, ValueError) as e:
        raise BmfaError(ErrorKind.CONTAINER_UNREADABLE, e) from e

    with archive:
        raw_metadata = _read_entry(
            archive,
            config.metadata_entry,
            missing=ErrorKind.METADATA_ENTRY_MISSING,
            corrupt=ErrorKind.METADATA_CORRUPT,
        )
        try:
            metadata = metadata_from_json(raw_metadata, strict=config.strict_schema)
        except ValidationError as e:
            raise BmfaError(ErrorKind.METADATA_CORRUPT, e) from e
        logger.debug(
            f"Read metadata: {metadata.dimensions}px, {len(metadata.glyph_metadata)} glyphs, "
            f"origin={metadata.origin}"
        )

        raw_image = _read_entry(
            archive,
            config.image_entry,
            missing=ErrorKind.IMAGE_ENTRY_MISSING,
            corrupt=ErrorKind.IMAGE_CORRUPT,
        )
        try:
            image = decode_png(raw_image, origin=metadata.origin)
        except RasterError as e:
            raise BmfaError(ErrorKind.IMAGE_CORRUPT, e) from e

    return build_atlas(metadata, image)


def load(path: Union[str, PathLike], config: Optional[ContainerConfig] = None) -> Atlas:
    """
    Load a font atlas directly from a file.

    Args:
        path: Path to a .bmfa file (any extension is accepted)
        config: Entry names and validation options

    Returns:
        Atlas with canonical (top-left) image bytes

    Raises:
        BmfaError: SOURCE_NOT_FOUND if the file cannot be opened, or the
            kind of the first failing read step
    """
    path = Path(path)
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise BmfaError(ErrorKind.SOURCE_NOT_FOUND, e) from e

    with stream:
        atlas = from_reader(stream, config)

    logger.info(f"Loaded font atlas {path} ({atlas!r})")
    return atlas


def _read_entry(
    archive: zipfile.ZipFile,
    name: str,
    *,
    missing: ErrorKind,
    corrupt: ErrorKind,
) -> bytes:
    """Read one archive entry, mapping zip failures to error kinds."""
    try:
        info = archive.getinfo(name)
    except KeyError as e:
        raise BmfaError(missing, f"no entry named {name!r}") from e
    try:
        return archive.read(info)
    except (
        zipfile.BadZipFile, OSError, EOFError, zlib.error,
        NotImplementedError, ValueError, RuntimeError,
    ) as e:
        raise BmfaError(corrupt, e) from e
