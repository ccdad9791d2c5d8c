"""
Module: container.writer

Purpose:
    Write an Atlas as a .bmfa container: metadata.json followed by
    atlas.png, with the image re-oriented to the atlas's declared origin.

Key Functions:
    - write_to_file(): Main entry point, forces the .bmfa extension
    - to_writer(): Write to a seekable binary stream

Dependencies:
    - zipfile (std)
    - bmfa.core.utils.serialization: metadata JSON
    - bmfa.imaging: from_canonical, encode_png

Notes:
    The caller's atlas is never modified; re-orientation works on new
    bytes. A failed write may leave a partial file behind; callers that
    need atomic replacement should write to a temporary path and rename.
"""

from __future__ import annotations

import logging
import zipfile
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Optional, Union

from bmfa.core.errors import BmfaError, ErrorKind
from bmfa.core.models import Atlas, AtlasImage
from bmfa.core.utils.serialization import metadata_to_json
from bmfa.imaging.orientation import from_canonical
from bmfa.imaging.raster import RasterError, encode_png

from .config import ContainerConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def to_writer(stream: BinaryIO, atlas: Atlas, config: Optional[ContainerConfig] = None) -> None:
    """
    Write a font atlas container to a binary stream.

    Args:
        stream: Writable, seekable binary stream
        atlas: Atlas to write (not modified)
        config: Entry names and write options

    Raises:
        BmfaError: WRITE_FAILED wrapping the underlying cause
    """
    config = config or DEFAULT_CONFIG

    try:
        raw_metadata = metadata_to_json(atlas.metadata(), indent=config.json_indent)
        canonical = AtlasImage(atlas.dimensions, atlas.dimensions, atlas.image)
        stored = from_canonical(canonical, atlas.origin)
        raw_image = encode_png(stored)

        with zipfile.ZipFile(stream, "w", config.compression) as archive:
            archive.writestr(config.metadata_entry, raw_metadata)
            logger.debug(f"Wrote {config.metadata_entry} ({len(raw_metadata)} bytes)")
            archive.writestr(config.image_entry, raw_image)
            logger.debug(f"Wrote {config.image_entry} ({len(raw_image)} bytes)")
    except (OSError, ValueError, RasterError, RuntimeError) as e:
        raise BmfaError(ErrorKind.WRITE_FAILED, e) from e


def write_to_file(
    atlas: Atlas,
    path: Union[str, PathLike],
    config: Optional[ContainerConfig] = None,
) -> Path:
    """
    Write a font atlas to disk.

    The extension is always replaced with config.extension (".bmfa"),
    whatever the caller supplied.

    Args:
        atlas: Atlas to write (not modified)
        path: Destination path
        config: Entry names and write options

    Returns:
        Path of the written file

    Raises:
        BmfaError: WRITE_FAILED if the file cannot be created or written
    """
    config = config or DEFAULT_CONFIG
    output_path = Path(path)
    if output_path.suffix != config.extension:
        output_path = output_path.with_suffix(config.extension)

    logger.info(f"Writing font atlas to {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        stream = open(output_path, "wb")
    except OSError as e:
        raise BmfaError(ErrorKind.WRITE_FAILED, e) from e

    with stream:
        to_writer(stream, atlas, config)

    return output_path
