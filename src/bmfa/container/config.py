"""
Module: container.config

Purpose:
    Configuration dataclass for reading and writing .bmfa containers.
    Immutable configuration with validation on construction.

Key Classes:
    - ContainerConfig: Entry names, file extension and write options

Dependencies:
    - dataclasses (std)
    - zipfile (std): Compression constants

Used By:
    - container.reader
    - container.writer
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass
from typing import Optional

_COMPRESSION_METHODS = (
    zipfile.ZIP_STORED,
    zipfile.ZIP_DEFLATED,
    zipfile.ZIP_BZIP2,
    zipfile.ZIP_LZMA,
)


@dataclass(frozen=True)
class ContainerConfig:
    """
    Configuration for the container codec (immutable).

    Attributes:
        metadata_entry: Archive entry holding metadata JSON
        image_entry: Archive entry holding the PNG atlas image
        extension: Suffix forced by write_to_file
        compression: zipfile compression constant used when writing
        json_indent: Indent for metadata JSON (None = compact)
        strict_schema: Run full jsonschema validation when reading

    Example:
        >>> config = ContainerConfig(compression=zipfile.ZIP_DEFLATED)
    """

    metadata_entry: str = "metadata.json"
    image_entry: str = "atlas.png"
    extension: str = ".bmfa"
    compression: int = zipfile.ZIP_STORED  # Original files are stored uncompressed
    json_indent: Optional[int] = 2
    strict_schema: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.metadata_entry or not self.image_entry:
            raise ValueError("entry names must be non-empty")
        if self.metadata_entry == self.image_entry:
            raise ValueError(f"entry names must differ: {self.metadata_entry!r}")
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError(f"extension must look like '.ext': {self.extension!r}")
        if self.compression not in _COMPRESSION_METHODS:
            raise ValueError(f"unknown zip compression method: {self.compression}")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be non-negative: {self.json_indent}")


DEFAULT_CONFIG = ContainerConfig()
