"""
Module: container

Purpose:
    Read/write of the two-entry .bmfa zip container.

Key Functions:
    - load(), from_reader(): Container -> Atlas
    - write_to_file(), to_writer(): Atlas -> container

Container layout:
    font.bmfa
    ├── metadata.json    # AtlasMetadata, glyph table keyed by code point
    └── atlas.png        # RGBA image, rows in the declared origin's order
"""

from .config import ContainerConfig, DEFAULT_CONFIG
from .reader import load, from_reader
from .writer import write_to_file, to_writer

__all__ = [
    "ContainerConfig",
    "DEFAULT_CONFIG",
    "load",
    "from_reader",
    "write_to_file",
    "to_writer",
]
