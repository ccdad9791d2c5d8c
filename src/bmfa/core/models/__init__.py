"""
Core Models Package

Immutable data models describing a bitmap font atlas.

| Model | Role |
|-------|------|
| `GlyphMetadata` | Per-code-point box inside a slot |
| `AtlasMetadata` | Grid layout + glyph table (metadata.json) |
| `AtlasImage` | Raw RGBA buffer tagged with its origin |
| `Atlas` | Live atlas: metadata fields + canonical image |
"""

from .glyph import GlyphMetadata
from .atlas import Origin, AtlasMetadata, Atlas
from .image import AtlasImage, BYTES_PER_PIXEL

__all__ = [
    "GlyphMetadata",
    "Origin",
    "AtlasMetadata",
    "Atlas",
    "AtlasImage",
    "BYTES_PER_PIXEL",
]
