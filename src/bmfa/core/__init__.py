"""
Bitmap Font Atlas Core Package

Shared data models, error taxonomy, metadata schema and serialization.
These are the single source of truth for every other bmfa module.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses; an Atlas owns copies of its glyph table and pixels

2. **Canonical Orientation**
   - In-memory images are always top-left origin
   - `origin` records how the atlas was authored, for writing it back

3. **Versioned Metadata**
   - metadata.json carries `schema_version`; unversioned files are read
     explicitly as legacy v0
"""

from .models import GlyphMetadata, Origin, AtlasMetadata, Atlas, AtlasImage
from .errors import ErrorKind, BmfaError

__all__ = [
    "GlyphMetadata",
    "Origin",
    "AtlasMetadata",
    "Atlas",
    "AtlasImage",
    "ErrorKind",
    "BmfaError",
]
