import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to sys.path so we can import bmfa
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from bmfa.core.models import Atlas, AtlasMetadata, GlyphMetadata, Origin


def make_pixels(width: int, height: int) -> bytes:
    """RGBA pattern where every row differs (R = row, G = column)."""
    y, x = np.mgrid[0:height, 0:width]
    arr = np.stack(
        [y % 256, x % 256, (x + 3 * y) % 256, np.full_like(x, 255)],
        axis=-1,
    ).astype(np.uint8)
    return arr.tobytes()


def make_glyphs(count: int, columns: int) -> dict[int, GlyphMetadata]:
    """Glyphs for printable ASCII starting at space, with grid positions."""
    glyphs = {}
    for i in range(count):
        code_point = 32 + i
        glyphs[code_point] = GlyphMetadata(
            code_point=code_point,
            x_min=0.1,
            y_min=0.125,
            width=0.6,
            height=0.75,
            y_offset=0.0625,
            row=i // columns,
            column=i % columns,
        )
    return glyphs


# Common test fixtures
@pytest.fixture
def glyph_a() -> GlyphMetadata:
    """Glyph for 'A' without a grid position."""
    return GlyphMetadata(
        code_point=65, x_min=0.1, y_min=0.2, width=0.6, height=0.7, y_offset=0.05
    )


@pytest.fixture
def small_metadata() -> AtlasMetadata:
    """4x4 grid of 8px slots (padding 1, glyph 7) -> 32px atlas."""
    return AtlasMetadata(
        dimensions=32,
        columns=4,
        rows=4,
        padding=1,
        slot_glyph_size=8,
        glyph_size=7,
        glyph_metadata=make_glyphs(16, 4),
    )


@pytest.fixture
def small_atlas(small_metadata: AtlasMetadata) -> Atlas:
    """Top-left atlas built from small_metadata."""
    return Atlas.new(small_metadata, make_pixels(32, 32))


@pytest.fixture
def bottom_left_atlas(small_metadata: AtlasMetadata) -> Atlas:
    """Same grid as small_atlas, authored with a bottom-left origin."""
    metadata = AtlasMetadata(
        dimensions=small_metadata.dimensions,
        columns=small_metadata.columns,
        rows=small_metadata.rows,
        padding=small_metadata.padding,
        slot_glyph_size=small_metadata.slot_glyph_size,
        glyph_size=small_metadata.glyph_size,
        glyph_metadata=small_metadata.glyph_metadata,
        origin=Origin.BOTTOM_LEFT,
    )
    return Atlas.new(metadata, make_pixels(32, 32))


@pytest.fixture
def sample_metadata() -> AtlasMetadata:
    """16x16 grid, padding 1, glyph 31 -> 32px slots, 512px atlas."""
    return AtlasMetadata(
        dimensions=512,
        columns=16,
        rows=16,
        padding=1,
        slot_glyph_size=32,
        glyph_size=31,
        glyph_metadata=make_glyphs(95, 16),
    )


@pytest.fixture
def pixels_for():
    """Factory fixture for make_pixels."""
    return make_pixels


@pytest.fixture
def glyphs_for():
    """Factory fixture for make_glyphs."""
    return make_glyphs
