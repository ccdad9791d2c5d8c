"""
Unit Tests for Atlas Models

Tests for Origin, AtlasMetadata and Atlas.
"""

import pytest

from bmfa.core.models import Atlas, AtlasMetadata, GlyphMetadata, Origin


class TestOrigin:
    """Tests for the Origin tag."""

    def test_value_when_parsed_from_text_then_matches_member(self):
        """JSON text parses to the matching member."""
        assert Origin("TopLeft") is Origin.TOP_LEFT
        assert Origin("BottomLeft") is Origin.BOTTOM_LEFT

    def test_str_when_member_then_returns_json_text(self):
        """str() gives the text stored in metadata.json."""
        assert str(Origin.BOTTOM_LEFT) == "BottomLeft"


class TestAtlasMetadata:
    """Tests for AtlasMetadata dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Layout Invariant Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_layout_when_sample_grid_then_invariants_hold(self, sample_metadata):
        """16x16 slots of 1 + 31 pixels make a 512 pixel atlas."""
        assert sample_metadata.slot_glyph_size == 32
        assert sample_metadata.dimensions == 512
        assert sample_metadata.dimensions == sample_metadata.columns * sample_metadata.slot_glyph_size
        assert sample_metadata.dimensions == sample_metadata.rows * sample_metadata.slot_glyph_size
        assert sample_metadata.slot_glyph_size == sample_metadata.padding + sample_metadata.glyph_size
        assert sample_metadata.layout_issues() == []
        assert sample_metadata.is_valid_layout is True

    def test_image_length_when_sample_grid_then_one_mebibyte(self, sample_metadata):
        """A 512 pixel RGBA atlas is exactly 1 MiB."""
        assert sample_metadata.image_length == 4 * 512 * 512 == 1_048_576

    def test_layout_issues_when_slot_size_wrong_then_reports_each(self):
        """Inconsistent layouts can be constructed but report their problems."""
        meta = AtlasMetadata(
            dimensions=500, columns=16, rows=16,
            padding=1, slot_glyph_size=32, glyph_size=30,
        )
        issues = meta.layout_issues()
        assert len(issues) == 3
        assert any("columns" in issue for issue in issues)
        assert any("rows" in issue for issue in issues)
        assert any("padding" in issue for issue in issues)
        assert meta.is_valid_layout is False

    # ─────────────────────────────────────────────────────────────────────────
    # Glyph Table Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_table_given_then_copies_it(self, glyph_a):
        """Mutating the caller's dict must not affect the metadata."""
        table = {65: glyph_a}
        meta = AtlasMetadata(8, 1, 1, 0, 8, 8, glyph_metadata=table)
        table.clear()
        assert 65 in meta.glyph_metadata

    def test_init_when_key_mismatches_code_point_then_raises_error(self, glyph_a):
        """Table keys must equal the code point of their record."""
        with pytest.raises(ValueError, match="does not match code_point"):
            AtlasMetadata(8, 1, 1, 0, 8, 8, glyph_metadata={66: glyph_a})

    def test_init_when_origin_text_then_coerced_to_enum(self):
        """Origin given as text becomes the enum member."""
        meta = AtlasMetadata(8, 1, 1, 0, 8, 8, origin="BottomLeft")
        assert meta.origin is Origin.BOTTOM_LEFT

    def test_equality_when_same_fields_and_table_then_equal(self, small_metadata):
        """Equality compares every scalar and the glyph table as a mapping."""
        reordered = dict(reversed(list(small_metadata.glyph_metadata.items())))
        other = AtlasMetadata(32, 4, 4, 1, 8, 7, glyph_metadata=reordered)
        assert other == small_metadata

    def test_equality_when_glyph_differs_then_not_equal(self, small_metadata):
        """One changed glyph makes the metadata unequal."""
        table = dict(small_metadata.glyph_metadata)
        table[32] = GlyphMetadata(32, 0.0, 0.0, 0.0, 0.0, 0.0, row=0, column=0)
        other = AtlasMetadata(32, 4, 4, 1, 8, 7, glyph_metadata=table)
        assert other != small_metadata

    # ─────────────────────────────────────────────────────────────────────────
    # Slot Lookup Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_slot_box_when_top_left_then_counts_rows_from_top(self, small_metadata):
        """Code point 37 is index 5: row 1, column 1."""
        assert small_metadata.slot_box(37) == (8, 8, 16, 16)

    def test_slot_box_when_bottom_left_then_counts_rows_from_bottom(self, glyphs_for):
        """Row 0 of a bottom-left atlas is the last row of canonical pixels."""
        glyphs = glyphs_for(16, 4)
        meta = AtlasMetadata(32, 4, 4, 1, 8, 7, glyph_metadata=glyphs, origin=Origin.BOTTOM_LEFT)
        assert meta.slot_box(32) == (0, 24, 8, 32)

    def test_slot_box_when_unknown_code_point_then_raises_key_error(self, small_metadata):
        """Lookups of absent code points raise KeyError."""
        with pytest.raises(KeyError):
            small_metadata.slot_box(0x263A)

    def test_slot_box_when_no_grid_position_then_raises_error(self, glyph_a):
        """Glyphs without row/column have no slot box."""
        meta = AtlasMetadata(8, 1, 1, 0, 8, 8, glyph_metadata={65: glyph_a})
        with pytest.raises(ValueError, match="has no grid position"):
            meta.slot_box(65)


class TestAtlas:
    """Tests for the in-memory Atlas."""

    def test_new_when_metadata_and_image_then_copies_fields(self, small_metadata, pixels_for):
        """Atlas.new carries over every metadata field."""
        atlas = Atlas.new(small_metadata, pixels_for(32, 32))
        assert atlas.dimensions == 32
        assert atlas.columns == 4
        assert atlas.rows == 4
        assert atlas.padding == 1
        assert atlas.slot_glyph_size == 8
        assert atlas.glyph_size == 7
        assert atlas.origin is Origin.TOP_LEFT
        assert atlas.glyph_metadata == small_metadata.glyph_metadata
        assert atlas.image_length == 4 * 32 * 32

    def test_new_when_bytearray_given_then_owns_immutable_copy(self, small_metadata, pixels_for):
        """The atlas must not alias a mutable buffer held by the caller."""
        buffer = bytearray(pixels_for(32, 32))
        atlas = Atlas.new(small_metadata, buffer)
        buffer[0] = (buffer[0] + 1) % 256
        assert isinstance(atlas.image, bytes)
        assert atlas.image[0] != buffer[0]

    def test_metadata_when_rederived_then_equals_source(self, small_metadata, small_atlas):
        """metadata() rebuilds the record the atlas was made from."""
        assert small_atlas.metadata() == small_metadata

    def test_metadata_when_bottom_left_then_keeps_origin(self, bottom_left_atlas):
        """The declared origin survives re-derivation."""
        assert bottom_left_atlas.metadata().origin is Origin.BOTTOM_LEFT

    def test_fields_when_assigned_then_raises(self, small_atlas):
        """Atlas is frozen: no partial updates."""
        with pytest.raises(AttributeError):
            small_atlas.columns = 8

    def test_slot_box_when_called_then_matches_metadata(self, small_atlas, small_metadata):
        """Atlas.slot_box delegates to the same lookup as the metadata."""
        assert small_atlas.slot_box(47) == small_metadata.slot_box(47)

    def test_repr_when_called_then_does_not_dump_pixels(self, small_atlas):
        """repr summarizes the atlas without the pixel bytes."""
        text = repr(small_atlas)
        assert "16 glyphs" in text
        assert len(text) < 200
