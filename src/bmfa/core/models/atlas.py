"""
Module: atlas

Purpose:
    Provides the atlas-level models: the Origin row-order tag, the
    AtlasMetadata grid/glyph description stored in metadata.json, and the
    live in-memory Atlas handed to the rendering pipeline.

Key Functions:
    - AtlasMetadata.layout_issues(): List violated grid invariants
    - AtlasMetadata.slot_box(code_point): Pixel rectangle of a glyph slot
    - Atlas.new(metadata, image): Build from canonical pixel bytes
    - Atlas.metadata(): Re-derive the AtlasMetadata for writing

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .glyph.GlyphMetadata

Used By:
    - core.utils.serialization
    - builder.assembler
    - container.reader / container.writer

Layout invariants (checked, not enforced on construction):
    dimensions == columns * slot_glyph_size
    dimensions == rows * slot_glyph_size
    slot_glyph_size == padding + glyph_size
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .glyph import GlyphMetadata


class Origin(str, Enum):
    """Which image row is row zero."""
    TOP_LEFT = "TopLeft"
    BOTTOM_LEFT = "BottomLeft"

    def __str__(self) -> str:
        return self.value


def _own_glyph_table(table: Mapping[int, GlyphMetadata]) -> dict[int, GlyphMetadata]:
    """Copy a glyph table, checking each key matches its record."""
    owned = dict(table)
    for key, glyph in owned.items():
        if key != glyph.code_point:
            raise ValueError(
                f"glyph table key {key!r} does not match code_point {glyph.code_point}"
            )
    return owned


def _slot_box(
    glyph: GlyphMetadata,
    rows: int,
    slot_glyph_size: int,
    origin: Origin,
) -> tuple[int, int, int, int]:
    if not glyph.has_grid_position:
        raise ValueError(f"glyph {glyph.code_point} has no grid position")
    # Rows count from the declared origin; boxes are in top-left pixel space
    row = glyph.row if origin is Origin.TOP_LEFT else rows - 1 - glyph.row
    left = glyph.column * slot_glyph_size
    top = row * slot_glyph_size
    return (left, top, left + slot_glyph_size, top + slot_glyph_size)


@dataclass(frozen=True, slots=True)
class AtlasMetadata:
    """
    Grid layout plus the full glyph table of one atlas.

    Attributes:
        dimensions: Side length in pixels of the square atlas image
        columns: Glyph slots per image row
        rows: Glyph slots per image column
        padding: Pixels from a slot's edge to where glyph content starts
        slot_glyph_size: Pixels per slot (padding + glyph_size)
        glyph_size: Pixels available to glyph content inside a slot
        glyph_metadata: Mapping of code point to GlyphMetadata
        origin: Row-order convention the atlas was authored in

    Example:
        >>> meta = AtlasMetadata(dimensions=512, columns=16, rows=16,
        ...                      padding=1, slot_glyph_size=32, glyph_size=31)
        >>> meta.is_valid_layout
        True
    """

    dimensions: int
    columns: int
    rows: int
    padding: int
    slot_glyph_size: int
    glyph_size: int
    glyph_metadata: dict[int, GlyphMetadata] = field(default_factory=dict)
    origin: Origin = Origin.TOP_LEFT

    def __post_init__(self) -> None:
        """Take ownership of the glyph table and coerce the origin tag."""
        object.__setattr__(self, "glyph_metadata", _own_glyph_table(self.glyph_metadata))
        object.__setattr__(self, "origin", Origin(self.origin))

    def layout_issues(self) -> list[str]:
        """
        Check the grid invariants.

        Returns:
            Human-readable violations; empty when the layout is consistent
        """
        issues = []
        if self.dimensions != self.columns * self.slot_glyph_size:
            issues.append(
                f"dimensions {self.dimensions} != columns {self.columns} * "
                f"slot_glyph_size {self.slot_glyph_size}"
            )
        if self.dimensions != self.rows * self.slot_glyph_size:
            issues.append(
                f"dimensions {self.dimensions} != rows {self.rows} * "
                f"slot_glyph_size {self.slot_glyph_size}"
            )
        if self.slot_glyph_size != self.padding + self.glyph_size:
            issues.append(
                f"slot_glyph_size {self.slot_glyph_size} != padding {self.padding} + "
                f"glyph_size {self.glyph_size}"
            )
        return issues

    @property
    def is_valid_layout(self) -> bool:
        return not self.layout_issues()

    @property
    def image_length(self) -> int:
        """Expected RGBA byte length of the atlas image."""
        return 4 * self.dimensions * self.dimensions

    def slot_box(self, code_point: int) -> tuple[int, int, int, int]:
        """
        Get the pixel rectangle of a glyph's slot.

        Args:
            code_point: Code point of a glyph that records row/column

        Returns:
            (left, top, right, bottom) in top-left pixel coordinates,
            right/bottom exclusive

        Raises:
            KeyError: If the code point is not in the glyph table
            ValueError: If the glyph has no grid position
        """
        glyph = self.glyph_metadata[code_point]
        return _slot_box(glyph, self.rows, self.slot_glyph_size, self.origin)


@dataclass(frozen=True, slots=True)
class Atlas:
    """
    A bitmap font sheet ready for rendering.

    Holds the grid parameters and glyph table needed to index into the
    image, plus the image itself. The image is always stored in
    canonical (top-left origin) row order; `origin` remembers how the
    atlas was authored so a write can restore that orientation.

    Instances own copies of their glyph table and pixel bytes; nothing
    outside the atlas can mutate them.
    """

    dimensions: int
    columns: int
    rows: int
    padding: int
    slot_glyph_size: int
    glyph_size: int
    glyph_metadata: dict[int, GlyphMetadata]
    image: bytes
    origin: Origin = Origin.TOP_LEFT

    def __post_init__(self) -> None:
        object.__setattr__(self, "glyph_metadata", _own_glyph_table(self.glyph_metadata))
        object.__setattr__(self, "image", bytes(self.image))
        object.__setattr__(self, "origin", Origin(self.origin))

    @classmethod
    def new(cls, metadata: AtlasMetadata, image: bytes) -> Atlas:
        """
        Create an atlas from metadata and canonical (top-left) pixel bytes.

        No orientation handling is done here; use
        builder.assembler.build_atlas for decoded images.
        """
        return cls(
            dimensions=metadata.dimensions,
            columns=metadata.columns,
            rows=metadata.rows,
            padding=metadata.padding,
            slot_glyph_size=metadata.slot_glyph_size,
            glyph_size=metadata.glyph_size,
            glyph_metadata=metadata.glyph_metadata,
            image=image,
            origin=metadata.origin,
        )

    def metadata(self) -> AtlasMetadata:
        """Re-derive the metadata record describing this atlas."""
        return AtlasMetadata(
            dimensions=self.dimensions,
            columns=self.columns,
            rows=self.rows,
            padding=self.padding,
            slot_glyph_size=self.slot_glyph_size,
            glyph_size=self.glyph_size,
            glyph_metadata=self.glyph_metadata,
            origin=self.origin,
        )

    @property
    def image_length(self) -> int:
        return len(self.image)

    def slot_box(self, code_point: int) -> tuple[int, int, int, int]:
        """Pixel rectangle of a glyph's slot in the canonical image."""
        glyph = self.glyph_metadata[code_point]
        return _slot_box(glyph, self.rows, self.slot_glyph_size, self.origin)

    def __repr__(self) -> str:
        return (
            f"Atlas({self.dimensions}px, {self.columns}x{self.rows} slots of "
            f"{self.slot_glyph_size}px, {len(self.glyph_metadata)} glyphs, "
            f"origin={self.origin.value})"
        )
