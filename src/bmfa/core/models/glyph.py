"""
Module: glyph

Purpose:
    Provides the GlyphMetadata dataclass - the per-code-point description
    of where a glyph's visible box sits inside its atlas slot.

Key Functions:
    - GlyphMetadata.character: The glyph as a one-character string
    - GlyphMetadata.has_grid_position: Whether row/column are recorded
    - GlyphMetadata.to_dict(): Serialize for JSON
    - GlyphMetadata.from_dict(data): Deserialize from JSON

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.atlas.AtlasMetadata
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MAX_CODE_POINT = 0x10FFFF

# Fields expressed relative to one grid slot, always within [0, 1]
NORMALIZED_FIELDS = ("x_min", "y_min", "width", "height")


@dataclass(frozen=True, slots=True)
class GlyphMetadata:
    """
    Geometry of a single glyph inside its atlas slot.

    All box fields are slot-relative, so the same record works at any
    atlas resolution.

    Attributes:
        code_point: Unicode scalar value identifying the character
        x_min: Left edge of the visible box, in [0, 1]
        y_min: Depth of the box below the baseline, in [0, 1]
        width: Visible width, in [0, 1]
        height: Visible height, in [0, 1]
        y_offset: Baseline offset
        row: Grid row of the glyph's slot (None = implicit packing order)
        column: Grid column of the glyph's slot

    Invariants:
        - 0 <= code_point <= 0x10FFFF
        - x_min, y_min, width, height in [0, 1]
        - row and column are both set or both None, and non-negative

    Example:
        >>> g = GlyphMetadata(code_point=65, x_min=0.1, y_min=0.0,
        ...                   width=0.6, height=0.7, y_offset=0.0)
        >>> g.character
        'A'
    """

    code_point: int
    x_min: float
    y_min: float
    width: float
    height: float
    y_offset: float
    row: Optional[int] = None
    column: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate ranges on construction."""
        if isinstance(self.code_point, bool) or not isinstance(self.code_point, int):
            raise ValueError(f"code_point must be an integer: {self.code_point!r}")
        if not 0 <= self.code_point <= MAX_CODE_POINT:
            raise ValueError(f"code_point out of Unicode range: {self.code_point}")
        for name in NORMALIZED_FIELDS:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1]: {value}")
        if (self.row is None) != (self.column is None):
            raise ValueError(
                f"row and column must be given together: row={self.row}, column={self.column}"
            )
        for name in ("row", "column"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"{name} must be an integer: {value!r}")
        if self.row is not None and (self.row < 0 or self.column < 0):
            raise ValueError(f"grid position must be >= 0: ({self.row}, {self.column})")

    @property
    def character(self) -> str:
        """The glyph as a string of length one."""
        return chr(self.code_point)

    @property
    def has_grid_position(self) -> bool:
        return self.row is not None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict with all geometry fields; row/column only when set
        """
        d: dict[str, Any] = {
            "code_point": self.code_point,
            "x_min": self.x_min,
            "y_min": self.y_min,
            "width": self.width,
            "height": self.height,
            "y_offset": self.y_offset,
        }
        if self.row is not None:
            d["row"] = self.row
            d["column"] = self.column
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GlyphMetadata:
        """
        Deserialize from dictionary.

        Args:
            data: Dict produced by to_dict() or read from metadata.json

        Returns:
            GlyphMetadata instance
        """
        return cls(
            code_point=data["code_point"],
            x_min=data["x_min"],
            y_min=data["y_min"],
            width=data["width"],
            height=data["height"],
            y_offset=data["y_offset"],
            row=data.get("row"),
            column=data.get("column"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"GlyphMetadata({self.code_point}, box=({self.x_min}, {self.y_min}, "
            f"{self.width}, {self.height}), y_offset={self.y_offset})"
        )
