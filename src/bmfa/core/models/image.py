"""
Module: image

Purpose:
    Provides the AtlasImage dataclass - a raw RGBA8 pixel buffer tagged
    with the row-order convention it was authored in.

Dependencies:
    - dataclasses (std)

Used By:
    - imaging.orientation
    - imaging.raster
    - builder.assembler
"""

from __future__ import annotations

from dataclasses import dataclass

from .atlas import Origin

BYTES_PER_PIXEL = 4


@dataclass(frozen=True, slots=True)
class AtlasImage:
    """
    Raw RGBA pixel buffer (8 bits per channel, row-major).

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: len == 4 * width * height
        origin: Which image row is row zero for this buffer

    Invariants:
        - width >= 0, height >= 0
        - len(pixels) == 4 * width * height
    """

    width: int
    height: int
    pixels: bytes
    origin: Origin = Origin.TOP_LEFT

    def __post_init__(self) -> None:
        """Validate buffer size on construction."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"image size must be >= 0: {self.width}x{self.height}")
        if not isinstance(self.pixels, bytes):
            object.__setattr__(self, "pixels", bytes(self.pixels))
        object.__setattr__(self, "origin", Origin(self.origin))
        expected = BYTES_PER_PIXEL * self.width * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel buffer has {len(self.pixels)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    @property
    def stride(self) -> int:
        """Bytes per image row."""
        return BYTES_PER_PIXEL * self.width

    @property
    def is_canonical(self) -> bool:
        return self.origin is Origin.TOP_LEFT

    def __repr__(self) -> str:
        return f"AtlasImage({self.width}x{self.height}, origin={self.origin.value})"
