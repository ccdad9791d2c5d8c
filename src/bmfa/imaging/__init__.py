"""
Module: imaging

Purpose:
    Pixel-level helpers for atlas images: the origin normalizer and the
    PNG codec.

Key Functions:
    - flip_rows(), to_canonical(), from_canonical(): Row-order handling
    - decode_png(), encode_png(): PNG codec

Dependencies:
    - numpy: Row reversal
    - PIL/Pillow: PNG codec
"""

from .orientation import flip_rows, to_canonical, from_canonical
from .raster import decode_png, encode_png, RasterError

__all__ = [
    "flip_rows",
    "to_canonical",
    "from_canonical",
    "decode_png",
    "encode_png",
    "RasterError",
]
