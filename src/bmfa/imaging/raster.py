"""
Module: imaging.raster

Purpose:
    PNG decode/encode for the atlas.png entry. Converts between PNG
    bytes and raw RGBA8 AtlasImage buffers; no orientation handling.

Key Functions:
    - decode_png(): PNG stream -> AtlasImage (RGBA)
    - encode_png(): AtlasImage -> PNG bytes

Dependencies:
    - PIL/Pillow

Used By:
    - container.reader
    - container.writer
"""

from __future__ import annotations

from io import BytesIO
from typing import BinaryIO, Union

from PIL import Image

from bmfa.core.models import AtlasImage, Origin


class RasterError(Exception):
    """PNG data could not be decoded or encoded."""
    pass


def decode_png(source: Union[bytes, BinaryIO], origin: Origin = Origin.TOP_LEFT) -> AtlasImage:
    """
    Decode PNG data to an RGBA buffer.

    Args:
        source: PNG bytes or a binary file-like object
        origin: Origin the image was authored in (tag only, no flip)

    Returns:
        AtlasImage with RGBA8 pixels

    Raises:
        RasterError: If the data is not a decodable PNG
    """
    if isinstance(source, (bytes, bytearray)):
        source = BytesIO(source)
    try:
        with Image.open(source, formats=["PNG"]) as img:
            img.load()
            rgba = img if img.mode == "RGBA" else img.convert("RGBA")
            return AtlasImage(
                width=rgba.width,
                height=rgba.height,
                pixels=rgba.tobytes(),
                origin=origin,
            )
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        # UnidentifiedImageError is an OSError; truncated data raises OSError
        raise RasterError(f"cannot decode PNG: {e}") from e


def encode_png(image: AtlasImage) -> bytes:
    """
    Encode an RGBA buffer as PNG.

    Rows are written in buffer order; re-orient with
    imaging.orientation.from_canonical first if needed.

    Args:
        image: Image to encode

    Returns:
        PNG bytes

    Raises:
        RasterError: If Pillow cannot encode the buffer (e.g. zero size)
    """
    try:
        img = Image.frombytes("RGBA", (image.width, image.height), image.pixels)
        out = BytesIO()
        img.save(out, format="PNG")
    except (OSError, ValueError, SystemError) as e:
        raise RasterError(f"cannot encode {image.width}x{image.height} PNG: {e}") from e
    return out.getvalue()
