"""
Module: imaging.orientation

Purpose:
    Reconciles the two row-order conventions an atlas image may be
    authored in. Raster formats put row 0 at the top; font tooling often
    puts the origin at the bottom. In memory every atlas image is kept
    top-left (canonical); the declared origin is applied on the way in
    and undone on the way out.

Key Functions:
    - flip_rows(): Reverse the vertical order of rows (self-inverse)
    - to_canonical(): Normalize a decoded image to top-left origin
    - from_canonical(): Re-orient a canonical image for writing

Dependencies:
    - numpy: Row reversal over a pixel array view

Used By:
    - builder.assembler: Normalization after decode
    - container.writer: Inverse before encode
"""

from __future__ import annotations

import logging

import numpy as np

from bmfa.core.models import AtlasImage, Origin, BYTES_PER_PIXEL

logger = logging.getLogger(__name__)


def flip_rows(pixels: bytes, width: int, height: int) -> bytes:
    """
    Reverse the vertical order of rows in an RGBA buffer.

    Row r swaps with row height - 1 - r; the middle row of an odd
    height stays where it is. Applying it twice restores the input.

    Args:
        pixels: RGBA8 bytes, row-major, len == 4 * width * height
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        New bytes with rows reversed (the input is never modified)

    Raises:
        ValueError: If the buffer length disagrees with width/height

    Example:
        >>> flip_rows(b"AAAABBBB", 1, 2)
        b'BBBBAAAA'
    """
    expected = BYTES_PER_PIXEL * width * height
    if len(pixels) != expected:
        raise ValueError(
            f"pixel buffer has {len(pixels)} bytes, expected {expected} "
            f"for {width}x{height} RGBA"
        )
    if width == 0 or height == 0:
        return bytes(pixels)

    rows = np.frombuffer(pixels, dtype=np.uint8).reshape(height, BYTES_PER_PIXEL * width)
    return rows[::-1].tobytes()


def to_canonical(image: AtlasImage) -> AtlasImage:
    """
    Normalize an image to top-left origin.

    Args:
        image: Decoded image tagged with the origin it was authored in

    Returns:
        Image with origin TOP_LEFT; rows flipped if the input was
        BOTTOM_LEFT, otherwise the same pixel bytes
    """
    if image.origin is Origin.TOP_LEFT:
        return image
    logger.debug(f"Flipping {image.width}x{image.height} image from {image.origin} to canonical")
    return AtlasImage(
        width=image.width,
        height=image.height,
        pixels=flip_rows(image.pixels, image.width, image.height),
        origin=Origin.TOP_LEFT,
    )


def from_canonical(image: AtlasImage, origin: Origin) -> AtlasImage:
    """
    Re-orient a canonical image to a declared origin.

    Args:
        image: Top-left image (as held by an Atlas)
        origin: Row order the output should be stored in

    Returns:
        Image tagged with `origin`

    Raises:
        ValueError: If `image` is not canonical
    """
    if not image.is_canonical:
        raise ValueError(f"expected a canonical (TopLeft) image, got {image.origin}")
    origin = Origin(origin)
    if origin is Origin.TOP_LEFT:
        return image
    logger.debug(f"Flipping {image.width}x{image.height} image from canonical to {origin}")
    return AtlasImage(
        width=image.width,
        height=image.height,
        pixels=flip_rows(image.pixels, image.width, image.height),
        origin=origin,
    )
