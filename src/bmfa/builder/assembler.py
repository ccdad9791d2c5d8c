"""
Module: builder.assembler

Purpose:
    Combines decoded metadata and a decoded image into a ready-to-use
    Atlas with canonical (top-left) row order. Kept separate from
    decoding so orientation handling can be exercised without any
    archive or PNG I/O.

Key Functions:
    - build_atlas(): Validate sizes, normalize orientation, create Atlas

Dependencies:
    - bmfa.imaging.orientation: to_canonical
    - bmfa.core.models: Atlas, AtlasMetadata, AtlasImage

Used By:
    - container.reader: After decoding both entries
"""

from __future__ import annotations

import logging

from bmfa.core.errors import BmfaError, ErrorKind
from bmfa.core.models import Atlas, AtlasImage, AtlasMetadata
from bmfa.imaging.orientation import to_canonical

logger = logging.getLogger(__name__)


def build_atlas(metadata: AtlasMetadata, image: AtlasImage) -> Atlas:
    """
    Assemble an Atlas from decoded parts.

    The image is re-tagged with the origin declared by the metadata and
    normalized to top-left order. The resulting atlas keeps the declared
    origin so a later write can restore the authored orientation.

    Args:
        metadata: Decoded atlas metadata
        image: Decoded RGBA image, rows as stored on disk

    Returns:
        Atlas holding canonical pixel bytes

    Raises:
        BmfaError: IMAGE_CORRUPT if the image size disagrees with
            metadata.dimensions
    """
    expected = metadata.image_length
    if len(image.pixels) != expected:
        raise BmfaError(
            ErrorKind.IMAGE_CORRUPT,
            f"image has {len(image.pixels)} bytes, metadata declares "
            f"{metadata.dimensions}x{metadata.dimensions} ({expected} bytes)",
        )
    if image.width != metadata.dimensions or image.height != metadata.dimensions:
        raise BmfaError(
            ErrorKind.IMAGE_CORRUPT,
            f"image is {image.width}x{image.height}, metadata declares "
            f"{metadata.dimensions}x{metadata.dimensions}",
        )

    for issue in metadata.layout_issues():
        logger.warning(f"Atlas layout inconsistent: {issue}")

    declared = AtlasImage(image.width, image.height, image.pixels, metadata.origin)
    canonical = to_canonical(declared)
    return Atlas.new(metadata, canonical.pixels)
