"""
Utils Package

Serialization utilities for atlas metadata.
"""

from .serialization import (
    serialize_metadata,
    deserialize_metadata,
    metadata_to_json,
    metadata_from_json,
)

__all__ = [
    "serialize_metadata",
    "deserialize_metadata",
    "metadata_to_json",
    "metadata_from_json",
]
