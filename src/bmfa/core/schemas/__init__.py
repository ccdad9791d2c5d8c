"""
Schemas Package

JSON schema definitions and validation utilities for metadata.json.
"""

from .validator import (
    validate_metadata,
    schema_version_of,
    ValidationError,
    METADATA_SCHEMA_VERSION,
    LEGACY_SCHEMA_VERSION,
)

__all__ = [
    "validate_metadata",
    "schema_version_of",
    "ValidationError",
    "METADATA_SCHEMA_VERSION",
    "LEGACY_SCHEMA_VERSION",
]
