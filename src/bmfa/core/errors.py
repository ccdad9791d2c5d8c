"""
Module: errors

Purpose:
    Error taxonomy for reading and writing font atlas containers. Every
    failure surfaces as a BmfaError carrying one ErrorKind, so callers can
    branch on the cause ("not our file" vs "corrupt file") without
    matching on message text.

Key Classes:
    - ErrorKind: Closed set of failure kinds
    - BmfaError: Exception carrying a kind and the underlying cause

Dependencies:
    - enum (std)

Used By:
    - builder.assembler
    - container.reader
    - container.writer
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kind of container read/write failure."""
    SOURCE_NOT_FOUND = "source_not_found"
    CONTAINER_UNREADABLE = "container_unreadable"
    METADATA_ENTRY_MISSING = "metadata_entry_missing"
    METADATA_CORRUPT = "metadata_corrupt"
    IMAGE_ENTRY_MISSING = "image_entry_missing"
    IMAGE_CORRUPT = "image_corrupt"
    WRITE_FAILED = "write_failed"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    ErrorKind.SOURCE_NOT_FOUND: "Font atlas source not found",
    ErrorKind.CONTAINER_UNREADABLE: "The file exists but is not a readable font atlas container",
    ErrorKind.METADATA_ENTRY_MISSING: "The font atlas contains no metadata",
    ErrorKind.METADATA_CORRUPT: "The font atlas metadata is corrupt",
    ErrorKind.IMAGE_ENTRY_MISSING: "The font atlas contains no atlas image",
    ErrorKind.IMAGE_CORRUPT: "The font atlas contains an atlas image but it cannot be loaded",
    ErrorKind.WRITE_FAILED: "The font atlas could not be written",
}


class BmfaError(Exception):
    """
    Raised when a font atlas cannot be read, built or written.

    Attributes:
        kind: What went wrong
        cause: Underlying I/O, codec or validation error (may be None)

    Example:
        >>> try:
        ...     load("missing.bmfa")
        ... except BmfaError as e:
        ...     if e.kind is ErrorKind.SOURCE_NOT_FOUND:
        ...         ...
    """

    def __init__(self, kind: ErrorKind, cause: Optional[BaseException | str] = None):
        self.kind = kind
        if isinstance(cause, str):
            cause = ValueError(cause)
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if self.cause is None:
            return self.kind.description
        return f"{self.kind.description}: {self.cause}"

    def __repr__(self) -> str:
        return f"BmfaError({self.kind.name}, {self.cause!r})"
