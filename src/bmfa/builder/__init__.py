"""
Module: builder

Purpose:
    Atlas assembly from decoded metadata and image buffers.

Key Functions:
    - build_atlas(): Normalize orientation and create an Atlas
"""

from .assembler import build_atlas

__all__ = [
    "build_atlas",
]
