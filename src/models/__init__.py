"""Data models for path validation and move-file requests.

This module provides the pydantic option models consumed by the sanitization
layer and by move request preparation.
"""

from .options import MoveFileOptions, PathValidationOptions

__all__ = [
    "MoveFileOptions",
    "PathValidationOptions",
]
