"""Path sanitization utilities for workspace file operations."""
from __future__ import annotations

import logging
import os
import re
import sys
import unicodedata
from pathlib import PurePath
from typing import Optional, Union

from ..models.options import PathValidationOptions
from .escaping import escape_for_regex_char_class

logger = logging.getLogger(__name__)

_REDUNDANT_SEPARATORS = re.compile(r"/{2,}")

# Valid in Unix filenames but not on Windows
UNIX_ONLY_CHARS = "<>:"
GLOB_CHARS = "*?[]{},"

# Unicode categories accepted when allow_unicode is set: letters, numbers,
# marks and connector punctuation.
_UNICODE_CATEGORY_PREFIXES = ("L", "N", "M")
_UNICODE_EXTRA_CATEGORIES = {"Pc"}


class PathTraversalError(ValueError):
    """Raised when a workspace path contains a ``..`` segment.

    The unsanitized input is kept on ``path`` for diagnostics. Callers must
    not continue with the file operation after catching it.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Invalid path: path traversal detected in "{path}"')


class PathSanitizer:
    """Utilities for sanitizing workspace paths and path fragments."""

    @staticmethod
    def sanitize_workspace_path(file_path: Union[PurePath, str]) -> str:
        """Normalize a workspace-relative path and reject traversal.

        Backslashes become forward slashes, runs of separators collapse to one
        and a single leading separator is stripped, so absolute-looking input
        is treated as workspace-relative. ``.`` and empty segments are dropped.
        Any ``..`` segment rejects the whole input, even one that a preceding
        segment would cancel out.

        Args:
            file_path: Path relative to the workspace root

        Returns:
            Normalized POSIX path without leading separator, or ``"."`` when
            the input denotes the workspace root itself

        Raises:
            PathTraversalError: If any ``..`` segment is present
        """
        original = os.fspath(file_path)

        normalized = _REDUNDANT_SEPARATORS.sub("/", original.replace("\\", "/"))
        if normalized.startswith("/"):
            normalized = normalized[1:]

        segments = []
        for segment in normalized.split("/"):
            if segment == "..":
                logger.warning(f"Rejected workspace path with traversal segment: {original!r}")
                raise PathTraversalError(original)
            if segment in ("", "."):
                continue
            segments.append(segment)

        sanitized = "/".join(segments) if segments else "."
        logger.debug(f"Sanitized workspace path {original!r} -> {sanitized!r}")
        return sanitized

    @staticmethod
    def is_valid_path_input(
        value: object, options: Optional[PathValidationOptions] = None
    ) -> bool:
        """Check a literal path fragment against a character whitelist.

        Intended for user input that will later be interpolated into generated
        patterns or paths. By default only ASCII letters, digits and a small
        set of safe punctuation are accepted.

        Args:
            value: Candidate path fragment
            options: Whitelist settings (defaults to ``PathValidationOptions()``)

        Returns:
            True if every character is allowed and the length limit holds
        """
        if not isinstance(value, str):
            return False

        options = options or PathValidationOptions()

        if options.max_length is not None and len(value) > options.max_length:
            return False

        literal_chars = "_@./\\ -"
        if sys.platform != "win32":
            literal_chars += UNIX_ONLY_CHARS
        if options.allow_glob_patterns:
            literal_chars += GLOB_CHARS
        literal_chars += options.additional_allowed_chars

        literal_class = escape_for_regex_char_class(literal_chars)
        if not options.allow_unicode:
            return re.fullmatch(f"[A-Za-z0-9{literal_class}]*", value) is not None

        literal_re = re.compile(f"[{literal_class}]")
        for ch in value:
            if literal_re.fullmatch(ch):
                continue
            category = unicodedata.category(ch)
            if category.startswith(_UNICODE_CATEGORY_PREFIXES) or category in _UNICODE_EXTRA_CATEGORIES:
                continue
            return False
        return True


# Convenience functions
def sanitize_workspace_path(file_path: Union[PurePath, str]) -> str:
    """Normalize a workspace-relative path and reject traversal.

    Args:
        file_path: Path relative to the workspace root

    Returns:
        Sanitized POSIX path

    Raises:
        PathTraversalError: If any ``..`` segment is present
    """
    return PathSanitizer.sanitize_workspace_path(file_path)


def is_valid_path_input(value: object, options: Optional[PathValidationOptions] = None) -> bool:
    """Check a literal path fragment against a character whitelist."""
    return PathSanitizer.is_valid_path_input(value, options)


sanitize_path = sanitize_workspace_path
