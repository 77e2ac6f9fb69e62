"""Path and pattern safety utilities for workspace file moves."""

from .escaping import (
    escape_for_regex,
    escape_for_regex_char_class,
    escape_regex,
    escape_regex_for_char_class,
)
from .sanitization import (
    PathSanitizer,
    PathTraversalError,
    is_valid_path_input,
    sanitize_path,
    sanitize_workspace_path,
)

__all__ = [
    "PathSanitizer",
    "PathTraversalError",
    "escape_for_regex",
    "escape_for_regex_char_class",
    "escape_regex",
    "escape_regex_for_char_class",
    "is_valid_path_input",
    "sanitize_path",
    "sanitize_workspace_path",
]
