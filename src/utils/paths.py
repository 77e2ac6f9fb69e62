"""Workspace path utilities for import specifiers and safe file access.

Functions here work on POSIX-style workspace-relative strings. Anything that
touches the file system goes through ``resolve_workspace_path`` so the path is
sanitized exactly once before use.
"""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Iterable, List, Sequence

from .file_extensions import (
    ENTRYPOINT_EXTENSIONS,
    PRIMARY_ENTRY_BASE_NAMES,
    SOURCE_FILE_EXTENSIONS,
    STRIPPABLE_EXTENSIONS,
)
from .sanitization import PathTraversalError, sanitize_workspace_path


def normalize_separators(file_path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return file_path.replace("\\", "/")


def has_source_file_extension(file_path: str) -> bool:
    """Return True if the path ends with a supported source file extension."""
    return posixpath.splitext(file_path)[1] in SOURCE_FILE_EXTENSIONS


def remove_source_file_extension(file_path: str) -> str:
    """Remove a supported source extension, leaving other paths untouched."""
    root, ext = posixpath.splitext(file_path)
    return root if ext in SOURCE_FILE_EXTENSIONS else file_path


def strip_file_extension(import_path: str) -> str:
    """Strip .ts/.tsx/.js/.jsx from an import path.

    ESM-specific extensions (.mjs, .mts, .cjs, .cts) are preserved.
    """
    root, ext = posixpath.splitext(import_path)
    return root if ext in STRIPPABLE_EXTENSIONS else import_path


def to_absolute_workspace_path(file_path: str) -> str:
    """Return the normalized path rooted at ``/``, e.g. ``libs/a.ts`` -> ``/libs/a.ts``."""
    normalized = normalize_separators(file_path).lstrip("/")
    return posixpath.normpath("/" + normalized)


def get_relative_import_specifier(from_file_path: str, to_file_path: str) -> str:
    """Relative import specifier from one workspace file to another.

    The result always starts with ``.`` and has its extension stripped
    (except for ESM files).

    Args:
        from_file_path: File containing the import
        to_file_path: File being imported

    Returns:
        Specifier such as ``./lib/utils`` or ``../shared``
    """
    from_dir = posixpath.dirname(to_absolute_workspace_path(from_file_path))
    target = to_absolute_workspace_path(to_file_path)
    relative_path = posixpath.relpath(target, from_dir)

    if not relative_path.startswith("."):
        relative_path = f"./{relative_path}"

    return strip_file_extension(relative_path)


def build_file_names(base_names: Iterable[str]) -> List[str]:
    """Combine base names with every entry point extension."""
    return [f"{base}.{ext}" for base in base_names for ext in ENTRYPOINT_EXTENSIONS]


def build_patterns(prefixes: Sequence[str], file_names: Sequence[str]) -> List[str]:
    """Combine each prefix with each file name, prefix-major."""
    return [f"{prefix}{name}" for prefix in prefixes for name in file_names]


def split_patterns(text: str) -> List[str]:
    """Split a comma-separated list, ignoring commas inside brace expansions.

    ``"file1.ts,file.{ts,js}"`` yields ``["file1.ts", "file.{ts,js}"]``.
    Items are trimmed and empty items dropped.
    """
    patterns: List[str] = []
    current: List[str] = []
    depth = 0

    for ch in text:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            item = "".join(current).strip()
            if item:
                patterns.append(item)
            current = []
            continue
        current.append(ch)

    item = "".join(current).strip()
    if item:
        patterns.append(item)
    return patterns


_PRIMARY_ENTRY_FILE_NAMES = build_file_names(PRIMARY_ENTRY_BASE_NAMES)
_MAIN_ENTRY_FILE_NAMES = build_file_names(["main"])
_INDEX_PATH_SUFFIXES = tuple(
    build_patterns(["", "src/", "lib/"], _PRIMARY_ENTRY_FILE_NAMES)
    + build_patterns(["", "src/"], _MAIN_ENTRY_FILE_NAMES)
)


def is_index_file_path(file_path: str) -> bool:
    """Return True if the path looks like a project entry point file."""
    return normalize_separators(file_path).endswith(_INDEX_PATH_SUFFIXES)


def resolve_workspace_path(root: Path | str, file_path: Path | str) -> Path:
    """Return ``root/<sanitized file_path>`` for a file operation.

    The path is sanitized once and the sanitized string is what gets joined.
    Symlinks are not resolved; links pointing outside the root are the
    caller's concern.

    Raises:
        PathTraversalError: If the path contains ``..`` or would land outside
            ``root`` (e.g. a drive-qualified path on Windows)
    """
    root_path = Path(root).absolute()
    sanitized = sanitize_workspace_path(file_path)
    candidate = root_path / sanitized
    try:
        candidate.relative_to(root_path)
    except ValueError as e:
        raise PathTraversalError(str(file_path)) from e
    return candidate
