"""Import rewriting helpers built on the path and pattern safety layer."""

from .import_patterns import (
    build_import_pattern,
    build_relative_import_pattern,
    find_relative_imports,
    has_import_specifier,
    is_file_exported,
    remove_file_export,
    replace_import_specifier,
)
from .move_request import (
    InvalidPathInputError,
    MoveRequest,
    ProjectInfo,
    build_target_path,
    derive_project_directory_from_source,
    prepare_move,
)

__all__ = [
    "InvalidPathInputError",
    "MoveRequest",
    "ProjectInfo",
    "build_import_pattern",
    "build_relative_import_pattern",
    "build_target_path",
    "derive_project_directory_from_source",
    "find_relative_imports",
    "has_import_specifier",
    "is_file_exported",
    "prepare_move",
    "remove_file_export",
    "replace_import_specifier",
]
