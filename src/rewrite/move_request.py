"""Validation and path resolution for a single move-file request.

This is the step that runs before any file is touched: user options are
checked against the path whitelist, every path is sanitized, and the target
location is computed. Nothing here reads or writes the file system.
"""
from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass
from typing import Optional

from ..models.options import MoveFileOptions
from ..utils.sanitization import is_valid_path_input, sanitize_workspace_path

logger = logging.getLogger(__name__)

_GLOB_CHARACTERS = re.compile(r"[*?[\]{}]")


class InvalidPathInputError(ValueError):
    """Raised when a user-supplied path or name contains disallowed characters."""

    def __init__(self, field: str, value: str, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(
            message or f"Invalid path input for '{field}': contains disallowed characters: \"{value}\""
        )


@dataclass
class ProjectInfo:
    """Minimal project metadata needed to place a moved file."""

    name: str
    root: str
    source_root: Optional[str] = None
    project_type: str = "library"

    @property
    def effective_source_root(self) -> str:
        """Source root, falling back to the project root."""
        return self.source_root or self.root

    @property
    def base_dir(self) -> str:
        """Top-level source folder: ``app`` for applications, ``lib`` otherwise."""
        return "app" if self.project_type == "application" else "lib"


@dataclass
class MoveRequest:
    """Sanitized source and target paths for a move."""

    source_path: str
    target_path: str
    source_project: ProjectInfo
    target_project: ProjectInfo
    project_directory: Optional[str] = None

    @property
    def is_same_project(self) -> bool:
        return self.source_project.name == self.target_project.name

    @property
    def relative_path_in_source(self) -> str:
        """Source file path relative to the source project's source root."""
        return posixpath.relpath(self.source_path, self.source_project.effective_source_root)


def derive_project_directory_from_source(source_path: str, project: ProjectInfo) -> Optional[str]:
    """Directory of ``source_path`` below the project's lib/ or app/ folder.

    Returns None when the file is not under that folder or sits directly in it.
    """
    relative = posixpath.relpath(source_path, project.effective_source_root)
    prefix = project.base_dir + "/"
    if not relative.startswith(prefix):
        return None

    directory = posixpath.dirname(relative[len(prefix):])
    return directory or None


def build_target_path(
    target_project: ProjectInfo, source_path: str, project_directory: Optional[str] = None
) -> str:
    """Target path ``<source root>/<lib|app>[/<directory>]/<file name>``.

    Projects without a source root use ``<root>/src``.
    """
    file_name = posixpath.basename(source_path)
    base_root = target_project.source_root or posixpath.join(target_project.root, "src")
    target_dir = target_project.base_dir
    if project_directory:
        target_dir = posixpath.join(target_dir, project_directory)
    return posixpath.normpath(posixpath.join(base_root, target_dir, file_name))


def prepare_move(
    options: MoveFileOptions, source_project: ProjectInfo, target_project: ProjectInfo
) -> MoveRequest:
    """Validate options and compute sanitized source and target paths.

    Args:
        options: Raw request options
        source_project: Project that currently owns the file
        target_project: Project the file is moving to

    Returns:
        MoveRequest with sanitized paths

    Raises:
        InvalidPathInputError: If an input contains disallowed characters
        PathTraversalError: If the file or directory contains ``..``
    """
    is_glob = _GLOB_CHARACTERS.search(options.file) is not None
    if not is_valid_path_input(options.file, options.path_validation_options(allow_glob_patterns=is_glob)):
        raise InvalidPathInputError("file", options.file)

    if not is_valid_path_input(options.project, options.path_validation_options()):
        raise InvalidPathInputError(
            "project",
            options.project,
            f'Invalid project name: contains disallowed characters: "{options.project}"',
        )

    if options.project_directory and not is_valid_path_input(
        options.project_directory, options.path_validation_options()
    ):
        raise InvalidPathInputError("project_directory", options.project_directory)

    source_path = sanitize_workspace_path(options.file)

    project_directory: Optional[str] = None
    if options.derive_project_directory:
        derived = derive_project_directory_from_source(source_path, source_project)
        project_directory = sanitize_workspace_path(derived) if derived else None
    elif options.project_directory:
        project_directory = sanitize_workspace_path(options.project_directory)

    target_path = build_target_path(target_project, source_path, project_directory)
    logger.info(f"Prepared move {source_path} -> {target_path}")

    return MoveRequest(
        source_path=source_path,
        target_path=target_path,
        source_project=source_project,
        target_project=target_project,
        project_directory=project_directory,
    )
