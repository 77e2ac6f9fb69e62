"""Option models for path validation and move-file requests."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.types import PositiveInt


class PathValidationOptions(BaseModel):
    """Whitelist settings for literal path fragments supplied by users."""

    allow_unicode: bool = Field(False, description="Accept letters, numbers and marks outside ASCII")
    max_length: Optional[PositiveInt] = Field(None, description="Maximum accepted length")
    additional_allowed_chars: str = Field("", description="Extra literal characters to accept")
    allow_glob_patterns: bool = Field(False, description="Accept glob characters such as * ? [ ] { } ,")


class MoveFileOptions(BaseModel):
    """Raw options for moving a file into a target project."""

    file: str = Field(..., description="Workspace-relative path of the file to move")
    project: str = Field(..., description="Name of the target project")
    project_directory: Optional[str] = Field(
        None, description="Directory inside the target project's lib/ or app/ folder"
    )
    derive_project_directory: bool = Field(
        False, description="Reuse the source file's directory under lib/ or app/"
    )
    allow_unicode: bool = Field(False, description="Accept non-ASCII characters in path inputs")

    @field_validator("file", "project")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @model_validator(mode="after")
    def validate_directory_options(self) -> "MoveFileOptions":
        """Ensure only one way of choosing the target directory is used."""
        if self.derive_project_directory and self.project_directory:
            raise ValueError(
                'Cannot use both "derive_project_directory" and "project_directory" '
                "options at the same time"
            )
        return self

    def path_validation_options(self, allow_glob_patterns: bool = False) -> PathValidationOptions:
        """Build the whitelist options used for this request's inputs."""
        return PathValidationOptions(
            allow_unicode=self.allow_unicode,
            allow_glob_patterns=allow_glob_patterns,
        )
