"""Simplified configuration management using environment variables."""
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..models.options import PathValidationOptions


def _parse_bool(value: str | bool | None) -> bool:
    """Parse boolean value from various formats."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on", "enabled")
    return bool(value)


def _getenv(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.getenv(key, default)


def _getenv_int(key: str, default: int) -> int:
    """Get integer environment variable with validation.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Parsed integer value

    Raises:
        ValueError: If value cannot be parsed as integer
    """
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(
            f"Invalid integer value for {key}='{value}'. "
            f"Expected integer, got: {value}"
        ) from e


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # ========== Workspace ==========
    workspace_root: Path = field(default_factory=lambda: Path(_getenv("WORKSPACE_ROOT", ".")))

    # ========== Path Input Validation ==========
    allow_unicode_paths: bool = field(default_factory=lambda: _parse_bool(_getenv("ALLOW_UNICODE_PATHS", "false")))
    max_path_length: int = field(default_factory=lambda: _getenv_int("MAX_PATH_LENGTH", 4096))
    additional_allowed_path_chars: str = field(default_factory=lambda: _getenv("ADDITIONAL_ALLOWED_PATH_CHARS", ""))

    # ========== Logging ==========
    log_level: str = field(default_factory=lambda: _getenv("LOG_LEVEL", "INFO").upper())
    log_format: str = field(
        default_factory=lambda: _getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    log_to_file: bool = field(default_factory=lambda: _parse_bool(_getenv("LOG_TO_FILE", "false")))
    log_dir: Path = field(default_factory=lambda: Path(_getenv("LOG_DIR", "logs")))
    verbose: bool = field(default_factory=lambda: _parse_bool(_getenv("VERBOSE", "false")))

    def __post_init__(self):
        """Validate numeric settings."""
        if self.max_path_length <= 0:
            raise ValueError(f"MAX_PATH_LENGTH must be positive, got: {self.max_path_length}")

    def path_validation_options(self, allow_glob_patterns: bool = False) -> PathValidationOptions:
        """Whitelist options for validating user path input."""
        return PathValidationOptions(
            allow_unicode=self.allow_unicode_paths,
            max_length=self.max_path_length,
            additional_allowed_chars=self.additional_allowed_path_chars,
            allow_glob_patterns=allow_glob_patterns,
        )


# Singleton instance with thread-safe initialization
_config_instance: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Get global config instance (singleton pattern, thread-safe)."""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            # Double-check pattern to prevent race conditions
            if _config_instance is None:
                _config_instance = Config()
    return _config_instance


__all__ = ["Config", "get_config"]
