"""Centralized logging factory for consistent logger creation across the application.

This module provides a singleton-based logging factory that ensures consistent
logger configuration throughout the application. It handles:
- Centralized log file management
- Per-component logging level configuration
- Easy verbosity control for debugging

Usage:
    LoggingFactory.initialize(log_dir=Path("logs"), level=logging.INFO)
    LoggingFactory.configure_verbose(verbose=True)

Modules log through ``logging.getLogger(__name__)``; the factory only owns
handlers and levels.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

# Component loggers whose level follows the verbosity switch
COMPONENT_LOGGERS = ("src.utils.sanitization", "src.rewrite")


class LoggingFactory:
    """Factory for creating and configuring loggers consistently.

    The logging system is initialized only once regardless of how many times
    initialize() is called. Output goes to ``<log_dir>/app.log`` and the console.

    Class Attributes:
        _initialized: Flag to ensure single initialization
        _log_dir: Directory path where log files are stored
    """

    _initialized = False
    _log_dir = Path("logs")

    @classmethod
    def initialize(
        cls,
        log_dir: Optional[Path] = None,
        level: int = logging.INFO,
        format_string: Optional[str] = None,
        log_to_file: bool = True,
        log_to_console: bool = True,
    ) -> None:
        """Initialize the logging system once for the entire application.

        Args:
            log_dir: Directory for log files. If None, uses "logs" in current directory.
            level: Default logging level for root logger (default: logging.INFO).
            format_string: Custom format string for log messages. If None, uses:
                          "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            log_to_file: Whether to add the app.log file handler
            log_to_console: Whether to add a console stream handler

        Side Effects:
            - Creates log_dir if it doesn't exist and log_to_file is set
            - Adds handlers to the root logger and sets its level
            - Sets _initialized flag to prevent re-initialization
        """
        if cls._initialized:
            return

        if log_dir:
            cls._log_dir = log_dir

        if format_string is None:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        handlers: list[logging.Handler] = []
        if log_to_file:
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(cls._log_dir / "app.log"))
        if log_to_console:
            handlers.append(logging.StreamHandler())

        # Existing root handlers are left in place
        root = logging.getLogger()
        root.setLevel(level)
        formatter = logging.Formatter(format_string)
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

        # Sanitizer warnings stay visible at any root level
        cls.set_level("src.utils.sanitization", logging.INFO)

        cls._initialized = True

    @classmethod
    def set_level(cls, name: str, level: int) -> None:
        """Set the logging level for a specific logger.

        Example:
            LoggingFactory.set_level('src.rewrite', logging.DEBUG)
        """
        logging.getLogger(name).setLevel(level)

    @classmethod
    def configure_verbose(cls, verbose: bool = False) -> None:
        """Switch the root, ``src`` and component loggers between DEBUG and INFO."""
        level = logging.DEBUG if verbose else logging.INFO

        logging.getLogger().setLevel(level)
        for name in ("src", *COMPONENT_LOGGERS):
            cls.set_level(name, level)

