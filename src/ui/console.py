"""Console management with Rich integration.

This module provides a ConsoleManager that adapts output to:
- Rich-rendered color output when writing for humans
- JSON-only output for machine-readable logs (CI/CD)
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape


class ConsoleManager:
    """Manages console output with Rich integration."""

    def __init__(self, verbose: bool = False, json_output: bool = False):
        self.verbose = verbose
        self.json_output = json_output
        self._lock = threading.RLock()

        if self.json_output:
            self.console = None
            self.error_console = None
        else:
            self.console = Console()
            self.error_console = Console(stderr=True)

    def setup_logging(self, logger: logging.Logger) -> None:
        """Configure logging with Rich handler or plain formatter.

        Adds a handler and sets logger level based on `verbose`.
        """

        def _has_handler_of_type(h_type):
            return any(isinstance(h, h_type) for h in logger.handlers)

        if self.json_output:
            if not _has_handler_of_type(logging.StreamHandler):
                handler = logging.StreamHandler(sys.stderr)
                handler.setFormatter(logging.Formatter("%(message)s"))
                logger.addHandler(handler)
        else:
            if not _has_handler_of_type(RichHandler):
                handler = RichHandler(
                    console=self.error_console,
                    show_time=True,
                    show_path=self.verbose,
                    rich_tracebacks=True,
                )
                logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

    def print_result(self, value: str, **fields: Any) -> None:
        """Print a command result on stdout.

        In JSON mode a single object with ``result`` and any extra fields is
        written. Otherwise the value is printed verbatim with markup disabled.
        """
        with self._lock:
            if self.json_output:
                print(json.dumps({"result": value, **fields}, ensure_ascii=False))
            else:
                self.console.print(value, markup=False, highlight=False, soft_wrap=True)

    def print_error(self, message: str, **fields: Any) -> None:
        """Print an error on stderr."""
        with self._lock:
            if self.json_output:
                print(json.dumps({"error": message, **fields}, ensure_ascii=False), file=sys.stderr)
            else:
                self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
