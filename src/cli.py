"""Command-line interface for the workspace path and pattern safety layer.

Commands:
    sanitize  Normalize workspace-relative paths, failing on traversal
    escape    Escape text for use in a regular expression
    validate  Check a path fragment against the input whitelist
    rewrite   Rewrite an import specifier inside a workspace file
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_config
from .rewrite.import_patterns import replace_import_specifier
from .ui.console import ConsoleManager
from .utils.escaping import escape_for_regex, escape_for_regex_char_class
from .utils.logging_factory import LoggingFactory
from .utils.paths import resolve_workspace_path
from .utils.sanitization import PathTraversalError, is_valid_path_input, sanitize_workspace_path

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration based on verbosity level.

    Args:
        verbose: If True, set to DEBUG level; otherwise INFO
    """
    config = get_config()
    if config.log_to_file:
        LoggingFactory.initialize(
            log_dir=config.log_dir,
            level=getattr(logging, config.log_level, logging.INFO),
            format_string=config.log_format,
            log_to_console=False,
        )
    LoggingFactory.configure_verbose(verbose or config.verbose)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="move-file-safety",
        description="Sanitize workspace paths and build safe import-rewrite patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Normalize a path supplied by a user
  move-file-safety sanitize /packages/lib1/src/file.ts

  # Escape a file name for a regex character class
  move-file-safety escape "my-file?.ts" --char-class

  # Point imports of @org/old at @org/new in one file
  move-file-safety rewrite packages/app/src/main.ts --from @org/old --to @org/new
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--json-output",
        action="store_true",
        help="Emit machine-readable JSON results to stdout and errors to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    sanitize_parser = subparsers.add_parser(
        "sanitize",
        help="Normalize workspace-relative paths",
        description="Normalize paths and reject any containing a '..' segment",
    )
    sanitize_parser.add_argument("paths", nargs="+", help="Workspace-relative paths")

    escape_parser = subparsers.add_parser(
        "escape",
        help="Escape text for use in a regular expression",
    )
    escape_parser.add_argument("text", help="Literal text to escape")
    escape_parser.add_argument(
        "--char-class",
        action="store_true",
        help="Escape for use inside a [...] character class",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a path fragment against the input whitelist",
    )
    validate_parser.add_argument("text", help="Path or name to validate")
    validate_parser.add_argument(
        "--allow-unicode",
        action="store_true",
        default=None,
        help="Accept non-ASCII letters, numbers and marks",
    )
    validate_parser.add_argument("--max-length", type=int, help="Maximum accepted length")
    validate_parser.add_argument(
        "--allow-glob", action="store_true", help="Accept glob characters such as * and ?"
    )

    rewrite_parser = subparsers.add_parser(
        "rewrite",
        help="Rewrite an import specifier in a workspace file",
    )
    rewrite_parser.add_argument("file", help="Workspace-relative path of the file to update")
    rewrite_parser.add_argument("--from", dest="old_specifier", required=True, help="Specifier to replace")
    rewrite_parser.add_argument("--to", dest="new_specifier", required=True, help="Replacement specifier")
    rewrite_parser.add_argument("--root", help="Workspace root (default: $WORKSPACE_ROOT or .)")
    rewrite_parser.add_argument(
        "--dry-run", action="store_true", help="Report the number of replacements without writing"
    )

    return parser


def sanitize_command(args: argparse.Namespace, console: ConsoleManager) -> int:
    """Print the sanitized form of each path.

    Returns:
        0 if every path is clean, 1 if any was rejected
    """
    exit_code = 0
    for raw_path in args.paths:
        try:
            console.print_result(sanitize_workspace_path(raw_path), input=raw_path)
        except PathTraversalError as e:
            console.print_error(str(e), input=e.path)
            exit_code = 1
    return exit_code


def escape_command(args: argparse.Namespace, console: ConsoleManager) -> int:
    """Print the escaped form of the text."""
    if args.char_class:
        escaped = escape_for_regex_char_class(args.text)
    else:
        escaped = escape_for_regex(args.text)
    console.print_result(escaped, char_class=args.char_class)
    return 0


def validate_command(args: argparse.Namespace, console: ConsoleManager) -> int:
    """Validate the text against the whitelist from config and flags."""
    options = get_config().path_validation_options(allow_glob_patterns=args.allow_glob)
    updates = {}
    if args.allow_unicode is not None:
        updates["allow_unicode"] = args.allow_unicode
    if args.max_length is not None:
        updates["max_length"] = args.max_length
    if updates:
        options = options.model_copy(update=updates)

    valid = is_valid_path_input(args.text, options)
    console.print_result("valid" if valid else "invalid", input=args.text, valid=valid)
    return 0 if valid else 1


def rewrite_command(args: argparse.Namespace, console: ConsoleManager) -> int:
    """Rewrite one import specifier inside a workspace file."""
    root = args.root or get_config().workspace_root
    try:
        target = resolve_workspace_path(root, args.file)
    except PathTraversalError as e:
        console.print_error(str(e), input=e.path)
        return 1

    try:
        content = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print_error(f"Could not read {target}: {e}")
        return 1

    updated, count = replace_import_specifier(content, args.old_specifier, args.new_specifier)
    if count and not args.dry_run:
        try:
            target.write_text(updated, encoding="utf-8")
        except OSError as e:
            console.print_error(f"Could not write {target}: {e}")
            return 1
        logger.info(f"Updated {count} import(s) in {target}")

    console.print_result(str(count), file=str(target), replacements=count, dry_run=args.dry_run)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    console = ConsoleManager(verbose=args.verbose, json_output=args.json_output)
    console.setup_logging(logging.getLogger("src"))

    commands = {
        "sanitize": sanitize_command,
        "escape": escape_command,
        "validate": validate_command,
        "rewrite": rewrite_command,
    }
    try:
        return commands[args.command](args, console)
    except KeyboardInterrupt:
        logger.error("Operation cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
