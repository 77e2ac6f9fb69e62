"""Regex builders for finding and rewriting import specifiers in source text.

Every file name or module specifier that reaches a pattern here comes from
project metadata or user options, so it is passed through
:func:`~src.utils.escaping.escape_for_regex` exactly once before being spliced
into the pattern template. Replacement text is inserted through a callable so
backreference syntax in it is never interpreted.
"""
from __future__ import annotations

import logging
import re
from typing import List, Pattern, Tuple

from ..utils.escaping import escape_for_regex
from ..utils.file_extensions import SOURCE_FILE_EXTENSIONS
from ..utils.paths import remove_source_file_extension

logger = logging.getLogger(__name__)

_IMPORT_PREFIX = r"(?P<prefix>\bfrom\s+|\bimport\s*\(\s*|\brequire\s*\(\s*|\bimport\s+)"
_OPTIONAL_SOURCE_EXTENSION = (
    "(?:" + "|".join(escape_for_regex(ext) for ext in SOURCE_FILE_EXTENSIONS) + ")?"
)
_EXPORT_CLAUSE = r"export\s+(?:type\s+)?(?:\*(?:\s+as\s+[\w$]+)?|\{[^}]*\}|[\w$]+)\s+from\s+"


def build_import_pattern(specifier: str) -> Pattern[str]:
    """Pattern matching ``specifier`` used by import, export, require or import().

    Only the exact specifier matches; ``@org/lib`` does not match
    ``@org/lib/sub`` or ``@org/library``.
    """
    escaped = escape_for_regex(specifier)
    return re.compile(f"{_IMPORT_PREFIX}(?P<quote>['\"]){escaped}(?P=quote)")


def has_import_specifier(content: str, specifier: str) -> bool:
    """Return True if ``content`` references ``specifier`` in any import form."""
    return build_import_pattern(specifier).search(content) is not None


def replace_import_specifier(content: str, old_specifier: str, new_specifier: str) -> Tuple[str, int]:
    """Replace every reference to ``old_specifier`` with ``new_specifier``.

    Quote style and the surrounding statement are preserved.

    Args:
        content: Source text
        old_specifier: Specifier to look for
        new_specifier: Specifier to write instead, inserted literally

    Returns:
        Tuple of (updated content, number of replacements)
    """
    pattern = build_import_pattern(old_specifier)

    def _substitute(match: re.Match) -> str:
        quote = match.group("quote")
        return f"{match.group('prefix')}{quote}{new_specifier}{quote}"

    updated, count = pattern.subn(_substitute, content)
    if count:
        logger.debug(f"Replaced {count} reference(s) to {old_specifier!r} with {new_specifier!r}")
    return updated, count


def build_relative_import_pattern(file_name: str) -> Pattern[str]:
    """Pattern for relative ``from`` specifiers whose last component is ``file_name``.

    ``file_name`` may carry a source extension, which is dropped. The captured
    ``specifier`` group holds the matched specifier.
    """
    stem = escape_for_regex(remove_source_file_extension(file_name))
    return re.compile(
        r"(?P<prefix>\bfrom\s+)(?P<quote>['\"])"
        rf"(?P<specifier>\.{{1,2}}/(?:[^'\"\n]*/)?{stem}{_OPTIONAL_SOURCE_EXTENSION})"
        r"(?P=quote)"
    )


def find_relative_imports(content: str, file_name: str) -> List[str]:
    """Relative specifiers in ``content`` that point at ``file_name``."""
    pattern = build_relative_import_pattern(file_name)
    return [match.group("specifier") for match in pattern.finditer(content)]


def _export_target(file_path: str) -> str:
    return escape_for_regex(remove_source_file_extension(file_path))


def is_file_exported(index_content: str, file_path: str) -> bool:
    """Return True if an entry point re-exports ``file_path``.

    Supported forms: ``export * from``, ``export * as ns from``,
    ``export { a, b } from`` and ``export name from``, each optionally
    type-only (``export type { Foo } from``).

    Args:
        index_content: Text of the entry point file
        file_path: File path relative to the project's source root
    """
    pattern = re.compile(
        f"{_EXPORT_CLAUSE}(['\"])\\.{{1,2}}/(?:[^'\"\\n]*/)?"
        f"{_export_target(file_path)}{_OPTIONAL_SOURCE_EXTENSION}\\1"
    )
    return pattern.search(index_content) is not None


def remove_file_export(index_content: str, file_path: str) -> str:
    """Remove ``export * from`` and ``export {..} from`` lines for ``file_path``.

    If nothing is left but whitespace, ``export {};`` is returned so the entry
    point still parses as a module. Content without a matching export is
    returned unchanged.
    """
    target = _export_target(file_path)
    patterns = [
        re.compile(
            rf"export\s+\*\s+from\s+(['\"])\.\.?/{target}{_OPTIONAL_SOURCE_EXTENSION}\1;?\s*\n?"
        ),
        re.compile(
            rf"export\s+\{{[^}}]+\}}\s+from\s+(['\"])\.\.?/{target}{_OPTIONAL_SOURCE_EXTENSION}\1;?\s*\n?"
        ),
    ]

    updated = index_content
    for pattern in patterns:
        updated = pattern.sub("", updated)

    if updated != index_content:
        logger.debug(f"Removed export of {file_path!r} from entry point")
        if not updated.strip():
            updated = "export {};\n"
    return updated
