"""Regex escaping helpers for building patterns from file and module names.

Two escapers are provided:

- ``escape_for_regex`` neutralizes every metacharacter that is special in
  ordinary pattern position.
- ``escape_for_regex_char_class`` builds on it and additionally neutralizes the
  characters that only become special inside a ``[...]`` character class.

Both are total over ``str`` and are meant to be applied exactly once per use.
Applying them twice double-escapes.
"""
from __future__ import annotations

import re

# Characters with special meaning outside a character class. Hyphen is left
# alone here since it only matters inside ``[...]``.
_REGEX_METACHARACTERS = re.compile(r"[|\\{}()[\]^$+*?.]")

# Inside a class, ``-`` forms ranges and Python reserves ``&&`` and ``~~`` for
# set operations. Each is replaced by its code-point escape.
_CHAR_CLASS_ESCAPES = {
    "-": r"\x2d",
    "&": r"\x26",
    "~": r"\x7e",
}
_CHAR_CLASS_SPECIALS = re.compile(r"[-&~]")


def escape_for_regex(value: str) -> str:
    """Escape regex metacharacters so ``value`` matches itself literally.

    Every occurrence of ``| \\ { } ( ) [ ] ^ $ + * ? .`` is prefixed with a
    backslash. All other characters, including control characters and lone
    surrogates, are passed through unchanged.

    Args:
        value: Arbitrary string, possibly user controlled

    Returns:
        Pattern fragment matching ``value`` literally
    """
    return _REGEX_METACHARACTERS.sub(r"\\\g<0>", value)


def escape_for_regex_char_class(value: str) -> str:
    """Escape ``value`` for insertion between ``[`` and ``]``.

    Applies :func:`escape_for_regex` first, then replaces each literal hyphen
    with ``\\x2d`` so it cannot form a range with neighbouring class content.
    ``&`` and ``~`` get the same code-point treatment.

    Args:
        value: Arbitrary string, possibly user controlled

    Returns:
        Fragment safe to embed inside a character class
    """
    base = escape_for_regex(value)
    return _CHAR_CLASS_SPECIALS.sub(lambda m: _CHAR_CLASS_ESCAPES[m.group(0)], base)


# Short aliases used by the import rewriting helpers
escape_regex = escape_for_regex
escape_regex_for_char_class = escape_for_regex_char_class
