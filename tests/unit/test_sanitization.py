"""Tests for workspace path sanitization and path input validation."""
import logging
import re
import sys
from pathlib import PurePosixPath, PureWindowsPath

import pytest

from src.models.options import PathValidationOptions
from src.utils.sanitization import (
    PathSanitizer,
    PathTraversalError,
    is_valid_path_input,
    sanitize_path,
    sanitize_workspace_path,
)


class TestSanitizeWorkspacePath:
    """Tests for sanitize_workspace_path."""

    def test_simple_relative_path_unchanged(self):
        assert sanitize_workspace_path("packages/lib1/src/file.ts") == "packages/lib1/src/file.ts"

    def test_removes_leading_slash(self):
        assert sanitize_workspace_path("/packages/lib1/src/file.ts") == "packages/lib1/src/file.ts"

    def test_converts_backslashes(self):
        assert sanitize_workspace_path("packages\\lib1\\src\\file.ts") == "packages/lib1/src/file.ts"

    def test_collapses_redundant_separators(self):
        assert sanitize_workspace_path("packages//lib1///src/file.ts") == "packages/lib1/src/file.ts"

    def test_multiple_leading_separators(self):
        assert sanitize_workspace_path("//packages/lib1") == "packages/lib1"
        assert sanitize_workspace_path("\\\\packages\\lib1") == "packages/lib1"

    def test_removes_current_directory_segments(self):
        assert sanitize_workspace_path("./packages/./lib1/file.ts") == "packages/lib1/file.ts"

    def test_drops_trailing_separator(self):
        assert sanitize_workspace_path("packages/lib1/") == "packages/lib1"

    @pytest.mark.parametrize("value", ["", "/", ".", "./", "//", "\\"])
    def test_workspace_root(self, value):
        assert sanitize_workspace_path(value) == "."

    @pytest.mark.parametrize(
        "value",
        ["...", "file..ts", "..hidden", "packages/..lib/x.ts", "a/b../c", ". ./x"],
    )
    def test_dot_lookalikes_are_not_traversal(self, value):
        assert ".." not in sanitize_workspace_path(value).split("/")

    def test_accepts_path_objects(self):
        assert sanitize_workspace_path(PurePosixPath("/packages/lib1/a.ts")) == "packages/lib1/a.ts"
        assert sanitize_workspace_path(PureWindowsPath("packages\\lib1\\a.ts")) == "packages/lib1/a.ts"

    def test_traversal_error_message_includes_input(self):
        with pytest.raises(
            PathTraversalError,
            match=re.escape('Invalid path: path traversal detected in "../etc/passwd"'),
        ) as exc_info:
            sanitize_workspace_path("../etc/passwd")

        assert exc_info.value.path == "../etc/passwd"

    @pytest.mark.parametrize(
        "value",
        [
            "..",
            "../etc/passwd",
            "packages/../../etc/passwd",
            "packages/lib1/..",
            "packages/lib1/../lib2/file.ts",
            "/../etc/passwd",
            "..\\windows\\system32",
            "packages\\..\\..\\secret",
            "packages/..\\secret",
            "packages//..//secret",
            "./../x",
        ],
    )
    def test_rejects_any_parent_segment(self, value):
        """Any '..' is rejected, even when a preceding segment would cancel it."""
        with pytest.raises(PathTraversalError) as exc_info:
            sanitize_workspace_path(value)
        assert exc_info.value.path == value
        assert value in str(exc_info.value)

    def test_traversal_error_is_value_error(self):
        with pytest.raises(ValueError):
            sanitize_workspace_path("../x")

    @pytest.mark.parametrize(
        "value",
        ["a/b/c.ts", "/a//b/./c", "\\a\\b", "x/.../y", "./", "a/b/"],
    )
    def test_output_invariants(self, value):
        result = sanitize_workspace_path(value)
        assert not result.startswith("/")
        assert "\\" not in result
        assert "//" not in result
        assert ".." not in result.split("/")

    def test_sanitizing_clean_output_is_stable(self):
        once = sanitize_workspace_path("/packages\\lib1//./src/file.ts")
        assert sanitize_workspace_path(once) == once

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.utils.sanitization"):
            with pytest.raises(PathTraversalError):
                sanitize_workspace_path("../secret")

        assert any("../secret" in record.getMessage() for record in caplog.records)

    def test_static_method_and_alias(self):
        assert PathSanitizer.sanitize_workspace_path("/a/b") == "a/b"
        assert sanitize_path("/a/b") == "a/b"


class TestIsValidPathInput:
    """Tests for is_valid_path_input."""

    def test_allows_ascii_filenames_by_default(self):
        assert is_valid_path_input("file-name_01.ts") is True

    def test_allows_path_separators_and_spaces(self):
        assert is_valid_path_input("packages/lib 1\\src/@scope/file.ts") is True

    def test_rejects_disallowed_characters_by_default(self):
        assert is_valid_path_input("bad|name.ts") is False

    @pytest.mark.parametrize("value", ["a;b", "a$b", "a`b", "a\nb", "a\x00b", "a(b)", "a+b", "a#b"])
    def test_rejects_shell_and_regex_characters(self, value):
        assert is_valid_path_input(value) is False

    def test_empty_string_is_valid(self):
        assert is_valid_path_input("") is True

    @pytest.mark.parametrize("value", [None, 42, b"file.ts", ["file.ts"]])
    def test_non_strings_are_invalid(self, value):
        assert is_valid_path_input(value) is False

    def test_unicode_rejected_by_default(self):
        assert is_valid_path_input("файл.ts") is False

    def test_unicode_accepted_when_enabled(self):
        options = PathValidationOptions(allow_unicode=True)
        assert is_valid_path_input("файл.ts", options) is True
        assert is_valid_path_input("ファイル/モジュール.ts", options) is True

    def test_unicode_accepts_combining_marks(self):
        options = PathValidationOptions(allow_unicode=True)
        assert is_valid_path_input("cafe\u0301.ts", options) is True

    def test_unicode_still_rejects_symbols(self):
        options = PathValidationOptions(allow_unicode=True)
        assert is_valid_path_input("file😀.ts", options) is False
        assert is_valid_path_input("bad|name.ts", options) is False

    def test_max_length(self):
        options = PathValidationOptions(max_length=5)
        assert is_valid_path_input("abcde", options) is True
        assert is_valid_path_input("abcdef", options) is False

    def test_additional_allowed_chars(self):
        assert is_valid_path_input("a+b.ts") is False
        assert is_valid_path_input("a+b.ts", PathValidationOptions(additional_allowed_chars="+")) is True

    def test_additional_chars_are_literal_in_class(self):
        """Extra characters cannot open a range, negate, or close the class."""
        options = PathValidationOptions(additional_allowed_chars="!-~")
        assert is_valid_path_input("a!b~c", options) is True
        assert is_valid_path_input("a#b", options) is False

        options = PathValidationOptions(additional_allowed_chars="^]")
        assert is_valid_path_input("a^]b", options) is True
        assert is_valid_path_input("a[b", options) is False

    def test_glob_patterns(self):
        assert is_valid_path_input("src/*.{ts,js}") is False
        options = PathValidationOptions(allow_glob_patterns=True)
        assert is_valid_path_input("src/*.{ts,js}", options) is True
        assert is_valid_path_input("src/file?.[tj]s", options) is True

    @pytest.mark.skipif(sys.platform == "win32", reason="Unix-only filename characters")
    def test_unix_only_characters(self):
        assert is_valid_path_input("a:b<c>.ts") is True

    def test_windows_rejects_unix_only_characters(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        assert is_valid_path_input("a:b.ts") is False

    def test_static_method(self):
        assert PathSanitizer.is_valid_path_input("ok.ts") is True
