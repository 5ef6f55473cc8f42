"""
Module: tests/unit/test_transforms.py

What:
    Validate glob translation and literal escaping, both as raw text
    transforms and through the guard's ``glob_to_regex`` / ``from_user_input``.

Why:
    These helpers let callers accept wildcard or literal user input without
    writing regex syntax. A mistranslated glob silently widens what a filter
    matches, and an unescaped metacharacter reopens the ReDoS surface.

How:
    Assert on the exact generated pattern text, then compile through the guard
    and check matches against representative paths and strings.

Interfaces:
    TestEscapeForRegex, TestGlobToRegex, TestFromUserInput

Invariants & Safety Rules:
    - ``from_user_input`` is always accepted for inputs within ``max_length``
      and matches its input literally.
    - Glob output is checked like any other pattern.
"""

import pytest

from pressurelid import SafeRegex, escape_for_regex
from pressurelid.core.transforms import glob_to_pattern


LITERAL_SAMPLES = [
    "",
    "hello",
    "file (1).txt",
    "test.*+?^${}()|[]\\",
    "(a+)+$",
    "(a|aa)+",
    "[a-z]+[0-9]*",
    "((x+)y*)",
    "a{2,}",
    "\\(",
    "price: $5.00?",
]


class TestEscapeForRegex:
    def test_escapes_example(self):
        assert escape_for_regex("a.b*c") == r"a\.b\*c"

    def test_empty_string(self):
        assert escape_for_regex("") == ""

    def test_escapes_every_metacharacter(self):
        assert escape_for_regex(".*+?^${}()|[]\\") == r"\.\*\+\?\^\$\{\}\(\)\|\[\]\\"

    def test_leaves_ordinary_characters(self):
        assert escape_for_regex("a-b c/d_e") == "a-b c/d_e"


class TestGlobToRegex:
    @pytest.mark.parametrize(
        "glob, expected",
        [
            ("*.md", r"^[^/]*\.md\Z"),
            ("**/*.md", r"^.*/[^/]*\.md\Z"),
            ("file?.txt", r"^file[^/]\.txt\Z"),
            ("***", r"^.*[^/]*\Z"),
            ("", r"^\Z"),
            ("{a,b}", r"^\{a,b\}\Z"),
        ],
    )
    def test_translation(self, glob, expected):
        assert glob_to_pattern(glob) == expected

    def test_single_star(self):
        result = SafeRegex().glob_to_regex("*.md")
        assert result.safe is True
        assert result.regex.search("readme.md")
        assert not result.regex.search("readme.txt")
        assert not result.regex.search("a/readme.md")

    def test_globstar(self):
        result = SafeRegex().glob_to_regex("**/*.md")
        assert result.safe is True
        assert result.regex.search("a/b/readme.md")

    def test_globstar_without_separator(self):
        result = SafeRegex().glob_to_regex("**.md")
        assert result.regex.search("readme.md")
        assert result.regex.search("docs/readme.md")

    def test_question_mark(self):
        result = SafeRegex().glob_to_regex("file?.txt")
        assert result.regex.search("file1.txt")
        assert not result.regex.search("file12.txt")
        assert not result.regex.search("file/.txt")

    def test_case_insensitive(self):
        assert SafeRegex().glob_to_regex("*.md").regex.search("README.MD")

    def test_whole_string_only(self):
        regex = SafeRegex().glob_to_regex("*.md").regex
        assert not regex.search("readme.md\n")
        assert not regex.search("readme.md.bak")

    def test_special_characters_are_literal(self):
        result = SafeRegex().glob_to_regex("file (1).txt")
        assert result.safe is True
        assert result.regex.search("file (1).txt")
        assert not result.regex.search("file 1.txt")

    def test_brackets_are_literal(self):
        result = SafeRegex().glob_to_regex("file[1].txt")
        assert result.safe is True
        assert result.regex.search("file[1].txt")
        assert not result.regex.search("file1.txt")

    def test_braces_are_literal(self):
        regex = SafeRegex().glob_to_regex("*.{md,txt}").regex
        assert regex.search("notes.{md,txt}")
        assert not regex.search("notes.md")

    @pytest.mark.parametrize("glob", ["node_modules", "*.log", ".git", "dist/**", "", "***"])
    def test_ignore_patterns_are_safe(self, glob):
        assert SafeRegex().glob_to_regex(glob).safe is True

    def test_long_glob_is_still_length_checked(self, guard_events):
        guard = SafeRegex(max_length=10, on_block=guard_events["on_block"])
        result = guard.glob_to_regex("**/*.markdown")
        assert result.reason == "pattern_too_long"
        assert len(guard_events["blocked"]) == 1


class TestFromUserInput:
    @pytest.mark.parametrize("text", LITERAL_SAMPLES)
    def test_always_safe_and_literal(self, text):
        """
        What:
            Escaped user input is accepted and matches itself.

        Why:
            Escaping removes every quantifier and group, so no heuristic
            should ever fire and the engine must accept the result.

        How:
            Run a corpus that includes known ReDoS shapes as literal text.

        Returns:
            None
        """
        result = SafeRegex().from_user_input(text)
        assert result.safe is True
        assert result.reason == "ok"
        assert result.regex.search(text)

    def test_does_not_treat_input_as_pattern(self):
        result = SafeRegex().from_user_input("file (1).txt")
        assert result.regex.search("file (1).txt")
        assert not result.regex.search("file 1.txt")
        assert not SafeRegex().from_user_input("a.c").regex.search("abc")

    def test_case_insensitive(self):
        result = SafeRegex().from_user_input("Hello")
        assert result.regex.search("hello")
        assert result.regex.search("HELLO")

    def test_length_overflow(self):
        result = SafeRegex(max_length=4).from_user_input("a.b.c")
        assert result.reason == "pattern_too_long"
