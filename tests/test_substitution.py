"""Tests for sl10n.substitution — placeholder replacement."""

from __future__ import annotations

import pytest

from sl10n.substitution import placeholders, substitute


class TestSubstitute:
    def test_single_placeholder(self) -> None:
        assert substitute("Goodbye, {name}.", {"name": "Alice"}) == "Goodbye, Alice."

    def test_every_occurrence_replaced(self) -> None:
        assert substitute("{x}-{x}-{x}", {"x": "1"}) == "1-1-1"

    def test_none_params_returns_template(self) -> None:
        assert substitute("Hi {name}!", None) == "Hi {name}!"

    def test_empty_params_returns_template(self) -> None:
        assert substitute("Hi {name}!", {}) == "Hi {name}!"

    def test_missing_param_left_verbatim(self) -> None:
        assert substitute("{a} and {b}", {"a": "X"}) == "X and {b}"

    def test_extra_params_ignored(self) -> None:
        assert substitute("Hello!", {"unused": "value"}) == "Hello!"

    def test_values_are_not_rescanned(self) -> None:
        """A value that looks like a placeholder is inserted literally."""
        assert substitute("{a} {b}", {"a": "{b}", "b": "B"}) == "{b} B"
        assert substitute("{a} {b}", {"b": "B", "a": "{b}"}) == "{b} B"

    def test_non_string_values_rendered(self) -> None:
        assert substitute("{n} items", {"n": 3}) == "3 items"

    def test_no_escaping_of_double_braces(self) -> None:
        assert substitute("{{name}}", {"name": "Bob"}) == "{Bob}"

    def test_regex_characters_in_name(self) -> None:
        assert substitute("Total: {a.b*}", {"a.b*": "42"}) == "Total: 42"

    @pytest.mark.parametrize(
        "template",
        ["", "{", "}", "{unclosed", "}{", "{}", "{ name }"],
    )
    def test_malformed_templates_do_not_raise(self, template: str) -> None:
        assert substitute(template, {"name": "x"}) == template

    def test_empty_name_matches_empty_braces(self) -> None:
        assert substitute("a{}b", {"": "-"}) == "a-b"


class TestPlaceholders:
    def test_finds_names(self) -> None:
        assert placeholders("Hello, {name1} and {name2}!") == {"name1", "name2"}

    def test_no_placeholders(self) -> None:
        assert placeholders("Hello!") == set()

    def test_ignores_non_word_braces(self) -> None:
        assert placeholders("{ spaced } {ok}") == {"ok"}
