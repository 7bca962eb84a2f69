"""Unit tests for semrange.core.tokenizer.

Test Coverage:
- Whitespace splitting and collapsing
- Operator/literal spacing tolerance after ``<``, ``>`` and ``=``
- Removal of spaces inside tokens
- Hyphen-range joining and its refusals
- Empty input
"""

from __future__ import annotations

import pytest

from semrange.core.tokenizer import tokenize


@pytest.mark.unit
class TestTokenize:
    """Tests for tokenize."""

    def test_splits_on_spaces(self) -> None:
        assert tokenize(">1.0.0 <2.0.0") == [">1.0.0", "<2.0.0"]

    def test_keeps_or_separator_as_token(self) -> None:
        assert tokenize(">1.0.0 || <0.5.0") == [">1.0.0", "||", "<0.5.0"]

    def test_collapses_and_trims_whitespace(self) -> None:
        assert tokenize("   >1.0.0     <2.0.0   ") == [">1.0.0", "<2.0.0"]

    @pytest.mark.parametrize(
        "text, expected",
        [
            (">= 1.0.0", [">=1.0.0"]),
            ("<  2.0.0", ["<2.0.0"]),
            ("= 1.2.3", ["=1.2.3"]),
            ("!= 1.2.3", ["!=1.2.3"]),
            ("> = 1.0.0", [">=1.0.0"]),
        ],
        ids=["ge", "lt-double-space", "eq", "ne", "split-operator"],
    )
    def test_space_after_operator_is_not_a_delimiter(
        self, text: str, expected: list
    ) -> None:
        assert tokenize(text) == expected

    def test_space_after_caret_is_a_delimiter(self) -> None:
        """Only ``<``, ``>`` and ``=`` glue the following space."""
        assert tokenize("^ 1.2.3") == ["^", "1.2.3"]

    def test_spaces_after_operator_are_dropped(self) -> None:
        assert tokenize(">=  1.0.0 <= 2.0.0") == [">=1.0.0", "<=2.0.0"]

    def test_spaces_inside_literal_still_split(self) -> None:
        assert tokenize(">= 1 . 0 . 0") == [">=1", ".", "0", ".", "0"]

    def test_tabs_are_whitespace(self) -> None:
        assert tokenize(">1.0.0\t<2.0.0") == [">1.0.0", "<2.0.0"]

    @pytest.mark.parametrize("text", ["", "   ", "\t \n"])
    def test_empty_input_yields_no_tokens(self, text: str) -> None:
        assert tokenize(text) == []

    def test_single_character_tokens_are_kept(self) -> None:
        assert tokenize("2 || 3") == ["2", "||", "3"]


@pytest.mark.unit
class TestHyphenJoining:
    """Tests for joining ``A - B`` into one hyphen-range token."""

    def test_joins_hyphen_range(self) -> None:
        assert tokenize("1.0.0 - 2.0.0") == ["1.0.0 - 2.0.0"]

    def test_joins_short_bounds(self) -> None:
        assert tokenize("2 - 4") == ["2 - 4"]

    def test_hyphen_range_among_other_tokens(self) -> None:
        assert tokenize(">0.1.0 1 - 2 || 3 - 4") == [">0.1.0", "1 - 2", "||", "3 - 4"]

    def test_prerelease_hyphen_is_not_a_range(self) -> None:
        assert tokenize("1.0.0-beta.1 <2.0.0") == ["1.0.0-beta.1", "<2.0.0"]

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("- 2.0.0", ["-", "2.0.0"]),
            ("1.0.0 -", ["1.0.0", "-"]),
            ("1.0.0 || - 2.0.0", ["1.0.0", "||", "-", "2.0.0"]),
            ("1.0.0 - || 2.0.0", ["1.0.0", "-", "||", "2.0.0"]),
        ],
        ids=["leading", "trailing", "after-or", "before-or"],
    )
    def test_dangling_hyphen_is_left_alone(self, text: str, expected: list) -> None:
        assert tokenize(text) == expected

    def test_chained_hyphen_is_not_joined_twice(self) -> None:
        assert tokenize("1 - 2 - 3") == ["1 - 2", "-", "3"]
