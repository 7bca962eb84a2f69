from __future__ import annotations

import pytest

from semrange.core.partitioner import partition
from semrange.exceptions import (
    EmptyExpressionError,
    MalformedRangeError,
    RangeParseError,
)


@pytest.mark.unit
class TestPartition:
    """Tests for partition."""

    def test_single_group_without_separator(self) -> None:
        assert partition([">1.0.0", "<2.0.0"]) == [[">1.0.0", "<2.0.0"]]

    def test_splits_on_or_separator(self) -> None:
        tokens = [">1.0.0", "<2.0.0", "||", ">3.0.0", "!4.2.1"]

        assert partition(tokens) == [[">1.0.0", "<2.0.0"], [">3.0.0", "!4.2.1"]]

    def test_three_groups(self) -> None:
        assert partition(["1", "||", "2", "||", "3"]) == [["1"], ["2"], ["3"]]

    def test_returns_fresh_lists(self) -> None:
        tokens = ["1.0.0"]

        groups = partition(tokens)
        groups[0].append("2.0.0")

        assert tokens == ["1.0.0"]

    def test_leading_separator_is_malformed(self) -> None:
        with pytest.raises(MalformedRangeError) as exc_info:
            partition(["||", ">1.0.0"])

        assert "first" in str(exc_info.value).lower()

    def test_trailing_separator_is_malformed(self) -> None:
        with pytest.raises(MalformedRangeError) as exc_info:
            partition([">1.0.0", "||"])

        assert "last" in str(exc_info.value).lower()

    def test_adjacent_separators_are_malformed(self) -> None:
        with pytest.raises(MalformedRangeError, match="Empty AND-group"):
            partition([">1.0.0", "||", "||", "<0.1.0"])

    def test_lone_separator_is_malformed(self) -> None:
        with pytest.raises(MalformedRangeError):
            partition(["||"])

    def test_empty_tokens_raise_empty_expression(self) -> None:
        with pytest.raises(EmptyExpressionError):
            partition([])

    def test_errors_share_parse_error_base(self) -> None:
        with pytest.raises(RangeParseError):
            partition(["||"])
