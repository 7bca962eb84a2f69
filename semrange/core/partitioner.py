"""Group tokens into OR-separated AND-groups."""

from __future__ import annotations

from typing import List, Sequence

from semrange.constants import OR_SEPARATOR
from semrange.exceptions import EmptyExpressionError, MalformedRangeError


def partition(tokens: Sequence[str]) -> List[List[str]]:
    """Split ``tokens`` on ``||``.

    Args:
        tokens: Output of :func:`semrange.core.tokenizer.tokenize`.

    Returns:
        One list of tokens per OR-clause, each non-empty.

    Raises:
        EmptyExpressionError: ``tokens`` is empty.
        MalformedRangeError: ``||`` is the first or last token, or two
            ``||`` tokens are adjacent.

    Examples:
        >>> partition([">1.0.0", "<2.0.0", "||", "3.x"])
        [['>1.0.0', '<2.0.0'], ['3.x']]
    """
    if not tokens:
        raise EmptyExpressionError("Range expression is empty")

    groups: List[List[str]] = []
    current: List[str] = []

    for index, token in enumerate(tokens):
        if token != OR_SEPARATOR:
            current.append(token)
            continue
        if index == 0:
            raise MalformedRangeError(
                f"First element in range is {OR_SEPARATOR!r}", token=token
            )
        if not current:
            raise MalformedRangeError(
                f"Empty AND-group between {OR_SEPARATOR!r} separators", token=token
            )
        groups.append(current)
        current = []

    if not current:
        raise MalformedRangeError(
            f"Last element in range is {OR_SEPARATOR!r}", token=OR_SEPARATOR
        )
    groups.append(current)

    return groups
