"""Compile range expressions into :class:`Range` predicates.

:func:`parse_range` runs the whole pipeline::

    text -> tokenize -> partition -> expand -> resolve -> build -> Range

AND binds tighter than OR and there is no grouping, so
``">1.0.0 <2.0.0 || >3.0.0 !4.2.1"`` reads as
``(>1.0.0 AND <2.0.0) OR (>3.0.0 AND !=4.2.1)``.

Typical usage::

    from semrange import parse_range

    supported = parse_range(">=1.2 <3 || ^4.1.x")
    if supported("4.3.0"):
        ...
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Iterable, List, Sequence

from semrange.core.expander import expand_token
from semrange.core.partitioner import partition
from semrange.core.resolver import resolve
from semrange.core.tokenizer import tokenize
from semrange.exceptions import (
    EmptyExpressionError,
    MalformedRangeError,
    RangeParseError,
)
from semrange.models.range import Range
from semrange.utils.logger import get_logger

logger = get_logger("core.builder")


def all_of(ranges: Iterable[Range]) -> Range:
    """Combine ``ranges`` with logical AND.

    Raises:
        ValueError: ``ranges`` is empty.
    """
    items = list(ranges)
    if not items:
        raise ValueError("all_of() requires at least one range")
    return reduce(operator.and_, items)


def any_of(ranges: Iterable[Range]) -> Range:
    """Combine ``ranges`` with logical OR.

    Raises:
        ValueError: ``ranges`` is empty.
    """
    items = list(ranges)
    if not items:
        raise ValueError("any_of() requires at least one range")
    return reduce(operator.or_, items)


def build(groups: Sequence[Sequence[Range]]) -> Range:
    """Fold resolved AND-groups into one predicate.

    Args:
        groups: One sequence of resolved ranges per OR-clause, normally
            :class:`ComparatorRange` values.

    Returns:
        The OR of the AND of each group.

    Raises:
        EmptyExpressionError: ``groups`` is empty.
        MalformedRangeError: One of the groups is empty.
    """
    if not groups:
        raise EmptyExpressionError("Range expression has no comparators")
    if any(not group for group in groups):
        raise MalformedRangeError("Range expression has an empty AND-group")

    return any_of(all_of(group) for group in groups)


def _compile_token(token: str) -> Range:
    """Expand and resolve one token into the AND of its comparators."""
    ranges = [resolve(canonical) for canonical in expand_token(token)]
    logger.debug("Expanded %r -> %s", token, [str(r) for r in ranges])
    return all_of(ranges)


def parse_range(text: str) -> Range:
    """Compile a range expression into a reusable predicate.

    Args:
        text: Expression such as ``">=1.0.0 <2.0.0 || ^3.1.x"``.

    Returns:
        A :class:`Range`; call it with a version to test membership.

    Raises:
        EmptyExpressionError: ``text`` contains no tokens.
        MalformedRangeError: ``||`` is misplaced.
        InvalidComparatorError: An operator is not recognized.
        InvalidVersionLiteralError: A version literal is malformed.

    Examples:
        >>> in_range = parse_range(">1.0.0 <2.0.0 || >3.0.0 !4.2.1")
        >>> in_range("1.2.3"), in_range("2.1.1"), in_range("4.2.1")
        (True, False, False)
    """
    try:
        tokens = tokenize(text)
        if not tokens:
            raise EmptyExpressionError("Range expression is empty")
        groups: List[List[Range]] = [
            [_compile_token(token) for token in group] for group in partition(tokens)
        ]
        compiled = build(groups)
    except RangeParseError as exc:
        exc.with_expression(text)
        raise

    logger.debug("Compiled range %r as %r", text, str(compiled))
    return compiled


def parse_range_or_exit(text: str) -> Range:
    """Like :func:`parse_range`, but terminate the process on error.

    Meant for scripts that have no sensible way to continue without the
    range. The error is logged and :class:`SystemExit` is raised with a
    ``semrange: ...`` message, which the interpreter prints to stderr
    before exiting with status 1.
    """
    try:
        return parse_range(text)
    except RangeParseError as exc:
        logger.error("Cannot compile range %r: %s", text, exc)
        raise SystemExit(f"semrange: {exc}") from exc
