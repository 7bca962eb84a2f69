"""Split a raw range expression into tokens.

Whitespace separates tokens, except directly after ``<``, ``>`` or ``=``,
so ``">= 1.0.0"`` stays one token. Whitespace inside a token is dropped.

A standalone ``-`` joins its neighbours into a single hyphen-range token
``"A - B"``; that token is the only one that keeps inner spaces, which
keeps it distinct from pre-release hyphens such as ``1.0.0-beta``.

The tokenizer never fails: empty input gives an empty list, and odd
placements of ``-`` or ``||`` are left for later stages to reject.
"""

from __future__ import annotations

from typing import List

from semrange.constants import (
    HYPHEN_SEPARATOR,
    HYPHEN_TOKEN,
    OPERATOR_JOIN_CHARS,
    OR_SEPARATOR,
    WHITESPACE,
)


def tokenize(text: str) -> List[str]:
    """Split ``text`` into comparator, version and ``||`` tokens.

    Args:
        text: Raw range expression.

    Returns:
        Tokens in input order. Hyphen ranges come back joined.

    Examples:
        >>> tokenize(">= 1.0.0  <2.0.0 || 3 - 4")
        ['>=1.0.0', '<2.0.0', '||', '3 - 4']
    """
    return _join_hyphen_ranges(_split(text))


def _split(text: str) -> List[str]:
    tokens: List[str] = []
    current: List[str] = []
    last_char = ""

    for char in text:
        if char not in WHITESPACE:
            current.append(char)
            last_char = char
        elif last_char not in OPERATOR_JOIN_CHARS and current:
            tokens.append("".join(current))
            current = []

    if current:
        tokens.append("".join(current))
    return tokens


def _join_hyphen_ranges(tokens: List[str]) -> List[str]:
    joined: List[str] = []
    index = 0

    while index < len(tokens):
        token = tokens[index]
        if (
            token == HYPHEN_TOKEN
            and joined
            and index + 1 < len(tokens)
            and _is_range_bound(joined[-1])
            and _is_range_bound(tokens[index + 1])
        ):
            joined[-1] = f"{joined[-1]}{HYPHEN_SEPARATOR}{tokens[index + 1]}"
            index += 2
            continue
        joined.append(token)
        index += 1

    return joined


def _is_range_bound(token: str) -> bool:
    return token not in (OR_SEPARATOR, HYPHEN_TOKEN) and HYPHEN_SEPARATOR not in token
