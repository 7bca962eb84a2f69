"""
Core range compilation pipeline for semrange.

Each stage lives in its own module and can be used on its own:

    from semrange.core import tokenize, partition, expand, resolve, build

Most callers only need :func:`parse_range`, which chains them.
"""

from __future__ import annotations

from semrange.core.tokenizer import tokenize
from semrange.core.partitioner import partition
from semrange.core.expander import expand, expand_token, normalize_literal
from semrange.core.resolver import resolve
from semrange.core.builder import (
    all_of,
    any_of,
    build,
    parse_range,
    parse_range_or_exit,
)

__all__ = [
    "tokenize",
    "partition",
    "expand",
    "expand_token",
    "normalize_literal",
    "resolve",
    "build",
    "all_of",
    "any_of",
    "parse_range",
    "parse_range_or_exit",
]
