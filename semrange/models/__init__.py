"""
Unified data model exports for semrange.

Example:
    >>> from semrange.models import Range, VersionParts, WildcardKind
"""

from __future__ import annotations

from semrange.models.parts import VersionParts, WildcardKind
from semrange.models.range import (
    AndRange,
    ComparatorRange,
    Operator,
    OrRange,
    Range,
)

__all__ = [
    "VersionParts",
    "WildcardKind",
    "Operator",
    "Range",
    "ComparatorRange",
    "AndRange",
    "OrRange",
]
