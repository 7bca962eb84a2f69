"""
Normalized version-literal data model for semrange.

A version literal written in a range expression may be partial (``1.2``)
or contain wildcards (``1.x``, ``1.2.*``). The expander normalizes it into
a :class:`VersionParts` value plus the :class:`WildcardKind` describing
which field was left open.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class WildcardKind(enum.IntEnum):
    """Least specific field left open in a version literal."""

    NONE = 0
    MAJOR = 1
    MINOR = 2
    PATCH = 3

    @classmethod
    def for_position(cls, position: int) -> "WildcardKind":
        """Return the kind for a wildcard at field ``position`` (0-based)."""
        return cls(position + 1)


@dataclass(frozen=True)
class VersionParts:
    """
    Fields of a normalized version literal.

    Attributes:
        major: Major field, wildcards rewritten to ``"0"``.
        minor: Minor field, ``"0"`` when omitted or wildcarded.
        patch: Patch field, ``"0"`` when omitted or wildcarded.
        tail: Pre-release / build suffix including its leading ``-`` or
            ``+``, kept verbatim. Empty when absent.
    """

    major: str = "0"
    minor: str = "0"
    patch: str = "0"
    tail: str = ""

    def to_string(self) -> str:
        """Render as ``MAJOR.MINOR.PATCH`` followed by the tail."""
        return f"{self.major}.{self.minor}.{self.patch}{self.tail}"

    def __str__(self) -> str:
        return self.to_string()
