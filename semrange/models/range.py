"""
Compiled range predicates for semrange.

A compiled range is a small immutable tree:

- :class:`ComparatorRange` — one primitive comparator applied against a
  fixed bound version (``>=1.2.0``).
- :class:`AndRange` — satisfied when both children are.
- :class:`OrRange` — satisfied when either child is.

Every node is a frozen dataclass holding only other nodes and
:class:`semver.Version` values, so a compiled range can be shared and
evaluated from any number of threads.

Example:
    >>> from semrange import parse_range
    >>> stable = parse_range("^1.2")
    >>> stable("1.9.0"), stable("2.0.0")
    (True, False)
    >>> str(stable | parse_range("3.x"))
    '>=1.2.0 <2.0.0 || >=3.0.0 <4.0.0'
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Union

from semver import Version

from semrange.utils.version_utils import coerce_version, compare


class Operator(enum.Enum):
    """The six primitive comparators.

    Each member's value is its canonical symbol.
    """

    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    @property
    def symbol(self) -> str:
        return self.value

    def test(self, version: Version, bound: Version) -> bool:
        """Return True if ``version <op> bound`` holds."""
        return _ORDER_TESTS[self](compare(version, bound))


_ORDER_TESTS: Dict[Operator, Callable[[int], bool]] = {
    Operator.EQ: lambda order: order == 0,
    Operator.NE: lambda order: order != 0,
    Operator.GT: lambda order: order > 0,
    Operator.GE: lambda order: order >= 0,
    Operator.LT: lambda order: order < 0,
    Operator.LE: lambda order: order <= 0,
}


class Range:
    """Base class for compiled range predicates.

    Call a range with a :class:`semver.Version` (or a version string) to
    test membership. Combine ranges with ``&`` (AND) and ``|`` (OR); the
    result is a new range and neither operand is modified.
    """

    __slots__ = ()

    def __call__(self, version: Union[Version, str]) -> bool:
        return self.satisfied_by(coerce_version(version))

    def satisfied_by(self, version: Version) -> bool:
        raise NotImplementedError

    def __and__(self, other: "Range") -> "Range":
        if not isinstance(other, Range):
            return NotImplemented
        return AndRange(self, other)

    def __or__(self, other: "Range") -> "Range":
        if not isinstance(other, Range):
            return NotImplemented
        return OrRange(self, other)


@dataclass(frozen=True)
class ComparatorRange(Range):
    """A primitive comparator bound to a concrete version.

    Attributes:
        operator: Comparator applied to the tested version.
        version: Bound the tested version is compared against.
    """

    operator: Operator
    version: Version

    def satisfied_by(self, version: Version) -> bool:
        return self.operator.test(version, self.version)

    def __str__(self) -> str:
        return f"{self.operator.symbol}{self.version}"


@dataclass(frozen=True)
class AndRange(Range):
    """Logical AND of two ranges."""

    left: Range
    right: Range

    def satisfied_by(self, version: Version) -> bool:
        return self.left.satisfied_by(version) and self.right.satisfied_by(version)

    def __str__(self) -> str:
        return f"{_and_operand(self.left)} {_and_operand(self.right)}"


@dataclass(frozen=True)
class OrRange(Range):
    """Logical OR of two ranges."""

    left: Range
    right: Range

    def satisfied_by(self, version: Version) -> bool:
        return self.left.satisfied_by(version) or self.right.satisfied_by(version)

    def __str__(self) -> str:
        return f"{self.left} || {self.right}"


def _and_operand(node: Range) -> str:
    # The string grammar has no grouping; only programmatic composition
    # can put an OR below an AND.
    if isinstance(node, OrRange):
        return f"({node})"
    return str(node)
