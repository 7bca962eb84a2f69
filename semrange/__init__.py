"""
semrange — npm-style semantic version ranges for Python

semrange compiles human-written range expressions such as
``>1.0.0 <2.0.0 || ^3.1.x`` into immutable predicates that test whether
a semantic version satisfies them.

Supported syntax:
    • Primitive comparators: ``= == != ! > >= < <=``
    • AND by whitespace, OR by ``||`` (AND binds tighter, no grouping)
    • Caret and tilde shorthand: ``^1.2.3``, ``~1.2``, ``~>1.2``
    • Wildcards and partial versions: ``1.x``, ``1.2.*``, ``1.2``, ``*``
    • Hyphen ranges: ``1.0.0 - 2.0.0``

Example:
    >>> from semrange import parse_range
    >>> parse_range("^1.2.3")("1.9.9")
    True
"""

from __future__ import annotations

from semrange.__version__ import __version__
from semrange.core import all_of, any_of, parse_range, parse_range_or_exit
from semrange.exceptions import (
    ConfigError,
    EmptyExpressionError,
    InvalidComparatorError,
    InvalidVersionLiteralError,
    MalformedRangeError,
    RangeParseError,
    SemRangeError,
)
from semrange.models import (
    AndRange,
    ComparatorRange,
    Operator,
    OrRange,
    Range,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "semrange Contributors"
__license__ = "Apache-2.0"
__description__ = "Compile npm-style semantic version ranges into predicates."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Compilation
    "parse_range",
    "parse_range_or_exit",
    "all_of",
    "any_of",
    # Predicates
    "Range",
    "ComparatorRange",
    "AndRange",
    "OrRange",
    "Operator",
    # Errors
    "SemRangeError",
    "RangeParseError",
    "EmptyExpressionError",
    "MalformedRangeError",
    "InvalidComparatorError",
    "InvalidVersionLiteralError",
    "ConfigError",
]
