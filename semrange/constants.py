"""
Centralized constants for semrange.

This module defines immutable values used across semrange, including the
range grammar symbols, configuration defaults, and logging formats. All
values are intended to be treated as read-only.
"""

from typing import Final, FrozenSet, Tuple

# ---------------------------------------------------------------------------
# Range grammar
# ---------------------------------------------------------------------------

#: Token separating OR-groups.
OR_SEPARATOR: Final[str] = "||"

#: Standalone token joining the two bounds of a hyphen range.
HYPHEN_TOKEN: Final[str] = "-"

#: Separator kept inside a joined hyphen-range token (``"1.0 - 2.0"``).
HYPHEN_SEPARATOR: Final[str] = " - "

#: Characters the tokenizer treats as delimiters.
WHITESPACE: Final[FrozenSet[str]] = frozenset(" \t\r\n")

#: A delimiter directly after one of these characters is not a split point.
OPERATOR_JOIN_CHARS: Final[FrozenSet[str]] = frozenset("<>=")

#: Characters standing in for an unconstrained version field.
WILDCARD_CHARS: Final[FrozenSet[str]] = frozenset("x*")

#: Characters that may start the version literal of a token.
LITERAL_START_CHARS: Final[FrozenSet[str]] = frozenset("0123456789x*")

#: Characters allowed in the numeric body of a version literal.
LITERAL_BODY_CHARS: Final[FrozenSet[str]] = frozenset("0123456789.x*")

#: Characters opening the pre-release / build tail of a version literal.
LITERAL_TAIL_CHARS: Final[Tuple[str, ...]] = ("-", "+")

#: Token matching every version.
ANY_TOKEN: Final[str] = "*"

#: Lowest release version; ``>=`` this matches any release.
ZERO_VERSION: Final[str] = "0.0.0"

#: Operators accepted in front of a version literal before expansion.
SHORTHAND_OPERATORS: Final[FrozenSet[str]] = frozenset(
    {"", "=", "==", "!", "!=", "<", "<=", ">", ">=", "^", "~", "~>"}
)

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Output formats understood by CLI commands.
OUTPUT_FORMATS: Final[Tuple[str, ...]] = ("table", "simple", "json")

#: Output format used when neither config nor ``--format`` pick one.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Whether ``check`` exits non-zero when a version falls outside the range.
DEFAULT_FAIL_ON_MISMATCH: Final[bool] = True

#: Name of the standalone configuration file.
CONFIG_FILE_NAME: Final[str] = "semrange.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
