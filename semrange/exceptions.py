"""
Custom exception hierarchy for semrange.

This module defines structured exception types used across semrange.
All exceptions inherit from :class:`SemRangeError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Compile errors raised while turning a range expression into a predicate
share the :class:`RangeParseError` base, so callers can catch every
syntax problem with a single ``except`` clause.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class SemRangeError(Exception):
    """Base exception for all semrange errors.

    All semrange-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class RangeParseError(SemRangeError):
    """Raised when a range expression cannot be compiled.

    Args:
        message: Error description.
        token: The token being processed when the error occurred.
        expression: The full range expression, truncated for safety.
    """

    __slots__ = ("token", "expression")

    def __init__(
        self,
        message: str,
        *,
        token: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "token", token)
        _add_if(details, "range", _truncate(expression) if expression else None)

        super().__init__(message, details)

        self.token = token
        self.expression = expression

    def with_token(self, token: str) -> "RangeParseError":
        """Record the enclosing token unless one is already recorded."""
        if self.token is None:
            self.token = token
            self.details["token"] = token
        return self

    def with_expression(self, expression: str) -> "RangeParseError":
        """Attach the full input expression unless one is already recorded."""
        if self.expression is None:
            self.expression = expression
            self.details["range"] = _truncate(expression)
        return self


class EmptyExpressionError(RangeParseError):
    """Raised when a range expression contains no tokens at all."""

    __slots__ = ()


class MalformedRangeError(RangeParseError):
    """Raised when ``||`` is misplaced or an AND-group is empty."""

    __slots__ = ()


class InvalidComparatorError(RangeParseError):
    """Raised when the operator in front of a version is not recognized.

    Args:
        message: Error description.
        operator: The unrecognized operator text.
        **kwargs: Additional arguments forwarded to ``RangeParseError``.
    """

    __slots__ = ("operator",)

    def __init__(
        self,
        message: str,
        *,
        operator: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)

        self.operator = operator
        if operator is not None:
            self.details["operator"] = operator


class InvalidVersionLiteralError(RangeParseError):
    """Raised when a version literal is malformed.

    Covers both characters outside the wildcard alphabet and literals
    rejected by the version parser.

    Args:
        message: Error description, quoting the offending text.
        literal: The rejected version literal.
        **kwargs: Additional arguments forwarded to ``RangeParseError``.
    """

    __slots__ = ("literal",)

    def __init__(
        self,
        message: str,
        *,
        literal: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)

        self.literal = literal


class ConfigError(SemRangeError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
