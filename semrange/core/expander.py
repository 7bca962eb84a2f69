"""Expand shorthand and wildcard tokens into primitive comparator tokens.

Every token of an AND-group is rewritten into one or two canonical tokens
that only use the primitive operators ``= != > >= < <=`` against a full
``MAJOR.MINOR.PATCH`` version. ``bump(v, field)`` below increments
``field`` and zeroes everything after it.

===============================  =======================================
Input                            Output
===============================  =======================================
``A - B`` (hyphen range)         ``>=A <B`` (B is not bumped)
``^A``                           ``>=A <bump(A, major)``
``~A.B.C`` / ``~A.B.x``          ``>=A <bump(A, minor)``
``~>A.B.x``                      ``>=A <bump(A, minor)``
``~>A.B.C``                      ``>=A``
``~A`` / ``~>A``, ``A.x``        ``>=A <bump(A, major)``
``~*``                           ``>=0.0.0``
``>A.B.x`` / ``>A.x``            ``>=bump(A, minor)`` / ``>=bump(A, major)``
``>=A``                          ``>=A``
``<A``                           ``<A``
``<=A.B.x`` / ``<=A.x``          ``<bump(A, minor)`` / ``<bump(A, major)``
``A.B.x`` / ``=A.x`` / ``==``    ``>=A <bump(A, minor|major)``
``!A.B.x`` / ``!=A.x``           ``<A >=bump(A, minor|major)``
``2`` (digits only)              ``2.0.0``
``*``                            ``>=0.0.0``
===============================  =======================================

A literal naming only the major field (``1``) is open at the minor
level, one naming major and minor (``1.2``) at the patch level. A fully
specified literal passes through untouched unless the operator is ``^``,
``~`` or ``~>``.

All scratch state is local to a call, so expansion is safe to run from
several threads at once.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from semrange.constants import (
    ANY_TOKEN,
    HYPHEN_SEPARATOR,
    LITERAL_BODY_CHARS,
    LITERAL_START_CHARS,
    LITERAL_TAIL_CHARS,
    SHORTHAND_OPERATORS,
    WILDCARD_CHARS,
    ZERO_VERSION,
)
from semrange.exceptions import InvalidComparatorError, InvalidVersionLiteralError
from semrange.models.parts import VersionParts, WildcardKind
from semrange.utils.logger import get_logger
from semrange.utils.version_utils import bump, parse_version

logger = get_logger("core.expander")

#: Canonical token no release version satisfies.
NOTHING_TOKEN = f"<{ZERO_VERSION}"

#: Canonical token every release version satisfies.
EVERYTHING_TOKEN = f">={ZERO_VERSION}"

#: Field bumped to close the upper end of an open literal.
_BUMP_FIELD = {
    WildcardKind.MINOR: "major",
    WildcardKind.PATCH: "minor",
}


def split_comparator_version(token: str) -> Tuple[str, str]:
    """Split ``token`` into its operator prefix and version literal.

    The literal starts at the first digit or wildcard character.

    Raises:
        InvalidVersionLiteralError: The token holds no version literal.

    Examples:
        >>> split_comparator_version(">=1.2.x")
        ('>=', '1.2.x')
        >>> split_comparator_version("*")
        ('>=', '0.0.0')
    """
    if token == ANY_TOKEN:
        return ">=", ZERO_VERSION

    for index, char in enumerate(token):
        if char in LITERAL_START_CHARS:
            return token[:index], token[index:]

    raise InvalidVersionLiteralError(
        f"Could not get version from {token!r}", token=token, literal=""
    )


def normalize_literal(literal: str) -> Tuple[VersionParts, WildcardKind]:
    """Normalize a possibly partial or wildcarded version literal.

    Args:
        literal: Version text such as ``"1.2.3"``, ``"1.x"`` or ``"2.*-rc.1"``.

    Returns:
        The normalized fields and the least specific open field.

    Raises:
        InvalidVersionLiteralError: The literal contains characters outside
            ``[0-9.x*]`` before its tail, mixes digits and wildcards in one
            field, or has more than three fields.

    Examples:
        >>> parts, kind = normalize_literal("1.x")
        >>> str(parts), kind.name
        ('1.0.0', 'MINOR')
    """
    body, tail = _split_tail(literal)

    invalid = sorted({char for char in body if char not in LITERAL_BODY_CHARS})
    if invalid:
        raise InvalidVersionLiteralError(
            f"Invalid character(s) {''.join(invalid)!r} in version {literal!r}",
            literal=literal,
        )

    fields = body.split(".")
    # "1." names the same fields as "1"
    if len(fields) > 1 and not fields[-1]:
        fields.pop()
    if len(fields) > 3:
        raise InvalidVersionLiteralError(
            f"Too many fields in version {literal!r}", literal=literal
        )

    kind = WildcardKind.NONE
    values: List[str] = []
    for position, field in enumerate(fields):
        wildcards = sum(1 for char in field if char in WILDCARD_CHARS)
        if wildcards and wildcards != len(field):
            raise InvalidVersionLiteralError(
                f"Field {field!r} mixes digits and wildcards in version {literal!r}",
                literal=literal,
            )
        if wildcards and kind is WildcardKind.NONE:
            kind = WildcardKind.for_position(position)
        # Fields after a wildcard are open as well
        values.append("0" if kind is not WildcardKind.NONE else field or "0")

    if kind is WildcardKind.NONE and len(fields) < 3:
        kind = WildcardKind.for_position(len(fields))
    values.extend("0" for _ in range(3 - len(values)))

    return VersionParts(values[0], values[1], values[2], tail), kind


def _split_tail(literal: str) -> Tuple[str, str]:
    for index, char in enumerate(literal):
        if char in LITERAL_TAIL_CHARS:
            return literal[:index], literal[index:]
    return literal, ""


def _bumped(token: str, parts: VersionParts, field: str) -> str:
    try:
        return str(bump(parse_version(parts.to_string()), field))
    except InvalidVersionLiteralError as exc:
        exc.with_token(token)
        raise


def _normalized(token: str, literal: str) -> Tuple[VersionParts, WildcardKind]:
    try:
        return normalize_literal(literal)
    except InvalidVersionLiteralError as exc:
        exc.with_token(token)
        raise


def expand_token(token: str) -> List[str]:
    """Rewrite one token into its canonical comparator tokens.

    Args:
        token: A token from an AND-group.

    Returns:
        One or two canonical tokens.

    Raises:
        InvalidComparatorError: The operator prefix is not recognized.
        InvalidVersionLiteralError: The version literal is malformed.

    Examples:
        >>> expand_token("^1.2.3")
        ['>=1.2.3', '<2.0.0']
        >>> expand_token("!=1.2.x")
        ['<1.2.0', '>=1.3.0']
    """
    if HYPHEN_SEPARATOR in token:
        return _expand_hyphen(token)

    if token == ANY_TOKEN:
        return [EVERYTHING_TOKEN]

    if token.isascii() and token.isdigit():
        parts, _ = _normalized(token, token)
        return [parts.to_string()]

    operator, literal = split_comparator_version(token)
    if operator not in SHORTHAND_OPERATORS:
        raise InvalidComparatorError(
            f"Could not parse comparator {operator!r} in {token!r}",
            operator=operator,
            token=token,
        )

    parts, kind = _normalized(token, literal)

    if kind is WildcardKind.NONE and operator not in ("^", "~", "~>"):
        return [token]

    base = parts.to_string()

    if operator == "^":
        return [f">={base}", f"<{_bumped(token, parts, 'major')}"]

    if operator == "~>" and kind is WildcardKind.NONE:
        return [f">={base}"]

    if operator in ("~", "~>"):
        if kind is WildcardKind.MAJOR:
            return [EVERYTHING_TOKEN]
        field = "major" if kind is WildcardKind.MINOR else "minor"
        return [f">={base}", f"<{_bumped(token, parts, field)}"]

    if operator == ">=":
        return [f">={base}"]

    if operator == "<":
        return [f"<{base}"]

    if kind is WildcardKind.MAJOR:
        # Every version is inside "*"
        if operator in (">", "!", "!="):
            return [NOTHING_TOKEN]
        return [EVERYTHING_TOKEN]

    upper = _bumped(token, parts, _BUMP_FIELD[kind])

    if operator == ">":
        return [f">={upper}"]
    if operator == "<=":
        return [f"<{upper}"]
    if operator in ("!", "!="):
        return [f"<{base}", f">={upper}"]
    # "", "=" and "=="
    return [f">={base}", f"<{upper}"]


def _expand_hyphen(token: str) -> List[str]:
    left, right = token.split(HYPHEN_SEPARATOR, 1)
    bounds: List[str] = []

    for side in (left, right):
        if side == ANY_TOKEN:
            operator, literal = "", side
        else:
            operator, literal = split_comparator_version(side)
        if operator:
            raise InvalidComparatorError(
                f"Hyphen range bounds take no comparator, got {side!r} in {token!r}",
                operator=operator,
                token=token,
            )
        parts, _ = _normalized(token, literal)
        bounds.append(parts.to_string())

    return [f">={bounds[0]}", f"<{bounds[1]}"]


def expand(group: Sequence[str]) -> List[str]:
    """Expand every token of an AND-group.

    Args:
        group: Tokens of one OR-clause.

    Returns:
        Canonical tokens in input order.
    """
    expanded: List[str] = []
    for token in group:
        canonical = expand_token(token)
        logger.debug("Expanded %r -> %s", token, canonical)
        expanded.extend(canonical)
    return expanded
