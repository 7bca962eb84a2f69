"""Resolve canonical tokens into :class:`ComparatorRange` values."""

from __future__ import annotations

from typing import Dict

from semrange.core.expander import split_comparator_version
from semrange.exceptions import InvalidComparatorError, InvalidVersionLiteralError
from semrange.models.range import ComparatorRange, Operator
from semrange.utils.version_utils import parse_version

#: Operator text accepted after expansion, mapped to its comparator.
PRIMITIVE_OPERATORS: Dict[str, Operator] = {
    "": Operator.EQ,
    "=": Operator.EQ,
    "==": Operator.EQ,
    "!": Operator.NE,
    "!=": Operator.NE,
    ">": Operator.GT,
    ">=": Operator.GE,
    "<": Operator.LT,
    "<=": Operator.LE,
}


def resolve(token: str) -> ComparatorRange:
    """Turn a canonical ``op+version`` token into a comparator range.

    Args:
        token: Canonical token such as ``">=1.2.0"`` or ``"!=2.0.0-rc.1"``.

    Returns:
        The comparator bound to the parsed version.

    Raises:
        InvalidComparatorError: The operator is not a primitive comparator.
        InvalidVersionLiteralError: The version is not a full semantic version.
    """
    operator_text, literal = split_comparator_version(token)

    operator = PRIMITIVE_OPERATORS.get(operator_text)
    if operator is None:
        raise InvalidComparatorError(
            f"Could not parse comparator {operator_text!r} in {token!r}",
            operator=operator_text,
            token=token,
        )

    try:
        version = parse_version(literal)
    except InvalidVersionLiteralError as exc:
        exc.with_token(token)
        raise

    return ComparatorRange(operator, version)
