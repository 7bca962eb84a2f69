"""Check command implementation for semrange.

Compiles a range expression once and tests each given version against it.

Typical usage::

    # Which of these versions does the range accept?
    $ semrange check "^1.2.3" 1.2.3 1.9.9 2.0.0

    # Machine-readable output
    $ semrange check ">=1.0.0 <2.0.0 || 3.x" 1.5.0 3.4.1 --format json

    # Report only; never fail on versions outside the range
    $ semrange check "~1.2" 1.3.0 --no-fail-on-mismatch
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click

from semrange.constants import OUTPUT_FORMATS
from semrange.context import SemRangeContext, pass_context
from semrange.core import parse_range
from semrange.exceptions import InvalidVersionLiteralError, SemRangeError
from semrange.models import Range
from semrange.utils import (
    colorize_verdict,
    get_logger,
    parse_version,
    print_error,
    print_json,
    print_plain,
    print_success,
    print_table,
    print_warning,
)

logger = get_logger("commands.check")


@click.command()
@click.argument("range_expression", metavar="RANGE")
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured default_format).",
)
@click.option(
    "--fail-on-mismatch/--no-fail-on-mismatch",
    default=None,
    help="Exit with status 1 when a version is outside the range.",
)
@pass_context
def check(
    ctx: SemRangeContext,
    range_expression: str,
    versions: Tuple[str, ...],
    output_format: Optional[str],
    fail_on_mismatch: Optional[bool],
) -> None:
    """Test VERSION... against RANGE.

    Each version is reported as ``yes`` (satisfies the range), ``no``, or
    ``invalid`` (not a semantic version).

    Exits:
        0 if every version satisfies the range, 1 if any version is
        invalid, does not satisfy the range (unless disabled with
        ``--no-fail-on-mismatch``), or the range cannot be compiled.
    """
    fmt = ctx.output_format(output_format)
    if fail_on_mismatch is None:
        fail_on_mismatch = ctx.config.fail_on_mismatch

    try:
        compiled = parse_range(range_expression)
    except SemRangeError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.info("Checking %d version(s) against %s", len(versions), compiled)
    results = [_evaluate(compiled, version) for version in versions]

    if fmt == "table":
        _display_table(range_expression, compiled, results)
    elif fmt == "simple":
        _display_simple(results)
    else:  # json
        _display_json(range_expression, compiled, results)

    verdicts = [row["verdict"] for row in results]
    invalid = verdicts.count("invalid")
    mismatched = verdicts.count("no")

    if fmt == "table":
        _display_summary(len(results), mismatched, invalid)

    if invalid or (fail_on_mismatch and mismatched):
        sys.exit(1)


def _evaluate(compiled: Range, text: str) -> Dict[str, Any]:
    """Return one result row for ``text``.

    Invalid versions are reported in the row rather than raised, so one bad
    argument does not hide the verdicts for the others.
    """
    try:
        version = parse_version(text)
    except InvalidVersionLiteralError as exc:
        logger.debug("Rejected version %r: %s", text, exc)
        return {"version": text, "verdict": "invalid", "error": exc.message}

    verdict = "yes" if compiled.satisfied_by(version) else "no"
    return {"version": text, "verdict": verdict, "error": None}


def _display_table(
    range_expression: str,
    compiled: Range,
    results: List[Dict[str, Any]],
) -> None:
    rows = [
        {
            "Version": row["version"],
            "Satisfies": colorize_verdict(row["verdict"]),
            "Note": row["error"] or "",
        }
        for row in results
    ]
    print_table(
        rows,
        title=f"Range {range_expression}",
        caption=f"compiled as {compiled}",
        column_styles={
            "Version": {"style": "bold cyan", "no_wrap": True},
            "Satisfies": {"justify": "center", "no_wrap": True},
            "Note": {"style": "dim"},
        },
    )


def _display_simple(results: List[Dict[str, Any]]) -> None:
    width = max(len(row["version"]) for row in results)
    for row in results:
        print_plain(f"{row['version']:<{width}}  {row['verdict']}")


def _display_json(
    range_expression: str,
    compiled: Range,
    results: List[Dict[str, Any]],
) -> None:
    print_json(
        {
            "range": range_expression,
            "canonical": str(compiled),
            "results": [
                {
                    "version": row["version"],
                    "satisfies": row["verdict"] == "yes",
                    "valid": row["verdict"] != "invalid",
                    "error": row["error"],
                }
                for row in results
            ],
        }
    )


def _display_summary(total: int, mismatched: int, invalid: int) -> None:
    if invalid:
        print_warning(f"{invalid} of {total} version(s) could not be parsed")
    if mismatched:
        print_warning(f"{mismatched} of {total} version(s) do not satisfy the range")
    if not (invalid or mismatched):
        print_success(f"All {total} version(s) satisfy the range")
