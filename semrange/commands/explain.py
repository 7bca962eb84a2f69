"""Explain command implementation for semrange.

Shows how a range expression moves through the compile pipeline: the
OR-groups found by the partitioner, the canonical comparators each token
expands to, and the final compiled form.

Typical usage::

    $ semrange explain ">=1.2 <3 || ^4.1.x"
    $ semrange explain "1.0.0 - 2.x" --format json
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional

import click

from semrange.constants import OUTPUT_FORMATS
from semrange.context import SemRangeContext, pass_context
from semrange.core import expand_token, parse_range, partition, tokenize
from semrange.exceptions import SemRangeError
from semrange.utils import (
    get_logger,
    get_raw_console,
    print_error,
    print_json,
    print_plain,
    print_table,
)

logger = get_logger("commands.explain")


@click.command()
@click.argument("range_expression", metavar="RANGE")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured default_format).",
)
@pass_context
def explain(
    ctx: SemRangeContext,
    range_expression: str,
    output_format: Optional[str],
) -> None:
    """Show how RANGE is tokenized, expanded and compiled.

    Exits:
        0 if RANGE compiles, 1 otherwise.
    """
    fmt = ctx.output_format(output_format)

    try:
        compiled = parse_range(range_expression)
    except SemRangeError as exc:
        print_error(str(exc))
        sys.exit(1)

    # The range compiled, so re-running the stages cannot fail
    steps = _pipeline_steps(range_expression)
    canonical = str(compiled)
    logger.debug("Explained %d OR-group(s) for %r", len(steps), range_expression)

    if fmt == "table":
        _display_table(steps, canonical)
    elif fmt == "simple":
        _display_simple(steps, canonical)
    else:  # json
        print_json(
            {
                "range": range_expression,
                "groups": steps,
                "canonical": canonical,
            }
        )


def _pipeline_steps(range_expression: str) -> List[List[Dict[str, Any]]]:
    """Return, per OR-group, each token with its canonical expansion."""
    return [
        [{"token": token, "expanded": expand_token(token)} for token in group]
        for group in partition(tokenize(range_expression))
    ]


def _display_table(steps: List[List[Dict[str, Any]]], canonical: str) -> None:
    rows = [
        {
            "Group": str(index),
            "Token": step["token"],
            "Expands to": " ".join(step["expanded"]),
        }
        for index, group in enumerate(steps, start=1)
        for step in group
    ]
    print_table(
        rows,
        title="Range expansion",
        column_styles={
            "Group": {"justify": "right", "style": "dim"},
            "Token": {"style": "bold cyan", "no_wrap": True},
            "Expands to": {"style": "bright_green"},
        },
    )
    get_raw_console().print(f"[bold]Compiled:[/bold] {canonical}", highlight=False)


def _display_simple(steps: List[List[Dict[str, Any]]], canonical: str) -> None:
    for index, group in enumerate(steps, start=1):
        for step in group:
            print_plain(f"{index}: {step['token']} -> {' '.join(step['expanded'])}")
    print_plain(canonical)
