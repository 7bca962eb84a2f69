"""
Console output utilities for semrange using Rich.

User-facing CLI output goes through this module; diagnostics go through
:mod:`semrange.utils.logger`.
"""

from __future__ import annotations

import sys
import json
import threading
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from semrange.utils.logger import color_supported

SEMRANGE_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

#: Rich markup for each ``check`` verdict.
VERDICT_STYLES = {
    "yes": "green",
    "no": "red",
    "invalid": "yellow",
}

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _get_console() -> Console:
    """Return the shared Rich console, creating it on first use."""
    global _console

    with _console_lock:
        if _console is None:
            use_color = color_supported(sys.stdout)
            _console = Console(
                theme=SEMRANGE_THEME,
                no_color=not use_color,
                highlight=use_color,
            )
        return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call rebuilds it.

    Needed after ``NO_COLOR`` changes at runtime (``--no-color``).
    """
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich console."""
    return _get_console()


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_plain(message: str) -> None:
    """Print text verbatim, without markup, highlighting or wrapping."""
    _get_console().print(message, markup=False, highlight=False, soft_wrap=True)


def print_json(payload: Any) -> None:
    """Print ``payload`` as indented JSON without any styling."""
    print_plain(json.dumps(payload, indent=2))


def print_table(
    rows: List[Dict[str, Any]],
    *,
    headers: Optional[Sequence[str]] = None,
    title: Optional[str] = None,
    caption: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render rows as a Rich table.

    Args:
        rows: Row dictionaries; values are converted with ``str``.
        headers: Column order. Defaults to the keys of the first row.
        title: Optional table title.
        caption: Optional table caption.
        column_styles: Per-column ``style``/``justify``/``no_wrap`` options.
    """
    if not rows:
        return

    columns = list(headers) if headers is not None else list(rows[0].keys())
    table = Table(title=title, caption=caption, header_style="bold")

    styles = column_styles or {}
    for column in columns:
        options = styles.get(column, {})
        table.add_column(
            column,
            style=options.get("style"),
            justify=options.get("justify", "left"),
            no_wrap=options.get("no_wrap", False),
            overflow="fold",
        )

    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))

    _get_console().print(table)


def colorize_verdict(verdict: str) -> str:
    """Return Rich markup coloring a ``yes``/``no``/``invalid`` verdict."""
    color = VERDICT_STYLES.get(verdict.lower())
    return f"[{color}]{verdict}[/{color}]" if color else verdict
