"""
Utility helpers for semrange.

This package provides reusable utilities used across semrange:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Version parsing, comparison and bumping

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from semrange.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from semrange.utils.console import (
    colorize_verdict,
    get_raw_console,
    print_error,
    print_json,
    print_plain,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from semrange.utils.version_utils import bump, coerce_version, compare, parse_version

__all__ = [
    # Console
    "print_error",
    "print_json",
    "print_plain",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_verdict",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
    "is_logging_configured",
    # Version utilities
    "bump",
    "compare",
    "parse_version",
    "coerce_version",
]
