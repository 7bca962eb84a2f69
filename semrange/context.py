"""
Shared context object for semrange CLI commands.

This module defines the Click context object used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from semrange.config import SemRangeConfig


class SemRangeContext:
    """Per-invocation state shared by semrange CLI commands.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; defaults when no file was found.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: SemRangeConfig = SemRangeConfig()

    def output_format(self, requested: Optional[str]) -> str:
        """Return ``requested`` or, when omitted, the configured default."""
        return (requested or self.config.default_format).lower()


#: Click decorator for injecting :class:`SemRangeContext` into commands.
pass_context = click.make_pass_decorator(SemRangeContext, ensure=True)
