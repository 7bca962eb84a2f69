"""Command-line interface for semrange: the ``check`` and ``explain`` commands."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from semrange.__version__ import __version__
from semrange.commands.check import check
from semrange.commands.explain import explain
from semrange.config import load_config
from semrange.context import SemRangeContext
from semrange.exceptions import ConfigError, SemRangeError
from semrange.utils.console import print_error, print_warning, reconfigure_console
from semrange.utils.logger import get_logger, level_for_verbosity, setup_logging

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _apply_color(enabled: bool) -> None:
    # Rich and ColoredFormatter both read NO_COLOR
    if enabled:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="SEMRANGE_CONFIG",
    help="Read settings from this TOML file.",
)
@click.option("--verbose", "-v", count=True, help="-v for info, -vv for debug.")
@click.option(
    "--color/--no-color",
    default=True,
    envvar="SEMRANGE_COLOR",
    help="Colorize output.",
)
@click.version_option(__version__, prog_name="semrange", message="%(prog)s %(version)s")
@click.pass_context
def cli(
    ctx: click.Context, config: Optional[Path], verbose: int, color: bool
) -> None:
    """Test semantic versions against npm-style ranges.

    \b
      semrange check "^1.2.3" 1.4.0 2.0.0
      semrange explain ">=1.2 <3 || 4.x"
    """
    setup_logging(level=level_for_verbosity(verbose), verbose=verbose > 1)
    _apply_color(color)

    state = SemRangeContext()
    state.verbose = verbose
    state.color = color
    try:
        state.config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(EXIT_FAILURE) from exc
    state.config_path = state.config.source_path
    ctx.obj = state

    logger.debug("semrange %s, config: %s", __version__, state.config_path)


cli.add_command(check)
cli.add_command(explain)


def main() -> int:
    """Run the CLI and return its exit status.

    0 when every version satisfies the range, 1 on mismatch or error,
    2 on usage errors and 130 when interrupted.
    """
    try:
        cli(standalone_mode=False)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_FAILURE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (click.exceptions.Abort, KeyboardInterrupt):
        print_warning("\nInterrupted")
        return EXIT_INTERRUPTED
    except SemRangeError as exc:
        print_error(str(exc))
        logger.debug("details: %s", exc.details, exc_info=True)
        return EXIT_FAILURE
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
