from __future__ import annotations

import io
import json
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

import semrange.utils.console as console_module
from semrange.utils.console import (
    SEMRANGE_THEME,
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


@pytest.fixture
def output() -> Generator[io.StringIO, None, None]:
    """Route the shared console into a buffer."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        theme=SEMRANGE_THEME,
        no_color=True,
        highlight=False,
        width=120,
    )
    with patch.object(console_module, "_console", console):
        yield buffer


@pytest.mark.unit
class TestTheme:
    """Tests for SEMRANGE_THEME."""

    @pytest.mark.parametrize(
        "style_name", ["success", "error", "warning", "info", "dim", "highlight"]
    )
    def test_theme_has_style(self, style_name: str) -> None:
        assert style_name in SEMRANGE_THEME.styles


@pytest.mark.unit
class TestMessages:
    """Tests for the print_* helpers."""

    def test_print_success(self, output: io.StringIO) -> None:
        print_success("all good")

        assert output.getvalue() == "[OK] all good\n"

    def test_print_error_keeps_brackets_literal(self, output: io.StringIO) -> None:
        print_error("bad token [x]")

        assert output.getvalue() == "[ERROR] bad token [x]\n"

    def test_print_warning_custom_prefix(self, output: io.StringIO) -> None:
        print_warning("careful", prefix="!!")

        assert output.getvalue() == "!! careful\n"

    def test_print_plain(self, output: io.StringIO) -> None:
        print_plain(">=1.0.0 [<2.0.0]")

        assert output.getvalue() == ">=1.0.0 [<2.0.0]\n"

    def test_print_json(self, output: io.StringIO) -> None:
        print_json({"range": "^1.0.0", "results": []})

        assert json.loads(output.getvalue()) == {"range": "^1.0.0", "results": []}


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_renders_headers_and_rows(self, output: io.StringIO) -> None:
        print_table(
            [{"Version": "1.2.3", "Satisfies": "yes"}],
            title="Range ^1.0.0",
        )

        text = output.getvalue()
        assert "Range ^1.0.0" in text
        assert "Version" in text
        assert "1.2.3" in text
        assert "yes" in text

    def test_headers_select_columns(self, output: io.StringIO) -> None:
        print_table(
            [{"Version": "1.2.3", "Hidden": "secret"}],
            headers=["Version"],
        )

        assert "secret" not in output.getvalue()

    def test_empty_rows_print_nothing(self, output: io.StringIO) -> None:
        print_table([])

        assert output.getvalue() == ""


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for console creation and reconfiguration."""

    def test_reconfigure_rebuilds_console(self) -> None:
        first = get_raw_console()

        reconfigure_console()

        assert get_raw_console() is not first

    def test_no_color_env_disables_styles(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        reconfigure_console()

        assert get_raw_console().no_color is True

        monkeypatch.delenv("NO_COLOR")
        reconfigure_console()


@pytest.mark.unit
@pytest.mark.parametrize(
    "verdict, expected",
    [
        ("yes", "[green]yes[/green]"),
        ("no", "[red]no[/red]"),
        ("invalid", "[yellow]invalid[/yellow]"),
        ("maybe", "maybe"),
    ],
)
def test_colorize_verdict(verdict: str, expected: str) -> None:
    assert colorize_verdict(verdict) == expected
