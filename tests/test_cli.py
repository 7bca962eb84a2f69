"""End-to-end tests for the semrange command line.

Test Coverage:
- check verdicts in table, simple and json formats
- check exit codes for mismatches, invalid versions and bad ranges
- explain output in every format
- Configuration file handling through --config
- main() exit code mapping
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Generator, List

import pytest
from click.testing import CliRunner, Result

from semrange.__version__ import __version__
from semrange.cli import cli, main
from semrange.utils.logger import disable_logging


@pytest.fixture(autouse=True)
def isolated_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run each command from an empty directory with colors off."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("SEMRANGE_CONFIG", raising=False)
    monkeypatch.delenv("SEMRANGE_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    yield
    disable_logging()


def _invoke(args: List[str]) -> Result:
    return CliRunner().invoke(cli, ["--no-color", *args])


@pytest.mark.integration
class TestCheckCommand:
    """Tests for ``semrange check``."""

    def test_simple_format(self) -> None:
        result = _invoke(["check", "^1.2.3", "1.4.0", "2.0.0", "-f", "simple"])

        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines == ["1.4.0  yes", "2.0.0  no"]

    def test_all_satisfy_exits_zero(self) -> None:
        result = _invoke(["check", ">=1.0.0 <2.0.0 || 3.x", "1.5.0", "3.4.1"])

        assert result.exit_code == 0
        assert "All 2 version(s) satisfy the range" in result.output

    def test_no_fail_on_mismatch(self) -> None:
        result = _invoke(
            ["check", "~1.2", "1.3.0", "--no-fail-on-mismatch", "-f", "simple"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "1.3.0  no"

    def test_invalid_version_always_fails(self) -> None:
        result = _invoke(
            ["check", "*", "1.0", "--no-fail-on-mismatch", "-f", "simple"]
        )

        assert result.exit_code == 1
        assert result.output.strip() == "1.0  invalid"

    def test_table_format_reports_summary(self) -> None:
        result = _invoke(["check", "1.x", "1.2.3", "2.0.0", "abc"])

        assert result.exit_code == 1
        assert "1.2.3" in result.output
        assert "1 of 3 version(s) could not be parsed" in result.output
        assert "1 of 3 version(s) do not satisfy the range" in result.output

    def test_json_format(self) -> None:
        result = _invoke(
            ["check", "!1.2.x", "1.2.5", "1.3.0", "bad", "--format", "json"]
        )

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["range"] == "!1.2.x"
        assert payload["canonical"] == "<1.2.0 >=1.3.0"
        assert [r["satisfies"] for r in payload["results"]] == [False, False, False]
        assert [r["valid"] for r in payload["results"]] == [True, True, False]
        assert payload["results"][2]["error"].startswith("Invalid version 'bad'")

    def test_bad_range_fails(self) -> None:
        result = _invoke(["check", "|| 1.0.0", "1.0.0"])

        assert result.exit_code == 1
        assert "[ERROR] First element in range is '||'" in result.output

    def test_requires_a_version(self) -> None:
        result = _invoke(["check", "^1.0.0"])

        assert result.exit_code == 2


@pytest.mark.integration
class TestExplainCommand:
    """Tests for ``semrange explain``."""

    def test_simple_format(self) -> None:
        result = _invoke(["explain", ">=1.2 <3 || ^4.1.x", "-f", "simple"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "1: >=1.2 -> >=1.2.0",
            "1: <3 -> <3.0.0",
            "2: ^4.1.x -> >=4.1.0 <5.0.0",
            ">=1.2.0 <3.0.0 || >=4.1.0 <5.0.0",
        ]

    def test_json_format(self) -> None:
        result = _invoke(["explain", "1.0.0 - 2.x", "--format", "json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["groups"] == [
            [{"token": "1.0.0 - 2.x", "expanded": [">=1.0.0", "<2.0.0"]}]
        ]
        assert payload["canonical"] == ">=1.0.0 <2.0.0"

    def test_table_format(self) -> None:
        result = _invoke(["explain", "~1.2.3"])

        assert result.exit_code == 0
        assert "Range expansion" in result.output
        assert "Compiled: >=1.2.3 <1.3.0" in result.output

    def test_bad_range_fails(self) -> None:
        result = _invoke(["explain", "=>1.0.0"])

        assert result.exit_code == 1
        assert "Could not parse comparator '=>'" in result.output


@pytest.mark.integration
class TestConfiguration:
    """Tests for configuration through the CLI."""

    def test_default_format_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "semrange.toml"
        config.write_text('[semrange]\ndefault_format = "json"\n', encoding="utf-8")

        result = _invoke(["check", "1.x", "1.0.0"])

        assert result.exit_code == 0
        assert json.loads(result.output)["canonical"] == ">=1.0.0 <2.0.0"

    def test_fail_on_mismatch_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text(
            '[semrange]\nfail_on_mismatch = false\ndefault_format = "simple"\n',
            encoding="utf-8",
        )

        result = _invoke(["--config", str(config), "check", "1.x", "2.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "2.0.0  no"

    def test_command_line_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "semrange.toml").write_text(
            '[semrange]\ndefault_format = "json"\n', encoding="utf-8"
        )

        result = _invoke(["check", "1.x", "1.0.0", "-f", "simple"])

        assert result.output.strip() == "1.0.0  yes"

    def test_invalid_config_fails(self, tmp_path: Path) -> None:
        (tmp_path / "semrange.toml").write_text(
            "[semrange]\nunknown = 1\n", encoding="utf-8"
        )

        result = _invoke(["check", "1.x", "1.0.0"])

        assert result.exit_code == 1
        assert "Unknown configuration keys: unknown" in result.output

    def test_missing_config_is_usage_error(self, tmp_path: Path) -> None:
        result = _invoke(["--config", str(tmp_path / "nope.toml"), "check", "1", "1"])

        assert result.exit_code == 2


@pytest.mark.unit
class TestMainExitCodes:
    """Tests for main()."""

    def test_version(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["semrange", "--version"])

        assert main() == 0
        assert f"semrange {__version__}" in capsys.readouterr().out

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "sys.argv", ["semrange", "check", "^1.0.0", "1.2.0", "-f", "simple"]
        )

        assert main() == 0

    def test_mismatch(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "sys.argv", ["semrange", "check", "^1.0.0", "2.0.0", "-f", "simple"]
        )

        assert main() == 1

    def test_usage_error(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["semrange", "check", "--bogus"])

        assert main() == 2
        assert "No such option" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("semrange.cli.cli", interrupted)

        assert main() == 130

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        def broken(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("semrange.cli.cli", broken)

        assert main() == 1
        assert "Unexpected error: kaboom" in capsys.readouterr().out
