"""Tests for the console-bound parsing front end (cli/command_line.py)."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from sample_helper.cli.command_line import parse_command_line, print_help
from sample_helper.core.arguments import Argument, define_arguments


@dataclass
class _Job:
    retries: int = 1
    dry_run: bool = False


define_arguments(
    _Job,
    Argument("retries", short_name="r", description="Retry count", value_type=int),
    Argument("dry-run", description="Only print actions", value_type=bool),
)


class TestParseCommandLine:
    def test_uses_sys_argv_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["job", "-r=4", "--dry-run", "target"])
        job = _Job()
        assert parse_command_line(job) == ["target"]
        assert job == _Job(retries=4, dry_run=True)

    def test_errors_go_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        parse_command_line(_Job(), ["--retries=many"])
        assert (
            capsys.readouterr().out
            == " Argument 'retries' requires a value of the type 'int'.\n"
        )


class TestPrintHelp:
    def test_writes_every_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_help(_Job(retries=2))
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == " Arguments:"
        assert lines[1].startswith("    --dry-run")
        assert lines[2].startswith("    -r, --retries=[2]")
        assert lines[2].endswith("Retry count")
