# Unit tests for rootglob.cli.
# These tests drive the typer app end to end over a temporary tree.

from __future__ import annotations

import os
from pathlib import Path

from typer.testing import CliRunner

from rootglob import __version__
from rootglob.cli import app

runner = CliRunner()


def _make_tree(root: Path) -> None:
    (root / "docs").mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "docs" / "c.txt").write_text("c", encoding="utf-8")


def test_cli_lists_sorted_matches(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    result = runner.invoke(app, [os.sep.join([str(tmp_path), "**", "*.txt"]), "--sort"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        str(tmp_path / "a.txt"),
        str(tmp_path / "b.txt"),
        str(tmp_path / "docs" / "c.txt"),
    ]


def test_cli_count(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    result = runner.invoke(app, [os.sep.join([str(tmp_path), "**", "*"]), "--count"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "4"


def test_cli_dirs_only_and_null_separator(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    result = runner.invoke(app, [os.sep.join([str(tmp_path), "*"]), "--dirs-only", "--null"])

    assert result.exit_code == 0
    assert result.stdout == str(tmp_path / "docs") + "\0"


def test_cli_rejects_relative_pattern() -> None:
    result = runner.invoke(app, ["relative/*.txt"])
    assert result.exit_code == 2


def test_cli_reports_parse_error(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    result = runner.invoke(app, [os.sep.join([str(tmp_path), "a**"])])
    assert result.exit_code == 1


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_cli_short_null_flag(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    result = runner.invoke(app, [os.sep.join([str(tmp_path), "*.txt"]), "--sort", "-z"])

    assert result.exit_code == 0
    assert result.stdout == str(tmp_path / "a.txt") + "\0" + str(tmp_path / "b.txt") + "\0"
