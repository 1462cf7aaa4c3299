"""
Tests for the date, currency and path commands.
"""

from pathlib import Path
import pytest
from unittest.mock import patch
from optkit.commands.app import cli


def test_date_command_uses_format(runner):
    with patch("optkit.commands.util.date_get", return_value="150403") as mock_date:
        result = runner.invoke(cli, ["date", "ymd"])
    assert result.exit_code == 0
    assert "150403" in result.output
    mock_date.assert_called_once_with("ymd")


def test_date_command_default_format(runner):
    result = runner.invoke(cli, ["date"])
    assert result.exit_code == 0
    assert result.output.count("/") == 2


@pytest.mark.parametrize("cents, expected", [("1234", "12.34"), ("-5", "-0.05")])
def test_currency_command(runner, cents, expected):
    result = runner.invoke(cli, ["currency", cents])
    assert result.exit_code == 0
    assert expected in result.output


def test_currency_command_rejects_text(runner):
    result = runner.invoke(cli, ["currency", "lots"])
    assert result.exit_code != 0


def test_path_command_new_file(runner, tmp_path: Path):
    target = str(tmp_path / "fresh.txt")
    result = runner.invoke(cli, ["path", target])
    assert result.exit_code == 0
    assert "fresh.txt" in result.output


def test_path_command_declined(runner, tmp_path: Path):
    target = tmp_path / "taken.txt"
    target.write_text("x")
    result = runner.invoke(cli, ["path", str(target)], input="n\n")
    assert result.exit_code == 1
    assert "not overwriting" in result.output


def test_path_command_accepted(runner, tmp_path: Path):
    target = tmp_path / "taken.txt"
    target.write_text("x")
    result = runner.invoke(cli, ["path", str(target)], input="y\n")
    assert result.exit_code == 0
    assert "[y/N]?" in result.output
