"""Integration tests for CLI functionality."""

import json
import subprocess
import sys

from inlinemath_pkg.cli import main_entry


def _run(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "inlinemath_pkg.cli", *args],
        capture_output=True,
        text=True,
        input=stdin,
        timeout=10,
    )


def test_cli_version():
    """Test --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_eval_human():
    """Test CLI evaluation with human output."""
    result = _run("--eval", "100 + 10%")
    assert result.returncode == 0
    assert result.stdout.strip() == "110"


def test_cli_eval_json():
    """Test CLI evaluation with JSON output."""
    result = _run("--eval", "5 km + 2 km", "--format", "json")
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["result"] == "7 km"


def test_cli_eval_invalid():
    result = _run("--eval", "5 / 0")
    assert result.returncode == 1
    assert "Error:" in result.stdout


def test_cli_decimals():
    result = _run("--decimals", "2", "--eval", "1 / 3")
    assert result.returncode == 0
    assert result.stdout.strip() == "0.33"


def test_cli_line():
    result = _run("--line", "2 X 21 =  ")
    assert result.returncode == 0
    assert result.stdout.rstrip("\n") == "2 X 21 = 42 "


def test_cli_line_json_untriggered():
    result = _run("--line", "2 X 21", "--format", "json")
    data = json.loads(result.stdout)
    assert data["triggered"] is False
    assert data["value"] == "2 X 21"


def test_cli_repl():
    result = _run(stdin="2 + 2\nhelp\nquit\n")
    assert result.returncode == 0
    assert "4" in result.stdout
    assert "Goodbye" in result.stdout


def test_main_entry_in_process(capsys):
    assert main_entry(["--eval", "3X4"]) == 0
    assert capsys.readouterr().out.strip() == "12"


def test_main_entry_nothing_to_evaluate(capsys):
    assert main_entry(["--eval", "just words"]) == 0
    assert "Nothing to evaluate" in capsys.readouterr().out
