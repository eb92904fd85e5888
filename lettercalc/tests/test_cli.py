"""Tests for the lettercalc command line."""

import pytest
from typer.testing import CliRunner

from lettercalc.__main__ import app
from lettercalc.config import GROUP_MODE_VAR, VERBOSE_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's LETTERCALC_* variables out of every test."""
    monkeypatch.delenv(GROUP_MODE_VAR, raising=False)
    monkeypatch.delenv(VERBOSE_VAR, raising=False)


def _lines(result) -> list[str]:
    return [line for line in result.stdout.splitlines() if line.strip()]


# --- Results (4 tests) ---

def test_prints_result():
    result = runner.invoke(app, ["3ae4c66fb32"])
    assert result.exit_code == 0
    assert _lines(result)[:2] == ["Evaluating 3ae4c66fb32", "Result: 235"]


def test_prints_fractional_result():
    result = runner.invoke(app, ["4c3b2d4"])
    assert result.exit_code == 0
    assert "Result: 2.5" in _lines(result)


def test_prints_negative_result():
    result = runner.invoke(app, ["2b3c4"])
    assert "Result: -4" in _lines(result)


def test_expression_echoed_verbatim():
    result = runner.invoke(app, ["1[red]a:smile:"])
    assert "Evaluating 1[red]a:smile:" in _lines(result)


# --- Errors (4 tests) ---

def test_division_by_zero():
    result = runner.invoke(app, ["4d0"])
    assert result.exit_code == 1
    assert _lines(result)[:2] == ["Evaluating 4d0", "Error: DivisionByZero"]


def test_invalid_character():
    result = runner.invoke(app, ["3a2z4"])
    assert result.exit_code == 1
    assert "Error: InvalidCharacter" in _lines(result)


def test_invalid_block():
    result = runner.invoke(app, ["1ae1"])
    assert "Error: InvalidBlock" in _lines(result)


def test_empty_expression():
    result = runner.invoke(app, [""])
    assert result.exit_code == 1
    assert "Error: InvalidInput" in _lines(result)


# --- Group mode (4 tests) ---

def test_default_group_mode_is_flat():
    result = runner.invoke(app, ["e1ae2c3ff"])
    assert "Result: 9" in _lines(result)


def test_groups_option_nested():
    result = runner.invoke(app, ["e1ae2c3ff", "--groups", "nested"])
    assert result.exit_code == 0
    assert "Result: 7" in _lines(result)


def test_group_mode_from_env(monkeypatch):
    monkeypatch.setenv(GROUP_MODE_VAR, "nested")
    result = runner.invoke(app, ["e1ae2c3ff"])
    assert "Result: 7" in _lines(result)


def test_option_overrides_env(monkeypatch):
    monkeypatch.setenv(GROUP_MODE_VAR, "nested")
    result = runner.invoke(app, ["e1ae2c3ff", "-g", "flat"])
    assert "Result: 9" in _lines(result)


# --- Configuration and logging (4 tests) ---

def test_invalid_env_group_mode(monkeypatch):
    monkeypatch.setenv(GROUP_MODE_VAR, "sideways")
    result = runner.invoke(app, ["1a1"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_option_overrides_invalid_env(monkeypatch):
    monkeypatch.setenv(GROUP_MODE_VAR, "sideways")
    result = runner.invoke(app, ["1a1", "--groups", "flat"])
    assert result.exit_code == 0
    assert "Result: 2" in _lines(result)


def test_verbose_logs_groups():
    result = runner.invoke(app, ["3ae4c66fb32", "--verbose"])
    assert result.exit_code == 0
    assert "'4c66'" in result.output
    assert "Result: 235" in result.output


def test_missing_expression():
    result = runner.invoke(app, [])
    assert result.exit_code != 0
