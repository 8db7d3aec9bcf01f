"""Tests for the Typer entry point."""

from __future__ import annotations

import io
import json
import logging
from types import SimpleNamespace

import pytest
from rich.console import Console
from typer.testing import CliRunner

from terminal_quiz.cli import app
from terminal_quiz.config.loader import CONFIG_PATH_ENV_VAR, OVERRIDES_ENV_VAR
from terminal_quiz.utils.logging import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def clear_overrides(monkeypatch):
    monkeypatch.delenv(OVERRIDES_ENV_VAR, raising=False)
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)


@pytest.mark.parametrize(
    "text, final_line",
    [
        ("3\n2\n2\n", "Your score: 3/3\n"),
        ("1\n1\n1\n", "Your score: 0/3\n"),
        ("3\n4\n2\n", "Your score: 2/3\n"),
        ("abc\n0\n5\n3\n2\n2\n", "Your score: 3/3\n"),
        ("  2  \n2\n2\n", "Your score: 2/3\n"),
    ],
)
def test_cli_reports_final_score(text, final_line):
    result = runner.invoke(app, [], input=text)
    assert result.exit_code == 0
    assert result.stdout.endswith(final_line)


def test_cli_starts_with_first_question():
    result = runner.invoke(app, [], input="3\n2\n2\n")
    assert result.stdout.startswith("1. What is the capital of France?\n1. Berlin\n")


def test_cli_exits_nonzero_on_eof():
    result = runner.invoke(app, [], input="3\n2\n")
    assert result.exit_code == 1
    assert "Your score" not in result.output


def test_cli_exits_nonzero_on_bad_config(monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV_VAR, "{not json")
    result = runner.invoke(app, [], input="3\n2\n2\n")
    assert result.exit_code == 1
    assert "Your score" not in result.output


class FailingStream(io.StringIO):
    def write(self, text):
        raise OSError("disk full")


class BrokenInput(io.StringIO):
    def readline(self, *args):
        raise OSError("device gone")


def test_cli_reports_eof_on_stderr():
    result = runner.invoke(app, [], input="3\n2\n")
    assert result.exit_code == 1
    assert "Error: Input closed before all questions were answered." in result.output
    assert "Your score" not in result.output


def test_cli_exits_nonzero_when_stdout_fails(monkeypatch):
    monkeypatch.setattr("terminal_quiz.cli.console", Console(file=FailingStream()))
    result = runner.invoke(app, [], input="3\n2\n2\n")
    assert result.exit_code == 1
    assert "Error: disk full" in result.output


def test_cli_exits_nonzero_when_stdin_fails(monkeypatch):
    monkeypatch.setattr("terminal_quiz.cli.sys", SimpleNamespace(stdin=BrokenInput()))
    result = runner.invoke(app, [], input="")
    assert result.exit_code == 1
    assert "Error: Failed to read from input: device gone" in result.output
    assert "Your score" not in result.output


def test_cli_exits_nonzero_on_answer_count_mismatch(monkeypatch):
    def take_too_few(quiz, reader, console):
        quiz.take([1])
        return quiz.score

    monkeypatch.setattr("terminal_quiz.cli.run_quiz", take_too_few)
    result = runner.invoke(app, [], input="3\n2\n2\n")
    assert result.exit_code == 1
    assert "Error: Answer count (1) must match number of quiz questions (3)." in result.output


def test_cli_reads_yaml_named_by_environment(tmp_path, monkeypatch):
    config = tmp_path / "quiz.yaml"
    config.write_text("logging: [not, a, mapping]\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(config))
    result = runner.invoke(app, [], input="3\n2\n2\n")
    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output


def test_cli_logs_project_name(monkeypatch, caplog):
    monkeypatch.setenv(
        OVERRIDES_ENV_VAR,
        json.dumps({"project_name": "Trivia Night", "logging": {"level": "INFO"}}),
    )
    with caplog.at_level(logging.INFO):
        result = runner.invoke(app, [], input="3\n2\n2\n")
    configure_logging()
    assert result.exit_code == 0
    assert "Trivia Night" in caplog.text
