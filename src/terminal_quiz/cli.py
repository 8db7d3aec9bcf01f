from __future__ import annotations

import sys
from typing import NoReturn

import typer
from rich.console import Console

from terminal_quiz.config.loader import load_settings
from terminal_quiz.errors import QuizError
from terminal_quiz.learning.answers import AnswerReader
from terminal_quiz.learning.bank import builtin_questions
from terminal_quiz.learning.quiz import Quiz
from terminal_quiz.services.quiz_runner import run_quiz
from terminal_quiz.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Multiple-choice quiz in the terminal.", add_completion=False)
console = Console()
error_console = Console(stderr=True)

logger = get_logger(__name__)


def _fail(message: str) -> NoReturn:
    """Report a fatal error on standard error and exit with status 1."""
    error_console.out(f"Error: {message}", highlight=False)
    raise typer.Exit(code=1)


@app.command()
def main() -> None:
    """
    Ask the built-in questions, read answers from standard input and print the score.

    Input failures, end of input before the last answer and internal precondition
    violations are reported on standard error with exit status 1.
    """
    try:
        settings = load_settings()
    except (OSError, ValueError) as exc:
        _fail(str(exc))
    configure_logging(settings.logging.level, settings.logging.json_output)
    logger.info("session_configured", project=settings.project_name)

    quiz = Quiz(builtin_questions())
    try:
        with AnswerReader(sys.stdin) as reader:
            run_quiz(quiz, reader, console)
    except (QuizError, OSError) as exc:
        logger.error("quiz_aborted", error=str(exc), error_type=type(exc).__name__)
        _fail(str(exc))


if __name__ == "__main__":
    app()
