from __future__ import annotations

from typing import List

from rich.console import Console

from terminal_quiz.errors import InvalidAnswerError
from terminal_quiz.learning.answers import AnswerReader, parse_answer
from terminal_quiz.learning.quiz import Question, Quiz
from terminal_quiz.utils.logging import get_logger

ANSWER_PROMPT = "Your answer (enter option number): "

logger = get_logger(__name__)


def _write(console: Console, text: str = "", end: str = "\n") -> None:
    console.out(text, end=end, highlight=False)


def render_question(console: Console, number: int, question: Question) -> None:
    """Print the numbered prompt followed by each option label on its own line."""
    _write(console, f"{number}. {question.prompt}")
    for option in question.options:
        _write(console, option)


def ask_for_answer(console: Console, reader: AnswerReader, question: Question) -> int:
    """
    Prompt until the learner types a well-formed option number for `question`.

    Format and range mistakes are reported and the prompt is repeated; input
    failures (including end of input) propagate to the caller.
    """
    option_count = len(question.options)
    while True:
        _write(console, ANSWER_PROMPT, end="")
        line = reader.read_line()
        try:
            return parse_answer(line, option_count)
        except InvalidAnswerError as exc:
            logger.debug("answer_rejected", raw=line, reason=type(exc).__name__)
            _write(console, str(exc))


def run_quiz(quiz: Quiz, reader: AnswerReader, console: Console) -> int:
    """
    Drive one interactive session and return the final score.

    Renders every question in order, collects one validated answer per question,
    scores the answer vector against `quiz` and prints the score line.
    """
    logger.info("quiz_started", questions=len(quiz.questions))
    answers: List[int] = []
    for idx, question in enumerate(quiz.questions):
        render_question(console, idx + 1, question)
        answers.append(ask_for_answer(console, reader, question))
        _write(console)

    quiz.take(answers)
    _write(console, f"Your score: {quiz.score}/{len(quiz.questions)}")
    logger.info("quiz_finished", score=quiz.score, total=len(quiz.questions))
    return quiz.score
