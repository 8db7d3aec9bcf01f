"""Questions shipped with the program."""

from __future__ import annotations

from typing import Tuple

from terminal_quiz.learning.quiz import Question

BUILTIN_QUESTIONS: Tuple[Question, ...] = (
    Question(
        prompt="What is the capital of France?",
        options=("1. Berlin", "2. Madrid", "3. Paris", "4. Rome"),
        correct=3,
    ),
    Question(
        prompt="What is 2 + 2?",
        options=("1. 3", "2. 4", "3. 5", "4. 6"),
        correct=2,
    ),
    Question(
        prompt="What is the largest planet in our solar system?",
        options=("1. Earth", "2. Jupiter", "3. Saturn", "4. Mars"),
        correct=2,
    ),
)


def builtin_questions() -> Tuple[Question, ...]:
    """Return the fixed question bank in the order it is asked."""
    return BUILTIN_QUESTIONS
