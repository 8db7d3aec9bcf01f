from __future__ import annotations

import logging
from typing import Sequence, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from terminal_quiz.errors import AnswerCountError

logger = logging.getLogger(__name__)


class Question(BaseModel):
    """Single multiple-choice item with a 1-based answer key."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    options: Tuple[str, ...]
    correct: int

    @field_validator("prompt")
    def validate_prompt(cls, value: str) -> str:
        if not value:
            raise ValueError("prompt must not be empty")
        return value

    @field_validator("options")
    def validate_options(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(value) < 2:
            raise ValueError("options must contain at least two entries")
        return value

    @model_validator(mode="after")
    def validate_correct(self) -> "Question":
        if not 1 <= self.correct <= len(self.options):
            raise ValueError(
                f"correct must be between 1 and {len(self.options)}, got {self.correct}"
            )
        return self

    def is_correct(self, choice: int) -> bool:
        """Return True when `choice` is the 1-based index of the correct option."""
        return choice == self.correct


class Quiz:
    """
    Ordered questions plus the running score of one quiz session.

    `take` adds to the score every time it is called, so a second pass over the
    same answers doubles the count. Build a fresh `Quiz` for each run.
    """

    def __init__(self, questions: Sequence[Question]):
        if not questions:
            raise ValueError("quiz must include at least one question")
        self.questions: Tuple[Question, ...] = tuple(questions)
        self._score = 0

    def __len__(self) -> int:
        return len(self.questions)

    @property
    def score(self) -> int:
        """Correct answers counted so far."""
        return self._score

    def take(self, answers: Sequence[int]) -> None:
        """
        Score one answer per question, left to right, adding to `score`.

        Raises `AnswerCountError` without touching the score when the number of
        answers differs from the number of questions.
        """
        submitted = list(answers)
        if len(submitted) != len(self.questions):
            raise AnswerCountError(
                f"Answer count ({len(submitted)}) must match number of quiz questions "
                f"({len(self.questions)})."
            )

        for idx, (question, selected) in enumerate(zip(self.questions, submitted)):
            if question.is_correct(selected):
                self._score += 1
            logger.debug(
                "Question %d: selected=%s correct=%s", idx + 1, selected, question.correct
            )
