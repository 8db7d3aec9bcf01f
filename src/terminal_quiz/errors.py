from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by the quiz."""


class InvalidAnswerError(QuizError, ValueError):
    """A typed answer that the learner can correct by trying again."""


class AnswerFormatError(InvalidAnswerError):
    def __init__(self, raw: str) -> None:
        super().__init__("Invalid input. Enter the option number (e.g., 1, 2, 3, ...).")
        self.raw = raw


class AnswerRangeError(InvalidAnswerError):
    def __init__(self, value: int, option_count: int) -> None:
        super().__init__(f"Please enter a number between 1 and {option_count}.")
        self.value = value
        self.option_count = option_count


class QuizInputError(QuizError):
    """Standard input could not supply the next answer."""


class InputClosedError(QuizInputError):
    """End of input reached before every question was answered."""


class AnswerCountError(QuizError, ValueError):
    """Answer vector length differs from the number of questions."""
