from __future__ import annotations

import re
from typing import Optional, TextIO

from terminal_quiz.errors import (
    AnswerFormatError,
    AnswerRangeError,
    InputClosedError,
    QuizInputError,
)

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def parse_answer(raw: str, option_count: int) -> int:
    """
    Turn one typed line into a 1-based option index.

    Accepts an optional sign followed by decimal digits of any script (so `"３"`
    reads as 3) that fit in a signed 32-bit integer; anything else raises
    `AnswerFormatError`. Well-formed numbers outside `[1, option_count]` raise
    `AnswerRangeError`.
    """
    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise AnswerFormatError(text)
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise AnswerFormatError(text)
    if not 1 <= value <= option_count:
        raise AnswerRangeError(value, option_count)
    return value


class AnswerReader:
    """Line reader over a text stream, usable as a context manager."""

    def __init__(self, stream: TextIO):
        self._stream: Optional[TextIO] = stream

    def __enter__(self) -> "AnswerReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._stream is None

    def close(self) -> None:
        # The stream is usually the process's stdin; only the reference is dropped.
        self._stream = None

    def read_line(self) -> str:
        if self._stream is None:
            raise QuizInputError("Answer reader is closed.")
        try:
            line = self._stream.readline()
        except OSError as exc:
            raise QuizInputError(f"Failed to read from input: {exc}") from exc
        if not line:
            raise InputClosedError("Input closed before all questions were answered.")
        return line.rstrip("\r\n")
