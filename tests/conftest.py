from __future__ import annotations

import io

import pytest
from rich.console import Console

from terminal_quiz.learning.bank import builtin_questions
from terminal_quiz.learning.quiz import Quiz


@pytest.fixture
def quiz():
    """Fresh session over the built-in bank."""
    return Quiz(builtin_questions())


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    """Plain console writing into an in-memory buffer."""
    return Console(file=output, color_system=None, width=200)
