"""
Terminal Quiz.

Interactive multiple-choice quiz: a built-in question bank, a validating answer
loop on standard input and a final score on standard output.
"""

from .learning import Question, Quiz, builtin_questions
from .services.quiz_runner import run_quiz

__all__ = ["Question", "Quiz", "builtin_questions", "run_quiz"]
