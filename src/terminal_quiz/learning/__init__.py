from .answers import AnswerReader, parse_answer
from .bank import BUILTIN_QUESTIONS, builtin_questions
from .quiz import Question, Quiz

__all__ = [
    "AnswerReader",
    "parse_answer",
    "BUILTIN_QUESTIONS",
    "builtin_questions",
    "Question",
    "Quiz",
]
