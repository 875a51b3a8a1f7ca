# quiz_optimizer/db/models/__init__.py

from .quiz import Quiz
from .question import Question, QUESTION_DIFFICULTIES

__all__ = [
    "Quiz",
    "Question",
    "QUESTION_DIFFICULTIES",
]
