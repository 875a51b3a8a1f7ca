# quiz_optimizer/services/quiz_service.py

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from quiz_optimizer.db.models import Question, Quiz

logger = logging.getLogger(__name__)


class QuizNotFoundError(LookupError):
    """Raised when a quiz id does not match any stored quiz."""

    def __init__(self, quiz_id: str) -> None:
        self.quiz_id = quiz_id
        super().__init__(f"Quiz with id '{quiz_id}' not found")


def list_quizzes(db: Session) -> List[Quiz]:
    """Return all quizzes, newest first."""
    quizzes = db.query(Quiz).order_by(Quiz.created_at.desc()).all()
    logger.debug("quizzes.list", extra={"count": len(quizzes)})
    return quizzes


def get_quiz(db: Session, quiz_id: str) -> Quiz:
    quiz = db.query(Quiz).filter(Quiz.id == quiz_id).one_or_none()
    if quiz is None:
        raise QuizNotFoundError(quiz_id)
    return quiz


def questions_for_quiz(db: Session, quiz: Quiz) -> List[Question]:
    """Return the questions of an already loaded quiz ordered by question_order."""
    questions = (
        db.query(Question)
        .filter(Question.quiz_id == quiz.id)
        .order_by(Question.question_order.asc(), Question.created_at.asc())
        .all()
    )
    logger.debug("questions.list", extra={"quiz_id": quiz.id, "count": len(questions)})
    return questions


def list_questions(db: Session, quiz_id: str) -> List[Question]:
    """
    Return the questions of an existing quiz ordered by question_order.

    Raises QuizNotFoundError if the quiz does not exist. A quiz without
    questions yields an empty list.
    """
    return questions_for_quiz(db, get_quiz(db, quiz_id))


__all__ = ["QuizNotFoundError", "list_quizzes", "get_quiz", "questions_for_quiz", "list_questions"]
