# quiz_optimizer/db/models/question.py

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from quiz_optimizer.db.base import Base

QUESTION_DIFFICULTIES = ("easy", "medium", "hard")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Question(Base):
    """
    A quiz question. score and time_required are the knapsack value and
    weight used by the optimizer.
    """

    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint("length(trim(question_text)) > 0", name="question_text_not_empty"),
        CheckConstraint("score > 0", name="score_positive"),
        CheckConstraint("time_required > 0", name="time_positive"),
        CheckConstraint(
            "difficulty IN (" + ", ".join(f"'{d}'" for d in QUESTION_DIFFICULTIES) + ")",
            name="difficulty_valid",
        ),
        Index("ix_questions_quiz_order", "quiz_id", "question_order"),
        Index("ix_questions_difficulty", "difficulty"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    quiz_id = Column(String(36), ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)

    question_text = Column(Text, nullable=False)
    score = Column(Integer, nullable=False)
    time_required = Column(Integer, nullable=False)  # minutes
    question_order = Column(Integer, nullable=False, default=0)
    difficulty = Column(String(10), nullable=False, default="medium")

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    quiz = relationship("Quiz", back_populates="questions")
