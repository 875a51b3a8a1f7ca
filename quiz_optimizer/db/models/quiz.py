# quiz_optimizer/db/models/quiz.py

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from quiz_optimizer.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quiz(Base):
    """A collection of questions that can be optimized against a time budget."""

    __tablename__ = "quizzes"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="title_not_empty"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    total_questions = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    questions = relationship(
        "Question",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="Question.question_order",
    )
