# quiz_optimizer/api/schemas/quizzes.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from quiz_optimizer.schemas.quiz import QuestionRead, QuizRead


class QuizzesResponse(BaseModel):
    quizzes: List[QuizRead] = Field(default_factory=list)
    success: bool = True


class QuestionsResponse(BaseModel):
    quiz: QuizRead
    questions: List[QuestionRead] = Field(default_factory=list)
    success: bool = True
