# quiz_optimizer/schemas/quiz.py

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict


QuestionDifficulty = Literal["easy", "medium", "hard"]


class QuizRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    total_questions: int = 0
    created_at: datetime
    updated_at: datetime


class QuestionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    quiz_id: str
    question_text: str
    score: int
    time_required: int
    question_order: int = 0
    difficulty: QuestionDifficulty = "medium"
    created_at: datetime
    updated_at: datetime
