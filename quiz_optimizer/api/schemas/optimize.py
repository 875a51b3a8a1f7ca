# quiz_optimizer/api/schemas/optimize.py

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, Field

from quiz_optimizer.schemas.quiz import QuestionRead


class OptimizeRequest(BaseModel):
    quiz_id: str = Field(..., min_length=1)
    total_time: int = Field(..., ge=1, description="Minutes available")


class OptimizeResponse(BaseModel):
    selected_questions: List[QuestionRead] = Field(default_factory=list)
    total_score: int = 0
    total_time: int = 0
    success: bool = True


class ItemIn(BaseModel):
    id: Union[int, str]
    value: int
    weight: int


class ItemsOptimizeRequest(BaseModel):
    items: List[ItemIn] = Field(default_factory=list)
    capacity: int


class ItemsOptimizeResponse(BaseModel):
    selected_ids: List[Union[int, str]] = Field(default_factory=list)
    total_value: int = 0
    total_weight: int = 0
    success: bool = True
