# quiz_optimizer/services/quiz_optimization_service.py
"""
Quiz optimization: turn stored questions into knapsack items, guard the
problem size, solve, and hand back the selected question records.

value = question score, weight = minutes required, capacity = minutes available.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from quiz_optimizer.config import Settings, settings as default_settings
from quiz_optimizer.services.quiz_service import list_questions
from quiz_optimizer.services.solvers.knapsack import (
    KnapsackInputError,
    KnapsackItem,
    solve_knapsack,
    validate_knapsack_input,
)

logger = logging.getLogger(__name__)


class ProblemTooLargeError(ValueError):
    """Raised when n_items x capacity would exceed the configured DP table ceiling."""

    def __init__(self, message: str, *, item_count: int, capacity: int) -> None:
        self.item_count = item_count
        self.capacity = capacity
        super().__init__(message)


@dataclass(frozen=True)
class QuizOptimizationResult:
    """Selected question records plus the totals shown to the user."""

    selected_questions: List[Any] = field(default_factory=list)
    total_score: int = 0
    total_time: int = 0


def check_problem_size(item_count: int, capacity: int, settings: Optional[Settings] = None) -> None:
    """
    Reject requests whose DP table would be unreasonably large.

    The table has (item_count + 1) * (capacity + 1) cells and lives for the
    duration of a single solve.
    """
    cfg = settings or default_settings

    if capacity > cfg.OPTIMIZER_MAX_CAPACITY:
        raise ProblemTooLargeError(
            f"Capacity {capacity} exceeds the maximum of {cfg.OPTIMIZER_MAX_CAPACITY}.",
            item_count=item_count,
            capacity=capacity,
        )

    cells = (item_count + 1) * (capacity + 1)
    if cells > cfg.OPTIMIZER_MAX_TABLE_CELLS:
        logger.warning(
            "optimize.rejected",
            extra={"item_count": item_count, "capacity": capacity, "cells": cells, "reason": "table_too_large"},
        )
        raise ProblemTooLargeError(
            f"Problem too large: {item_count} items x capacity {capacity} needs {cells} cells "
            f"(limit {cfg.OPTIMIZER_MAX_TABLE_CELLS}).",
            item_count=item_count,
            capacity=capacity,
        )


def questions_to_items(questions: Sequence[Any]) -> List[KnapsackItem]:
    """Map question records to knapsack items, keeping the given order."""
    return [
        KnapsackItem(id=q.id, value=q.score, weight=q.time_required, payload=q)
        for q in questions
    ]


def optimize_questions(
    questions: Sequence[Any],
    total_time: int,
    settings: Optional[Settings] = None,
) -> QuizOptimizationResult:
    """
    Pick the questions that maximize total score within total_time minutes.

    No questions, or a time budget smaller than every question, is a
    successful empty result.

    Raises:
        ProblemTooLargeError: if the size guard trips
        KnapsackInputError: if questions is not a sequence, total_time is not a
        non-negative integer, or a question has a negative score or non-positive time
    """
    cfg = settings or default_settings

    # Validate before the empty short-circuit and the size guard
    if isinstance(questions, Sequence) and not isinstance(questions, (str, bytes, bytearray)):
        items = questions_to_items(questions)
    else:
        items = questions
    issues = validate_knapsack_input(items, total_time, allow_free_items=cfg.OPTIMIZER_ALLOW_FREE_ITEMS)
    if issues:
        raise KnapsackInputError(issues)

    if not items:
        return QuizOptimizationResult()

    check_problem_size(len(items), total_time, cfg)

    solution = solve_knapsack(items, total_time, allow_free_items=cfg.OPTIMIZER_ALLOW_FREE_ITEMS)

    return QuizOptimizationResult(
        selected_questions=solution.payloads,
        total_score=solution.total_value,
        total_time=solution.total_weight,
    )


def optimize_quiz(
    db: Session,
    quiz_id: str,
    total_time: int,
    settings: Optional[Settings] = None,
) -> QuizOptimizationResult:
    """
    Load a quiz's questions (ordered by question_order) and optimize them.

    Raises QuizNotFoundError if the quiz does not exist.
    """
    questions = list_questions(db, quiz_id)

    logger.info(
        "optimize.start",
        extra={"quiz_id": quiz_id, "item_count": len(questions), "capacity": total_time},
    )
    result = optimize_questions(questions, total_time, settings)
    logger.info(
        "optimize.done",
        extra={
            "quiz_id": quiz_id,
            "selected_count": len(result.selected_questions),
            "total_value": result.total_score,
            "total_weight": result.total_time,
        },
    )
    return result


__all__ = [
    "ProblemTooLargeError",
    "QuizOptimizationResult",
    "check_problem_size",
    "questions_to_items",
    "optimize_questions",
    "optimize_quiz",
]
