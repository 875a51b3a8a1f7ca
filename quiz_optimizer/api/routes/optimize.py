# quiz_optimizer/api/routes/optimize.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from quiz_optimizer.api.deps import get_db, get_settings
from quiz_optimizer.api.schemas.optimize import (
    ItemsOptimizeRequest,
    ItemsOptimizeResponse,
    OptimizeRequest,
    OptimizeResponse,
)
from quiz_optimizer.config import Settings
from quiz_optimizer.schemas.quiz import QuestionRead
from quiz_optimizer.services.quiz_optimization_service import (
    ProblemTooLargeError,
    check_problem_size,
    optimize_quiz,
)
from quiz_optimizer.services.quiz_service import QuizNotFoundError
from quiz_optimizer.services.solvers.knapsack import KnapsackInputError, KnapsackItem, solve_knapsack

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/optimize", tags=["optimize"])


@router.post("", response_model=OptimizeResponse)
def optimize(
    req: OptimizeRequest,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
) -> OptimizeResponse:
    """
    Select the questions of a quiz that maximize total score within total_time minutes.
    """
    try:
        result = optimize_quiz(db=db, quiz_id=req.quiz_id, total_time=req.total_time, settings=cfg)
    except QuizNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ProblemTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except KnapsackInputError as e:
        raise HTTPException(status_code=400, detail=e.report.model_dump()) from e
    except Exception as e:
        logger.exception("optimize.error", extra={"quiz_id": req.quiz_id})
        raise HTTPException(status_code=500, detail=f"Failed to optimize quiz: {e}") from e

    return OptimizeResponse(
        selected_questions=[QuestionRead.model_validate(q) for q in result.selected_questions],
        total_score=result.total_score,
        total_time=result.total_time,
    )


@router.post("/items", response_model=ItemsOptimizeResponse)
def optimize_items(
    req: ItemsOptimizeRequest,
    cfg: Settings = Depends(get_settings),
) -> ItemsOptimizeResponse:
    """
    Solve an inline item list without touching the database.
    """
    items = [KnapsackItem(id=it.id, value=it.value, weight=it.weight) for it in req.items]
    try:
        check_problem_size(len(items), req.capacity, cfg)
        solution = solve_knapsack(items, req.capacity, allow_free_items=cfg.OPTIMIZER_ALLOW_FREE_ITEMS)
    except ProblemTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except KnapsackInputError as e:
        raise HTTPException(status_code=400, detail=e.report.model_dump()) from e

    return ItemsOptimizeResponse(
        selected_ids=solution.selected_ids,
        total_value=solution.total_value,
        total_weight=solution.total_weight,
    )
