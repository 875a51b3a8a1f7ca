#!/usr/bin/env python3
"""
CLI entrypoint for quiz / item-list optimization.

Usage examples:
    # Solve an inline item file: JSON list of {"id", "value", "weight"}
    python -m scripts.optimize_cli --items items.json --capacity 60
    # Optimize a stored quiz
    python -m scripts.optimize_cli --quiz-id 650e8400-e29b-41d4-a716-446655440000 --capacity 20

Flags:
    --items PATH          JSON file with the items to choose from
    --quiz-id ID          Load questions of a stored quiz instead
    --capacity N          Weight budget (minutes available)
    --log-level LEVEL     Logging level (INFO, DEBUG, etc.)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from quiz_optimizer.db.session import SessionLocal
from quiz_optimizer.services.quiz_optimization_service import (
    ProblemTooLargeError,
    check_problem_size,
    optimize_quiz,
)
from quiz_optimizer.services.quiz_service import QuizNotFoundError
from quiz_optimizer.services.solvers.knapsack import KnapsackInputError, KnapsackItem, solve_knapsack


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Select items maximizing value within a capacity.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--items",
        type=Path,
        default=None,
        help="JSON file containing a list of {id, value, weight} objects.",
    )
    source.add_argument(
        "--quiz-id",
        type=str,
        default=None,
        help="Optimize the questions of a stored quiz.",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        required=True,
        help="Weight budget (minutes available).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def load_items(path: Path) -> List[KnapsackItem]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("Items file must contain a JSON list of {id, value, weight} objects.")

    rows: List[KnapsackItem] = []
    for idx, row in enumerate(raw):
        if not isinstance(row, dict):
            raise ValueError(f"Item {idx} must be a JSON object with id, value and weight.")
        rows.append(KnapsackItem(id=row["id"], value=row["value"], weight=row["weight"]))
    return rows


def solve_items_file(path: Path, capacity: int) -> Dict[str, Any]:
    items = load_items(path)
    check_problem_size(len(items), capacity)
    solution = solve_knapsack(items, capacity)
    return {
        "selected_ids": solution.selected_ids,
        "total_value": solution.total_value,
        "total_weight": solution.total_weight,
    }


def solve_quiz(quiz_id: str, capacity: int) -> Dict[str, Any]:
    db = SessionLocal()
    try:
        result = optimize_quiz(db=db, quiz_id=quiz_id, total_time=capacity)
        return {
            "selected_question_ids": [q.id for q in result.selected_questions],
            "total_score": result.total_score,
            "total_time": result.total_time,
        }
    finally:
        db.close()


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)
    logger.info("optimize.cli.start")

    try:
        if args.items is not None:
            output = solve_items_file(args.items, args.capacity)
        else:
            output = solve_quiz(args.quiz_id, args.capacity)
    except (KnapsackInputError, ProblemTooLargeError, QuizNotFoundError, ValueError, KeyError, TypeError, OSError) as e:
        logger.error("optimize.cli.invalid: %s", e)
        return 2
    except KeyboardInterrupt:
        logger.warning("optimize.cli.interrupted")
        return 130

    print(json.dumps(output, indent=2))
    logger.info("optimize.cli.done", extra={"total_value": output.get("total_value", output.get("total_score"))})
    return 0


if __name__ == "__main__":
    sys.exit(main())
