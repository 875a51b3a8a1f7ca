# quiz_optimizer/services/solvers/knapsack.py
"""
0/1 knapsack solver used for quiz question selection.

Given items with (value, weight) and an integer capacity, selects the subset
with maximum total value whose total weight fits the capacity. Each item is
used at most once and the exact subset is returned, not only the optimum.

Applied to quizzes:
- value    = question score
- weight   = minutes required
- capacity = minutes available

Time O(n * capacity), space O(n * capacity): the full table is kept so the
selected subset can be reconstructed.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Hashable, List, Tuple

from quiz_optimizer.schemas.validation import ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)


class KnapsackInputError(ValueError):
    """Raised when solver input is malformed. Carries the validation issues."""

    def __init__(self, issues: List[ValidationIssue]) -> None:
        self.issues = issues
        messages = "; ".join(i.message for i in issues)
        super().__init__(f"Invalid knapsack input: {messages}")

    @property
    def report(self) -> ValidationReport:
        return ValidationReport.from_issues(self.issues)


@dataclass(frozen=True)
class KnapsackItem:
    """
    A selectable unit.

    Attributes:
        id: Opaque identifier (e.g. question id)
        value: Non-negative benefit (e.g. score)
        weight: Positive cost (e.g. minutes required)
        payload: Caller's record; returned as-is, never copied or mutated
    """

    id: Hashable
    value: int
    weight: int
    payload: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class KnapsackSolution:
    """Selected items (input order preserved) and their totals."""

    selected: Tuple[KnapsackItem, ...]
    total_value: int
    total_weight: int

    @property
    def selected_ids(self) -> List[Hashable]:
        return [it.id for it in self.selected]

    @property
    def payloads(self) -> List[Any]:
        return [it.payload for it in self.selected]


EMPTY_SOLUTION = KnapsackSolution(selected=(), total_value=0, total_weight=0)


def _is_int(v: Any) -> bool:
    # bool is an int subclass; True/False are not meaningful weights or capacities
    return isinstance(v, int) and not isinstance(v, bool)


def validate_knapsack_input(
    items: Any,
    capacity: Any,
    *,
    allow_free_items: bool = False,
) -> List[ValidationIssue]:
    """
    Check solver input and return field-level issues (empty list when valid).

    Empty items and zero capacity are valid. Zero-weight items are rejected
    unless allow_free_items is set; negative weights are always rejected.
    """
    issues: List[ValidationIssue] = []

    if not _is_int(capacity):
        issues.append(
            ValidationIssue(
                severity="error",
                code="CAPACITY_NOT_INTEGER",
                message=f"capacity must be an integer, got {type(capacity).__name__}",
                field="capacity",
            )
        )
    elif capacity < 0:
        issues.append(
            ValidationIssue(
                severity="error",
                code="CAPACITY_NEGATIVE",
                message=f"capacity must be >= 0, got {capacity}",
                field="capacity",
                details={"capacity": capacity},
            )
        )

    if not isinstance(items, Sequence) or isinstance(items, (str, bytes, bytearray)):
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEMS_NOT_SEQUENCE",
                message=f"items must be a sequence of KnapsackItem, got {type(items).__name__}",
                field="items",
            )
        )
        return issues

    for idx, it in enumerate(items):
        issues.extend(_check_item(idx, it, allow_free_items=allow_free_items))

    return issues


def _check_item(idx: int, it: Any, *, allow_free_items: bool) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if not isinstance(it, KnapsackItem):
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEM_NOT_KNAPSACK_ITEM",
                message=f"items[{idx}] must be a KnapsackItem, got {type(it).__name__}",
                field=f"items[{idx}]",
                item_index=idx,
            )
        )
        return issues

    item_id = str(it.id)

    if not _is_int(it.value):
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEM_VALUE_NOT_INTEGER",
                message=f"Item {item_id} value must be an integer.",
                field=f"items[{idx}].value",
                item_index=idx,
                item_id=item_id,
            )
        )
    elif it.value < 0:
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEM_VALUE_NEGATIVE",
                message=f"Item {item_id} has negative value.",
                field=f"items[{idx}].value",
                item_index=idx,
                item_id=item_id,
                details={"value": it.value},
            )
        )

    if not _is_int(it.weight):
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEM_WEIGHT_NOT_INTEGER",
                message=f"Item {item_id} weight must be an integer.",
                field=f"items[{idx}].weight",
                item_index=idx,
                item_id=item_id,
            )
        )
    elif it.weight < 0 or (it.weight == 0 and not allow_free_items):
        issues.append(
            ValidationIssue(
                severity="error",
                code="ITEM_WEIGHT_NOT_POSITIVE",
                message=f"Item {item_id} weight must be > 0, got {it.weight}.",
                field=f"items[{idx}].weight",
                item_index=idx,
                item_id=item_id,
                details={"weight": it.weight},
            )
        )
    return issues


def _build_table(items: Sequence[KnapsackItem], capacity: int) -> List[List[int]]:
    """dp[i][w] = best value using the first i items with weight limit w."""
    n = len(items)
    dp: List[List[int]] = [[0] * (capacity + 1)]

    for i in range(1, n + 1):
        item = items[i - 1]
        prev = dp[i - 1]
        row = list(prev)  # exclude item i
        for w in range(item.weight, capacity + 1):
            with_item = prev[w - item.weight] + item.value
            if with_item > row[w]:
                row[w] = with_item
        dp.append(row)

    return dp


def _backtrack(dp: List[List[int]], items: Sequence[KnapsackItem], capacity: int) -> List[KnapsackItem]:
    """
    Walk from (n, capacity) back to row 0.

    Item i is part of the selection iff dp[i][w] != dp[i-1][w]. The scan runs
    until i reaches 0 (not until w reaches 0) so zero-weight items are kept.
    """
    selected: List[KnapsackItem] = []
    w = capacity
    i = len(items)

    while i > 0:
        if dp[i][w] != dp[i - 1][w]:
            item = items[i - 1]
            selected.append(item)
            w -= item.weight
        i -= 1

    selected.reverse()
    return selected


def solve_knapsack(
    items: Sequence[KnapsackItem],
    capacity: int,
    *,
    allow_free_items: bool = False,
) -> KnapsackSolution:
    """
    Solve 0/1 knapsack exactly with dynamic programming.

    Args:
        items: Ordered items; order decides which optimal subset is returned
        capacity: Maximum total weight (>= 0)
        allow_free_items: Accept zero-weight items (always included when value > 0)

    Returns:
        KnapsackSolution with the selected items in input order.

    Raises:
        KnapsackInputError: if items/capacity fail validation. Nothing is
        computed in that case.
    """
    issues = validate_knapsack_input(items, capacity, allow_free_items=allow_free_items)
    if issues:
        raise KnapsackInputError(issues)

    if not items:
        return EMPTY_SOLUTION
    if capacity == 0 and not allow_free_items:
        return EMPTY_SOLUTION

    dp = _build_table(items, capacity)
    selected = _backtrack(dp, items, capacity)

    solution = KnapsackSolution(
        selected=tuple(selected),
        total_value=sum(it.value for it in selected),
        total_weight=sum(it.weight for it in selected),
    )
    logger.debug(
        "knapsack.solved",
        extra={
            "item_count": len(items),
            "capacity": capacity,
            "selected_count": len(selected),
            "total_value": solution.total_value,
            "total_weight": solution.total_weight,
        },
    )
    return solution


def verify_solution(solution: KnapsackSolution, capacity: int) -> bool:
    """
    Self-check a solution: totals match the selected items, the weight fits
    the capacity and no item object is selected twice.
    """
    if solution.total_weight > capacity:
        return False

    # identity, not id: distinct items may share an id
    ids = [id(it) for it in solution.selected]
    if len(ids) != len(set(ids)):
        return False

    computed_value = sum(it.value for it in solution.selected)
    computed_weight = sum(it.weight for it in solution.selected)
    return computed_value == solution.total_value and computed_weight == solution.total_weight


__all__ = [
    "KnapsackInputError",
    "KnapsackItem",
    "KnapsackSolution",
    "EMPTY_SOLUTION",
    "validate_knapsack_input",
    "solve_knapsack",
    "verify_solution",
]
