# test_scripts/test_knapsack_validation.py

from __future__ import annotations

import pytest

from quiz_optimizer.services.solvers.knapsack import (
    KnapsackInputError,
    KnapsackItem,
    solve_knapsack,
    validate_knapsack_input,
)


def _codes(issues):
    return [i.code for i in issues]


def test_valid_input_has_no_issues():
    items = [KnapsackItem(id=1, value=0, weight=1), KnapsackItem(id=2, value=5, weight=3)]
    assert validate_knapsack_input(items, 10) == []
    assert validate_knapsack_input([], 0) == []


@pytest.mark.parametrize("items", ["abc", {"a": 1}, {1, 2}, None, 42, (i for i in [])])
def test_rejects_non_sequence_items(items):
    assert _codes(validate_knapsack_input(items, 10)) == ["ITEMS_NOT_SEQUENCE"]


@pytest.mark.parametrize("capacity", [1.5, "10", None, True])
def test_rejects_non_integer_capacity(capacity):
    assert _codes(validate_knapsack_input([], capacity)) == ["CAPACITY_NOT_INTEGER"]


def test_rejects_negative_capacity():
    issues = validate_knapsack_input([], -1)
    assert _codes(issues) == ["CAPACITY_NEGATIVE"]
    assert issues[0].field == "capacity"


def test_item_field_issues_are_reported_per_item():
    items = [
        KnapsackItem(id="ok", value=1, weight=1),
        KnapsackItem(id="neg", value=-1, weight=2),
        KnapsackItem(id="zero", value=1, weight=0),
        KnapsackItem(id="float", value=1.5, weight=2.0),
        ("raw", 1, 1),
    ]

    issues = validate_knapsack_input(items, 10)

    assert _codes(issues) == [
        "ITEM_VALUE_NEGATIVE",
        "ITEM_WEIGHT_NOT_POSITIVE",
        "ITEM_VALUE_NOT_INTEGER",
        "ITEM_WEIGHT_NOT_INTEGER",
        "ITEM_NOT_KNAPSACK_ITEM",
    ]
    assert issues[0].item_id == "neg"
    assert issues[0].field == "items[1].value"
    assert issues[1].item_index == 2
    assert issues[4].item_index == 4


def test_zero_weight_allowed_only_with_free_items():
    items = [KnapsackItem(id=1, value=3, weight=0)]
    assert _codes(validate_knapsack_input(items, 5)) == ["ITEM_WEIGHT_NOT_POSITIVE"]
    assert validate_knapsack_input(items, 5, allow_free_items=True) == []


def test_negative_weight_rejected_even_with_free_items():
    items = [KnapsackItem(id=1, value=3, weight=-2)]
    assert _codes(validate_knapsack_input(items, 5, allow_free_items=True)) == ["ITEM_WEIGHT_NOT_POSITIVE"]


def test_solve_raises_with_report():
    with pytest.raises(KnapsackInputError) as exc_info:
        solve_knapsack([KnapsackItem(id=1, value=5, weight=0)], -3)

    err = exc_info.value
    assert isinstance(err, ValueError)
    assert _codes(err.issues) == ["CAPACITY_NEGATIVE", "ITEM_WEIGHT_NOT_POSITIVE"]
    report = err.report
    assert report.is_valid is False
    assert report.summary == "invalid (2 errors, 0 warnings)"
    assert "capacity must be >= 0" in str(err)
