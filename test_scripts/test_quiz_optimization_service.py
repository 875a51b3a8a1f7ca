# test_scripts/test_quiz_optimization_service.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from quiz_optimizer.config import Settings
from quiz_optimizer.services.quiz_optimization_service import (
    ProblemTooLargeError,
    QuizOptimizationResult,
    check_problem_size,
    optimize_questions,
    optimize_quiz,
    questions_to_items,
)
from quiz_optimizer.services.quiz_service import QuizNotFoundError, list_questions, list_quizzes
from quiz_optimizer.services.solvers.knapsack import KnapsackInputError


def _q(qid, score, minutes):
    return SimpleNamespace(id=qid, score=score, time_required=minutes)


def test_questions_to_items_maps_score_and_time():
    questions = [_q("a", 10, 3), _q("b", 15, 5)]

    items = questions_to_items(questions)

    assert [(it.id, it.value, it.weight) for it in items] == [("a", 10, 3), ("b", 15, 5)]
    assert items[0].payload is questions[0]


def test_optimize_questions_returns_payloads_and_totals():
    questions = [_q(1, 10, 3), _q(2, 15, 5), _q(3, 20, 8), _q(4, 25, 10)]

    result = optimize_questions(questions, 13)

    assert [q.id for q in result.selected_questions] == [2, 3]
    assert result.selected_questions[0] is questions[1]
    assert result.total_score == 35
    assert result.total_time == 13


def test_optimize_questions_with_no_questions_is_empty_success():
    assert optimize_questions([], 30) == QuizOptimizationResult()


def test_optimize_questions_when_nothing_fits():
    result = optimize_questions([_q(1, 100, 50)], 10)
    assert result.selected_questions == []
    assert result.total_score == 0
    assert result.total_time == 0


def test_optimize_questions_rejects_bad_question_fields():
    with pytest.raises(KnapsackInputError):
        optimize_questions([_q(1, -5, 3)], 10)


def test_zero_time_questions_follow_setting():
    questions = [_q(1, 5, 0), _q(2, 8, 4)]

    with pytest.raises(KnapsackInputError):
        optimize_questions(questions, 4, Settings(OPTIMIZER_ALLOW_FREE_ITEMS=False))

    result = optimize_questions(questions, 4, Settings(OPTIMIZER_ALLOW_FREE_ITEMS=True))
    assert [q.id for q in result.selected_questions] == [1, 2]
    assert result.total_score == 13


def test_check_problem_size_limits():
    cfg = Settings(OPTIMIZER_MAX_CAPACITY=100, OPTIMIZER_MAX_TABLE_CELLS=1_000)

    check_problem_size(9, 99, cfg)  # 10 * 100 cells, exactly at the limit

    with pytest.raises(ProblemTooLargeError, match="exceeds the maximum"):
        check_problem_size(1, 101, cfg)

    with pytest.raises(ProblemTooLargeError, match="Problem too large") as exc_info:
        check_problem_size(10, 99, cfg)
    assert exc_info.value.item_count == 10
    assert exc_info.value.capacity == 99


def test_optimize_quiz_uses_question_order(db_session, quiz_factory):
    quiz = quiz_factory("Data Structures", [(10, 3), (15, 5), (20, 8), (25, 10)])

    result = optimize_quiz(db_session, quiz.id, 13)

    assert [q.question_order for q in result.selected_questions] == [2, 3]
    assert result.total_score == 35
    assert result.total_time == 13


def test_optimize_quiz_without_questions(db_session, quiz_factory):
    quiz = quiz_factory("Empty", [])

    result = optimize_quiz(db_session, quiz.id, 20)

    assert result == QuizOptimizationResult()


def test_optimize_quiz_missing_quiz(db_session):
    with pytest.raises(QuizNotFoundError, match="not found"):
        optimize_quiz(db_session, "does-not-exist", 20)


def test_optimize_quiz_too_large(db_session, quiz_factory):
    quiz = quiz_factory("Big", [(1, 1)] * 5)
    cfg = Settings(OPTIMIZER_MAX_TABLE_CELLS=50)

    with pytest.raises(ProblemTooLargeError):
        optimize_quiz(db_session, quiz.id, 20, settings=cfg)


def test_list_quizzes_and_questions(db_session, quiz_factory):
    first = quiz_factory("First", [(5, 2), (6, 3)])
    quiz_factory("Second", [])

    assert {q.title for q in list_quizzes(db_session)} == {"First", "Second"}
    questions = list_questions(db_session, first.id)
    assert [q.question_order for q in questions] == [1, 2]

    with pytest.raises(QuizNotFoundError):
        list_questions(db_session, "missing")


@pytest.mark.parametrize(
    "questions, total_time, code",
    [
        ([], -5, "CAPACITY_NEGATIVE"),
        (None, 10, "ITEMS_NOT_SEQUENCE"),
        ([_q(1, 10, 3)], "10", "CAPACITY_NOT_INTEGER"),
    ],
)
def test_optimize_questions_validates_before_short_circuit(questions, total_time, code):
    with pytest.raises(KnapsackInputError) as exc_info:
        optimize_questions(questions, total_time)
    assert [i.code for i in exc_info.value.issues] == [code]


def test_optimize_quiz_without_questions_rejects_negative_time(db_session, quiz_factory):
    quiz = quiz_factory("Empty", [])

    with pytest.raises(KnapsackInputError):
        optimize_quiz(db_session, quiz.id, -5)
