# quiz_optimizer/api/routes/quizzes.py

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from quiz_optimizer.api.deps import get_db
from quiz_optimizer.api.schemas.quizzes import QuestionsResponse, QuizzesResponse
from quiz_optimizer.schemas.quiz import QuestionRead, QuizRead
from quiz_optimizer.services.quiz_service import QuizNotFoundError, get_quiz, list_quizzes, questions_for_quiz


router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("", response_model=QuizzesResponse)
def get_quizzes(db: Session = Depends(get_db)) -> QuizzesResponse:
    return QuizzesResponse(quizzes=[QuizRead.model_validate(q) for q in list_quizzes(db)])


@router.get("/{quiz_id}/questions", response_model=QuestionsResponse)
def get_quiz_questions(quiz_id: str, db: Session = Depends(get_db)) -> QuestionsResponse:
    """
    Return all questions of a quiz, ordered by question_order.
    """
    try:
        quiz = get_quiz(db, quiz_id)
    except QuizNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    questions = questions_for_quiz(db, quiz)

    return QuestionsResponse(
        quiz=QuizRead.model_validate(quiz),
        questions=[QuestionRead.model_validate(q) for q in questions],
    )
