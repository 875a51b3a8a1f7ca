# Test fixtures: in-memory SQLite schema, sessions, and an API client bound to them
from __future__ import annotations

import logging
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quiz_optimizer.db.base import Base
from quiz_optimizer.db import models  # noqa: F401  side-effect: register all models
from quiz_optimizer.db.models import Question, Quiz

logger = logging.getLogger(__name__)


@pytest.fixture()
def engine():
    """Fresh in-memory database per test. Production schema comes from Alembic migrations."""
    eng = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def _enable_fk(dbapi_conn, _):
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=eng)
    logger.info("test-bootstrap: schema ensured")
    yield eng
    eng.dispose()


@pytest.fixture()
def db_session(engine) -> Iterator[Session]:
    SessionTesting = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = SessionTesting()
    try:
        yield db
    finally:
        db.close()


def make_quiz(db: Session, title: str, questions: list[tuple[int, int]], quiz_id: str | None = None) -> Quiz:
    """Create a quiz with (score, time_required) questions in the given order."""
    quiz = Quiz(title=title, total_questions=len(questions))
    if quiz_id is not None:
        quiz.id = quiz_id
    for order, (score, minutes) in enumerate(questions, start=1):
        quiz.questions.append(
            Question(
                question_text=f"{title} question {order}",
                score=score,
                time_required=minutes,
                question_order=order,
            )
        )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    return quiz


@pytest.fixture()
def quiz_factory(db_session):
    def _factory(title: str, questions: list[tuple[int, int]], quiz_id: str | None = None) -> Quiz:
        return make_quiz(db_session, title, questions, quiz_id=quiz_id)

    return _factory


@pytest.fixture()
def client(engine) -> Iterator[TestClient]:
    from quiz_optimizer.api.deps import get_db
    from quiz_optimizer.main import create_app

    SessionTesting = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    def _get_test_db():
        db = SessionTesting()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
