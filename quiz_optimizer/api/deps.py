from __future__ import annotations

from typing import Generator

from sqlalchemy.orm import Session

from quiz_optimizer.config import Settings, settings
from quiz_optimizer.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_settings() -> Settings:
    return settings
