# quiz_optimizer/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from quiz_optimizer.config import setup_json_logging, settings
from quiz_optimizer.api.routes.optimize import router as optimize_router
from quiz_optimizer.api.routes.quizzes import router as quizzes_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="QUIZ OPTIMIZER - Question Selection API",
        version="0.1.0",
    )

    app.include_router(quizzes_router)
    app.include_router(optimize_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
