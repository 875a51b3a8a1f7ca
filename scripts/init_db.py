#!/usr/bin/env python3
"""
Initialize database schema by creating all tables defined by SQLAlchemy models.
Pass --seed to insert the sample quizzes used during development.
"""

from __future__ import annotations

import argparse

from sqlalchemy.orm import Session

from quiz_optimizer.db.base import Base
from quiz_optimizer.db.models import Question, Quiz
from quiz_optimizer.db.session import SessionLocal, engine

SAMPLE_QUIZZES = [
    {
        "id": "650e8400-e29b-41d4-a716-446655440000",
        "title": "Data Structures Quiz",
        "description": "Test your knowledge of fundamental data structures",
        "questions": [
            ("What is the time complexity of binary search?", 10, 3, "easy"),
            ("Explain the difference between a stack and a queue.", 15, 5, "easy"),
            ("What is a linked list and when would you use it?", 20, 8, "medium"),
            ("Describe how a hash table works.", 25, 10, "medium"),
            ("What is a binary tree? Provide examples of tree traversal methods.", 30, 15, "hard"),
        ],
    },
    {
        "id": "650e8400-e29b-41d4-a716-446655440001",
        "title": "Algorithms Quiz",
        "description": "Challenge yourself with algorithm problems",
        "questions": [
            ("Implement bubble sort and analyze its complexity.", 20, 10, "medium"),
            ("What is dynamic programming? Give an example.", 25, 12, "medium"),
            ("Explain Dijkstra's shortest path algorithm.", 30, 15, "hard"),
            ("Solve the travelling salesman problem for 5 cities.", 40, 20, "hard"),
        ],
    },
]


def seed(db: Session) -> int:
    created = 0
    for sample in SAMPLE_QUIZZES:
        if db.get(Quiz, sample["id"]) is not None:
            continue
        quiz = Quiz(
            id=sample["id"],
            title=sample["title"],
            description=sample["description"],
            total_questions=len(sample["questions"]),
        )
        for order, (text, score, minutes, difficulty) in enumerate(sample["questions"], start=1):
            quiz.questions.append(
                Question(
                    question_text=text,
                    score=score,
                    time_required=minutes,
                    question_order=order,
                    difficulty=difficulty,
                )
            )
        db.add(quiz)
        created += 1
    db.commit()
    return created


def main() -> None:
    parser = argparse.ArgumentParser(description="Create tables and optionally seed sample quizzes.")
    parser.add_argument("--seed", action="store_true", help="Insert the sample quizzes.")
    args = parser.parse_args()

    print("Creating all tables using SQLAlchemy metadata...")
    Base.metadata.create_all(bind=engine)
    if args.seed:
        db = SessionLocal()
        try:
            print(f"Seeded {seed(db)} quizzes.")
        finally:
            db.close()
    print("Done.")


if __name__ == "__main__":
    main()
