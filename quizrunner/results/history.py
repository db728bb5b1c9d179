from __future__ import annotations

"""Persist finished attempts into the Parquet attempt history."""

from datetime import datetime
from pathlib import Path
from typing import List, Tuple
from uuid import uuid4

from storage.schema import AnswerRow, AttemptRow
from storage.store import append_attempt, validate_answers, validate_attempts

from ..app.explain import trace as xtrace
from .summary import ResultSummary


def rows_from_summary(
    summary: ResultSummary,
    *,
    quiz_type: str,
    started_at: datetime,
    attempt_id: str | None = None,
) -> Tuple[AttemptRow, List[AnswerRow]]:
    aid = attempt_id or str(uuid4())
    attempt = AttemptRow(
        attempt_id=aid,
        started_at=started_at,
        quiz_type=quiz_type,
        total=summary.total_questions,
        correct=summary.correct_count,
        score=summary.score,
        grade=summary.grade,
    )
    answers = [
        AnswerRow(
            attempt_id=aid,
            quiz_type=quiz_type,
            question_index=a.question_index,
            prompt=a.question.prompt,
            user_answer=str(a.user_answer),
            correct_answer=a.question.correct_answer,
            is_correct=a.is_correct,
        )
        for a in summary.answers
    ]
    return attempt, answers


def save_attempt(summary: ResultSummary, *, quiz_type: str, started_at: datetime, data_dir: str | Path) -> str:
    """Append one attempt and its answers to the store; returns the attempt id."""
    attempt, answers = rows_from_summary(summary, quiz_type=quiz_type, started_at=started_at)
    append_attempt(validate_attempts([attempt]), validate_answers(answers), Path(data_dir))
    xtrace("attempt_saved", {"attempt_id": attempt.attempt_id, "score": attempt.score})
    return attempt.attempt_id
