from __future__ import annotations

"""Schema constants and Pydantic models for Parquet-backed attempt history."""

from datetime import datetime, timezone

import pandas as pd
from pydantic import BaseModel, Field, field_validator, model_validator

# --- Constants ---

ATTEMPT_DTYPES = {
    "attempt_id": "string",
    # timezone-aware UTC timestamps
    "started_at": pd.DatetimeTZDtype(tz="UTC"),
    "quiz_type": "string",
    "total": "UInt16",
    "correct": "UInt16",
    "score": "UInt8",
    "grade": "string",
}

ANSWER_DTYPES = {
    "attempt_id": "string",
    "quiz_type": "string",
    "question_index": "UInt16",
    "prompt": "string",
    "user_answer": "string",
    "correct_answer": "string",
    "is_correct": "boolean",
}


def _utc(v: datetime) -> datetime:
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


# --- Pydantic models ---

class AttemptRow(BaseModel):
    attempt_id: str = Field(min_length=1)
    started_at: datetime
    quiz_type: str = Field(min_length=1)
    total: int = Field(ge=0, le=65535)
    correct: int = Field(ge=0, le=65535)
    score: int = Field(ge=0, le=100)
    # Grade tiers are configurable, so any non-empty code is accepted
    grade: str = Field(min_length=1)

    @model_validator(mode="after")
    def _correct_le_total(self) -> "AttemptRow":
        if self.correct > self.total:
            raise ValueError("correct must be <= total")
        return self

    @field_validator("started_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        return _utc(v)


class AnswerRow(BaseModel):
    attempt_id: str = Field(min_length=1)
    quiz_type: str = Field(min_length=1)
    question_index: int = Field(ge=0, le=65535)
    prompt: str
    user_answer: str
    correct_answer: str
    is_correct: bool
