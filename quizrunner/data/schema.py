from __future__ import annotations

"""Pydantic models for question-set JSON payloads."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import OX_ANSWERS, Question, QuestionSet


class QuestionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    question: str = Field(min_length=1)
    options: List[str] = Field(default_factory=list)
    correct_answer: str = Field(alias="correctAnswer")
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def _answer_matches_kind(self) -> "QuestionModel":
        if self.options:
            if self.correct_answer not in self.options:
                raise ValueError(f"correctAnswer {self.correct_answer!r} is not one of the options")
        elif self.correct_answer not in OX_ANSWERS:
            raise ValueError("questions without options need correctAnswer 'O' or 'X'")
        return self

    def to_question(self) -> Question:
        return Question(
            prompt=self.question,
            correct_answer=self.correct_answer,
            options=tuple(self.options),
            explanation=self.explanation or None,
        )


class QuestionSetModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    questions: List[QuestionModel] = Field(default_factory=list)

    def to_question_set(self) -> QuestionSet:
        return QuestionSet(questions=tuple(q.to_question() for q in self.questions), title=self.title)
