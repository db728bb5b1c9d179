from __future__ import annotations

"""Value types shared by the quiz engine, scoring and presentation."""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

# Sentinel answers for binary (O/X) questions
ANSWER_O = "O"
ANSWER_X = "X"
OX_ANSWERS = (ANSWER_O, ANSWER_X)


@dataclass(frozen=True)
class Question:
    prompt: str
    correct_answer: str
    options: Tuple[str, ...] = field(default_factory=tuple)
    explanation: Optional[str] = None

    @property
    def is_binary(self) -> bool:
        return not self.options

    def option_index(self, value: Any) -> int:
        """Index of ``value`` among the options, or -1."""
        try:
            return self.options.index(value)
        except ValueError:
            return -1


@dataclass(frozen=True)
class AnswerRecord:
    """One submitted answer. ``is_correct`` is fixed at submission time."""

    question_index: int
    question: Question
    user_answer: Any
    is_correct: bool


@dataclass(frozen=True)
class CompletionResult:
    total: int
    correct_count: int
    score: int
    answers: Tuple[AnswerRecord, ...] = ()


@dataclass(frozen=True)
class QuestionSet:
    questions: Tuple[Question, ...]
    title: Optional[str] = None

    def __len__(self) -> int:
        return len(self.questions)
