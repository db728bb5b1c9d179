from __future__ import annotations

"""Quiz type registry.

Each type names its question-set file, a display label and whether it is
presented as O/X (binary) or as multiple choice.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class QuizTypeMeta:
    id: str
    label: str
    filename: str

    @property
    def is_binary(self) -> bool:
        return is_binary_type(self.id)


_LABELS = {
    "multiple-choice": "Multiple choice",
    "ox": "O/X",
    "cosmetic": "Skin check",
    "cosmetic-ox": "Beauty facts",
    "haircare": "Scalp & hair check",
    "haircare-ox": "Hair care facts",
    "event": "Trivia quiz",
    "event-ox": "O/X quiz",
}

_FILES = {
    "multiple-choice": "multiple-choice.json",
    "ox": "ox-quiz.json",
}


class UnknownQuizTypeError(KeyError):
    pass


def is_binary_type(quiz_type: str) -> bool:
    return quiz_type == "ox" or quiz_type.endswith("-ox")


def list_quiz_types() -> List[QuizTypeMeta]:
    return [QuizTypeMeta(id=k, label=v, filename=_FILES.get(k, f"{k}.json")) for k, v in _LABELS.items()]


def get_quiz_type(quiz_type: str) -> QuizTypeMeta:
    for m in list_quiz_types():
        if m.id == quiz_type:
            return m
    raise UnknownQuizTypeError(f"Unknown quiz type: {quiz_type}")
