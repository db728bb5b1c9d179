from __future__ import annotations

"""Result summary for the results screen.

``build_summary`` only aggregates: score and grade are computed elsewhere
and passed in unchanged.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from ..models import AnswerRecord, CompletionResult
from ..scoring.grading import GradeDescriptor, GradingPolicy


@dataclass(frozen=True)
class ResultSummary:
    total_questions: int
    correct_count: int
    incorrect_count: int
    score: int
    grade: str
    grade_label: str
    grade_color: str
    answers: Tuple[AnswerRecord, ...] = ()

    @property
    def percentage(self) -> str:
        return f"{self.score}%"

    @property
    def incorrect_answers(self) -> Tuple[AnswerRecord, ...]:
        return tuple(a for a in self.answers if not a.is_correct)

    def to_json(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "grade": self.grade,
            "gradeLabel": self.grade_label,
            "gradeColor": self.grade_color,
            "correctCount": self.correct_count,
            "totalQuestions": self.total_questions,
            "incorrectCount": self.incorrect_count,
            "percentage": self.percentage,
        }


def build_summary(
    total: int,
    correct_count: int,
    score: int,
    grade: GradeDescriptor,
    answers: Sequence[AnswerRecord],
) -> ResultSummary:
    return ResultSummary(
        total_questions=total,
        correct_count=correct_count,
        incorrect_count=total - correct_count,
        score=score,
        grade=grade.tier,
        grade_label=grade.label,
        grade_color=grade.color,
        answers=tuple(answers),
    )


def summarize(result: CompletionResult, policy: GradingPolicy) -> ResultSummary:
    """Resolve the grade for a finished run and build its summary."""
    return build_summary(
        result.total,
        result.correct_count,
        result.score,
        policy.resolve(result.score),
        result.answers,
    )
