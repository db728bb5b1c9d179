from __future__ import annotations

"""Results screen: grade, score and a review of the mistakes."""

from typing import Sequence

from ..models import AnswerRecord
from ..results.summary import ResultSummary


class ResultScreen:
    def render(self, summary: ResultSummary) -> str:
        return "\n".join(
            [
                "Quiz complete!",
                "",
                f"  Grade {summary.grade}  |  {summary.score} points",
                f"  {summary.grade_label}",
                "",
                f"  Questions: {summary.total_questions}",
                f"  Correct:   {summary.correct_count}",
                f"  Incorrect: {summary.incorrect_count}",
            ]
        )

    def render_details(self, answers: Sequence[AnswerRecord]) -> str:
        """Mistake notes for every incorrect answer; empty string if none."""
        wrong = [a for a in answers if not a.is_correct]
        if not wrong:
            return ""
        lines = ["Mistake notes:"]
        for a in wrong:
            lines.append(f"  Q{a.question_index + 1}. {a.question.prompt}")
            lines.append(f"      Your answer: {a.user_answer}  |  Correct answer: {a.question.correct_answer}")
        return "\n".join(lines)
