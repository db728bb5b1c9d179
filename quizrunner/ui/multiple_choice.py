from __future__ import annotations

"""Multiple-choice view: options labelled A-D (numbers beyond that)."""

from typing import Any, Optional

from ..models import Question
from .base_view import QuestionView

_LABELS = ["A", "B", "C", "D"]


def option_label(index: int) -> str:
    return _LABELS[index] if 0 <= index < len(_LABELS) else str(index + 1)


class MultipleChoice(QuestionView):
    def prompt(self) -> str:
        return "Your answer (letter or number): "

    def parse(self, raw: str, question: Question) -> Optional[Any]:
        token = (raw or "").strip().upper()
        if not token:
            return None
        for i, option in enumerate(question.options):
            if token == option_label(i):
                return option
        if token.isdigit():
            i = int(token) - 1
            if 0 <= i < len(question.options):
                return question.options[i]
        return None

    def _render(self, question: Question) -> str:
        lines = [question.prompt, ""]
        for i, option in enumerate(question.options):
            lines.append(f"  {option_label(i)}. {option}")
        return "\n".join(lines)

    def _render_result(self, question: Question, user_answer: Any) -> str:
        correct_index = question.option_index(question.correct_answer)
        selected_index = question.option_index(user_answer)
        lines = []
        for i, option in enumerate(question.options):
            if i == correct_index:
                mark = "[correct]"
            elif i == selected_index:
                mark = "[wrong]"
            else:
                mark = ""
            lines.append(f"  {option_label(i)}. {option} {mark}".rstrip())
        return "\n".join(lines)
