from __future__ import annotations

"""O/X view for true/false style statements."""

from typing import Any, Optional

from ..models import ANSWER_O, ANSWER_X, Question
from .base_view import QuestionView

_ALIASES = {
    "o": ANSWER_O,
    "y": ANSWER_O,
    "yes": ANSWER_O,
    "true": ANSWER_O,
    "x": ANSWER_X,
    "n": ANSWER_X,
    "no": ANSWER_X,
    "false": ANSWER_X,
}

_CAPTIONS = {ANSWER_O: "That's right", ANSWER_X: "Not true"}


class OXQuiz(QuestionView):
    def prompt(self) -> str:
        return "O or X? "

    def parse(self, raw: str, question: Question) -> Optional[Any]:
        return _ALIASES.get((raw or "").strip().lower())

    def _render(self, question: Question) -> str:
        return "\n".join([question.prompt, "", f"  O. {_CAPTIONS[ANSWER_O]}", f"  X. {_CAPTIONS[ANSWER_X]}"])

    def _render_result(self, question: Question, user_answer: Any) -> str:
        lines = []
        for answer in (ANSWER_O, ANSWER_X):
            if answer == question.correct_answer:
                mark = "[correct]"
            elif answer == user_answer:
                mark = "[wrong]"
            else:
                mark = ""
            lines.append(f"  {answer}. {_CAPTIONS[answer]} {mark}".rstrip())
        return "\n".join(lines)
