from __future__ import annotations

"""Base class for terminal question views."""

from typing import Any, Optional

from ..models import Question


class QuestionView:
    """Renders one question as text and turns raw input into an answer value.

    After ``show_result`` the view is locked and ignores further input until
    the next ``render``.
    """

    def __init__(self) -> None:
        self.is_locked = False

    def render(self, question: Question) -> str:
        self.is_locked = False
        return self._render(question)

    def select(self, raw: str, question: Question) -> Optional[Any]:
        """Parse ``raw`` into a canonical answer value; None if unrecognized."""
        if self.is_locked:
            return None
        return self.parse(raw, question)

    def show_result(self, question: Question, user_answer: Any) -> str:
        self.is_locked = True
        return self._render_result(question, user_answer)

    def prompt(self) -> str:
        raise NotImplementedError

    def parse(self, raw: str, question: Question) -> Optional[Any]:
        raise NotImplementedError

    def _render(self, question: Question) -> str:
        raise NotImplementedError

    def _render_result(self, question: Question, user_answer: Any) -> str:
        raise NotImplementedError
