from __future__ import annotations

from typing import List, Sequence

from quizrunner.models import Question


def make_questions(n: int) -> List[Question]:
    return [
        Question(prompt=f"Question {i + 1}?", options=("a", "b", "c", "d"), correct_answer="a")
        for i in range(n)
    ]


def scripted_ui(inputs: Sequence[str]):
    """UI callbacks that replay ``inputs`` and collect everything shown."""
    pending = list(inputs)
    shown: List[str] = []
    prompts: List[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return pending.pop(0)

    def inform(msg: str) -> None:
        shown.append(msg)

    return {"ask": ask, "inform": inform}, shown, prompts
