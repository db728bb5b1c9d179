from __future__ import annotations

"""Text progress bar with one marker per question.

Markers: ``.`` pending, ``>`` current, ``o`` answered correctly,
``x`` answered incorrectly.
"""

from typing import Dict

from ..scoring.calculator import round_half_up_ratio


class ProgressBar:
    def __init__(self, width: int = 20) -> None:
        self.width = width
        self.total = 0
        self.current = 0
        self.fill = 0
        self._marks: Dict[int, bool] = {}

    def render(self, total: int) -> str:
        self.total = total
        self.current = 0
        self.fill = 0
        self._marks = {}
        return self.as_text()

    def update(self, current: int) -> str:
        self.current = current
        self.fill = round_half_up_ratio(current + 1, self.total) if self.total > 0 else 0
        return self.as_text()

    def mark_step(self, step: int, is_correct: bool) -> None:
        if 0 <= step < self.total:
            self._marks[step] = bool(is_correct)

    def complete(self) -> str:
        self.fill = 100
        return self.as_text()

    def step_marker(self, step: int) -> str:
        if step in self._marks:
            return "o" if self._marks[step] else "x"
        if step == self.current:
            return ">"
        return "."

    def as_text(self) -> str:
        filled = self.width * self.fill // 100
        bar = "#" * filled + "-" * (self.width - filled)
        steps = "".join(self.step_marker(i) for i in range(self.total))
        return f"[{bar}] {self.fill:3d}%  {steps}"
