from __future__ import annotations

"""Grade policy: maps a 0..100 score onto a grade descriptor.

The table is ordered by strictly decreasing ``minimum_score`` and must end
with a 0 threshold so every score resolves. A table that breaks this is a
caller error; ``resolve`` then falls back to the last descriptor.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class GradeDescriptor:
    minimum_score: int
    tier: str
    label: str
    color: str

    def to_json(self) -> Dict[str, Any]:
        return {"min": self.minimum_score, "grade": self.tier, "label": self.label, "color": self.color}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "GradeDescriptor":
        """Accepts short keys (``min``/``grade``) or long ones (``minimumScore``/``tier``)."""
        minimum = data["min"] if "min" in data else data["minimumScore"]
        tier = data["grade"] if "grade" in data else data["tier"]
        return cls(
            minimum_score=int(minimum),
            tier=str(tier),
            label=str(data.get("label", "")),
            color=str(data.get("color", "")),
        )


DEFAULT_GRADE_TABLE: Tuple[GradeDescriptor, ...] = (
    GradeDescriptor(90, "S", "Perfect!", "#FFD700"),
    GradeDescriptor(70, "A", "Excellent!", "#4CAF50"),
    GradeDescriptor(50, "B", "Good job!", "#2196F3"),
    GradeDescriptor(30, "C", "A little more effort!", "#FF9800"),
    GradeDescriptor(0, "D", "Try again!", "#F44336"),
)


def is_well_formed(table: Sequence[GradeDescriptor]) -> bool:
    """True when thresholds strictly decrease and the last one is 0."""
    if not table:
        return False
    mins = [g.minimum_score for g in table]
    return all(a > b for a, b in zip(mins, mins[1:])) and mins[-1] == 0


class GradingPolicy:
    def __init__(self, table: Iterable[GradeDescriptor | Mapping[str, Any]] | None = None) -> None:
        if table is None:
            grades: List[GradeDescriptor] = list(DEFAULT_GRADE_TABLE)
        else:
            grades = [g if isinstance(g, GradeDescriptor) else GradeDescriptor.from_json(g) for g in table]
        if not grades:
            raise ValueError("grade table must contain at least one descriptor")
        self._table: Tuple[GradeDescriptor, ...] = tuple(grades)

    @property
    def table(self) -> Tuple[GradeDescriptor, ...]:
        return self._table

    def resolve(self, score: float) -> GradeDescriptor:
        for grade in self._table:
            if score >= grade.minimum_score:
                return grade
        return self._table[-1]

    def message(self, score: float) -> str:
        return self.resolve(score).label
