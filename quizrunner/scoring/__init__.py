from .calculator import calculate_score, calculate_progress, round_half_up_ratio
from .grading import DEFAULT_GRADE_TABLE, GradeDescriptor, GradingPolicy

__all__ = [
    "calculate_score",
    "calculate_progress",
    "round_half_up_ratio",
    "DEFAULT_GRADE_TABLE",
    "GradeDescriptor",
    "GradingPolicy",
]
