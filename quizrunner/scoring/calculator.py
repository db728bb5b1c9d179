from __future__ import annotations

"""Score and progress arithmetic (0..100 integer percentages).

Rounding is half-up (``x.5`` goes to the next integer), computed with
integer arithmetic so results never depend on float representation:
``calculate_score(1, 8) == 13`` and ``calculate_score(2, 3) == 67``.
"""


def round_half_up_ratio(numerator: int, denominator: int) -> int:
    """Return ``round(numerator / denominator * 100)`` rounding halves up.

    ``denominator`` must be positive.
    """
    return (200 * int(numerator) + int(denominator)) // (2 * int(denominator))


def calculate_score(correct: int, total: int) -> int:
    """Percentage of correct answers; 0 when there are no questions."""
    if total <= 0:
        return 0
    return round_half_up_ratio(correct, total)


def calculate_progress(index: int, total: int) -> int:
    """Percentage of the question sequence already passed at ``index``."""
    if total <= 0:
        return 0
    return round_half_up_ratio(index, total)
