from .config import AnalyticsConfig
from .metrics import compute_metrics, question_miss_rates, grade_counts
from .prepare import load_and_prepare
from .smoothing import ewma_by_attempt
from .plots import plot_score_trend, plot_grade_distribution, plot_miss_rates
from .report import write_reports

__all__ = [
    "AnalyticsConfig",
    "compute_metrics",
    "question_miss_rates",
    "grade_counts",
    "load_and_prepare",
    "ewma_by_attempt",
    "plot_score_trend",
    "plot_grade_distribution",
    "plot_miss_rates",
    "write_reports",
]
