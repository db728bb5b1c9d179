from __future__ import annotations

"""Report generation: loads the attempt history, smooths scores and writes
PNG plots plus a CSV snapshot into an output directory."""

from pathlib import Path

from storage.store import load_answers
from .config import AnalyticsConfig
from .metrics import grade_counts, question_miss_rates
from .plots import plot_grade_distribution, plot_miss_rates, plot_score_trend
from .prepare import load_and_prepare
from .smoothing import ewma_by_attempt

SNAPSHOT_COLS = ["attempt_id", "started_at", "quiz_type", "total", "correct", "score", "grade", "acc", "passed", "score_smooth"]


def write_reports(data_dir: Path, outdir: Path, cfg: AnalyticsConfig | None = None) -> int:
    """Write reports for the stored attempts; returns the number of attempts covered."""
    cfg = cfg or AnalyticsConfig()
    df = load_and_prepare(Path(data_dir), cfg)
    if df.empty:
        return 0
    df = ewma_by_attempt(df, value_col="score", span=cfg.smoothing_span, group_cols=["quiz_type"])

    outdir = Path(outdir)
    outdir.mkdir(exist_ok=True, parents=True)

    plot_score_trend(df, save_path=outdir / "score_trend.png")
    for quiz_type in sorted(df["quiz_type"].astype("string").unique()):
        plot_score_trend(df, quiz_type=quiz_type, save_path=outdir / f"score_trend_{quiz_type}.png")
    plot_grade_distribution(grade_counts(df), save_path=outdir / "grade_distribution.png")
    plot_miss_rates(question_miss_rates(load_answers(Path(data_dir))), save_path=outdir / "miss_rates.png")

    df[[c for c in SNAPSHOT_COLS if c in df.columns]].to_csv(outdir / "attempts_snapshot.csv", index=False)
    return len(df)
