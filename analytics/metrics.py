from __future__ import annotations

"""Metric computations for attempts and per-question answers."""

import numpy as np
import pandas as pd
from .config import AnalyticsConfig


def compute_metrics(df: pd.DataFrame, cfg: AnalyticsConfig) -> pd.DataFrame:
    """Add accuracy and pass flag per attempt.

    Returns a copy with added columns:
    - acc: correct / total (0 for empty attempts)
    - passed: score >= cfg.pass_score
    """
    out = df.copy()
    total = out["total"].astype("float32").to_numpy()
    correct = out["correct"].astype("float32").to_numpy()
    out["acc"] = np.divide(correct, total, out=np.zeros_like(total), where=total > 0).astype("float32")
    out["passed"] = out["score"].astype(int) >= int(cfg.pass_score)
    return out


def question_miss_rates(answers: pd.DataFrame) -> pd.DataFrame:
    """Per (quiz_type, question_index): asked, missed and miss_rate, worst first."""
    if answers.empty:
        return pd.DataFrame(columns=["quiz_type", "question_index", "prompt", "asked", "missed", "miss_rate"])
    g = answers.assign(missed=~answers["is_correct"].astype(bool))
    agg = (
        g.groupby(["quiz_type", "question_index"], observed=True)
        .agg(prompt=("prompt", "last"), asked=("missed", "size"), missed=("missed", "sum"))
        .reset_index()
    )
    agg["missed"] = agg["missed"].astype(int)
    agg["miss_rate"] = (agg["missed"] / agg["asked"]).astype("float32")
    return agg.sort_values(["miss_rate", "asked"], ascending=[False, False], kind="stable").reset_index(drop=True)


def grade_counts(df: pd.DataFrame) -> pd.Series:
    """Number of attempts per grade tier."""
    return df["grade"].astype("string").value_counts().sort_index()
