from __future__ import annotations

"""Matplotlib plots for score trends, grade distribution and question difficulty."""

import os
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def plot_score_trend(
    df: pd.DataFrame,
    *,
    quiz_type: Optional[str] = None,
    value_col: str = "score",
    save_path: Optional[str | os.PathLike[str]] = None,
) -> None:
    g = df.copy()
    if quiz_type is not None:
        g = g[g["quiz_type"].astype("string") == quiz_type]
    if g.empty:
        return
    g = g.sort_values("attempt_idx")
    plt.figure()
    plt.plot(g["attempt_idx"], g[value_col].astype(float), marker="o", linestyle="", label=value_col)
    smooth_col = f"{value_col}_smooth"
    if smooth_col in g.columns:
        plt.plot(g["attempt_idx"], g[smooth_col], linewidth=2, label=f"{value_col} (EWMA)")
    plt.xlabel("Attempt")
    plt.ylabel(value_col)
    if value_col == "score":
        plt.ylim(-5, 105)
    plt.title("Score trend" + (f" - {quiz_type}" if quiz_type else ""))
    plt.legend()
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()


def plot_grade_distribution(
    counts: pd.Series,
    *,
    save_path: Optional[str | os.PathLike[str]] = None,
) -> None:
    if counts.empty:
        return
    plt.figure()
    x = np.arange(len(counts))
    plt.bar(x, counts.to_numpy())
    plt.xticks(ticks=x, labels=counts.index.astype(str))
    plt.xlabel("Grade")
    plt.ylabel("Attempts")
    plt.title("Grade distribution")
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()


def plot_miss_rates(
    rates: pd.DataFrame,
    *,
    top: int = 10,
    save_path: Optional[str | os.PathLike[str]] = None,
) -> None:
    if rates.empty:
        return
    r = rates.head(top)
    labels = [f"{t} Q{int(i) + 1}" for t, i in zip(r["quiz_type"], r["question_index"])]
    plt.figure()
    y = np.arange(len(r))
    plt.barh(y, r["miss_rate"].to_numpy())
    plt.yticks(ticks=y, labels=labels)
    plt.gca().invert_yaxis()
    plt.xlim(0, 1)
    plt.xlabel("Miss rate")
    plt.title("Most missed questions")
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()
