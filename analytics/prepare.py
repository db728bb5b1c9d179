from __future__ import annotations

"""Load stored attempts and compute derived metrics."""

from pathlib import Path
import pandas as pd

from storage.store import load_attempts
from .config import AnalyticsConfig
from .metrics import compute_metrics


def load_and_prepare(data_dir: Path, cfg: AnalyticsConfig) -> pd.DataFrame:
    """Read attempts and compute metrics with consistent dtypes.

    - Sorts by (started_at, attempt_id).
    - Adds a stable attempt index 'attempt_idx'.
    """
    df = load_attempts(Path(data_dir))
    df = compute_metrics(df, cfg)
    df["attempt_idx"] = pd.factorize(df["attempt_id"])[0]
    return df
