from __future__ import annotations

"""Parquet-backed store for quiz attempts using pandas + pyarrow.

Two tables: one row per attempt (``attempts.parquet``) and one row per
submitted answer (``answers.parquet``).
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pandas as pd

from .schema import ANSWER_DTYPES, ATTEMPT_DTYPES, AnswerRow, AttemptRow


ATTEMPTS_FILE = "attempts.parquet"
ANSWERS_FILE = "answers.parquet"


def _empty_df(dtypes: Dict[str, Any]) -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in dtypes.items()})


def _fix_dtypes(df: pd.DataFrame, dtypes: Dict[str, Any]) -> pd.DataFrame:
    for col, dt in dtypes.items():
        if col not in df.columns:
            df[col] = pd.NA
        df[col] = df[col].astype(dt)
    return df[list(dtypes.keys())]


def init_store(data_dir: Path) -> None:
    """Ensure data directory and empty Parquet files with correct schema exist."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    for name, dtypes in ((ATTEMPTS_FILE, ATTEMPT_DTYPES), (ANSWERS_FILE, ANSWER_DTYPES)):
        f = data_dir / name
        if not f.exists():
            _empty_df(dtypes).to_parquet(f, engine="pyarrow", compression="zstd", index=False)


def validate_attempts(records: Iterable[AttemptRow | Dict[str, Any]]) -> pd.DataFrame:
    """Validate attempt rows via Pydantic and return a typed DataFrame."""
    rows = [r if isinstance(r, AttemptRow) else AttemptRow.model_validate(r) for r in records]
    if not rows:
        return _empty_df(ATTEMPT_DTYPES)
    return _fix_dtypes(pd.DataFrame([r.model_dump() for r in rows]), ATTEMPT_DTYPES)


def validate_answers(records: Iterable[AnswerRow | Dict[str, Any]]) -> pd.DataFrame:
    """Validate answer rows via Pydantic and return a typed DataFrame."""
    rows = [r if isinstance(r, AnswerRow) else AnswerRow.model_validate(r) for r in records]
    if not rows:
        return _empty_df(ANSWER_DTYPES)
    return _fix_dtypes(pd.DataFrame([r.model_dump() for r in rows]), ANSWER_DTYPES)


def _append(df_new: pd.DataFrame, f: Path, dtypes: Dict[str, Any]) -> None:
    if f.exists():
        df_old = _fix_dtypes(pd.read_parquet(f, engine="pyarrow"), dtypes)
    else:
        df_old = _empty_df(dtypes)
    df_new = _fix_dtypes(df_new.copy(), dtypes)
    if df_old.empty:
        combined = df_new
    elif df_new.empty:
        combined = df_old
    else:
        combined = pd.concat([df_old, df_new], ignore_index=True)
    combined = _fix_dtypes(combined, dtypes).drop_duplicates()  # exact duplicate rows only
    combined.to_parquet(f, engine="pyarrow", compression="zstd", index=False)


def append_attempt(attempts: pd.DataFrame, answers: pd.DataFrame, data_path: Path) -> None:
    """Append validated attempt and answer rows to the store."""
    data_path = Path(data_path)
    init_store(data_path)
    _append(attempts, data_path / ATTEMPTS_FILE, ATTEMPT_DTYPES)
    _append(answers, data_path / ANSWERS_FILE, ANSWER_DTYPES)


def load_attempts(data_path: Path) -> pd.DataFrame:
    """Load all attempts sorted by start time, with an ``acc`` convenience column."""
    f = Path(data_path) / ATTEMPTS_FILE
    if not f.exists():
        df = _empty_df(ATTEMPT_DTYPES)
    else:
        df = _fix_dtypes(pd.read_parquet(f, engine="pyarrow"), ATTEMPT_DTYPES)
    total = df["total"].astype("float32")
    df["acc"] = (df["correct"].astype("float32") / total.where(total > 0, other=1.0)).astype("float32")
    return df.sort_values(["started_at", "attempt_id"], kind="stable").reset_index(drop=True)


def load_answers(data_path: Path) -> pd.DataFrame:
    f = Path(data_path) / ANSWERS_FILE
    if not f.exists():
        return _empty_df(ANSWER_DTYPES)
    return _fix_dtypes(pd.read_parquet(f, engine="pyarrow"), ANSWER_DTYPES)


def query_trend(df: pd.DataFrame, *, quiz_type: Optional[str] = None) -> pd.DataFrame:
    """Filter attempts for ``quiz_type`` (all types if None) and sort by start time."""
    dff = df if quiz_type is None else df[df["quiz_type"].astype("string") == quiz_type]
    return dff.sort_values("started_at", kind="stable").reset_index(drop=True)


def export_ndjson(df: pd.DataFrame, out_path: Path) -> None:
    """Export a DataFrame to line-delimited JSON (NDJSON) for quick inspection."""
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_json(out_path, orient="records", lines=True, date_format="iso")
