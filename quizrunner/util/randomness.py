from __future__ import annotations

"""Randomness helpers for question ordering and seeding."""

import os
import random
from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def seed_if_needed() -> None:
    """Seed RNGs if SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is None:
        return
    try:
        s = int(seed)
    except ValueError:
        return
    random.seed(s)
    np.random.seed(s % (2**32))


def pick_questions(questions: Sequence[T], *, shuffle: bool = False, limit: Optional[int] = None) -> List[T]:
    """Return the questions for one attempt, optionally shuffled and capped at ``limit``."""
    pool = list(questions)
    if shuffle:
        random.shuffle(pool)
    if limit is not None:
        pool = pool[: max(0, int(limit))]
    return pool
