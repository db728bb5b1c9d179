from __future__ import annotations

"""Analytics configuration (hyperparameters) using Pydantic."""

from pydantic import BaseModel, Field


class AnalyticsConfig(BaseModel):
    """Hyperparameters for attempt analytics.

    - smoothing_span: EWMA span in attempts (>1)
    - pass_score: score at or above which an attempt counts as passed
    """

    smoothing_span: int = Field(5, gt=1)
    pass_score: int = Field(50, ge=0, le=100)
