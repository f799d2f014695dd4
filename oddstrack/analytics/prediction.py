"""Short-horizon estimates over a chronological multiplier history.

Two independent policies are offered:

* ``moving-window`` - the mean of the most recent ``window`` entries.
* ``forecast`` - a bundle of robust statistics over the whole history
  (simple mean, median, trimmed mean) plus percentile "risk odds" at 20/50/80%.

None of this is a forecasting model; the numbers are heuristics.
"""
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from oddstrack.analytics.stats import fmt, quantile
from oddstrack.core.errors import InsufficientData

MOVING_WINDOW = "moving-window"
FORECAST = "forecast"
MODES = (FORECAST, MOVING_WINDOW)

LOW_RISK_P = 0.20
MEDIUM_RISK_P = 0.50
HIGH_RISK_P = 0.80


@dataclass
class Prediction:
    mode: str
    next_value: float
    fields: dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> dict:
        out = {'mode': self.mode, 'nextValue': fmt(self.next_value)}
        out.update({k: fmt(v) for k, v in self.fields.items()})
        return out


def moving_window_mean(values: Sequence[float], window: int = 5) -> Prediction:
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")
    if len(values) < window:
        raise InsufficientData(f"need at least {window} entries")
    tail = np.asarray(values[-window:], dtype=float)
    return Prediction(mode=MOVING_WINDOW, next_value=float(tail.mean()))


def trimmed_mean(values: Sequence[float], fraction: float = 0.10) -> float:
    s = sorted(values)
    n = len(s)
    k = math.floor(n * fraction)
    kept = s[k:n - k]
    if not kept:
        kept = s
    return float(np.mean(kept))


def forecast(values: Sequence[float], trim_fraction: float = 0.10) -> Prediction:
    if not values:
        raise InsufficientData("need at least 1 entry")
    s = sorted(values)
    mean = float(np.mean(s))
    medium = quantile(s, MEDIUM_RISK_P)
    return Prediction(
        mode=FORECAST,
        next_value=mean,
        fields={
            'simpleMean': mean,
            'median': medium,
            'trimmedMean': trimmed_mean(s, trim_fraction),
            'lowRiskOdd': quantile(s, LOW_RISK_P),
            'mediumRiskOdd': medium,
            'highRiskOdd': quantile(s, HIGH_RISK_P),
        },
    )


def predict(values: Sequence[float], mode: str = FORECAST, window: int = 5,
            trim_fraction: float = 0.10) -> Prediction:
    if mode == MOVING_WINDOW:
        return moving_window_mean(values, window=window)
    if mode == FORECAST:
        return forecast(values, trim_fraction=trim_fraction)
    raise ValueError(f"unknown prediction mode: {mode}")
