from collections import Counter
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from oddstrack.core.errors import InsufficientData


def fmt(x: float) -> str:
    return f"{x:.2f}"


def quantile(sorted_values: Sequence[float], p: float) -> float:
    # linear interpolation at rank p * (n - 1) between the bracketing order statistics
    return float(np.quantile(np.asarray(sorted_values, dtype=float), p, method="linear"))


def median(values: Sequence[float]) -> float:
    return quantile(sorted(values), 0.5)


def mode(values: Sequence[float]) -> float:
    # most_common keeps first-seen order among equal counts, so a tie goes to
    # the tied value whose first occurrence is earliest
    return Counter(values).most_common(1)[0][0]


@dataclass
class Stats:
    mean: float
    mode: float
    median: float
    stddev: float
    min: float
    max: float
    count: int

    def as_dict(self) -> dict:
        return {
            'mean': fmt(self.mean),
            'mode': fmt(self.mode),
            'median': fmt(self.median),
            'stddev': fmt(self.stddev),
            'min': fmt(self.min),
            'max': fmt(self.max),
            'count': self.count,
        }


def describe(values: Sequence[float]) -> Stats:
    if not values:
        raise InsufficientData("no entries to describe")
    arr = np.asarray(values, dtype=float)
    return Stats(
        mean=float(arr.mean()),
        mode=mode(values),
        median=median(values),
        stddev=float(arr.std(ddof=0)),
        min=float(arr.min()),
        max=float(arr.max()),
        count=len(values),
    )
