"""
Descriptive statistics over repeated trial durations.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


class InsufficientDataError(ValueError):
    """Raised when statistics are requested for an empty sample."""


@dataclass(frozen=True)
class Stats:
    """Summary of a set of durations (population formulas)."""
    mean: float
    min: float
    max: float
    std_dev: float
    median: float


def calculate_stats(values: Sequence[float]) -> Stats:
    """Reduce ``values`` to mean, median, extrema and population standard deviation."""
    if len(values) == 0:
        raise InsufficientDataError("cannot compute statistics of an empty sample")

    arr = np.asarray(values, dtype=np.float64)
    return Stats(
        mean=float(np.mean(arr)),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        std_dev=float(np.std(arr)),  # ddof=0
        median=float(np.median(arr)),
    )
