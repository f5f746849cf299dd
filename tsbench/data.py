"""
Synthetic sensor readings for the benchmark.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import numpy as np


def generate_records(count: int, now: Optional[datetime] = None,
                     rng: Optional[np.random.Generator] = None,
                     sensor_count: int = 5) -> List[Dict]:
    """
    Generate ``count`` readings going back one second per record from ``now``.

    Values are uniform in [0, 100); sensor tags cycle through
    ``sensor0 .. sensor{sensor_count - 1}``.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    if now is None:
        now = datetime.now(timezone.utc)
    if rng is None:
        rng = np.random.default_rng()

    values = rng.uniform(0, 100, size=count)

    return [
        {
            "timestamp": now - timedelta(seconds=i),
            "value": float(values[i]),
            "meta": {"sensor": f"sensor{i % sensor_count}"},
        }
        for i in range(count)
    ]


def copy_records(records: List[Dict]) -> List[Dict]:
    """Fresh documents for insert_many, which stamps ``_id`` onto what it is given."""
    return [{**record, "meta": dict(record["meta"])} for record in records]
