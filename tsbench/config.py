"""
Benchmark configuration and presets.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


# =============================================================================
# Presets
# =============================================================================

PRESETS = {
    "quick": {"data_sizes": (1_000,), "test_runs": 3, "description": "Quick smoke test"},
    "default": {"data_sizes": (1_000, 10_000, 100_000), "test_runs": 5, "description": "Default benchmark"},
    "large": {"data_sizes": (1_000, 10_000, 100_000, 1_000_000), "test_runs": 5, "description": "Large scale test"},
}


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    test_runs: int = 5
    data_sizes: Tuple[int, ...] = (1_000, 10_000, 100_000)

    database_name: str = "testDb"
    general_collection: str = "generalCollection"
    timeseries_collection: str = "timeSeriesCollection"

    # Time series collection options
    time_field: str = "timestamp"
    meta_field: str = "meta"
    granularity: str = "seconds"

    query_window_seconds: int = 100   # query: timestamp > now - window
    delete_threshold: float = 50      # delete: value > threshold
    sensor_count: int = 5

    mongo_version: str = "7.0"        # time series collections need 5.0+

    def __post_init__(self):
        self.data_sizes = tuple(self.data_sizes)
        if self.test_runs < 1:
            raise ValueError(f"test_runs must be >= 1, got {self.test_runs}")
        if not self.data_sizes:
            raise ValueError("data_sizes must not be empty")
        for size in self.data_sizes:
            if size < 1:
                raise ValueError(f"data sizes must be >= 1, got {size}")
        if self.sensor_count < 1:
            raise ValueError(f"sensor_count must be >= 1, got {self.sensor_count}")

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "BenchmarkConfig":
        preset = PRESETS[name]
        values = {"data_sizes": preset["data_sizes"], "test_runs": preset["test_runs"]}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def timeseries_options(self) -> Dict[str, str]:
        """Options passed as ``timeseries=`` when creating the time series collection."""
        return {
            "timeField": self.time_field,
            "metaField": self.meta_field,
            "granularity": self.granularity,
        }
