"""
tsbench - MongoDB Time Series Collection Benchmark

Measures how a time series collection compares with a general collection
on insert, query and delete speed and on storage size.

Quick Start:
    from tsbench import BenchmarkConfig, run

    config = BenchmarkConfig.from_preset("quick")
    results = run(config)

    for size_result in results:
        print(size_result.size, size_result.phases["insert"].improvement)
"""

__version__ = "0.1.0"

from tsbench.config import PRESETS, BenchmarkConfig
from tsbench.data import generate_records
from tsbench.stats import InsufficientDataError, Stats, calculate_stats
from tsbench.formatting import Improvement, calculate_improvement, format_bytes, format_number
from tsbench.timing import measure, run_multiple_tests
from tsbench.host import EphemeralMongo
from tsbench.benchmarker import Benchmarker, DocumentCountMismatch, PhaseResult, SizeResult
from tsbench.benchmark import main, run

__all__ = [
    "__version__",

    # Running
    "run",
    "main",
    "Benchmarker",
    "EphemeralMongo",

    # Configuration
    "BenchmarkConfig",
    "PRESETS",

    # Results
    "PhaseResult",
    "SizeResult",
    "Stats",
    "Improvement",

    # Building blocks
    "generate_records",
    "calculate_stats",
    "calculate_improvement",
    "format_bytes",
    "format_number",
    "measure",
    "run_multiple_tests",

    # Errors
    "InsufficientDataError",
    "DocumentCountMismatch",
]
