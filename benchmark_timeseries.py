#!/usr/bin/env python3
"""
Benchmark: General Collection vs Time Series Collection

Usage:
    python benchmark_timeseries.py            # 1K / 10K / 100K records, 5 runs each
    python benchmark_timeseries.py --quick    # 1K records, 3 runs
"""

from tsbench.benchmark import main


if __name__ == "__main__":
    main()
