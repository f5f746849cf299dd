"""
MongoDB Time Series Collection Benchmark

Compares a general collection with a time series collection on insert,
query and delete speed and on storage size, at several data sizes, against
a disposable MongoDB server started for the run.

Usage:
    tsbench                          # Default run: 1K / 10K / 100K records, 5 runs each
    tsbench --quick                  # Quick run (1K records, 3 runs)
    tsbench --large                  # Adds 1M records
    tsbench --sizes 5000 50000       # Custom data sizes
    tsbench --runs 10                # Runs per operation
    tsbench --mongo-version 8.0      # Server version to download
    tsbench --quiet                  # Summary only
"""

import argparse
import os
import platform
import sys
import traceback
from datetime import datetime
from typing import List, Optional

import psutil

from tsbench.benchmarker import Benchmarker, SizeResult
from tsbench.config import PRESETS, BenchmarkConfig
from tsbench.formatting import format_number, print_separator, print_title
from tsbench.host import EphemeralMongo, server_info


def get_system_info() -> dict:
    """Get system information for benchmark context."""
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "cpu_count": os.cpu_count(),
        "total_memory_gb": round(psutil.virtual_memory().total / (1024**3), 2),
    }


def print_header(versions: dict, config: BenchmarkConfig):
    system = get_system_info()
    print_title("MongoDB Time Series Collection Benchmark")
    print(f"🔧 MongoDB version: {versions['server_version']} (Client: pymongo@{versions['driver_version']})")
    print(f"💻 Host: {system['platform']}, Python {system['python_version']}, "
          f"{system['cpu_count']} CPUs, {system['total_memory_gb']} GB RAM")
    print(f"📅 Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🔄 Runs per test: {config.test_runs}")
    print(f"📊 Data sizes: {', '.join(format_number(s) for s in config.data_sizes)} records")
    print()


def run(config: BenchmarkConfig, verbose: bool = True) -> List[SizeResult]:
    """Start a disposable server, run every benchmark against it, and shut it down."""
    with EphemeralMongo(config.mongo_version) as client:
        print_header(server_info(client), config)

        benchmarker = Benchmarker(client[config.database_name], config, verbose=verbose)
        results = benchmarker.run_all()

        print_separator()
        print("✅ Benchmark complete!")
        return results


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    if args.quick:
        preset = "quick"
    elif args.large:
        preset = "large"
    else:
        preset = "default"

    return BenchmarkConfig.from_preset(
        preset,
        data_sizes=args.sizes,
        test_runs=args.runs,
        mongo_version=args.mongo_version,
    )


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="MongoDB Time Series Collection Benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\n".join(
            f"  {name:<8} {p['description']}: "
            f"{', '.join(format_number(s) for s in p['data_sizes'])} records, {p['test_runs']} runs"
            for name, p in PRESETS.items()
        ),
    )

    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument("--quick", "-q", action="store_true",
                            help="Quick benchmark (1K records, 3 runs)")
    size_group.add_argument("--large", "-l", action="store_true",
                            help="Large benchmark (up to 1M records)")
    size_group.add_argument("--sizes", "-n", type=int, nargs="+",
                            help="Data sizes to test (default: 1000 10000 100000)")

    parser.add_argument("--runs", "-r", type=int,
                        help="Runs per operation (default: 5)")
    parser.add_argument("--mongo-version", type=str,
                        help="MongoDB server version to run (default: 7.0)")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the header and the summary")

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        run(config, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted.")
        sys.exit(1)
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
