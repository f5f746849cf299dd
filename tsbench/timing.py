"""
Wall-clock timing of database operations.
"""

import time
from typing import Callable, List, TypeVar

T = TypeVar("T")


def measure(operation: Callable[[], object]) -> int:
    """Run ``operation`` once and return the elapsed time in whole milliseconds."""
    start = time.perf_counter()
    operation()
    return int((time.perf_counter() - start) * 1000)


def run_multiple_tests(test_function: Callable[[], T], runs: int, description: str,
                       verbose: bool = True) -> List[T]:
    """
    Run ``test_function`` ``runs`` times, one after another, and collect its results.

    Prints a progress marker per run. Runs are never overlapped: each trial
    mutates shared collection state.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    results: List[T] = []
    if verbose:
        print(f"   Running {description}...", end="", flush=True)

    for i in range(runs):
        if verbose:
            print(f" {i + 1}", end="", flush=True)
        results.append(test_function())

    if verbose:
        print(" ✅")
    return results
