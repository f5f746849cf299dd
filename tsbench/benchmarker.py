"""
Runs the insert / storage / query / delete comparison between a general
collection and a time series collection at each configured data size.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import OperationFailure

from tsbench.config import BenchmarkConfig
from tsbench.data import copy_records, generate_records
from tsbench.formatting import (
    Improvement,
    calculate_improvement,
    format_bytes,
    format_number,
    format_space_saving,
    format_stats,
)
from tsbench.stats import Stats, calculate_stats
from tsbench.timing import measure, run_multiple_tests

NAMESPACE_NOT_FOUND = 26


class DocumentCountMismatch(RuntimeError):
    """A collection does not hold the number of documents that was inserted."""


def drop_quietly(collection: Collection):
    """Drop ``collection``, ignoring the error for one that does not exist."""
    try:
        collection.drop()
    except OperationFailure as e:
        if e.code != NAMESPACE_NOT_FOUND:
            raise


@dataclass
class PhaseResult:
    """Timing statistics for one operation on both collection kinds."""
    name: str
    size: int
    general: Stats
    timeseries: Stats

    @property
    def improvement(self) -> Improvement:
        return calculate_improvement(self.general.mean, self.timeseries.mean)


@dataclass
class SizeResult:
    """Everything measured for one data size."""
    size: int
    phases: Dict[str, PhaseResult] = field(default_factory=dict)
    general_bytes: Optional[int] = None
    timeseries_bytes: Optional[int] = None


class Benchmarker:
    """Compares a general collection with a time series collection."""

    def __init__(self, db: Database, config: BenchmarkConfig, verbose: bool = True):
        self.db = db
        self.config = config
        self.verbose = verbose
        self.results: List[SizeResult] = []

        self.general: Collection = db[config.general_collection]
        self.timeseries: Collection = db[config.timeseries_collection]

    def log(self, msg: str = ""):
        if self.verbose:
            print(msg)

    # -------------------------------------------------------------------------
    # Collection state
    # -------------------------------------------------------------------------

    def recreate_timeseries(self) -> Collection:
        """Drop and recreate the time series collection with the same options."""
        drop_quietly(self.timeseries)
        self.timeseries = self.db.create_collection(
            self.config.timeseries_collection,
            timeseries=self.config.timeseries_options(),
        )
        return self.timeseries

    def reset_collections(self):
        self.general.delete_many({})
        self.recreate_timeseries()

    def generate(self, size: int) -> List[Dict]:
        return generate_records(size, sensor_count=self.config.sensor_count)

    def populate(self, size: int):
        """Load the same fresh batch into both collections and check the counts."""
        records = self.generate(size)
        self.reset_collections()
        self.general.insert_many(copy_records(records))
        self.timeseries.insert_many(copy_records(records))

        for collection in (self.general, self.timeseries):
            count = collection.count_documents({})
            if count != size:
                raise DocumentCountMismatch(
                    f"{collection.name} holds {count:,} documents, expected {size:,}"
                )

    def collection_size(self, name: str) -> int:
        return self.db.command("collStats", name)["size"]

    # -------------------------------------------------------------------------
    # Runs
    # -------------------------------------------------------------------------

    def run_all(self) -> List[SizeResult]:
        for size in self.config.data_sizes:
            self.results.append(self.benchmark_size(size))

        self.print_summary()
        return self.results

    def benchmark_size(self, size: int) -> SizeResult:
        self.log("-" * 60)
        self.log(f"📈 Data size: {format_number(size)} records ({self.config.test_runs} runs each)")
        self.log("-" * 60)

        result = SizeResult(size=size)
        self.reset_collections()

        result.phases["insert"] = self.benchmark_insert(size)
        self.populate(size)
        self.benchmark_storage(result)
        result.phases["query"] = self.benchmark_query(size)
        result.phases["delete"] = self.benchmark_delete(size)

        self.log()
        return result

    def _report(self, name: str, size: int, general_times: List[int],
                timeseries_times: List[int]) -> PhaseResult:
        phase = PhaseResult(
            name=name,
            size=size,
            general=calculate_stats(general_times),
            timeseries=calculate_stats(timeseries_times),
        )
        self.log(f"   General collection    : {format_stats(phase.general)}")
        self.log(f"   Time series collection: {format_stats(phase.timeseries)}")
        self.log(f"   Comparison (mean): {phase.improvement}")
        return phase

    def benchmark_insert(self, size: int) -> PhaseResult:
        self.log("\n✏️  Insert performance")

        def general_trial():
            self.general.delete_many({})
            docs = copy_records(self.generate(size))
            return measure(lambda: self.general.insert_many(docs))

        def timeseries_trial():
            collection = self.recreate_timeseries()
            docs = copy_records(self.generate(size))
            return measure(lambda: collection.insert_many(docs))

        general_times = run_multiple_tests(
            general_trial, self.config.test_runs, "general collection insert", self.verbose)
        timeseries_times = run_multiple_tests(
            timeseries_trial, self.config.test_runs, "time series collection insert", self.verbose)

        return self._report("insert", size, general_times, timeseries_times)

    def benchmark_storage(self, result: SizeResult):
        result.general_bytes = self.collection_size(self.config.general_collection)
        result.timeseries_bytes = self.collection_size(self.config.timeseries_collection)

        self.log("\n💾 Storage usage")
        self.log(f"   General collection    : {format_bytes(result.general_bytes):>12}")
        self.log(f"   Time series collection: {format_bytes(result.timeseries_bytes):>12}")
        self.log(f"   {format_space_saving(result.general_bytes, result.timeseries_bytes)}")

    def benchmark_query(self, size: int) -> PhaseResult:
        since = datetime.now(timezone.utc) - timedelta(seconds=self.config.query_window_seconds)
        query = {self.config.time_field: {"$gt": since}}
        self.log("\n🔍 Query performance")

        general_times = run_multiple_tests(
            lambda: measure(lambda: list(self.general.find(query))),
            self.config.test_runs, "general collection query", self.verbose)
        timeseries_times = run_multiple_tests(
            lambda: measure(lambda: list(self.timeseries.find(query))),
            self.config.test_runs, "time series collection query", self.verbose)

        return self._report("query", size, general_times, timeseries_times)

    def benchmark_delete(self, size: int) -> PhaseResult:
        # Deleting is destructive, so every trial starts from a fresh batch
        query = {"value": {"$gt": self.config.delete_threshold}}
        self.log("\n🗑️  Delete performance")

        def general_trial():
            self.general.delete_many({})
            self.general.insert_many(copy_records(self.generate(size)))
            return measure(lambda: self.general.delete_many(query))

        def timeseries_trial():
            collection = self.recreate_timeseries()
            collection.insert_many(copy_records(self.generate(size)))
            return measure(lambda: collection.delete_many(query))

        general_times = run_multiple_tests(
            general_trial, self.config.test_runs, "general collection delete", self.verbose)
        timeseries_times = run_multiple_tests(
            timeseries_trial, self.config.test_runs, "time series collection delete", self.verbose)

        return self._report("delete", size, general_times, timeseries_times)

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def print_summary(self):
        """Print mean timings of every size and phase side by side."""
        if not self.results:
            return

        print("=" * 80)
        print("  BENCHMARK SUMMARY (mean ms)")
        print("=" * 80)
        print(f"  {'Size':>10} {'Phase':<8} {'General':>10} {'Time series':>12}  Comparison")
        print(f"  {'-'*10} {'-'*8} {'-'*10} {'-'*12}  {'-'*24}")

        for result in self.results:
            for name, phase in result.phases.items():
                print(f"  {format_number(result.size):>10} {name:<8} "
                      f"{phase.general.mean:>10.1f} {phase.timeseries.mean:>12.1f}  {phase.improvement}")
            if result.general_bytes is not None:
                print(f"  {format_number(result.size):>10} {'storage':<8} "
                      f"{format_bytes(result.general_bytes):>10} {format_bytes(result.timeseries_bytes):>12}  "
                      f"{format_space_saving(result.general_bytes, result.timeseries_bytes)}")
        print("")
