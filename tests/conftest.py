"""Pytest configuration and fixtures for tsbench tests."""

import sys
from pathlib import Path

# Add parent directory to Python path so we can import tsbench
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest

from tests.doubles import FakeDatabase
from tsbench.config import BenchmarkConfig


@pytest.fixture
def fake_db() -> FakeDatabase:
    """An empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def small_config() -> BenchmarkConfig:
    """A config small enough to run against the fake database quickly."""
    return BenchmarkConfig(test_runs=2, data_sizes=(50, 120))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
