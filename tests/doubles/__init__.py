"""Test doubles for the MongoDB driver."""

from tests.doubles.fake_mongo import FakeCollection, FakeDatabase

__all__ = ["FakeCollection", "FakeDatabase"]
