"""In-memory stand-in for the parts of a pymongo Database the benchmark uses.

Supports empty filters and ``{field: {"$gt": value}}`` filters, which are the
only ones the benchmark issues.

Example:
    >>> db = FakeDatabase()
    >>> coll = db.create_collection("readings", timeseries={"timeField": "timestamp"})
    >>> coll.insert_many([{"value": 1.0}, {"value": 70.0}])
    >>> coll.count_documents({})
    2
"""

import itertools
from typing import Dict, List, Optional

from pymongo.errors import CollectionInvalid, OperationFailure


def _matches(doc: Dict, filter: Dict) -> bool:
    for field, condition in filter.items():
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if op != "$gt":
                    raise NotImplementedError(f"operator {op} is not supported")
                if not doc[field] > operand:
                    return False
        elif doc.get(field) != condition:
            return False
    return True


class FakeCollection:
    """Collection handle bound to a name in a FakeDatabase."""

    def __init__(self, db: "FakeDatabase", name: str):
        self.database = db
        self.name = name

    @property
    def _docs(self) -> List[Dict]:
        return self.database._collections.setdefault(self.name, [])

    def insert_many(self, documents: List[Dict]):
        for doc in documents:
            doc.setdefault("_id", next(self.database._ids))
        self._docs.extend(documents)

    def find(self, filter: Optional[Dict] = None):
        return iter([doc for doc in self._docs if _matches(doc, filter or {})])

    def delete_many(self, filter: Dict):
        self.database._collections[self.name] = [
            doc for doc in self._docs if not _matches(doc, filter)
        ]

    def count_documents(self, filter: Dict) -> int:
        return sum(1 for doc in self._docs if _matches(doc, filter))

    def drop(self):
        if self.name not in self.database._collections and self.database.strict_drop:
            raise OperationFailure("ns not found", code=26)
        self.database._collections.pop(self.name, None)
        self.database.options.pop(self.name, None)
        self.database.drops.append(self.name)


class FakeDatabase:
    """Holds named collections as lists of documents.

    Attributes:
        strict_drop: raise NamespaceNotFound when dropping a missing collection,
            like older servers do
        options: creation options per collection name
        drops: names passed to drop(), in call order
    """

    # Stored size per document; time series buckets are modelled as half as big
    DOC_BYTES = 64

    def __init__(self, strict_drop: bool = False):
        self.strict_drop = strict_drop
        self._collections: Dict[str, List[Dict]] = {}
        self._ids = itertools.count(1)
        self.options: Dict[str, Dict] = {}
        self.drops: List[str] = []

    def __getitem__(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def create_collection(self, name: str, **kwargs) -> FakeCollection:
        if name in self._collections:
            raise CollectionInvalid(f"collection {name} already exists")
        self._collections[name] = []
        self.options[name] = kwargs
        return FakeCollection(self, name)

    def command(self, command: str, value):
        if command != "collStats":
            raise OperationFailure(f"no such command: '{command}'", code=59)
        docs = self._collections.get(value, [])
        per_doc = self.DOC_BYTES // 2 if "timeseries" in self.options.get(value, {}) else self.DOC_BYTES
        return {"ns": value, "count": len(docs), "size": len(docs) * per_doc}
