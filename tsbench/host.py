"""
Disposable MongoDB server for the duration of a benchmark run.
"""

from typing import Dict, Optional

import pymongo
from pymongo import MongoClient
from pymongo_inmemory import Mongod
from pymongo_inmemory.context import Context


class EphemeralMongo:
    """
    Starts a throwaway ``mongod`` and yields one client connected to it.

    Usage:
        with EphemeralMongo("7.0") as client:
            db = client["testDb"]

    The client is closed and the server stopped on every exit path.
    """

    def __init__(self, mongo_version: Optional[str] = None):
        self.mongo_version = mongo_version
        self.mongod: Optional[Mongod] = None
        self.client: Optional[MongoClient] = None

    def __enter__(self) -> MongoClient:
        self.mongod = Mongod(Context(version=self.mongo_version))
        try:
            self.mongod.start()
            self.client = MongoClient(self.mongod.connection_string)
            self.client.admin.command("ping")
        except BaseException:
            self.close()
            raise
        return self.client

    def __exit__(self, *args):
        self.close()

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
        if self.mongod is not None:
            mongod, self.mongod = self.mongod, None
            # start() may fail before the process is spawned
            if getattr(mongod, "_proc", None) is not None:
                mongod.stop()


def server_info(client: MongoClient) -> Dict[str, str]:
    """Server and driver versions for the run header."""
    build_info = client.admin.command("buildInfo")
    return {
        "server_version": build_info["version"],
        "driver_version": pymongo.version,
    }
