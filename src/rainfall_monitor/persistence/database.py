"""Database adapter (MongoDB) for the shared rainfall record.

Items keep the `{id, data, timestamp}` shape served by `GET /data/{id}`;
`timestamp` is the write time in epoch milliseconds.
"""
from __future__ import annotations

import time
from typing import Dict, List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from rainfall_monitor.config import settings
from rainfall_monitor.logger import get_logger
from .schemas import create_collection_with_validation

log = get_logger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class ScadaDatabase:
    """MongoDB operations for shared dashboard records."""

    def __init__(self, client: Optional[MongoClient] = None, db_name: Optional[str] = None,
                 collection_name: Optional[str] = None):
        if client is None:
            base_uri = settings.MONGODB_URL
            username = settings.MONGO_INITDB_ROOT_USERNAME
            password = settings.MONGO_INITDB_ROOT_PASSWORD
            if username and password:
                self.uri = f"mongodb://{username}:{password}@{base_uri}"
            else:
                self.uri = f"mongodb://{base_uri}"
            # Fail fast when no server is reachable
            client = MongoClient(self.uri, serverSelectionTimeoutMS=2000)
        self.client = client
        self.db = self.client[db_name or settings.MONGODB_NAME]
        self.collection_name = collection_name or settings.SCADA_COLLECTION
        self.records: Collection = self.db[self.collection_name]

    def initialize(self) -> None:
        """Create the validated collection and its indexes (idempotent)."""
        create_collection_with_validation(self.db, self.collection_name)
        self.records.create_index("id", unique=True)
        self.records.create_index("timestamp")

    def get_record(self, record_id: str) -> Optional[Dict]:
        return self.records.find_one({"id": record_id}, {"_id": 0})

    def put_record(self, record_id: str, data: Dict) -> Dict:
        """Replace (or create) the record and stamp it with the write time."""
        item = {"id": record_id, "data": data, "timestamp": now_ms()}
        self.records.replace_one({"id": record_id}, dict(item), upsert=True)
        log.info(f"Stored record {record_id} at {item['timestamp']}")
        return item

    def delete_record(self, record_id: str) -> bool:
        result = self.records.delete_one({"id": record_id})
        return result.deleted_count > 0

    def list_record_ids(self) -> List[str]:
        return [doc["id"] for doc in self.records.find({}, {"_id": 0, "id": 1}).sort("id")]

    def close(self):
        self.client.close()
