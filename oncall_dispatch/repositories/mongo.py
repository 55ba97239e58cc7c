# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: MongoDB-backed implementations of the three collections.
Same method surface as the in-memory repositories; selected in
core/dependencies.py when MONGO_URI is configured.
Each call is an individual document operation — no transactions.
"""

from typing import Any, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from oncall_dispatch.core.logging import get_logger

logger = get_logger(__name__)


def connect(uri: str, db_name: str):
    """Open a client and return the database handle."""
    client = MongoClient(uri)
    logger.info("MongoDB connected: db=%s", db_name)
    return client[db_name]


def _strip(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if doc is None:
        return None
    doc = dict(doc)
    doc.pop("_id", None)
    return doc


class MongoScheduleRepository:
    """``schedules`` collection; ``_id`` mirrors the entry id."""

    def __init__(self, collection: Collection) -> None:
        self._col = collection

    def get_all(self) -> list[dict[str, Any]]:
        return [_strip(d) for d in self._col.find({})]

    def get_by_id(self, entry_id: str) -> Optional[dict[str, Any]]:
        return _strip(self._col.find_one({"_id": entry_id}))

    def find_always(self, owner_id: str) -> Optional[dict[str, Any]]:
        return _strip(self._col.find_one({"owner_id": owner_id, "always": True}))

    def count(self) -> int:
        return self._col.count_documents({})

    def save(self, entry: dict[str, Any]) -> None:
        self._col.insert_one({"_id": entry["id"], **entry})

    def update(self, entry_id: str, fields: dict[str, Any]) -> Optional[dict[str, Any]]:
        result = self._col.update_one({"_id": entry_id}, {"$set": fields})
        if result.matched_count == 0:
            return None
        return self.get_by_id(entry_id)

    def delete(self, entry_id: str) -> Optional[dict[str, Any]]:
        return _strip(self._col.find_one_and_delete({"_id": entry_id}))

    def delete_by_owner(self, owner_id: str) -> int:
        return self._col.delete_many({"owner_id": owner_id}).deleted_count

    def delete_by_phone_number(self, phone_number: str) -> int:
        return self._col.delete_many({"phone_number": phone_number}).deleted_count

    def clear(self) -> None:
        self._col.delete_many({})


class MongoProfileRepository:
    """``schedule_profiles`` collection, one document per owner id."""

    def __init__(self, collection: Collection) -> None:
        self._col = collection

    def get(self, owner_id: str) -> Optional[dict[str, Any]]:
        return _strip(self._col.find_one({"owner_id": owner_id}))

    def owner_ids(self) -> set[str]:
        return set(self._col.distinct("owner_id"))

    def count(self) -> int:
        return self._col.count_documents({})

    def upsert(self, owner_id: str, phone_number: str, now: str) -> dict[str, Any]:
        self._col.update_one(
            {"owner_id": owner_id},
            {
                "$set": {
                    "owner_id": owner_id,
                    "phone_number": phone_number,
                    "updated_at": now,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )
        return self.get(owner_id)

    def delete(self, owner_id: str) -> bool:
        return self._col.delete_one({"owner_id": owner_id}).deleted_count == 1

    def delete_by_phone_number(self, phone_number: str) -> int:
        return self._col.delete_many({"phone_number": phone_number}).deleted_count

    def clear(self) -> None:
        self._col.delete_many({})


class MongoStaffRepository:
    """``staff`` collection, unique by phone number."""

    def __init__(self, collection: Collection) -> None:
        self._col = collection

    def get_all(self) -> list[dict[str, Any]]:
        return [_strip(d) for d in self._col.find({})]

    def get_by_phone_number(self, phone_number: str) -> Optional[dict[str, Any]]:
        return _strip(self._col.find_one({"phone_number": phone_number}))

    def count(self) -> int:
        return self._col.count_documents({})

    def save(self, staff: dict[str, Any]) -> None:
        self._col.insert_one(dict(staff))

    def set_active(self, phone_number: str, active: bool) -> bool:
        result = self._col.update_one(
            {"phone_number": phone_number}, {"$set": {"active": active}}
        )
        return result.matched_count > 0

    def delete(self, phone_number: str) -> bool:
        return self._col.delete_one({"phone_number": phone_number}).deleted_count > 0

    def clear(self) -> None:
        self._col.delete_many({})
