# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Schedule entry data access (``schedules`` collection).
Encapsulates all read/write operations on the in-memory store.
NO business rules here — pure CRUD.
"""

from typing import Any, Optional


class ScheduleRepository:
    """In-memory schedule entry storage, keyed by entry id."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return [dict(e) for e in self._store.values()]

    def get_by_id(self, entry_id: str) -> Optional[dict[str, Any]]:
        entry = self._store.get(entry_id)
        return dict(entry) if entry is not None else None

    def find_always(self, owner_id: str) -> Optional[dict[str, Any]]:
        for entry in self._store.values():
            if entry["owner_id"] == owner_id and entry.get("always"):
                return dict(entry)
        return None

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, entry: dict[str, Any]) -> None:
        self._store[entry["id"]] = dict(entry)

    def update(self, entry_id: str, fields: dict[str, Any]) -> Optional[dict[str, Any]]:
        entry = self._store.get(entry_id)
        if entry is None:
            return None
        entry.update(fields)
        return dict(entry)

    def delete(self, entry_id: str) -> Optional[dict[str, Any]]:
        return self._store.pop(entry_id, None)

    def delete_by_owner(self, owner_id: str) -> int:
        ids = [k for k, e in self._store.items() if e["owner_id"] == owner_id]
        for k in ids:
            del self._store[k]
        return len(ids)

    def delete_by_phone_number(self, phone_number: str) -> int:
        ids = [k for k, e in self._store.items() if e["phone_number"] == phone_number]
        for k in ids:
            del self._store[k]
        return len(ids)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
