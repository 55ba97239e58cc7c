# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Schedule profile data access (``schedule_profiles`` collection).
One profile per owner id. NO business rules here — pure CRUD.
"""

from typing import Any, Optional


class ProfileRepository:
    """In-memory profile storage, keyed by owner id."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    # ── Read ──

    def get(self, owner_id: str) -> Optional[dict[str, Any]]:
        profile = self._store.get(owner_id)
        return dict(profile) if profile is not None else None

    def owner_ids(self) -> set[str]:
        return set(self._store)

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def upsert(self, owner_id: str, phone_number: str, now: str) -> dict[str, Any]:
        """Insert or overwrite; ``created_at`` is only set on first write."""
        existing = self._store.get(owner_id)
        profile = {
            "owner_id": owner_id,
            "phone_number": phone_number,
            "created_at": existing["created_at"] if existing else now,
            "updated_at": now,
        }
        self._store[owner_id] = profile
        return dict(profile)

    def delete(self, owner_id: str) -> bool:
        return self._store.pop(owner_id, None) is not None

    def delete_by_phone_number(self, phone_number: str) -> int:
        owners = [k for k, p in self._store.items() if p["phone_number"] == phone_number]
        for k in owners:
            del self._store[k]
        return len(owners)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
