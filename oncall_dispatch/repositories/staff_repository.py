# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Staff directory data access (``staff`` collection).
Keyed by phone number. NO business rules here — pure CRUD.
"""

from typing import Any, Optional


class StaffRepository:
    """In-memory staff directory."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return [dict(s) for s in self._store.values()]

    def get_by_phone_number(self, phone_number: str) -> Optional[dict[str, Any]]:
        staff = self._store.get(phone_number)
        return dict(staff) if staff is not None else None

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, staff: dict[str, Any]) -> None:
        self._store[staff["phone_number"]] = dict(staff)

    def set_active(self, phone_number: str, active: bool) -> bool:
        staff = self._store.get(phone_number)
        if staff is None:
            return False
        staff["active"] = active
        return True

    def delete(self, phone_number: str) -> bool:
        return self._store.pop(phone_number, None) is not None

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
