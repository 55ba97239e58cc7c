# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule entry management — business logic for entry CRUD.
Coordinates repository writes with validation, ownership and metrics.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Any, Optional

from oncall_dispatch.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    NotLinkedError,
)
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import (
    ENTRIES_CREATED,
    ENTRIES_DELETED,
    SCHEDULE_ENTRIES,
)
from oncall_dispatch.models.domain import (
    ALWAYS_END_TIME,
    ALWAYS_START_TIME,
    NON_NULLABLE_FIELDS,
    PATCHABLE_FIELDS,
)
from oncall_dispatch.repositories.profile_repository import ProfileRepository
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.services.resolver import day_of_week

logger = get_logger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid date '{value}', expected YYYY-MM-DD")


def _validate_window(start_time: Any, end_time: Any, day: Any) -> None:
    """Timed entries need start, end and date, with start strictly before end."""
    if not start_time or not end_time or not day:
        raise InvalidInputError("start_time, end_time, and date are required")
    if start_time >= end_time:
        raise InvalidInputError("End time must be after start time")
    _parse_date(day)


class ScheduleService:
    """Business logic for on-call schedule entries."""

    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        profile_repo: ProfileRepository,
    ) -> None:
        self._schedules = schedule_repo
        self._profiles = profile_repo

    # ── Commands ──

    def create_entry(self, owner_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and persist a new entry for ``owner_id``.
        Raises NotLinkedError, InvalidInputError or ConflictError.
        """
        profile = self._profiles.get(owner_id)
        if profile is None:
            raise NotLinkedError()

        is_always = bool(data.get("always") or False)
        recurring = bool(data.get("recurring") or False)
        entry_day_of_week: Optional[int] = data.get("day_of_week")

        if is_always:
            if self._schedules.find_always(owner_id) is not None:
                raise ConflictError("Already marked as always on-call")
            start_time, end_time = ALWAYS_START_TIME, ALWAYS_END_TIME
            entry_date = datetime.now(timezone.utc).date().isoformat()
        else:
            start_time = data.get("start_time")
            end_time = data.get("end_time")
            entry_date = data.get("date")
            _validate_window(start_time, end_time, entry_date)
            if recurring and entry_day_of_week is None:
                entry_day_of_week = day_of_week(_parse_date(entry_date))

        entry: dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "owner_id": owner_id,
            "phone_number": profile["phone_number"],
            "start_time": start_time,
            "end_time": end_time,
            "day_of_week": entry_day_of_week,
            "recurring": recurring,
            "always": is_always,
            "date": entry_date,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self._schedules.save(entry)

        ENTRIES_CREATED.labels(kind=self._kind(entry)).inc()
        SCHEDULE_ENTRIES.set(self._schedules.count())
        logger.info(
            "Schedule entry created: id=%s, owner=%s, kind=%s, date=%s",
            entry["id"], owner_id, self._kind(entry), entry_date,
        )
        return entry

    def update_entry(
        self, owner_id: str, entry_id: str, patch: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Apply a partial update to an entry the caller owns.
        The merged entry is validated with the same rules as creation.
        """
        entry = self._get_owned(owner_id, entry_id, action="modify")

        fields = {k: patch[k] for k in PATCHABLE_FIELDS if k in patch}
        if not fields:
            return entry

        nulls = sorted(k for k in NON_NULLABLE_FIELDS if k in fields and fields[k] is None)
        if nulls:
            raise InvalidInputError(f"{', '.join(nulls)} cannot be null")

        if entry.get("always"):
            if "start_time" in fields or "end_time" in fields:
                raise InvalidInputError("Always on-call entries have fixed hours")
            if "date" in fields:
                _parse_date(fields["date"])
        else:
            merged = {**entry, **fields}
            _validate_window(merged["start_time"], merged["end_time"], merged["date"])
            # A moved anchor date moves the weekday unless one is given
            date_moved = "date" in fields and "day_of_week" not in fields
            if merged.get("recurring") and (
                merged.get("day_of_week") is None or date_moved
            ):
                fields["day_of_week"] = day_of_week(_parse_date(merged["date"]))

        if "recurring" in fields:
            fields["recurring"] = bool(fields["recurring"])

        updated = self._schedules.update(entry_id, fields)
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError("Schedule not found")
        logger.info(
            "Schedule entry updated: id=%s, owner=%s, fields=%s",
            entry_id, owner_id, sorted(fields),
        )
        return updated

    def delete_entry(self, owner_id: str, entry_id: str) -> dict[str, str]:
        """Delete an entry the caller owns. Raises NotFoundError / ForbiddenError."""
        self._get_owned(owner_id, entry_id, action="delete")
        self._schedules.delete(entry_id)

        ENTRIES_DELETED.labels(reason="owner").inc()
        SCHEDULE_ENTRIES.set(self._schedules.count())
        logger.info("Schedule entry deleted: id=%s, owner=%s", entry_id, owner_id)
        return {"status": "deleted", "id": entry_id}

    def reconcile_orphans(self) -> int:
        """
        Delete entries whose owner no longer has a profile.
        Safe to run repeatedly; returns the number of entries removed.
        """
        owners = self._profiles.owner_ids()
        orphans = [e for e in self._schedules.get_all() if e["owner_id"] not in owners]
        for entry in orphans:
            self._schedules.delete(entry["id"])
        if orphans:
            ENTRIES_DELETED.labels(reason="orphan").inc(len(orphans))
            SCHEDULE_ENTRIES.set(self._schedules.count())
            logger.warning("Reconciled %d orphaned schedule entries", len(orphans))
        return len(orphans)

    # ── Queries ──

    def list_entries(self) -> list[dict[str, Any]]:
        return self._schedules.get_all()

    def get_entry(self, entry_id: str) -> dict[str, Any]:
        entry = self._schedules.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError("Schedule not found")
        return entry

    # ── Internal ──

    def _get_owned(self, owner_id: str, entry_id: str, action: str) -> dict[str, Any]:
        entry = self.get_entry(entry_id)
        if entry["owner_id"] != owner_id:
            logger.warning(
                "Forbidden schedule %s: id=%s, owner=%s, caller=%s",
                action, entry_id, entry["owner_id"], owner_id,
            )
            raise ForbiddenError(f"Cannot {action} another user's schedule")
        return entry

    @staticmethod
    def _kind(entry: dict[str, Any]) -> str:
        if entry.get("always"):
            return "always"
        return "recurring" if entry.get("recurring") else "single"
