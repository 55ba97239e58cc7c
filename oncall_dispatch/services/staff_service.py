# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Staff directory — phone numbers eligible for on-call and paging.
"""

from typing import Any, Optional

from oncall_dispatch.core.errors import ConflictError, NotFoundError
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import ENTRIES_DELETED, SCHEDULE_ENTRIES
from oncall_dispatch.repositories.profile_repository import ProfileRepository
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.repositories.staff_repository import StaffRepository

logger = get_logger(__name__)


class StaffService:
    """Business logic for the staff directory."""

    def __init__(
        self,
        staff_repo: StaffRepository,
        schedule_repo: ScheduleRepository,
        profile_repo: ProfileRepository,
    ) -> None:
        self._staff = staff_repo
        self._schedules = schedule_repo
        self._profiles = profile_repo

    # ── Queries ──

    def list_staff(self) -> list[dict[str, Any]]:
        return self._staff.get_all()

    def find_by_phone_number(self, phone_number: str) -> Optional[dict[str, Any]]:
        return self._staff.get_by_phone_number(phone_number)

    # ── Commands ──

    def add_staff(self, phone_number: str) -> dict[str, Any]:
        """Add an active staff member. Raises ConflictError on duplicates."""
        if self._staff.get_by_phone_number(phone_number) is not None:
            raise ConflictError("Phone number already exists")
        staff = {"phone_number": phone_number, "active": True}
        self._staff.save(staff)
        logger.info("Staff added: phone=%s", phone_number)
        return staff

    def set_active(self, phone_number: str, active: bool) -> dict[str, Any]:
        if not self._staff.set_active(phone_number, active):
            raise NotFoundError("Phone number not found")
        logger.info("Staff updated: phone=%s, active=%s", phone_number, active)
        return {"phone_number": phone_number, "active": active}

    def remove_staff(self, phone_number: str) -> dict[str, Any]:
        """
        Remove a staff member along with any schedule entries and profiles
        still pointing at the number.
        """
        if not self._staff.delete(phone_number):
            raise NotFoundError("Phone number not found")

        entries_removed = self._schedules.delete_by_phone_number(phone_number)
        profiles_removed = self._profiles.delete_by_phone_number(phone_number)
        if entries_removed:
            ENTRIES_DELETED.labels(reason="staff_removed").inc(entries_removed)
            SCHEDULE_ENTRIES.set(self._schedules.count())
        logger.info(
            "Staff removed: phone=%s, entries_removed=%d, profiles_removed=%d",
            phone_number, entries_removed, profiles_removed,
        )
        return {
            "status": "removed",
            "phone_number": phone_number,
            "entries_removed": entries_removed,
            "profiles_removed": profiles_removed,
        }
