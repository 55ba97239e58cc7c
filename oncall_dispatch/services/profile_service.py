# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule profiles — links a caller identity to a staff phone number.
"""

from datetime import datetime, timezone
from typing import Any

from oncall_dispatch.core.errors import NotFoundError
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import (
    ENTRIES_DELETED,
    PROFILES_LINKED,
    PROFILES_UNLINKED,
    SCHEDULE_ENTRIES,
)
from oncall_dispatch.repositories.profile_repository import ProfileRepository
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.services.staff_service import StaffService

logger = get_logger(__name__)


class ProfileService:
    """Business logic for linking and unlinking schedule profiles."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        schedule_repo: ScheduleRepository,
        staff_service: StaffService,
    ) -> None:
        self._profiles = profile_repo
        self._schedules = schedule_repo
        self._staff = staff_service

    def get_profile(self, owner_id: str) -> dict[str, Any]:
        """The caller's profile, or an unlinked placeholder."""
        profile = self._profiles.get(owner_id)
        if profile is None:
            return {"owner_id": owner_id, "phone_number": None}
        return profile

    def link_profile(self, owner_id: str, phone_number: str) -> dict[str, Any]:
        """Upsert the profile. Raises NotFoundError if the number isn't staff."""
        if self._staff.find_by_phone_number(phone_number) is None:
            raise NotFoundError("Phone number not found in staff directory")

        now = datetime.now(timezone.utc).isoformat()
        profile = self._profiles.upsert(owner_id, phone_number, now)

        PROFILES_LINKED.inc()
        logger.info("Profile linked: owner=%s, phone=%s", owner_id, phone_number)
        return profile

    def unlink_profile(self, owner_id: str) -> dict[str, Any]:
        """
        Remove every entry the owner holds, then the profile itself.
        Two separate writes: a crash in between leaves a profile with no
        entries, never entries without a profile. Unlinking twice is a no-op.
        """
        removed = self._schedules.delete_by_owner(owner_id)
        existed = self._profiles.delete(owner_id)

        if removed:
            ENTRIES_DELETED.labels(reason="unlink").inc(removed)
            SCHEDULE_ENTRIES.set(self._schedules.count())
        if existed:
            PROFILES_UNLINKED.inc()
            logger.info("Profile unlinked: owner=%s, entries_removed=%d", owner_id, removed)
        return {
            "status": "unlinked",
            "owner_id": owner_id,
            "entries_removed": removed,
        }
