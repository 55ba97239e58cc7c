# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: On-call lookups and paging.
Resolves who is on-call for a date and texts them on demand.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import ONCALL_LOOKUPS
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.repositories.staff_repository import StaffRepository
from oncall_dispatch.services.resolver import day_of_week, entries_for_date, split_always
from oncall_dispatch.services.sms_client import TwilioSMSClient

logger = get_logger(__name__)


class OnCallService:
    """Business logic for on-call resolution and paging."""

    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        staff_repo: StaffRepository,
        sms_client: TwilioSMSClient,
    ) -> None:
        self._schedules = schedule_repo
        self._staff = staff_repo
        self._sms = sms_client

    def oncall_for_date(self, day: Optional[date] = None) -> dict[str, Any]:
        """
        Entries active on ``day`` (default: today, UTC), with always-on-call
        entries listed separately from time-ranged ones.
        """
        day = day or datetime.now(timezone.utc).date()
        ONCALL_LOOKUPS.inc()
        always, timed = split_always(entries_for_date(day, self._schedules.get_all()))
        return {
            "date": day.isoformat(),
            "day_of_week": day_of_week(day),
            "always": always,
            "entries": sorted(timed, key=lambda e: (e["start_time"], e["end_time"])),
        }

    def page_oncall(self, message: str, day: Optional[date] = None) -> dict[str, Any]:
        """
        Text every distinct, active staff number on-call for ``day``.
        Each recipient gets one attempt; the summary reports each outcome.
        """
        oncall = self.oncall_for_date(day)
        recipients: list[str] = []
        skipped: list[str] = []
        for entry in oncall["always"] + oncall["entries"]:
            phone = entry["phone_number"]
            if phone in recipients or phone in skipped:
                continue
            staff = self._staff.get_by_phone_number(phone)
            if staff is None or not staff.get("active", False):
                skipped.append(phone)
                continue
            recipients.append(phone)

        deliveries = [self._sms.send(phone, message) for phone in recipients]
        sent = sum(1 for d in deliveries if d["status"] in ("sent", "mock"))
        logger.info(
            "Paged on-call: date=%s, recipients=%d, delivered=%d, skipped=%d",
            oncall["date"], len(recipients), sent, len(skipped),
        )
        return {
            "date": oncall["date"],
            "message": message,
            "recipients": len(recipients),
            "delivered": sent,
            "skipped_inactive": skipped,
            "deliveries": deliveries,
        }
