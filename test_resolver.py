# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the pure schedule resolver and the schedule/profile services
wired to in-memory repositories.
"""

from datetime import date, timedelta

import pytest

from oncall_dispatch.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    NotLinkedError,
)
from oncall_dispatch.repositories.profile_repository import ProfileRepository
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.repositories.staff_repository import StaffRepository
from oncall_dispatch.services.profile_service import ProfileService
from oncall_dispatch.services.resolver import (
    day_of_week,
    entries_for_date,
    entry_matches,
    split_always,
)
from oncall_dispatch.services.schedule_service import ScheduleService
from oncall_dispatch.services.staff_service import StaffService


def _entry(**fields):
    entry = {
        "id": "e1",
        "owner_id": "alice",
        "phone_number": "+15551230000",
        "start_time": "09:00",
        "end_time": "17:00",
        "day_of_week": None,
        "recurring": False,
        "always": False,
        "date": "2024-06-03",
    }
    entry.update(fields)
    return entry


# ============================================
# Resolver
# ============================================
class TestDayOfWeek:
    def test_sunday_is_zero(self):
        assert day_of_week(date(2024, 6, 2)) == 0

    def test_monday_is_one(self):
        assert day_of_week(date(2024, 6, 3)) == 1

    def test_saturday_is_six(self):
        assert day_of_week(date(2024, 6, 8)) == 6


class TestEntriesForDate:
    def test_always_matches_any_date(self):
        always = _entry(always=True, date="2024-06-03", day_of_week=3)
        for day in (date(1999, 1, 1), date(2024, 1, 1), date(2030, 12, 31)):
            assert entries_for_date(day, [always]) == [always]

    def test_recurring_matches_every_week_from_anchor(self):
        weekly = _entry(recurring=True, day_of_week=1, date="2024-06-03")
        anchor = date(2024, 6, 3)
        for weeks in range(0, 60):
            assert entry_matches(weekly, anchor + timedelta(weeks=weeks))

    def test_recurring_ignores_weeks_before_anchor(self):
        weekly = _entry(recurring=True, day_of_week=1, date="2024-06-03")
        anchor = date(2024, 6, 3)
        for weeks in range(1, 10):
            assert not entry_matches(weekly, anchor - timedelta(weeks=weeks))

    def test_recurring_ignores_other_weekdays(self):
        weekly = _entry(recurring=True, day_of_week=1, date="2024-06-03")
        for offset in range(1, 7):
            assert not entry_matches(weekly, date(2024, 6, 10) + timedelta(days=offset))

    def test_single_entry_matches_only_its_date(self):
        single = _entry(date="2024-06-03", day_of_week=1)
        assert entry_matches(single, date(2024, 6, 3))
        for offset in (-7, -1, 1, 7, 365):
            assert not entry_matches(single, date(2024, 6, 3) + timedelta(days=offset))

    def test_overlaps_are_not_merged(self):
        a = _entry(id="a", recurring=True, day_of_week=1, date="2024-06-03")
        b = _entry(id="b", recurring=True, day_of_week=1, date="2024-05-06",
                   start_time="08:00", end_time="10:00")
        result = entries_for_date(date(2024, 6, 10), [a, b])
        assert [e["id"] for e in result] == ["a", "b"]

    def test_pure_and_repeatable(self):
        entries = [_entry(id=str(i), date=f"2024-06-0{i}") for i in range(1, 8)]
        snapshot = [dict(e) for e in entries]
        first = entries_for_date(date(2024, 6, 4), entries)
        second = entries_for_date(date(2024, 6, 4), entries)
        assert first == second
        assert entries == snapshot

    def test_split_always(self):
        always = _entry(id="a", always=True)
        timed = _entry(id="t")
        assert split_always([timed, always]) == ([always], [timed])


# ============================================
# Services
# ============================================
@pytest.fixture
def repos():
    staff = StaffRepository()
    staff.save({"phone_number": "+15551230000", "active": True})
    staff.save({"phone_number": "+15551230001", "active": True})
    return ScheduleRepository(), ProfileRepository(), staff


@pytest.fixture
def schedule_service(repos):
    schedules, profiles, _ = repos
    return ScheduleService(schedule_repo=schedules, profile_repo=profiles)


@pytest.fixture
def profile_service(repos):
    schedules, profiles, staff = repos
    staff_service = StaffService(
        staff_repo=staff, schedule_repo=schedules, profile_repo=profiles
    )
    return ProfileService(
        profile_repo=profiles, schedule_repo=schedules, staff_service=staff_service
    )


class TestScheduleService:
    def test_not_linked(self, schedule_service):
        with pytest.raises(NotLinkedError):
            schedule_service.create_entry(
                "alice", {"start_time": "09:00", "end_time": "17:00", "date": "2024-06-03"}
            )

    @pytest.mark.parametrize("start,end", [("09:00", "09:00"), ("10:00", "09:00")])
    def test_bad_window(self, schedule_service, profile_service, start, end):
        profile_service.link_profile("alice", "+15551230000")
        with pytest.raises(InvalidInputError):
            schedule_service.create_entry(
                "alice", {"start_time": start, "end_time": end, "date": "2024-06-03"}
            )

    def test_always_conflict(self, schedule_service, profile_service):
        profile_service.link_profile("alice", "+15551230000")
        schedule_service.create_entry("alice", {"always": True})
        with pytest.raises(ConflictError):
            schedule_service.create_entry("alice", {"always": True})

    def test_phone_number_copied_from_profile(self, schedule_service, profile_service):
        profile_service.link_profile("alice", "+15551230001")
        entry = schedule_service.create_entry("alice", {"always": True})
        assert entry["phone_number"] == "+15551230001"

    def test_foreign_update_and_delete_forbidden(self, schedule_service, profile_service):
        profile_service.link_profile("alice", "+15551230000")
        entry = schedule_service.create_entry("alice", {"always": True})
        with pytest.raises(ForbiddenError):
            schedule_service.update_entry("bob", entry["id"], {"date": "2024-01-01"})
        with pytest.raises(ForbiddenError):
            schedule_service.delete_entry("bob", entry["id"])

    def test_unknown_entry(self, schedule_service):
        with pytest.raises(NotFoundError):
            schedule_service.update_entry("alice", "missing", {})
        with pytest.raises(NotFoundError):
            schedule_service.delete_entry("alice", "missing")

    def test_update_ignores_unknown_fields(self, schedule_service, profile_service):
        profile_service.link_profile("alice", "+15551230000")
        entry = schedule_service.create_entry(
            "alice", {"start_time": "09:00", "end_time": "17:00", "date": "2024-06-03"}
        )
        updated = schedule_service.update_entry(
            "alice", entry["id"], {"owner_id": "bob", "always": True, "end_time": "18:00"}
        )
        assert updated["owner_id"] == "alice"
        assert updated["always"] is False
        assert updated["end_time"] == "18:00"

    def test_always_entry_keeps_its_date(self, repos, schedule_service, profile_service):
        schedules, _, _ = repos
        profile_service.link_profile("alice", "+15551230000")
        entry = schedule_service.create_entry("alice", {"always": True})
        for patch in ({"date": None}, {"recurring": None}, {"date": "not-a-date"}):
            with pytest.raises(InvalidInputError):
                schedule_service.update_entry("alice", entry["id"], patch)
        assert schedules.get_by_id(entry["id"]) == entry


class TestProfileService:
    def test_unknown_number(self, profile_service):
        with pytest.raises(NotFoundError):
            profile_service.link_profile("alice", "+15550000000")

    def test_unlink_cascade_then_resolve(self, repos, schedule_service, profile_service):
        schedules, _, _ = repos
        profile_service.link_profile("alice", "+15551230000")
        schedule_service.create_entry("alice", {"always": True})
        schedule_service.create_entry(
            "alice", {"start_time": "09:00", "end_time": "17:00",
                      "date": "2024-06-03", "recurring": True}
        )
        profile_service.unlink_profile("alice")
        for day in (date(2024, 6, 3), date(2024, 6, 10), date(2040, 1, 1)):
            assert [e for e in entries_for_date(day, schedules.get_all())
                    if e["owner_id"] == "alice"] == []

    def test_unlink_twice(self, profile_service):
        profile_service.link_profile("alice", "+15551230000")
        profile_service.unlink_profile("alice")
        assert profile_service.unlink_profile("alice")["entries_removed"] == 0
        assert profile_service.get_profile("alice")["phone_number"] is None
