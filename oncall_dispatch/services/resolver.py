# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule resolution — pure computation, no side effects.
"""

from datetime import date
from typing import Any, Iterable


def day_of_week(day: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def entry_matches(entry: dict[str, Any], day: date) -> bool:
    """True when ``entry`` puts its owner on-call on ``day``."""
    if entry.get("always"):
        return True
    day_str = day.isoformat()
    if entry.get("recurring"):
        # Weekly from the anchor date onward, open-ended
        return entry.get("day_of_week") == day_of_week(day) and day_str >= entry["date"]
    return entry.get("date") == day_str


def entries_for_date(
    day: date,
    entries: Iterable[dict[str, Any]],
) -> list[dict[str, Any]]:
    """
    Return the entries active on ``day``, in input order.
    Overlapping entries are all returned; time ranges are not merged.
    """
    return [e for e in entries if entry_matches(e, day)]


def split_always(
    entries: Iterable[dict[str, Any]],
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Separate always-on-call entries from time-ranged ones."""
    always: list[dict[str, Any]] = []
    timed: list[dict[str, Any]] = []
    for e in entries:
        (always if e.get("always") else timed).append(e)
    return always, timed
