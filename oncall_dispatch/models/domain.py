# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain constants — pure data, NO FastAPI dependency.
"""

# Zero-padded HH:MM, so string ordering equals chronological ordering.
TIME_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
PHONE_PATTERN = r"^\+?[0-9]{7,15}$"

# Always-on-call entries span the whole day.
ALWAYS_START_TIME = "00:00"
ALWAYS_END_TIME = "23:59"

# Fields an owner may change on an existing entry.
PATCHABLE_FIELDS: tuple[str, ...] = (
    "start_time",
    "end_time",
    "recurring",
    "day_of_week",
    "date",
)

# Patchable fields that must always hold a value; day_of_week may be cleared.
NON_NULLABLE_FIELDS: tuple[str, ...] = (
    "start_time",
    "end_time",
    "recurring",
    "date",
)
