# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, StrictBool

from oncall_dispatch.models.domain import DATE_PATTERN, PHONE_PATTERN, TIME_PATTERN


# ── Profile Schemas ──

class ProfileLinkRequest(BaseModel):
    phone_number: str = Field(
        ..., pattern=PHONE_PATTERN, description="Staff phone number to link"
    )


class ProfileResponse(BaseModel):
    owner_id: str
    phone_number: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class UnlinkResponse(BaseModel):
    status: str
    owner_id: str
    entries_removed: int


# ── Schedule Entry Schemas ──

class ScheduleCreateRequest(BaseModel):
    """Body for POST /api/v1/schedules. Times are ignored for always entries."""
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN, examples=["09:00"])
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN, examples=["17:00"])
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN, examples=["2024-06-03"])
    day_of_week: Optional[int] = Field(
        default=None, ge=0, le=6, description="0=Sunday .. 6=Saturday"
    )
    recurring: bool = False
    always: bool = False


class ScheduleUpdateRequest(BaseModel):
    """Partial update model for PUT /api/v1/schedules/{id}."""
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    recurring: Optional[bool] = None


class ScheduleEntryResponse(BaseModel):
    id: str
    owner_id: str
    phone_number: str
    start_time: str
    end_time: str
    day_of_week: Optional[int] = None
    recurring: bool
    always: bool
    date: str
    created_at: str


class ReconcileResponse(BaseModel):
    status: str
    entries_removed: int


# ── On-Call Schemas ──

class OnCallResponse(BaseModel):
    date: str
    day_of_week: int
    always: list[ScheduleEntryResponse]
    entries: list[ScheduleEntryResponse]


class PageRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=1600)
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)


class PageResponse(BaseModel):
    date: str
    message: str
    recipients: int
    delivered: int
    skipped_inactive: list[str]
    deliveries: list[dict[str, Any]]


# ── Staff Schemas ──

class StaffCreateRequest(BaseModel):
    phone_number: str = Field(..., pattern=PHONE_PATTERN)


class StaffUpdateRequest(BaseModel):
    active: StrictBool


class StaffResponse(BaseModel):
    phone_number: str
    active: bool
