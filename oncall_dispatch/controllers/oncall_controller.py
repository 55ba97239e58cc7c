# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: On-call lookup and paging endpoints.
Thin HTTP layer — delegates ALL logic to OnCallService.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from oncall_dispatch.core.dependencies import get_oncall_service
from oncall_dispatch.core.security import get_current_owner
from oncall_dispatch.models.domain import DATE_PATTERN
from oncall_dispatch.schemas.dispatch import OnCallResponse, PageRequest, PageResponse
from oncall_dispatch.services.oncall_service import OnCallService

router = APIRouter(
    prefix="/api/v1/oncall",
    tags=["On-Call"],
    dependencies=[Depends(get_current_owner)],
)


def _parse_day(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date '{value}'")


@router.get("", response_model=OnCallResponse)
def get_oncall(
    day: Optional[str] = Query(
        default=None, alias="date", pattern=DATE_PATTERN,
        description="YYYY-MM-DD, defaults to today (UTC)",
    ),
    service: OnCallService = Depends(get_oncall_service),
):
    """Who is on-call on the given date."""
    return service.oncall_for_date(_parse_day(day))


@router.post("/page", response_model=PageResponse)
def page_oncall(
    payload: PageRequest,
    service: OnCallService = Depends(get_oncall_service),
):
    """Text everyone on-call for the date (default today)."""
    return service.page_oncall(payload.message, _parse_day(payload.date))
