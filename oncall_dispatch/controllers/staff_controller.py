# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Staff directory endpoints.
Thin HTTP layer — delegates ALL logic to StaffService.
"""

from fastapi import APIRouter, Depends, HTTPException

from oncall_dispatch.core.dependencies import get_staff_service
from oncall_dispatch.core.errors import DispatchError
from oncall_dispatch.core.security import get_current_owner
from oncall_dispatch.schemas.dispatch import (
    StaffCreateRequest,
    StaffResponse,
    StaffUpdateRequest,
)
from oncall_dispatch.services.staff_service import StaffService

router = APIRouter(
    prefix="/api/v1/staff",
    tags=["Staff"],
    dependencies=[Depends(get_current_owner)],
)


@router.get("", response_model=list[StaffResponse])
def list_staff(service: StaffService = Depends(get_staff_service)):
    return service.list_staff()


@router.post("", status_code=201, response_model=StaffResponse)
def add_staff(
    payload: StaffCreateRequest,
    service: StaffService = Depends(get_staff_service),
):
    try:
        return service.add_staff(payload.phone_number)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.put("/{phone_number}", response_model=StaffResponse)
def set_staff_active(
    phone_number: str,
    payload: StaffUpdateRequest,
    service: StaffService = Depends(get_staff_service),
):
    """Activate or deactivate a staff member for paging."""
    try:
        return service.set_active(phone_number, payload.active)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.delete("/{phone_number}")
def remove_staff(
    phone_number: str,
    service: StaffService = Depends(get_staff_service),
):
    """Remove a staff member and everything scheduled under the number."""
    try:
        return service.remove_staff(phone_number)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
