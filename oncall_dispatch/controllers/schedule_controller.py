# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Schedule profile and entry endpoints.
Thin HTTP layer — delegates ALL logic to ProfileService / ScheduleService.
"""

from fastapi import APIRouter, Depends, HTTPException

from oncall_dispatch.core.dependencies import get_profile_service, get_schedule_service
from oncall_dispatch.core.errors import DispatchError
from oncall_dispatch.core.security import get_current_owner
from oncall_dispatch.schemas.dispatch import (
    ProfileLinkRequest,
    ProfileResponse,
    ReconcileResponse,
    ScheduleCreateRequest,
    ScheduleEntryResponse,
    ScheduleUpdateRequest,
    UnlinkResponse,
)
from oncall_dispatch.services.profile_service import ProfileService
from oncall_dispatch.services.schedule_service import ScheduleService

router = APIRouter(prefix="/api/v1/schedules", tags=["Schedules"])


# ── Profile (declared before /{entry_id} so "profile" is not taken as an id) ──

@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    owner_id: str = Depends(get_current_owner),
    service: ProfileService = Depends(get_profile_service),
):
    """The caller's phone number link, if any."""
    return service.get_profile(owner_id)


@router.post("/profile", response_model=ProfileResponse)
def link_profile(
    payload: ProfileLinkRequest,
    owner_id: str = Depends(get_current_owner),
    service: ProfileService = Depends(get_profile_service),
):
    """Link the caller to a phone number from the staff directory."""
    try:
        return service.link_profile(owner_id, payload.phone_number)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.delete("/profile", response_model=UnlinkResponse)
def unlink_profile(
    owner_id: str = Depends(get_current_owner),
    service: ProfileService = Depends(get_profile_service),
):
    """Unlink the caller's phone number and remove all their entries."""
    return service.unlink_profile(owner_id)


@router.post(
    "/reconcile",
    response_model=ReconcileResponse,
    dependencies=[Depends(get_current_owner)],
)
def reconcile(
    service: ScheduleService = Depends(get_schedule_service),
):
    """Remove entries left behind by an interrupted unlink."""
    return {"status": "ok", "entries_removed": service.reconcile_orphans()}


# ── Entries ──

@router.get(
    "",
    response_model=list[ScheduleEntryResponse],
    dependencies=[Depends(get_current_owner)],
)
def list_entries(
    service: ScheduleService = Depends(get_schedule_service),
):
    """All schedule entries (visible to everyone)."""
    return service.list_entries()


@router.post("", status_code=201, response_model=ScheduleEntryResponse)
def create_entry(
    payload: ScheduleCreateRequest,
    owner_id: str = Depends(get_current_owner),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Create an entry for the caller."""
    try:
        return service.create_entry(owner_id, payload.model_dump())
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.put("/{entry_id}", response_model=ScheduleEntryResponse)
def update_entry(
    entry_id: str,
    payload: ScheduleUpdateRequest,
    owner_id: str = Depends(get_current_owner),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Partially update one of the caller's entries."""
    try:
        return service.update_entry(
            owner_id, entry_id, payload.model_dump(exclude_unset=True)
        )
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.delete("/{entry_id}")
def delete_entry(
    entry_id: str,
    owner_id: str = Depends(get_current_owner),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Delete one of the caller's entries."""
    try:
        return service.delete_entry(owner_id, entry_id)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
