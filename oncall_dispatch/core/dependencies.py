# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories, clients and services.
Configuration flows in from ``settings`` here and nowhere else.
"""

from oncall_dispatch.core.cache import TTLCache
from oncall_dispatch.core.config import settings
from oncall_dispatch.repositories.profile_repository import ProfileRepository
from oncall_dispatch.repositories.schedule_repository import ScheduleRepository
from oncall_dispatch.repositories.staff_repository import StaffRepository
from oncall_dispatch.services.oncall_service import OnCallService
from oncall_dispatch.services.profile_service import ProfileService
from oncall_dispatch.services.schedule_service import ScheduleService
from oncall_dispatch.services.sms_client import TwilioSMSClient
from oncall_dispatch.services.sso_client import SSOClient
from oncall_dispatch.services.staff_service import StaffService

# ── Singleton repository instances ──
if settings.MONGO_URI:
    from oncall_dispatch.repositories.mongo import (
        MongoProfileRepository,
        MongoScheduleRepository,
        MongoStaffRepository,
        connect,
    )

    _db = connect(settings.MONGO_URI, settings.MONGO_DB_NAME)
    _schedule_repo = MongoScheduleRepository(_db["schedules"])
    _profile_repo = MongoProfileRepository(_db["schedule_profiles"])
    _staff_repo = MongoStaffRepository(_db["staff"])
else:
    _schedule_repo = ScheduleRepository()
    _profile_repo = ProfileRepository()
    _staff_repo = StaffRepository()

# ── Outbound clients ──
_sms_client = TwilioSMSClient(
    account_sid=settings.TWILIO_ACCOUNT_SID,
    api_token=settings.TWILIO_API_TOKEN,
    api_secret=settings.TWILIO_API_SECRET,
    from_number=settings.TWILIO_OUTBOUND_NUMBER,
    base_url=settings.TWILIO_BASE_URL,
    timeout=settings.TWILIO_TIMEOUT,
)
_sso_client = SSOClient(
    base_url=settings.SSO_URL,
    app_id=settings.SSO_APP_ID,
    timeout=settings.SSO_TIMEOUT,
    cache=TTLCache(settings.AUTH_CACHE_TTL, settings.AUTH_CACHE_SIZE),
)

# ── Service instances (with injected dependencies) ──
_schedule_service = ScheduleService(
    schedule_repo=_schedule_repo,
    profile_repo=_profile_repo,
)
_staff_service = StaffService(
    staff_repo=_staff_repo,
    schedule_repo=_schedule_repo,
    profile_repo=_profile_repo,
)
_profile_service = ProfileService(
    profile_repo=_profile_repo,
    schedule_repo=_schedule_repo,
    staff_service=_staff_service,
)
_oncall_service = OnCallService(
    schedule_repo=_schedule_repo,
    staff_repo=_staff_repo,
    sms_client=_sms_client,
)


# ── FastAPI dependency functions ──
def get_schedule_service() -> ScheduleService:
    return _schedule_service


def get_profile_service() -> ProfileService:
    return _profile_service


def get_staff_service() -> StaffService:
    return _staff_service


def get_oncall_service() -> OnCallService:
    return _oncall_service


def get_sso_client() -> SSOClient:
    return _sso_client


def get_schedule_repo() -> ScheduleRepository:
    return _schedule_repo


def get_profile_repo() -> ProfileRepository:
    return _profile_repo


def get_staff_repo() -> StaffRepository:
    return _staff_repo
