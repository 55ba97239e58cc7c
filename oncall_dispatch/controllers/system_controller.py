# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from oncall_dispatch.core.config import settings
from oncall_dispatch.core.dependencies import (
    get_profile_repo,
    get_schedule_repo,
    get_staff_repo,
)
from oncall_dispatch.core.logging import get_logger

router = APIRouter(tags=["System"])
logger = get_logger(__name__)


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness probe — verifies the store answers."""
    try:
        counts = {
            "schedules_count": get_schedule_repo().count(),
            "profiles_count": get_profile_repo().count(),
            "staff_count": get_staff_repo().count(),
        }
    except Exception as exc:
        logger.error("Readiness check failed: %s", exc)
        raise HTTPException(status_code=503, detail=f"Store unavailable: {exc}")
    return {"status": "ready", "service": settings.SERVICE_NAME, **counts}


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
