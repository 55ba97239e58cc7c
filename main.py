# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
On-Call Dispatch Service
========================
Staff directory, per-user on-call schedule entries (single day, weekly
recurring, always), date-based on-call resolution and SMS paging.

Layout:
    controllers/   thin HTTP layer
    services/      business logic (resolver is pure)
    repositories/  in-memory or MongoDB collections
    core/          config, logging, errors, cache, DI, caller identity

Port: 4000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from oncall_dispatch.controllers import (
    oncall_controller,
    schedule_controller,
    staff_controller,
    system_controller,
)
from oncall_dispatch.core.config import settings
from oncall_dispatch.core.dependencies import get_schedule_service
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


@asynccontextmanager
async def lifespan(application: FastAPI):
    if settings.RECONCILE_ON_STARTUP:
        removed = get_schedule_service().reconcile_orphans()
        logger.info("Startup reconciliation removed %d orphaned entries", removed)
    logger.info("%s v%s started", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="On-Call Dispatch Service",
    description="On-call schedules, staff directory and SMS paging.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": "Internal Server Error"},
    )


app.include_router(system_controller.router)
app.include_router(schedule_controller.router)
app.include_router(oncall_controller.router)
app.include_router(staff_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
