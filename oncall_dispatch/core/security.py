# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Caller identity — resolves the owner id from the SSO session cookie.
"""

from fastapi import Depends, HTTPException, Request, status

from oncall_dispatch.core.config import settings
from oncall_dispatch.core.dependencies import get_sso_client
from oncall_dispatch.core.errors import DispatchError
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.services.sso_client import SSOClient

logger = get_logger(__name__)


def get_current_owner(
    request: Request,
    sso: SSOClient = Depends(get_sso_client),
) -> str:
    """Exchange the access-token cookie for the caller's owner id."""
    access_token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not access_token:
        logger.warning("No %s cookie on %s", settings.AUTH_COOKIE_NAME, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Unauthorized: No {settings.AUTH_COOKIE_NAME} cookie found",
        )
    try:
        return sso.resolve_owner(access_token)
    except DispatchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
