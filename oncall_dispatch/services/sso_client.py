# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: SSO access-token exchange — turns a session cookie into an owner id.
"""

from typing import Optional

import httpx

from oncall_dispatch.core.cache import TTLCache
from oncall_dispatch.core.errors import UnauthorizedError, UpstreamError
from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import AUTH_EXCHANGES

logger = get_logger(__name__)

TOKEN_EXCHANGE_PATH = "/webman/sso/SSOAccessToken.cgi"


class SSOClient:
    """Exchanges access tokens with the SSO provider, memoizing the result."""

    def __init__(
        self,
        base_url: str,
        app_id: str,
        timeout: float,
        cache: TTLCache,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._app_id = app_id
        self._timeout = timeout
        self._cache = cache

    def resolve_owner(self, access_token: str) -> str:
        """
        Return the opaque identity behind ``access_token``.
        Raises UnauthorizedError for rejected tokens, UpstreamError when the
        provider is unreachable or misconfigured.
        """
        return self._cache.get_or_compute(
            access_token, lambda: self._exchange(access_token)
        )

    def forget(self, access_token: Optional[str] = None) -> None:
        """Drop one cached identity, or all of them."""
        self._cache.invalidate(access_token)

    def _exchange(self, access_token: str) -> str:
        if not self._base_url:
            raise UpstreamError("SSO provider is not configured")

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.get(
                    f"{self._base_url}{TOKEN_EXCHANGE_PATH}",
                    params={
                        "action": "exchange",
                        "app_id": self._app_id,
                        "access_token": access_token,
                    },
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            AUTH_EXCHANGES.labels(outcome="error").inc()
            logger.error("SSO token exchange failed: %s", exc)
            raise UpstreamError("SSO token exchange failed")

        if resp.status_code != 200:
            AUTH_EXCHANGES.labels(outcome="error").inc()
            logger.error("SSO token exchange returned %s", resp.status_code)
            raise UpstreamError("SSO token exchange failed")

        try:
            payload = resp.json()
        except ValueError:
            AUTH_EXCHANGES.labels(outcome="error").inc()
            logger.error("SSO token exchange returned a non-JSON body")
            raise UpstreamError("SSO token exchange failed")

        if not payload or not payload.get("success"):
            AUTH_EXCHANGES.labels(outcome="rejected").inc()
            logger.warning("SSO rejected access token: %s", (payload or {}).get("error"))
            raise UnauthorizedError("Unauthorized: Invalid access token")

        data = payload.get("data") or {}
        owner_id = data.get("user_id") or data.get("user_name")
        if owner_id is None:
            AUTH_EXCHANGES.labels(outcome="rejected").inc()
            raise UnauthorizedError("Unauthorized: Invalid access token")

        AUTH_EXCHANGES.labels(outcome="ok").inc()
        return str(owner_id)
