# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Outbound SMS via the Twilio Messages API.
One attempt per message; failures are logged and reported, never retried.
"""

from typing import Any

import httpx

from oncall_dispatch.core.logging import get_logger
from oncall_dispatch.metrics.prometheus import SMS_SENT

logger = get_logger(__name__)


class TwilioSMSClient:
    """Sends SMS from a fixed outbound number using API key credentials."""

    def __init__(
        self,
        account_sid: str,
        api_token: str,
        api_secret: str,
        from_number: str,
        base_url: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 10.0,
    ) -> None:
        self._account_sid = account_sid
        self._api_token = api_token
        self._api_secret = api_secret
        self._from_number = from_number
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return all(
            (self._account_sid, self._api_token, self._api_secret, self._from_number)
        )

    def _messages_url(self) -> str:
        return f"{self._base_url}/Accounts/{self._account_sid}/Messages.json"

    def send(self, to: str, body: str) -> dict[str, Any]:
        """Send one message and return a delivery record for ``to``."""
        if not self.configured:
            logger.info("[MOCK SMS] To: %s | Body: %s", to, body)
            SMS_SENT.labels(status="mock").inc()
            return {"to": to, "status": "mock"}

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    self._messages_url(),
                    data={"To": to, "From": self._from_number, "Body": body},
                    auth=(self._api_token, self._api_secret),
                )
        except httpx.HTTPError as exc:
            logger.error("SMS to %s failed: %s", to, exc)
            SMS_SENT.labels(status="failed").inc()
            return {"to": to, "status": "failed", "error": str(exc)}

        if resp.status_code >= 400:
            logger.warning("Twilio returned %s for SMS to %s", resp.status_code, to)
            SMS_SENT.labels(status="failed").inc()
            return {
                "to": to,
                "status": "failed",
                "error": f"Twilio returned {resp.status_code}",
            }

        # Twilio accepted the message; an unreadable body only costs us the sid
        try:
            sid = (resp.json() or {}).get("sid")
        except ValueError:
            logger.warning("Twilio returned a non-JSON body for SMS to %s", to)
            sid = None
        SMS_SENT.labels(status="sent").inc()
        logger.info("SMS sent: to=%s, sid=%s", to, sid)
        return {"to": to, "status": "sent", "sid": sid}
