# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Typed domain errors.

Services raise these; controllers turn them into HTTPException using the
attached status code. Anything else bubbles up to the global 500 handler.
"""


class DispatchError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500

    def __init__(self, detail: str = "Internal error"):
        self.detail = detail
        super().__init__(detail)


class InvalidInputError(DispatchError):
    """Missing or malformed fields (400)."""

    status_code = 400


class NotLinkedError(DispatchError):
    """Caller has no schedule profile yet (400)."""

    status_code = 400

    def __init__(self, detail: str = "Please link your phone number first"):
        super().__init__(detail)


class ForbiddenError(DispatchError):
    """Caller does not own the resource (403)."""

    status_code = 403


class NotFoundError(DispatchError):
    """Resource not found (404)."""

    status_code = 404


class ConflictError(DispatchError):
    """Duplicate or conflicting resource (409)."""

    status_code = 409


class UnauthorizedError(DispatchError):
    """Missing or rejected credentials (401)."""

    status_code = 401


class UpstreamError(DispatchError):
    """A third-party API (SSO, Twilio) failed or returned garbage (502)."""

    status_code = 502
