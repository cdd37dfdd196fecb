"""
Error types raised by the lookup services.

Every error carries the HTTP status the proxy answers with and the
``{error, details}`` body it renders. Routes never catch these; a single
exception handler in ``carcheck.main`` turns them into responses.
"""


class CarCheckError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}


class InvalidPlateError(CarCheckError):
    """Missing or malformed registration plate."""

    status_code = 400


class UpstreamStatusError(CarCheckError):
    """Upstream answered with a non-success HTTP status; relayed as-is."""


class UpstreamPayloadError(CarCheckError):
    """Upstream answered 2xx but the body was not usable JSON."""

    status_code = 500


class UpstreamUnavailableError(CarCheckError):
    """Network or client failure while calling the upstream provider."""

    status_code = 500
