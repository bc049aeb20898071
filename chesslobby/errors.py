"""Error taxonomy surfaced at the HTTP boundary.

Every failure in the service is one of these; the app maps each to a distinct
status code. Server-side errors (5xx) never expose their internal detail.
"""


class ServerError(Exception):
    status_code = 500
    default_detail = "Internal server error"
    public_detail: str | None = None

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def response_detail(self) -> str:
        return self.public_detail or self.detail


class Unauthenticated(ServerError):
    status_code = 401
    default_detail = "Missing or invalid authentication"


class Forbidden(ServerError):
    status_code = 403
    default_detail = "Not allowed to access this resource"


class NotFound(ServerError):
    status_code = 404
    default_detail = "Not found"


class Conflict(ServerError):
    status_code = 409
    default_detail = "Already exists"


class ValidationError(ServerError):
    status_code = 422
    default_detail = "Invalid request"


class AssemblyError(ServerError):
    """A challenge row does not reference the user it was assembled with."""

    public_detail = "Internal server error"


class StoreError(ServerError):
    status_code = 503
    public_detail = "Database temporarily unavailable"


class DecodeError(ValueError):
    pass
