"""Service-level error taxonomy, mapped to HTTP responses by the handlers in app.main."""


class ServiceError(Exception):
    """Base error raised by service functions; carries a human-readable message and HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationFailure(ServiceError):
    """Malformed or inconsistent input."""

    status_code = 400


class AuthFailure(ServiceError):
    """Bad credentials or unusable token on an auth endpoint."""

    status_code = 401


class AccessDenied(ServiceError):
    """Anonymous caller or insufficient role for the route."""

    status_code = 403

    def __init__(
        self,
        message: str = "Access Denied: You do not have the necessary permissions to access this resource.",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code)


class NotFound(ServiceError):
    """Referenced entity does not exist."""

    status_code = 404


class Conflict(ServiceError):
    """Request conflicts with current state (e.g. no rooms left, duplicate email)."""

    status_code = 409
