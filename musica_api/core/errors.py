"""Service exceptions and the HTTP status each one maps to."""


class ServiceError(Exception):
    """Base error carrying a client-safe message and an HTTP status code."""

    status_code = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class DuplicateUsernameError(ServiceError):
    """Signup attempted with a username that is already registered."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Missing or invalid token, or bad login credentials."""

    status_code = 401


class InvalidTokenError(AuthenticationError):
    """Token failed signature, structure, claims or expiry checks."""


class PermissionDeniedError(ServiceError):
    """Authenticated caller lacks the role the route requires."""

    status_code = 403


class StoreError(ServiceError):
    """Unexpected failure from the database layer."""

    status_code = 500
