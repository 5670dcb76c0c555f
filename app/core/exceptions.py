"""Domain and infrastructure exceptions. Each class knows its HTTP status and error code."""


class AircraftSystemError(Exception):
    """Base exception for all aircraft system errors."""

    status_code: int = 500
    code: str = "internal"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(AircraftSystemError):
    """Requested entity does not exist."""

    status_code = 404
    code = "not_found"


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "user not found") -> None:
        super().__init__(message)


class PlaneNotFoundError(NotFoundError):
    def __init__(self, message: str = "plane not found") -> None:
        super().__init__(message)


class PartNotFoundError(NotFoundError):
    def __init__(self, message: str = "plane part not found") -> None:
        super().__init__(message)


class AlreadyExistsError(AircraftSystemError):
    """Uniqueness violation (name, tail number, serial number)."""

    status_code = 409
    code = "already_exists"


class UserExistsError(AlreadyExistsError):
    def __init__(self, message: str = "user already exists") -> None:
        super().__init__(message)


class PlaneExistsError(AlreadyExistsError):
    def __init__(self, message: str = "plane with this tail number already exists") -> None:
        super().__init__(message)


class PartExistsError(AlreadyExistsError):
    def __init__(
        self, message: str = "plane part with this serial number already exists"
    ) -> None:
        super().__init__(message)


class ConflictError(AircraftSystemError):
    """Operation conflicts with the current state of related records."""

    status_code = 409
    code = "conflict"


class PlaneHasPartsError(ConflictError):
    def __init__(
        self, message: str = "plane still has installed parts; delete them first"
    ) -> None:
        super().__init__(message)


class InvalidInputError(AircraftSystemError):
    """Malformed or out-of-range request payload."""

    status_code = 400
    code = "invalid_input"


class UsageExceedsLimitError(AircraftSystemError):
    """New usage hours are above the part's certified limit."""

    status_code = 400
    code = "usage_exceeds_limit"

    def __init__(self, message: str = "usage hours cannot exceed limit") -> None:
        super().__init__(message)


class UnauthenticatedError(AircraftSystemError):
    """No principal could be resolved for the request."""

    status_code = 401
    code = "unauthenticated"

    def __init__(self, message: str = "authentication required") -> None:
        super().__init__(message)


class InvalidCredentialsError(UnauthenticatedError):
    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


class InvalidTokenError(UnauthenticatedError):
    def __init__(self, message: str = "invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(UnauthenticatedError):
    def __init__(self, message: str = "token has expired") -> None:
        super().__init__(message)


class ForbiddenError(AircraftSystemError):
    """Principal is authenticated but its role is insufficient."""

    status_code = 403
    code = "forbidden"

    def __init__(self, message: str = "insufficient permissions") -> None:
        super().__init__(message)


class StoreError(AircraftSystemError):
    """Store call failed; message carries the operation name and the cause."""

    status_code = 500
    code = "internal"


class DuplicateRecordError(StoreError):
    """Unique index rejected a write that passed the application pre-check."""


class StoreUnavailableError(AircraftSystemError):
    """No database is configured for this process."""

    status_code = 503
    code = "store_unavailable"

    def __init__(self, message: str = "database is not configured") -> None:
        super().__init__(message)
