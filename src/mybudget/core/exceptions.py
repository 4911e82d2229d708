"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class UnauthorizedError(AppError):
    """Raised when a caller has no valid credential for an owner-scoped route."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class ValidationError(AppError):
    """Raised when a transaction payload breaks a creation rule. Reported as 401, not 400."""

    status_code = 401

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")


class ConflictError(AppError):
    """Raised when a delete would leave dependent records behind."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class InternalFaultError(AppError):
    """Raised when the persistence layer fails on a transaction read or edit."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="INTERNAL_ERROR")
