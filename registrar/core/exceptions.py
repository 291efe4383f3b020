"""
Custom exceptions for the Registrar application.
"""


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistrarException):
    """Raised when input is missing or malformed."""
    status_code = 400


class AuthError(RegistrarException):
    """Raised when credentials do not match a known account."""
    status_code = 401


class NotFoundError(RegistrarException):
    """Raised when a requested student record does not exist."""
    status_code = 404


class ConflictError(RegistrarException):
    """Raised when a unique key is already taken."""
    status_code = 409


class InternalError(RegistrarException):
    """Raised for unexpected failures; the message is safe to show callers."""
    status_code = 500

    def __init__(self, message: str = "Internal server error."):
        super().__init__(message)


class PersistenceError(RegistrarException):
    """Raised when persistence operations fail."""
    pass


class DuplicateEntityError(PersistenceError):
    """Raised when a write violates a unique index."""
    pass


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
