"""Exception types raised by the Comrade data layer."""


class ComradeError(RuntimeError):
    """Base exception for data layer failures.

    Errors carry a human-readable message only; callers log them and leave
    their state unchanged.
    """


class NotLoggedInError(ComradeError):
    """Raised when a mutation requires a session user and none exists."""

    def __init__(self, message: str = "No user logged in") -> None:
        super().__init__(message)


class NotFoundError(ComradeError):
    """Raised when a referenced entity does not exist in its collection."""


class InvalidReferenceError(ComradeError):
    """Raised when a record points at an entity it may not reference."""


class BiometricAuthError(ComradeError):
    """Raised when a required biometric prompt does not succeed."""


class InvalidQRCodeError(ValueError):
    """Raised when a scanned payload cannot identify a comrade."""
