class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class SessionStateError(DomainError):
    """Raised when a session operation is called from the wrong state."""


class StaleSessionError(DomainError):
    """Raised when the active session record is no longer in the collection.

    Callers should re-run the session restore against the current records.
    """

    def __init__(self, record_id: str):
        super().__init__(f"Attendance record {record_id} no longer exists")
        self.record_id = record_id
