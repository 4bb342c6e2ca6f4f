"""
Application exceptions.

Every error carries the HTTP status it maps to, so the API layer can render
it as an ``ErrorResponse`` without knowing about individual failure modes.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UniversityNotFoundError(ApplicationError):
    """Raised when no live university record has the requested id"""

    status_code = 404

    def __init__(self, university_id: int):
        super().__init__("Not found", {"university_id": university_id})


class InvalidFilterError(ApplicationError):
    """Raised when a list filter value cannot be cast to its column type"""

    status_code = 400

    def __init__(self, field: str, value):
        super().__init__(f"Invalid filter value for {field}", {"field": field, "value": value})


class InvalidOperationError(ApplicationError):
    """Raised when an update is not allowed in the record's current state"""

    status_code = 400


class ImmutableFieldError(ApplicationError):
    """Raised when an already assigned identifier is overwritten"""

    status_code = 400

    def __init__(self, field: str, current, attempted):
        super().__init__(
            f"{field} is immutable once assigned",
            {"field": field, "current": current, "attempted": attempted},
        )


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        super().__init__(message, {"operation": operation})
