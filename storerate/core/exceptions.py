"""
Application exceptions.
Expected validation failures are returned as error collections; these are
reserved for callers that ask for the raising variant and for persistence faults.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.__class__.__name__


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class BusinessRuleViolationException(AppError):
    """Business logic violation error."""
    def __init__(self, message: str = "Business rule violation", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class RecordInvalidException(BusinessRuleViolationException):
    """Raised by SaveResult.unwrap() when the record failed validation."""
    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class PersistenceException(AppError):
    """Database rejected a write (constraint violation, lost race)."""
    def __init__(self, message: str = "Could not persist record", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
