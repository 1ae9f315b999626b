"""Exception hierarchy for the planner service."""

from typing import Dict, Optional


class PlannerError(Exception):
    """Base exception for all planner-specific errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(PlannerError):
    """Base class for rejected input."""
    pass


class MissingRoomLabelError(ValidationError):
    """Raised when a room-label table does not cover every room key."""
    pass


class UnsupportedLanguageError(ValidationError):
    """Raised when no built-in label table exists for a language."""
    pass


class ExportError(PlannerError):
    """Raised when an explication document cannot be produced."""
    pass
