"""
Palette Picker Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the three failure kinds a request can hit.
Why:   Handlers raise; one place (the global exception handlers in main.py)
       turns each kind into its status code and `{"error": ...}` body.
How:   Each exception carries a message (returned to the client) and an
       optional context dict (logged server-side only).
Who:   Raised by validators and services; caught by global handlers.

Exception Hierarchy:
    PalettePickerError (base)
    ├── ValidationError   → 422 Unprocessable Entity (required field missing)
    ├── NotFoundError     → 404 Not Found (no row with that id)
    └── DatabaseError     → 500 Internal Server Error (store call rejected)

There are no retries anywhere: a store failure is surfaced immediately.
"""

from typing import Any, Dict, Optional


class PalettePickerError(Exception):
    """
    Base exception for all Palette Picker application errors.

    Attributes:
        message:  Error text returned to the client as `{"error": message}`
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PalettePickerError):
    """
    Raised when a request payload is missing a required field.

    HTTP: 422 Unprocessable Entity

    The message names the expected shape and the first missing field, e.g.
        "The expected format is: { id: <Number> }. You are missing the id property."
    The full list of missing fields travels in context["missing"].
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PalettePickerError):
    """
    Raised when no row matches the requested id.

    HTTP: 404 Not Found

    Each entity words its message differently, so callers pass the
    final message text; resource and id are kept for logging.
    """

    def __init__(
        self,
        message: str,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PalettePickerError):
    """
    Raised when the underlying database call rejects.

    HTTP: 500 Internal Server Error

    The driver's own error text is passed through as the message and ends up
    in the response body unchanged; operation details go to context.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: Exception, **context: Any) -> "DatabaseError":
        """Wrap a SQLAlchemy/driver exception, keeping the driver's own text."""
        original = getattr(exc, "orig", None) or exc
        context["error_type"] = type(exc).__name__
        return cls(message=str(original), context=context)
