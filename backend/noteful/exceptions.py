"""
Noteful Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios the API knows about.
Why:   Route handlers raise these instead of building error responses by hand;
       global exception handlers (registered in main.py) turn them into the
       uniform `{"error": {"message": ...}}` body with the right status code.
How:   Each exception carries a client-safe message and an optional context
       dict that is logged but only returned in development mode.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged, returned only in development)
        status_code:  HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when a request body is missing a required field or has none of
    the fields an update accepts.

    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "Missing 'name' in request body"}}
    """

    status_code = 400

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


class NotFoundError(NotefulError):
    """
    Raised when a requested folder or note does not exist.

    HTTP:    404 Not Found

    The gateway returns None for missing rows; handlers convert that into
    this exception with the entity's fixed message ("Folder does not exist",
    "Note Not Found").
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Resource not found",
        resource: Optional[str] = None,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NotefulError):
    """
    Raised when a database statement fails unexpectedly.

    What:    Store unreachable, constraint violation, missing table, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        In production the response body is always generic. The context
        (operation, table, original error) is logged server-side.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
