"""
Client Records Backend: Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions mapped to HTTP responses.
Why:   Services raise domain errors; global handlers registered in main.py
       turn them into JSON error bodies with the right status code.
How:   Each exception class carries a message and optional context dict.
       The message is safe to return to clients; the context is only logged.

Exception Hierarchy:
    ClientRecordsError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error ("query failed")
"""

from typing import Any, Dict, Optional


class ClientRecordsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
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


class NotFoundError(ClientRecordsError):
    """
    Raised when a requested row does not exist.

    When:    PUT, DELETE or GET /test/{id} with an id that matches no row.
    HTTP:    404 Not Found

    SQLAlchemy returns None (or an empty RETURNING set) for missing rows; the
    service layer converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ClientRecordsError):
    """
    Raised when a statement fails to execute.

    What:    The single "query failed" error kind of this service.
    When:    Connection lost, constraint violation, database unreachable, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always the same static text.
    Driver error details are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
