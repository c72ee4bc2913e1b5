"""
Selerara Dashboard API — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions raised by the service layer.
Why:   Routes stay free of try/except; global handlers registered in
       main.py turn each exception type into its response shape.
How:   Each exception carries a message and an optional context dict.

Exception Hierarchy:
    SeleraraError (base)
    ├── DatabaseError             → 500 {"error": message}
    └── DatabaseUnavailableError  → 500 {"status": "ERROR", "message": message}

The only failure this service has is the database failing. The message sent
to the client is the driver's own message (what the dashboard front-end shows
in its error banner); context is logged server-side only.
"""

from typing import Any, Dict, Optional


class SeleraraError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description returned in the API response
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

    @classmethod
    def from_exception(cls, exc: Exception, **context: Any) -> "SeleraraError":
        """
        Wraps a driver/SQLAlchemy exception, keeping the driver's message.

        SQLAlchemy's DBAPIError string includes the SQL statement and a link to
        its docs; the wrapped driver exception (`orig`) carries just the
        server's message, e.g. "(1146, \"Table 'selerara.review' doesn't exist\")".
        """
        orig = getattr(exc, "orig", None)
        message = str(orig) if orig is not None else str(exc)
        context.setdefault("error_type", type(exc).__name__)
        return cls(message=message or type(exc).__name__, context=context)


class DatabaseError(SeleraraError):
    """
    Raised when a query fails.

    When:    Connection refused, unknown table/column, lost connection mid-query.
    HTTP:    500 Internal Server Error, body {"error": message}
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseUnavailableError(SeleraraError):
    """
    Raised by the database health probe when no connection can be made.

    HTTP:    500 Internal Server Error, body {"status": "ERROR", "message": message}
    """

    def __init__(
        self,
        message: str = "Database connection failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
