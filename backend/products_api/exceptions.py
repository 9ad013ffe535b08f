"""
Products API: Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the transport and persistence layers.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into structured
       JSON error responses with the matching HTTP status code.
Who:   Raised by the product service and the SQL store; caught by handlers.

Exception Hierarchy:
    ProductsApiError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Note:
    Stores never raise for a missing product. get_by_id returns None and
    update/delete are no-ops; only the service layer turns a None from
    get_by_id into NotFoundError.
"""

from typing import Any, Dict, Optional


class ProductsApiError(Exception):
    """
    Base exception for all Products API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for 5xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ProductsApiError):
    """
    Raised when client input fails a business rule.

    HTTP: 400 Bad Request. Schema-level problems (wrong types, missing
    fields) are still reported by FastAPI as 422.
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


class NotFoundError(ProductsApiError):
    """
    Raised when a requested resource does not exist.

    When:  GET /api/products/{id} for an id that is not live.
    HTTP:  404 Not Found
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


class DatabaseError(ProductsApiError):
    """
    Raised when the SQL store fails unexpectedly.

    HTTP: 500 Internal Server Error. The message sent to the client is
    always generic; the SQLAlchemy error type is kept in `context` and
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
