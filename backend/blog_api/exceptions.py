"""
Blog API Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the few error scenarios the service has.
How:   Each exception carries a message, an HTTP status code and an optional
       context dict. Global exception handlers (registered in main.py) catch
       these and answer with `{"error": <message>}`.
Who:   Raised by the store client and the blog service; caught by global handlers.

Exception Hierarchy:
    BlogServiceError (base)
    ├── ValidationError   → 400 Bad Request (body is not a blog-shaped object)
    ├── NotFoundError     → 404 Not Found   (delete of an unknown id)
    └── DatabaseError     → 500 by default; 400 when an insert is rejected

Messages are the raw store/driver text. The service does no domain-level
classification of store failures.
"""

from typing import Any, Dict, Optional


class BlogServiceError(Exception):
    """
    Base exception for all blog service errors.

    Attributes:
        message:      Error text returned to the client as the `error` field
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged, not returned)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogServiceError):
    """
    Raised when a create request body cannot be stored as a blog post.

    When:    Body is not a JSON object, or a field has a non-string, non-numeric value.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Blog validation failed: author: Input should be a valid string"}
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


class NotFoundError(BlogServiceError):
    """
    Raised when a delete targets an id that matches no document.

    HTTP:    404 Not Found, body is always `{"error": "Not found"}`.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "blog",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)


class DatabaseError(BlogServiceError):
    """
    Raised when a document store operation fails.

    What:    Wraps a driver exception (connection refused, server selection
             timeout, malformed ObjectId, write rejected, ...).
    HTTP:    500 Internal Server Error; create passes status_code=400.

    The message is the driver's own text, passed through verbatim.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=status_code, context=context)
