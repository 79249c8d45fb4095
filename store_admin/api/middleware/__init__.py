"""
Middleware package for FastAPI application.
"""

from store_admin.api.middleware.logging_middleware import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
