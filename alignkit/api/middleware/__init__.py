"""API middleware for alignkit."""

from alignkit.api.middleware.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
