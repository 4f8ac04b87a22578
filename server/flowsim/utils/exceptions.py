"""
Centralized exception handling utilities for the HTTP layer.

Validation and simulation report problems as data; these helpers only cover
request-level faults (unknown resources, unexpected server errors).
"""

import inspect
import logging
import traceback
from functools import wraps
from typing import Callable
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class ErrorResponse:
    """Factory for creating standardized HTTPException responses."""

    @staticmethod
    def not_found(resource: str) -> HTTPException:
        """Create a 404 not found error response."""
        return HTTPException(status_code=404, detail=f"{resource} not found")


def handle_api_errors(
    default_status: int = 500,
    log_errors: bool = True
):
    """
    Decorator for consistent error handling in API endpoints.

    HTTPException passes through untouched; anything else is logged and
    converted to an HTTPException with ``default_status``.

    Usage:
        @handle_api_errors(default_status=500)
        async def my_endpoint():
            ...
    """
    def decorator(func: Callable):
        def _convert(e: Exception) -> HTTPException:
            if log_errors:
                logger.error(f"Unexpected error in {func.__name__}: {str(e)}\n{traceback.format_exc()}")
            return HTTPException(
                status_code=default_status,
                detail=f"Internal error: {str(e)}"
            )

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _convert(e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _convert(e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
