"""Utility functions and helper classes."""

from .exceptions import (
    ErrorResponse,
    handle_api_errors
)

from .general import (
    format_sse_data,
    random_delay
)

__all__ = [
    # Exception handling
    'ErrorResponse',
    'handle_api_errors',
    # General utilities
    'format_sse_data',
    'random_delay'
]
