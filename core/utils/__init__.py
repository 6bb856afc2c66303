"""Core utilities for HTTP clients and error handling."""

from .context import ContextManager
from .http_client import BaseHttpClient
from .http_errors import safe_http_request

__all__ = [
    "ContextManager",
    "BaseHttpClient",
    "safe_http_request",
]
