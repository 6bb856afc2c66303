"""Base HTTP client with lazy initialization and context manager support."""

import logging
from typing import Optional

import httpx

from .context import ContextManager

logger = logging.getLogger(__name__)


class BaseHttpClient(ContextManager):
    """
    Base HTTP client with lazy initialization.

    Provides:
    - Lazy httpx.Client initialization
    - Explicit timeout and default headers
    - Redirects followed (renamed editions such as bat-smg answer 301)
    - Context manager support
    - Pluggable transport (tests pass an httpx.MockTransport)
    """

    def __init__(
        self,
        timeout: float,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None
            logger.debug("HTTP client closed")
