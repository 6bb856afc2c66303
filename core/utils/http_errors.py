"""HTTP error handling utilities."""

import logging
from typing import Any

import httpx

from core.errors import TransportError

logger = logging.getLogger(__name__)


def safe_http_request(
    client: httpx.Client,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    """
    Make HTTP request with consistent error handling.

    Args:
        client: httpx.Client instance
        method: HTTP method (GET, POST, etc.)
        url: Absolute request URL
        **kwargs: Additional arguments for request

    Returns:
        Response object

    Raises:
        TransportError: On HTTP status, timeout or connection errors
    """
    try:
        response = client.request(method, url, **kwargs)
        response.raise_for_status()
        return response
    except httpx.ConnectError as e:
        logger.error(f"Connection failed to {url}: {e}")
        raise TransportError(f"Connection failed: {e}", url) from e
    except httpx.TimeoutException as e:
        logger.error(f"Request timeout for {url}: {e}")
        raise TransportError(f"Request timeout: {e}", url) from e
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP {e.response.status_code} error for {url}")
        raise TransportError(f"HTTP {e.response.status_code}: {e.response.text}", url) from e
    except httpx.HTTPError as e:
        logger.error(f"Unexpected error for {url}: {e}")
        raise TransportError(f"Request failed: {e}", url) from e
