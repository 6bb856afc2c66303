"""HTTP client for the MediaWiki action API."""

import logging
from typing import Any, Optional

import httpx

from core.config import WikiConfig, get_wiki_config
from core.errors import ProtocolError
from core.utils import BaseHttpClient, safe_http_request

logger = logging.getLogger(__name__)


class WikipediaClient(BaseHttpClient):
    """
    Synchronous client for per-language Wikipedia API endpoints.

    Example:
        with WikipediaClient() as client:
            payload = client.get_json("en", {"action": "opensearch", "search": "aardvark"})
    """

    def __init__(
        self,
        config: Optional[WikiConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or get_wiki_config()
        super().__init__(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            transport=transport,
        )

    def get_json(self, lang: str, params: dict[str, str]) -> Any:
        """GET the API endpoint for lang and decode the JSON body.

        Raises:
            TransportError: Request failed or returned an error status
            ProtocolError: Body is not valid JSON
        """
        url = self.config.api_url(lang)
        logger.debug(f"GET {url} {params}")
        response = safe_http_request(self._get_client(), "GET", url, params=params)
        try:
            return response.json()
        except ValueError as e:
            snippet = response.text[:200]
            raise ProtocolError(f"Failed to parse response: {e}", snippet) from e
