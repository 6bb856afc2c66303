"""
Pytest configuration for wt tests.

Provides an isolated settings/log directory per test and a Wikipedia client
backed by httpx.MockTransport, so no test touches the network or the real
user configuration.

Usage:
    pytest testing/
    pytest testing/test_settings.py
"""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from core.config import WikiConfig
from core.logging import end_run, start_run
from core.settings import SettingsStore
from wiki_tools.wikipedia import WikipediaClient

AARDVARK_URL = "https://en.wikipedia.org/wiki/Aardvark"

AARDVARK_OPENSEARCH = ["aardvark", ["Aardvark"], [""], [AARDVARK_URL]]

AARDVARK_LANGLINKS = {
    "batchcomplete": "",
    "query": {
        "pages": {
            "19571": {
                "pageid": 19571,
                "ns": 0,
                "title": "Aardvark",
                "langlinks": [
                    {
                        "lang": "fr",
                        "url": "https://fr.wikipedia.org/wiki/Oryct%C3%A9rope",
                        "*": "Oryctérope",
                    },
                    {
                        "lang": "es",
                        "url": "https://es.wikipedia.org/wiki/Oricteropo",
                        "*": "Oricteropo",
                    },
                ],
            }
        }
    },
}


@pytest.fixture(autouse=True)
def logging_run(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Rotate logs at test module boundaries."""
    test_path = request.node.nodeid.split("::")[0]
    test_name = test_path.replace("/", "-").replace(".py", "")
    start_run(f"test-{test_name}")
    yield
    end_run()


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point settings and logs at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("WT_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("WT_LOG_DIR", str(tmp_path / "logs"))
    return config_dir


@pytest.fixture
def settings_store(isolated_config_dir: Path) -> SettingsStore:
    return SettingsStore(isolated_config_dir / "settings.json")


class FakeWikipedia:
    """Routes MediaWiki API requests to canned JSON payloads.

    Payloads are keyed by the `action` query parameter. A callable payload
    receives the request and returns an httpx.Response (or raises).
    """

    def __init__(self) -> None:
        self.payloads: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        action = request.url.params.get("action", "")
        payload = self.payloads.get(action)
        if payload is None:
            return httpx.Response(404, text=f"no payload for action={action}")
        if callable(payload):
            return payload(request)
        return httpx.Response(200, content=json.dumps(payload).encode("utf-8"))

    def client(self, config: WikiConfig | None = None) -> WikipediaClient:
        config = config or WikiConfig(timeout=5.0, user_agent="wt-tests")
        return WikipediaClient(config=config, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_wikipedia() -> FakeWikipedia:
    fake = FakeWikipedia()
    fake.payloads["opensearch"] = AARDVARK_OPENSEARCH
    fake.payloads["query"] = AARDVARK_LANGLINKS
    return fake


@pytest.fixture
def wiki_client(fake_wikipedia: FakeWikipedia) -> Generator[WikipediaClient, None, None]:
    with fake_wikipedia.client() as client:
        yield client


def raising(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    """Payload that makes the transport raise exc."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return handler
