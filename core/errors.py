"""Exceptions raised by the translation pipeline and settings store."""

from typing import Any


class WtError(Exception):
    """Base class for all wt errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class TransportError(WtError):
    """Could not reach a Wikipedia endpoint (connection, timeout, HTTP status)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url} if url else None)
        self.url = url


class ProtocolError(WtError):
    """Response does not have the expected shape."""

    def __init__(self, message: str, observed: Any = None):
        super().__init__(message, {"observed": observed})
        self.observed = observed


class NotFoundError(WtError):
    """Well-formed response with zero matches."""

    def __init__(self, term: str, lang: str | None = None):
        where = f" on {lang}.wikipedia.org" if lang else ""
        super().__init__(f'No results for "{term}"{where}', {"term": term, "lang": lang})
        self.term = term
        self.lang = lang


class ConfigError(WtError):
    """Settings file exists but cannot be read or parsed."""

    def __init__(self, path: str, error: str):
        super().__init__(
            f"Cannot read settings from {path}: {error}. "
            "Fix or delete the file to restore defaults.",
            {"path": path, "error": error},
        )
        self.path = path
