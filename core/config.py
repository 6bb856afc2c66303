"""wt configuration and environment setup.

This module provides centralized configuration for the wt tool, including
development mode detection, the Wikipedia API endpoint, request timeout and
the per-user configuration directory.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit

from dotenv import load_dotenv

load_dotenv()

APP_NAME = "wt"
APP_VERSION = "0.1.0"

DEFAULT_API_URL_TEMPLATE = "https://{lang}.wikipedia.org/w/api.php"
DEFAULT_TIMEOUT = 10.0


def is_dev_mode() -> bool:
    """Check if running in development mode.

    Returns:
        True if WT_MODE is set to 'dev', False otherwise.
    """
    return os.getenv("WT_MODE", "prod").lower() == "dev"


def user_config_dir() -> Path:
    """Locate the per-user configuration root for this platform.

    Follows the usual conventions: %APPDATA% on Windows,
    ~/Library/Application Support on macOS, and $XDG_CONFIG_HOME
    (falling back to ~/.config) elsewhere.

    Raises:
        RuntimeError: If no home directory can be determined. This is an
            environment problem, not a runtime data error.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise RuntimeError("%APPDATA% is not defined")
        return Path(appdata)

    home = os.environ.get("HOME")
    if not home:
        raise RuntimeError("$HOME is not defined")

    if sys.platform == "darwin":
        return Path(home) / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path(home) / ".config"


def app_config_dir() -> Path:
    """Directory holding wt's own files (settings, logs).

    WT_CONFIG_DIR overrides the platform default.
    """
    override = os.environ.get("WT_CONFIG_DIR")
    if override:
        return Path(override)
    return user_config_dir() / APP_NAME


def _validate_url_template(template: str) -> str:
    """Abort early if the API URL template cannot produce a usable URL."""
    try:
        sample = template.format(lang="en")
    except (KeyError, IndexError, ValueError) as e:
        raise RuntimeError(f"Invalid API URL template {template!r}: {e}") from e
    parts = urlsplit(sample)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise RuntimeError(f"Invalid API URL template {template!r}")
    return template


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable, aborting on a malformed value."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be a number of seconds, got {raw!r}") from e


@dataclass
class WikiConfig:
    """Configuration for the Wikipedia API client.

    Environment Variables:
        WT_API_URL_TEMPLATE: Per-language endpoint, with a {lang} placeholder
        WT_TIMEOUT: Request timeout in seconds (default: 10)
        WT_USER_AGENT: User-Agent header sent with every request
    """

    api_url_template: str = field(
        default_factory=lambda: os.environ.get(
            "WT_API_URL_TEMPLATE", DEFAULT_API_URL_TEMPLATE
        )
    )
    timeout: float = field(
        default_factory=lambda: _env_float("WT_TIMEOUT", DEFAULT_TIMEOUT)
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "WT_USER_AGENT", f"{APP_NAME}/{APP_VERSION} (Wikipedia term translator)"
        )
    )

    def __post_init__(self) -> None:
        _validate_url_template(self.api_url_template)
        if self.timeout <= 0:
            raise RuntimeError(f"WT_TIMEOUT must be positive, got {self.timeout}")

    def api_url(self, lang: str) -> str:
        """Endpoint URL for the given Wikipedia edition."""
        return self.api_url_template.format(lang=lang)


def get_wiki_config() -> WikiConfig:
    """Get Wikipedia client configuration from environment."""
    return WikiConfig()


def get_log_dir() -> Path:
    """Directory for module log files (WT_LOG_DIR overrides)."""
    override = os.environ.get("WT_LOG_DIR")
    if override:
        return Path(override)
    return app_config_dir() / "logs"
