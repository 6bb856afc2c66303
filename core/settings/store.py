"""Loading, normalizing and persisting language preferences.

The settings file lives at <config dir>/wt/settings.json and looks like:

    {
      "target_languages": ["en", "es", "fr"],
      "source_language": "en"
    }

A missing file is the normal first-run state and yields defaults. A file that
exists but cannot be read or decoded raises ConfigError; there is no partial
recovery for corrupt preference data.
"""

import bisect
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from core.config import app_config_dir
from core.errors import ConfigError
from core.languages import is_supported

from .models import Settings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"
DEFAULT_TARGET_LANGUAGES = ("en", "es", "fr")
DEFAULT_SOURCE_LANGUAGE = "en"


def default_settings_path() -> Path:
    """Path of the settings file for the current user."""
    return app_config_dir() / SETTINGS_FILENAME


def ensure_source_in_targets(source: str, targets: list[str]) -> list[str]:
    """Restore the invariant that the source language is also a target.

    targets must already be sorted and deduplicated. The source is inserted
    at its sorted position if absent, so the user always sees their own
    resolved title echoed in the report.
    """
    i = bisect.bisect_left(targets, source)
    if i < len(targets) and targets[i] == source:
        return targets
    return targets[:i] + [source] + targets[i:]


def normalize(settings: Settings) -> Settings:
    """Return a copy of settings with all invariants restored.

    After normalization target_languages is strictly ascending, holds only
    catalog-valid codes, and contains source_language. Idempotent.
    """
    requested = settings.target_languages
    targets = sorted({code for code in requested if is_supported(code)})
    if len(targets) < len(set(requested)):
        dropped = sorted({code for code in requested if not is_supported(code)})
        logger.info(f"Dropping unsupported language codes: {dropped}")
    if not targets:
        targets = list(DEFAULT_TARGET_LANGUAGES)

    source = settings.source_language
    if not source or not is_supported(source):
        if source:
            logger.info(f"Ignoring unsupported source language: {source!r}")
        source = DEFAULT_SOURCE_LANGUAGE if DEFAULT_SOURCE_LANGUAGE in targets else targets[0]

    targets = ensure_source_in_targets(source, targets)
    return Settings(target_languages=targets, source_language=source)


def merge_overrides(
    settings: Settings,
    source: Optional[str] = None,
    targets: Optional[list[str]] = None,
) -> Settings:
    """Apply explicit from=/to= options on top of stored settings.

    source replaces source_language. targets replaces the whole target list
    (it is not a union with the stored list).
    """
    merged = settings.model_copy()
    if source is not None:
        merged.source_language = source
    if targets is not None:
        merged.target_languages = list(targets)
    return normalize(merged)


def render(settings: Settings) -> str:
    """Pretty-printed JSON with 2-space indentation and trailing newline."""
    return json.dumps(settings.model_dump(), indent=2) + "\n"


class SettingsStore:
    """Owns the persisted preference record.

    Example:
        store = SettingsStore()
        settings = store.load()
        store.save(merge_overrides(settings, source="lv"))
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path or default_settings_path()

    def load(self) -> Settings:
        """Read and normalize stored settings, falling back to defaults."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No settings at {self.path}, using defaults")
            return normalize(Settings())
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(str(self.path), str(e)) from e

        try:
            settings = Settings.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigError(str(self.path), str(e)) from e

        logger.debug(f"Loaded settings from {self.path}")
        return normalize(settings)

    def save(self, settings: Settings) -> Settings:
        """Normalize and write settings, creating the directory if needed.

        Returns the normalized settings that were written.
        """
        settings = normalize(settings)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(render(settings), encoding="utf-8")
        logger.info(f"Saved settings to {self.path}")
        return settings
