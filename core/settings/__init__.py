"""Persisted source/target language preferences."""

from .models import Settings
from .store import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGES,
    SettingsStore,
    default_settings_path,
    ensure_source_in_targets,
    merge_overrides,
    normalize,
    render,
)

__all__ = [
    "Settings",
    "SettingsStore",
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGES",
    "default_settings_path",
    "ensure_source_in_targets",
    "merge_overrides",
    "normalize",
    "render",
]
