"""Tests for settings normalization and persistence."""

import json
import random

import pytest

from core.errors import ConfigError
from core.languages import is_supported
from core.settings import (
    DEFAULT_TARGET_LANGUAGES,
    Settings,
    SettingsStore,
    ensure_source_in_targets,
    merge_overrides,
    normalize,
    render,
)


def assert_invariants(settings: Settings) -> None:
    targets = settings.target_languages
    assert targets, "targets must never be empty"
    assert all(a < b for a, b in zip(targets, targets[1:])), targets
    assert all(is_supported(code) for code in targets), targets
    assert settings.source_language in targets


class TestNormalize:
    """Tests for normalize()."""

    def test_empty_settings_get_defaults(self):
        result = normalize(Settings())
        assert result.target_languages == ["en", "es", "fr"]
        assert result.source_language == "en"

    def test_sorts_and_deduplicates(self):
        result = normalize(Settings(target_languages=["ru", "es", "ru", "de", "es"]))
        assert result.target_languages == ["de", "es", "ru"]

    def test_drops_unsupported_codes(self):
        result = normalize(Settings(target_languages=["es", "klingon", "fr", "xx"]))
        assert result.target_languages == ["es", "fr"]

    def test_all_invalid_targets_fall_back_to_defaults(self):
        result = normalize(Settings(target_languages=["xx", "yy"]))
        assert result.target_languages == list(DEFAULT_TARGET_LANGUAGES)

    def test_source_defaults_to_en_when_present(self):
        result = normalize(Settings(target_languages=["ru", "en", "de"]))
        assert result.source_language == "en"

    def test_source_defaults_to_first_target_without_en(self):
        result = normalize(Settings(target_languages=["ru", "lv", "de"]))
        assert result.source_language == "de"

    def test_source_inserted_at_sorted_position(self):
        result = normalize(Settings(target_languages=["es", "ru"], source_language="lv"))
        assert result.target_languages == ["es", "lv", "ru"]
        assert result.source_language == "lv"

    def test_source_inserted_at_start_and_end(self):
        assert normalize(
            Settings(target_languages=["es", "ru"], source_language="de")
        ).target_languages == ["de", "es", "ru"]
        assert normalize(
            Settings(target_languages=["es", "ru"], source_language="zh")
        ).target_languages == ["es", "ru", "zh"]

    def test_unsupported_source_is_replaced(self):
        result = normalize(Settings(target_languages=["es", "fr"], source_language="xx"))
        assert result.source_language == "es"
        assert "xx" not in result.target_languages

    def test_does_not_mutate_input(self):
        original = Settings(target_languages=["ru", "es"], source_language="lv")
        normalize(original)
        assert original.target_languages == ["ru", "es"]

    def test_idempotent(self):
        rng = random.Random(1234)
        pool = ["en", "es", "fr", "ru", "lv", "lt", "de", "zh", "xx", "klingon", ""]
        for _ in range(200):
            settings = Settings(
                target_languages=[rng.choice(pool) for _ in range(rng.randint(0, 6))],
                source_language=rng.choice(pool),
            )
            once = normalize(settings)
            assert normalize(once) == once
            assert_invariants(once)


class TestEnsureSourceInTargets:
    """Tests for the invariant-restoring insert."""

    def test_already_present_unchanged(self):
        assert ensure_source_in_targets("es", ["en", "es", "fr"]) == ["en", "es", "fr"]

    def test_inserted_in_middle(self):
        assert ensure_source_in_targets("es", ["en", "fr"]) == ["en", "es", "fr"]

    def test_empty_targets(self):
        assert ensure_source_in_targets("lv", []) == ["lv"]


class TestMergeOverrides:
    """Tests for from=/to= merge semantics."""

    def test_from_overrides_source(self):
        stored = normalize(Settings(target_languages=["en", "es"]))
        merged = merge_overrides(stored, source="lv")
        assert merged.source_language == "lv"
        assert merged.target_languages == ["en", "es", "lv"]

    def test_to_replaces_targets(self):
        stored = normalize(Settings(target_languages=["en", "es", "fr", "ru"]))
        merged = merge_overrides(stored, targets=["de"])
        # source "en" is kept and re-inserted, nothing else survives
        assert merged.target_languages == ["de", "en"]

    def test_no_overrides_keeps_settings(self):
        stored = normalize(Settings(target_languages=["es", "ru"], source_language="ru"))
        assert merge_overrides(stored) == stored


class TestSettingsStore:
    """Tests for load/save."""

    def test_missing_file_yields_defaults(self, settings_store):
        assert not settings_store.path.exists()
        settings = settings_store.load()
        assert settings.target_languages == ["en", "es", "fr"]
        assert settings.source_language == "en"

    def test_save_creates_directory_and_writes_normalized(self, settings_store):
        saved = settings_store.save(Settings(target_languages=["ru", "es", "ru"], source_language="lv"))
        assert settings_store.path.exists()
        data = json.loads(settings_store.path.read_text())
        assert data == {"target_languages": ["es", "lv", "ru"], "source_language": "lv"}
        assert saved.target_languages == ["es", "lv", "ru"]

    def test_file_format(self, settings_store):
        settings_store.save(Settings(target_languages=["en", "es"], source_language="en"))
        assert settings_store.path.read_text() == (
            "{\n"
            '  "target_languages": [\n'
            '    "en",\n'
            '    "es"\n'
            "  ],\n"
            '  "source_language": "en"\n'
            "}\n"
        )

    def test_round_trip(self, settings_store):
        settings_store.save(Settings(target_languages=["de", "lt"], source_language="lt"))
        loaded = settings_store.load()
        assert loaded.target_languages == ["de", "lt"]
        assert loaded.source_language == "lt"

    def test_save_truncates_previous_content(self, settings_store):
        settings_store.save(Settings(target_languages=["de", "en", "es", "fr", "lt", "lv", "ru"]))
        settings_store.save(Settings(target_languages=["en"]))
        assert settings_store.load().target_languages == ["en"]

    def test_load_normalizes_hand_edited_file(self, settings_store):
        settings_store.path.parent.mkdir(parents=True)
        settings_store.path.write_text('{"target_languages": ["ru", "xx", "es", "es"]}')
        settings = settings_store.load()
        assert settings.target_languages == ["es", "ru"]
        assert settings.source_language == "es"

    def test_unknown_keys_ignored(self, settings_store):
        settings_store.path.parent.mkdir(parents=True)
        settings_store.path.write_text('{"target_languages": ["en"], "theme": "dark"}')
        assert settings_store.load().target_languages == ["en"]

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '["en", "es"]',
            '{"target_languages": "en"}',
            "",
        ],
    )
    def test_corrupt_file_raises_config_error(self, settings_store, content):
        settings_store.path.parent.mkdir(parents=True)
        settings_store.path.write_text(content)
        with pytest.raises(ConfigError) as exc_info:
            settings_store.load()
        assert str(settings_store.path) in exc_info.value.message

    def test_unreadable_path_raises_config_error(self, settings_store):
        # a directory where the file should be
        settings_store.path.mkdir(parents=True)
        with pytest.raises(ConfigError):
            settings_store.load()

    def test_default_path_uses_config_dir(self, isolated_config_dir):
        assert SettingsStore().path == isolated_config_dir / "settings.json"


def test_render_matches_saved_file(settings_store):
    settings = normalize(Settings(target_languages=["fr", "en"]))
    settings_store.save(settings)
    assert render(settings) == settings_store.path.read_text()
