from __future__ import annotations

import pytest

from component_viewer.config import DEFAULT_DEBOUNCE_MS, Settings, SettingsManager


_KEYS = ["CATALOG_MODULES", "DEBOUNCE_MS", "WATCH", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _KEYS:
        monkeypatch.delenv(f"COMPONENT_VIEWER_{key}", raising=False)


def test_defaults_when_nothing_configured(tmp_path) -> None:
    settings = SettingsManager(tmp_path / "missing.env").load()

    assert settings.catalog_modules == []
    assert settings.debounce_ms == DEFAULT_DEBOUNCE_MS
    assert settings.debounce_seconds == 0.25
    assert settings.watch is False
    assert settings.log_level == "INFO"


def test_environment_overrides(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_VIEWER_CATALOG_MODULES", "app.catalog; app.extra ;;")
    monkeypatch.setenv("COMPONENT_VIEWER_DEBOUNCE_MS", "100")
    monkeypatch.setenv("COMPONENT_VIEWER_WATCH", "yes")
    monkeypatch.setenv("COMPONENT_VIEWER_LOG_LEVEL", "debug")

    settings = SettingsManager(tmp_path / "missing.env").load()

    assert settings.catalog_modules == ["app.catalog", "app.extra"]
    assert settings.debounce_ms == 100
    assert settings.watch is True
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_VIEWER_DEBOUNCE_MS", "soon")
    monkeypatch.setenv("COMPONENT_VIEWER_LOG_LEVEL", "chatty")

    settings = SettingsManager(tmp_path / "missing.env").load()

    assert settings.debounce_ms == DEFAULT_DEBOUNCE_MS
    assert settings.log_level == "INFO"


def test_save_writes_env_file(tmp_path) -> None:
    env_file = tmp_path / "config" / "settings.env"
    manager = SettingsManager(env_file)

    manager.save(Settings(catalog_modules=["a.catalog", "b.catalog"], debounce_ms=50, watch=True))

    assert env_file.read_text(encoding="utf-8").splitlines() == [
        "COMPONENT_VIEWER_CATALOG_MODULES=a.catalog;b.catalog",
        "COMPONENT_VIEWER_DEBOUNCE_MS=50",
        "COMPONENT_VIEWER_WATCH=true",
        "COMPONENT_VIEWER_LOG_LEVEL=INFO",
    ]


def test_negative_debounce_is_clamped() -> None:
    assert Settings(debounce_ms=-5).debounce_seconds == 0
