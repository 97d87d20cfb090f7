from __future__ import annotations

from listwindow.runtime.config import (
    DEFAULT_DEBOUNCE_INTERVAL_MS,
    DEFAULT_ESTIMATED_ITEM_SIZE,
    EngineSettings,
    get_engine_settings,
    load_engine_settings,
    resolve_log_level_name,
    use_engine_settings,
)


def test_load_engine_settings_parses_environment(monkeypatch) -> None:
    monkeypatch.setenv("LISTWINDOW_DEBOUNCE_INTERVAL_MS", "90")
    monkeypatch.setenv("LISTWINDOW_OVERSCAN_COUNT", "4")
    monkeypatch.setenv("LISTWINDOW_ESTIMATED_ITEM_SIZE", "32.5")
    monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "debug")

    settings = load_engine_settings()
    assert settings.debounce_interval_ms == 90.0
    assert settings.default_overscan_count == 4
    assert settings.default_estimated_item_size == 32.5
    assert settings.log_level == "DEBUG"


def test_load_engine_settings_clamps_and_falls_back() -> None:
    settings = load_engine_settings(
        env={
            "LISTWINDOW_DEBOUNCE_INTERVAL_MS": "-10",
            "LISTWINDOW_OVERSCAN_COUNT": "many",
            "LISTWINDOW_ESTIMATED_ITEM_SIZE": "0",
        }
    )
    assert settings.debounce_interval_ms == 0.0
    assert settings.default_overscan_count == 2
    assert settings.default_estimated_item_size == DEFAULT_ESTIMATED_ITEM_SIZE


def test_load_engine_settings_defaults_from_empty_env() -> None:
    settings = load_engine_settings(env={})
    assert settings == EngineSettings()
    assert settings.debounce_interval_ms == DEFAULT_DEBOUNCE_INTERVAL_MS


def test_resolve_log_level_prefers_package_prefix() -> None:
    env = {"LOG_LEVEL": "WARNING", "LISTWINDOW_LOG_LEVEL": "error"}
    assert resolve_log_level_name(env=env) == "ERROR"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(env={}) == "INFO"


def test_use_engine_settings_scopes_override() -> None:
    override = EngineSettings(debounce_interval_ms=10.0)
    outer = get_engine_settings()
    with use_engine_settings(override) as active:
        assert active is override
        assert get_engine_settings() is override
    assert get_engine_settings() is outer
