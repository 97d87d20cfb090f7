"""Centralized engine settings ownership."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DEBOUNCE_INTERVAL_MS = 150.0
DEFAULT_OVERSCAN_COUNT = 2
DEFAULT_ESTIMATED_ITEM_SIZE = 50.0


@dataclass(frozen=True, slots=True)
class EngineSettings:
    debounce_interval_ms: float = DEFAULT_DEBOUNCE_INTERVAL_MS
    default_overscan_count: int = DEFAULT_OVERSCAN_COUNT
    default_estimated_item_size: float = DEFAULT_ESTIMATED_ITEM_SIZE
    log_level: str = "INFO"


_ENGINE_SETTINGS: ContextVar[EngineSettings | None] = ContextVar("listwindow_engine_settings", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("LISTWINDOW_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_engine_settings(*, env: Mapping[str, str] | None = None) -> EngineSettings:
    estimated = _float("LISTWINDOW_ESTIMATED_ITEM_SIZE", DEFAULT_ESTIMATED_ITEM_SIZE, env=env)
    if estimated <= 0.0:
        estimated = DEFAULT_ESTIMATED_ITEM_SIZE
    return EngineSettings(
        debounce_interval_ms=_float(
            "LISTWINDOW_DEBOUNCE_INTERVAL_MS", DEFAULT_DEBOUNCE_INTERVAL_MS, minimum=0.0, env=env
        ),
        default_overscan_count=_int(
            "LISTWINDOW_OVERSCAN_COUNT", DEFAULT_OVERSCAN_COUNT, minimum=0, env=env
        ),
        default_estimated_item_size=estimated,
        log_level=resolve_log_level_name(env=env),
    )


def initialize_engine_settings(*, env: Mapping[str, str] | None = None) -> EngineSettings:
    settings = load_engine_settings(env=env)
    _ENGINE_SETTINGS.set(settings)
    return settings


def get_engine_settings() -> EngineSettings:
    settings = _ENGINE_SETTINGS.get()
    if settings is not None:
        return settings
    return initialize_engine_settings()


@contextmanager
def use_engine_settings(settings: EngineSettings) -> Iterator[EngineSettings]:
    """Scope an explicit settings object to the current context."""
    token = _ENGINE_SETTINGS.set(settings)
    try:
        yield settings
    finally:
        _ENGINE_SETTINGS.reset(token)


__all__ = [
    "EngineSettings",
    "get_engine_settings",
    "initialize_engine_settings",
    "load_engine_settings",
    "resolve_log_level_name",
    "use_engine_settings",
]
