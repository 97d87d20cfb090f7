"""Windowing engine exception taxonomy."""

from __future__ import annotations


class ListWindowError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(ListWindowError, ValueError):
    """Host supplied a configuration the engine cannot accept."""


class MeasurementError(ListWindowError, ValueError):
    """A size strategy produced an unusable extent for a measured index."""

    def __init__(self, index: int, size: object) -> None:
        super().__init__(f"item size for index {index} must be a positive number, got {size!r}")
        self.index = index
        self.size = size


class EngineClosedError(ListWindowError, RuntimeError):
    """A transition was attempted after the engine was closed."""


__all__ = ["ConfigurationError", "EngineClosedError", "ListWindowError", "MeasurementError"]
