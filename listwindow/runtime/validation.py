"""Configuration acceptance: validate wholesale, translate legacy spellings once."""

from __future__ import annotations

import math
from dataclasses import replace
from numbers import Real

from listwindow.api.types import LAYOUTS, LEGACY_DIRECTIONS, WRITING_DIRECTIONS, ListConfiguration
from listwindow.runtime.config import EngineSettings
from listwindow.runtime.errors import ConfigurationError


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _describe(value: object) -> str:
    return "null" if value is None else type(value).__name__


def normalize_configuration(
    config: ListConfiguration,
    settings: EngineSettings,
) -> tuple[ListConfiguration, bool]:
    """Return the accepted configuration and whether a legacy direction was translated.

    Raises ConfigurationError without side effects when anything is invalid.
    """
    layout = config.layout
    direction = config.writing_direction
    legacy = direction in LEGACY_DIRECTIONS

    if layout not in LAYOUTS:
        raise ConfigurationError(
            'An invalid "layout" has been specified. '
            'Value should be either "horizontal" or "vertical". '
            f'"{layout}" was specified.'
        )
    if direction not in WRITING_DIRECTIONS and not legacy:
        raise ConfigurationError(
            'An invalid "writing_direction" has been specified. '
            'Value should be either "ltr" or "rtl". '
            f'"{direction}" was specified.'
        )
    if legacy:
        if layout == "horizontal" and direction == "vertical":
            raise ConfigurationError(
                'layout "horizontal" conflicts with legacy writing_direction "vertical"'
            )
        layout = direction
        direction = "ltr"

    if not _is_number(config.viewport_extent) or config.viewport_extent < 0:
        axis = "width" if layout == "horizontal" else "height"
        raise ConfigurationError(
            'An invalid "viewport_extent" has been specified. '
            f"{layout.capitalize()} lists must specify a non-negative number for their {axis}. "
            f'"{_describe(config.viewport_extent)}" was specified.'
        )
    if not _is_count(config.item_count):
        raise ConfigurationError(f"item_count must be a non-negative integer, got {config.item_count!r}")
    if config.overscan_count is not None and not _is_count(config.overscan_count):
        raise ConfigurationError(
            f"overscan_count must be a non-negative integer, got {config.overscan_count!r}"
        )
    if config.initial_scroll_offset is not None and not _is_number(config.initial_scroll_offset):
        raise ConfigurationError(
            f"initial_scroll_offset must be a number, got {config.initial_scroll_offset!r}"
        )
    if config.cross_extent is not None and not _is_number(config.cross_extent):
        raise ConfigurationError(f"cross_extent must be a number, got {config.cross_extent!r}")
    if config.item_key is not None and not callable(config.item_key):
        raise ConfigurationError(f"item_key must be callable, got {_describe(config.item_key)}")

    accepted = replace(
        config,
        layout=layout,
        writing_direction=direction,
        overscan_count=(
            settings.default_overscan_count if config.overscan_count is None else config.overscan_count
        ),
        estimated_item_size=(
            settings.default_estimated_item_size
            if config.estimated_item_size is None
            else config.estimated_item_size
        ),
    )
    return accepted, legacy


__all__ = ["normalize_configuration"]
