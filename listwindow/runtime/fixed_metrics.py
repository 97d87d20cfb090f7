"""Closed-form metrics for lists whose items share one size."""

from __future__ import annotations

import math
from numbers import Real

from listwindow.api.types import Alignment, ListConfiguration
from listwindow.runtime.alignment import resolve_alignment_offset
from listwindow.runtime.errors import ConfigurationError


def _fixed_size(config: ListConfiguration) -> float:
    return float(config.item_size)  # type: ignore[arg-type]


class FixedSizeMetrics:
    """Constant-time metrics; holds no measurement state."""

    @property
    def resets_geometry_on_size_change(self) -> bool:
        return True

    def validate(self, config: ListConfiguration) -> None:
        size = config.item_size
        if isinstance(size, bool) or not isinstance(size, Real):
            raise ConfigurationError(
                'An invalid "item_size" has been specified. '
                "Fixed-size lists must specify a number for item_size. "
                f'"{type(size).__name__}" was specified.'
            )
        if not math.isfinite(size) or size <= 0:
            raise ConfigurationError(f"item_size must be a positive finite number, got {size!r}")

    def item_offset(self, config: ListConfiguration, index: int) -> float:
        return index * _fixed_size(config)

    def item_size(self, config: ListConfiguration, index: int) -> float:
        del index
        return _fixed_size(config)

    def estimated_total_extent(self, config: ListConfiguration) -> float:
        return config.item_count * _fixed_size(config)

    def start_index_for_offset(self, config: ListConfiguration, offset: float) -> int:
        start = math.floor(offset / _fixed_size(config))
        return max(0, min(config.item_count - 1, start))

    def stop_index_for_start_index(
        self, config: ListConfiguration, start_index: int, offset: float
    ) -> int:
        size = _fixed_size(config)
        start_offset = start_index * size
        visible_count = math.ceil((config.viewport_extent + offset - start_offset) / size)
        return max(start_index, min(config.item_count - 1, start_index + visible_count - 1))

    def offset_for_index_and_alignment(
        self,
        config: ListConfiguration,
        index: int,
        alignment: Alignment,
        current_offset: float,
    ) -> float:
        return resolve_alignment_offset(
            alignment=alignment,
            item_offset=self.item_offset(config, index),
            item_size=_fixed_size(config),
            viewport_extent=config.viewport_extent,
            current_offset=current_offset,
            total_extent=self.estimated_total_extent(config),
        )


__all__ = ["FixedSizeMetrics"]
