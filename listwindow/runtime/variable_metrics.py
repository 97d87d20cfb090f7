"""Incrementally measured metrics for lists sized by a per-index callable."""

from __future__ import annotations

import logging
import math
from numbers import Real

import numpy as np

from listwindow.api.types import Alignment, ListConfiguration
from listwindow.runtime.alignment import resolve_alignment_offset
from listwindow.runtime.config import DEFAULT_ESTIMATED_ITEM_SIZE
from listwindow.runtime.errors import ConfigurationError, MeasurementError

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY = 64


class VariableSizeMetrics:
    """Metrics over a lazily grown offset table.

    Indices are measured in order, only when first asked for, and never
    beyond what a query needs. Offsets of measured indices are strictly
    increasing, so lookups inside the measured range are a binary search;
    lookups past it extend measurement with an exponential probe first.
    """

    def __init__(self, *, initial_capacity: int = _INITIAL_CAPACITY) -> None:
        capacity = max(1, int(initial_capacity))
        self._offsets = np.zeros(capacity, dtype=np.float64)
        self._sizes = np.zeros(capacity, dtype=np.float64)
        self._last_measured = -1

    @property
    def resets_geometry_on_size_change(self) -> bool:
        return False

    @property
    def last_measured_index(self) -> int:
        return self._last_measured

    def validate(self, config: ListConfiguration) -> None:
        if not callable(config.item_size):
            raise ConfigurationError(
                'An invalid "item_size" has been specified. '
                "Variable-size lists must specify a function for item_size. "
                f'"{type(config.item_size).__name__}" was specified.'
            )
        estimated = config.estimated_item_size
        if estimated is not None and (
            isinstance(estimated, bool)
            or not isinstance(estimated, Real)
            or not math.isfinite(estimated)
            or estimated <= 0
        ):
            raise ConfigurationError(
                f"estimated_item_size must be a positive finite number, got {estimated!r}"
            )

    def reset_after_index(self, index: int) -> None:
        """Forget measurements for `index` and every index after it."""
        self._last_measured = min(self._last_measured, index - 1)
        logger.debug("variable_metrics_reset index=%s last_measured=%s", index, self._last_measured)

    def item_offset(self, config: ListConfiguration, index: int) -> float:
        self._measure_through(config, index)
        return float(self._offsets[index])

    def item_size(self, config: ListConfiguration, index: int) -> float:
        self._measure_through(config, index)
        return float(self._sizes[index])

    def estimated_total_extent(self, config: ListConfiguration) -> float:
        last = min(self._last_measured, config.item_count - 1)
        measured = 0.0
        if last >= 0:
            measured = float(self._offsets[last] + self._sizes[last])
        unmeasured = config.item_count - last - 1
        return measured + unmeasured * _estimated_size(config)

    def start_index_for_offset(self, config: ListConfiguration, offset: float) -> int:
        if config.item_count <= 0:
            return 0
        last = min(self._last_measured, config.item_count - 1)
        last_offset = float(self._offsets[last]) if last > 0 else 0.0
        if last_offset >= offset:
            return self._search_measured(last, offset)
        return self._exponential_search(config, max(0, last), offset)

    def stop_index_for_start_index(
        self, config: ListConfiguration, start_index: int, offset: float
    ) -> int:
        end = self.item_offset(config, start_index) + self.item_size(config, start_index)
        max_offset = offset + config.viewport_extent
        stop = start_index
        while stop < config.item_count - 1 and end < max_offset:
            stop += 1
            end += self.item_size(config, stop)
        return stop

    def offset_for_index_and_alignment(
        self,
        config: ListConfiguration,
        index: int,
        alignment: Alignment,
        current_offset: float,
    ) -> float:
        item_offset = self.item_offset(config, index)
        item_size = self.item_size(config, index)
        return resolve_alignment_offset(
            alignment=alignment,
            item_offset=item_offset,
            item_size=item_size,
            viewport_extent=config.viewport_extent,
            current_offset=current_offset,
            total_extent=self.estimated_total_extent(config),
        )

    def _exponential_search(self, config: ListConfiguration, index: int, offset: float) -> int:
        interval = 1
        while index < config.item_count and self.item_offset(config, index) < offset:
            index += interval
            interval *= 2
        high = min(index, config.item_count - 1)
        self._measure_through(config, high)
        return self._search_measured(high, offset)

    def _search_measured(self, high: int, offset: float) -> int:
        """Return the last index in [0, high] whose offset is <= `offset`."""
        if high <= 0:
            return 0
        found = int(np.searchsorted(self._offsets[: high + 1], offset, side="right")) - 1
        return max(0, found)

    def _measure_through(self, config: ListConfiguration, index: int) -> None:
        if index <= self._last_measured:
            return
        self._ensure_capacity(index + 1)
        last = self._last_measured
        offset = float(self._offsets[last] + self._sizes[last]) if last >= 0 else 0.0
        size_fn = config.item_size
        for current in range(last + 1, index + 1):
            size = size_fn(current)  # type: ignore[operator]
            if isinstance(size, bool) or not isinstance(size, Real) or not math.isfinite(size) or size <= 0:
                raise MeasurementError(current, size)
            self._offsets[current] = offset
            self._sizes[current] = size
            offset += float(size)
            # Measurements before a failing index stay committed.
            self._last_measured = current

    def _ensure_capacity(self, required: int) -> None:
        capacity = self._offsets.shape[0]
        if required <= capacity:
            return
        while capacity < required:
            capacity *= 2
        self._offsets = np.resize(self._offsets, capacity)
        self._sizes = np.resize(self._sizes, capacity)


def _estimated_size(config: ListConfiguration) -> float:
    if config.estimated_item_size is None:
        return DEFAULT_ESTIMATED_ITEM_SIZE
    return float(config.estimated_item_size)


__all__ = ["VariableSizeMetrics"]
