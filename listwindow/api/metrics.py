"""Public item-metrics strategy contracts."""

from __future__ import annotations

from typing import Protocol

from listwindow.api.types import Alignment, ListConfiguration


class MetricsStrategy(Protocol):
    """Index/offset translation for one list shape.

    Implementations own whatever per-instance measurement state they need;
    the engine only ever reaches it through these calls.
    """

    @property
    def resets_geometry_on_size_change(self) -> bool:
        """Return whether the item-size spec keys the geometry cache."""

    def validate(self, config: ListConfiguration) -> None:
        """Raise ConfigurationError when the configuration does not fit this strategy."""

    def item_offset(self, config: ListConfiguration, index: int) -> float:
        """Return leading-edge offset of `index` along the primary axis."""

    def item_size(self, config: ListConfiguration, index: int) -> float:
        """Return primary-axis extent of `index`."""

    def estimated_total_extent(self, config: ListConfiguration) -> float:
        """Return best current estimate of total content extent."""

    def start_index_for_offset(self, config: ListConfiguration, offset: float) -> int:
        """Return first index intersecting `offset`."""

    def stop_index_for_start_index(
        self, config: ListConfiguration, start_index: int, offset: float
    ) -> int:
        """Return last index intersecting the viewport that begins at `offset`."""

    def offset_for_index_and_alignment(
        self,
        config: ListConfiguration,
        index: int,
        alignment: Alignment,
        current_offset: float,
    ) -> float:
        """Return the normalized scroll offset that brings `index` into view."""


class ResettableMetricsStrategy(MetricsStrategy, Protocol):
    """Metrics strategy with invalidatable measurements."""

    def reset_after_index(self, index: int) -> None:
        """Forget measurements for `index` and every index after it."""


def create_fixed_size_metrics() -> MetricsStrategy:
    """Create metrics for lists whose items all share one numeric size."""
    from listwindow.runtime.fixed_metrics import FixedSizeMetrics

    return FixedSizeMetrics()


def create_variable_size_metrics() -> ResettableMetricsStrategy:
    """Create metrics for lists sized by a per-index callable."""
    from listwindow.runtime.variable_metrics import VariableSizeMetrics

    return VariableSizeMetrics()


__all__ = [
    "MetricsStrategy",
    "ResettableMetricsStrategy",
    "create_fixed_size_metrics",
    "create_variable_size_metrics",
]
