"""Public windowing engine contract and factories."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from listwindow.api.host import RealizeFn, ScrollTarget, TimerPort
from listwindow.api.metrics import MetricsStrategy
from listwindow.api.types import (
    Alignment,
    Geometry,
    ListConfiguration,
    RenderPlan,
    RenderWindow,
    ScrollEvent,
    ScrollObservation,
    ScrollState,
    Subscription,
)

if TYPE_CHECKING:
    from listwindow.runtime.config import EngineSettings


class ListEngine(Protocol):
    """Windowing engine driving one virtualized list."""

    @property
    def config(self) -> ListConfiguration:
        """Return the accepted (normalized) configuration."""

    @property
    def state(self) -> ScrollState:
        """Return a snapshot of the scroll state."""

    def configure(self, config: ListConfiguration) -> None:
        """Validate and replace the configuration wholesale."""

    def on_scroll(self, observation: ScrollObservation) -> None:
        """Apply one observed native scroll event."""

    def scroll_to(self, offset: float) -> None:
        """Request a scroll to a host-native offset."""

    def scroll_to_item(self, index: int, align: Alignment = "auto") -> None:
        """Request a scroll that brings `index` into view."""

    def get_render_window(self) -> RenderWindow:
        """Return the index window for the current state."""

    def get_geometry(self, index: int) -> Geometry:
        """Return cached placement for `index`."""

    def estimated_total_extent(self) -> float:
        """Return the current content extent estimate."""

    def render(self, realize: RealizeFn) -> RenderPlan:
        """Realize every index in the current window."""

    def on_window_changed(self, callback: Callable[[RenderWindow], None]) -> Subscription:
        """Subscribe to render-window changes."""

    def on_scroll_state_changed(self, callback: Callable[[ScrollEvent], None]) -> Subscription:
        """Subscribe to scroll-state changes."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a listener."""

    def attach_scroll_target(self, target: ScrollTarget | None) -> None:
        """Bind the native scroll surface used for offset write-back."""

    def flush(self) -> bool:
        """Re-write the last requested offset to the attached scroll target."""

    def close(self) -> None:
        """Cancel pending work and reject further transitions."""


class ResettableListEngine(ListEngine, Protocol):
    """Engine over measurements that can be invalidated."""

    def reset_after_index(self, index: int, should_force_update: bool = True) -> None:
        """Forget cached measurements from `index` onwards."""


def create_list_engine(
    config: ListConfiguration,
    *,
    metrics: MetricsStrategy,
    timer: TimerPort,
    settings: EngineSettings | None = None,
) -> ResettableListEngine:
    """Create default engine around an injected metrics strategy."""
    from listwindow.runtime.list_engine import RuntimeListEngine

    return RuntimeListEngine(config, metrics=metrics, timer=timer, settings=settings)


def create_fixed_size_list(
    config: ListConfiguration,
    *,
    timer: TimerPort,
    settings: EngineSettings | None = None,
) -> ListEngine:
    """Create an engine for a list of uniformly sized items."""
    from listwindow.runtime.fixed_metrics import FixedSizeMetrics

    return create_list_engine(config, metrics=FixedSizeMetrics(), timer=timer, settings=settings)


def create_variable_size_list(
    config: ListConfiguration,
    *,
    timer: TimerPort,
    settings: EngineSettings | None = None,
) -> ResettableListEngine:
    """Create an engine for a list sized by a per-index callable."""
    from listwindow.runtime.variable_metrics import VariableSizeMetrics

    return create_list_engine(config, metrics=VariableSizeMetrics(), timer=timer, settings=settings)


__all__ = [
    "ListEngine",
    "ResettableListEngine",
    "create_fixed_size_list",
    "create_list_engine",
    "create_variable_size_list",
]
