"""Default windowing engine implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from listwindow.api.host import RealizeFn, ScrollTarget, TimerPort
from listwindow.api.metrics import MetricsStrategy
from listwindow.api.types import (
    Alignment,
    Geometry,
    ListConfiguration,
    RealizedItem,
    RenderPlan,
    RenderWindow,
    ScrollEvent,
    ScrollObservation,
    ScrollState,
    Subscription,
)
from listwindow.runtime.config import EngineSettings, get_engine_settings
from listwindow.runtime.debounce import DebounceController
from listwindow.runtime.errors import EngineClosedError, MeasurementError
from listwindow.runtime.geometry_cache import GeometryCache, geometry_fingerprint
from listwindow.runtime.notify import MemoizedNotifier
from listwindow.runtime.range_resolver import resolve_range
from listwindow.runtime.scroll_state import ScrollStateMachine
from listwindow.runtime.validation import normalize_configuration

logger = logging.getLogger(__name__)


class RuntimeListEngine:
    """Windowing engine over one injected metrics strategy.

    Every transition runs synchronously in the caller. After each committed
    transition the engine writes requested offsets back to the attached
    scroll target and then notifies listeners; listeners may re-enter the
    engine, in which case the outer notification pass stops early so no
    listener ever sees an older state after a newer one.
    """

    def __init__(
        self,
        config: ListConfiguration,
        *,
        metrics: MetricsStrategy,
        timer: TimerPort,
        settings: EngineSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else get_engine_settings()
        self._metrics = metrics
        self._legacy_direction_warned = False
        self._config = self._accept(config)
        self._cache = GeometryCache()
        self._debounce = DebounceController(
            timer, self._settings.debounce_interval_ms, self._on_debounce_elapsed
        )
        self._scroll = ScrollStateMachine.initial(self._config, metrics, self._debounce)
        self._next_subscription_id = 1
        self._window_listeners: MemoizedNotifier[RenderWindow] = MemoizedNotifier(self._allocate_id)
        self._scroll_listeners: MemoizedNotifier[ScrollEvent] = MemoizedNotifier(self._allocate_id)
        self._target: ScrollTarget | None = None
        self._initial_offset_written = False
        self._revision = 0
        self._closed = False
        logger.debug(
            "list_engine_created item_count=%s layout=%s direction=%s",
            self._config.item_count,
            self._config.layout,
            self._config.writing_direction,
        )

    @property
    def config(self) -> ListConfiguration:
        return self._config

    @property
    def state(self) -> ScrollState:
        return self._scroll.snapshot()

    @property
    def metrics(self) -> MetricsStrategy:
        return self._metrics

    @property
    def closed(self) -> bool:
        return self._closed

    def configure(self, config: ListConfiguration) -> None:
        """Validate and replace the configuration; a rejected one changes nothing."""
        self._ensure_open()
        accepted = self._accept(config)
        self._config = accepted
        self._revision += 1
        logger.debug("list_engine_configured item_count=%s", accepted.item_count)
        self._notify()

    def on_scroll(self, observation: ScrollObservation) -> None:
        self._ensure_open()
        if self._scroll.observe(self._config, observation):
            self._committed(requested=False)

    def scroll_to(self, offset: float) -> None:
        self._ensure_open()
        if self._scroll.scroll_to(self._config, self._metrics, offset):
            self._committed(requested=True)

    def scroll_to_item(self, index: int, align: Alignment = "auto") -> None:
        self._ensure_open()
        if self._scroll.scroll_to_item(self._config, self._metrics, index, align):
            self._committed(requested=True)

    def get_render_window(self) -> RenderWindow:
        return resolve_range(self._config, self._scroll.snapshot(), self._metrics)

    def get_geometry(self, index: int) -> Geometry:
        if not 0 <= index < self._config.item_count:
            raise IndexError(f"index {index} out of range for {self._config.item_count} items")
        config = self._config
        item_size = config.item_size if self._metrics.resets_geometry_on_size_change else None
        fingerprint = geometry_fingerprint(item_size, config.layout, config.writing_direction)
        return self._cache.get(fingerprint, index, self._compute_geometry)

    def estimated_total_extent(self) -> float:
        return self._metrics.estimated_total_extent(self._config)

    def render(self, realize: RealizeFn) -> RenderPlan:
        """Realize the current overscan window through the host callback."""
        config = self._config
        state = self._scroll.snapshot()
        window = resolve_range(config, state, self._metrics)
        in_motion = state.in_motion if config.use_is_scrolling else None
        items: list[RealizedItem] = []
        if config.item_count > 0:
            for index in window.indices():
                geometry = self.get_geometry(index)
                key = index if config.item_key is None else config.item_key(index, config.item_data)
                node = realize(index, geometry, in_motion)
                items.append(RealizedItem(key=key, index=index, geometry=geometry, node=node))
        # Read after realizing so freshly measured sizes are included.
        content_extent = self._metrics.estimated_total_extent(config)
        return RenderPlan(
            window=window,
            items=tuple(items),
            content_extent=content_extent,
            layout=config.layout,
            pointer_events_enabled=not state.in_motion,
        )

    def reset_after_index(self, index: int, should_force_update: bool = True) -> None:
        """Forget measurements from `index` onwards and drop cached geometry."""
        self._ensure_open()
        reset = getattr(self._metrics, "reset_after_index", None)
        if reset is None:
            raise TypeError(f"{type(self._metrics).__name__} does not support reset_after_index")
        reset(index)
        self._cache.invalidate()
        if should_force_update:
            self._revision += 1
            self._notify()

    def on_window_changed(self, callback: Callable[[RenderWindow], None]) -> Subscription:
        subscription = self._window_listeners.subscribe(callback)
        self._notify()
        return subscription

    def on_scroll_state_changed(self, callback: Callable[[ScrollEvent], None]) -> Subscription:
        subscription = self._scroll_listeners.subscribe(callback)
        self._notify()
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if not self._window_listeners.unsubscribe(subscription):
            self._scroll_listeners.unsubscribe(subscription)

    def attach_scroll_target(self, target: ScrollTarget | None) -> None:
        """Bind the native surface; the configured initial offset is written on first attach."""
        self._ensure_open()
        self._target = target
        if target is None:
            return
        initial = self._config.initial_scroll_offset
        if initial is not None and not self._initial_offset_written:
            self._initial_offset_written = True
            target.write_offset(self._config.layout, float(initial))
        self._notify()

    def flush(self) -> bool:
        """Write the committed offset back to the host if it was requested.

        Returns False when there is nothing to write: no target is attached
        or the current offset came from the host itself.
        """
        self._ensure_open()
        if self._target is None or not self._scroll.snapshot().update_was_requested:
            return False
        self._write_back()
        return True

    def close(self) -> None:
        """Cancel the pending debounce timer and detach from the host."""
        if self._closed:
            return
        self._closed = True
        self._debounce.cancel()
        self._target = None
        logger.debug("list_engine_closed")

    def _accept(self, config: ListConfiguration) -> ListConfiguration:
        accepted, legacy = normalize_configuration(config, self._settings)
        self._metrics.validate(accepted)
        if legacy and not self._legacy_direction_warned:
            self._legacy_direction_warned = True
            logger.warning(
                'writing_direction "%s" is deprecated; use writing_direction "ltr"/"rtl" '
                'with layout "%s"',
                config.writing_direction,
                accepted.layout,
            )
        return accepted

    def _compute_geometry(self, index: int) -> Geometry:
        config = self._config
        offset = self._metrics.item_offset(config, index)
        size = self._metrics.item_size(config, index)
        # Injected strategies are not required to check their own sizes.
        if size <= 0:
            raise MeasurementError(index, size)
        rtl_horizontal = config.is_horizontal and config.writing_direction == "rtl"
        return Geometry(
            index=index,
            offset=offset,
            size=size,
            layout=config.layout,
            leading_edge="end" if rtl_horizontal else "start",
        )

    def _committed(self, *, requested: bool) -> None:
        self._revision += 1
        if requested:
            self._write_back()
        self._notify()

    def _write_back(self) -> None:
        target = self._target
        if target is None:
            return
        config = self._config
        state = self._scroll.snapshot()
        target.write_offset(config.layout, state.offset)
        if config.is_horizontal:
            extent = target.content_extent(config.layout)
            if extent is None:
                extent = self._metrics.estimated_total_extent(config)
            self._scroll.correct_normalized(config, extent)

    def _on_debounce_elapsed(self) -> None:
        if self._closed:
            return
        self._scroll.settle()
        self._cache.invalidate()
        self._revision += 1
        logger.debug("list_engine_settled generation=%s", self._cache.generation)
        self._notify()

    def _notify(self) -> None:
        if self._closed:
            return
        revision = self._revision

        def still_current() -> bool:
            return self._revision == revision and not self._closed

        if self._config.item_count > 0 and len(self._window_listeners):
            self._window_listeners.publish(self.get_render_window(), still_current=still_current)
            if not still_current():
                return
        if len(self._scroll_listeners):
            state = self._scroll.snapshot()
            self._scroll_listeners.publish(
                ScrollEvent(
                    direction=state.direction,
                    offset=state.offset,
                    was_requested=state.update_was_requested,
                ),
                still_current=still_current,
            )

    def _allocate_id(self) -> int:
        sub_id = self._next_subscription_id
        self._next_subscription_id += 1
        return sub_id

    def _ensure_open(self) -> None:
        if self._closed:
            raise EngineClosedError("list engine has been closed")


ListEngine = RuntimeListEngine

__all__ = ["ListEngine", "RuntimeListEngine"]
