"""Scroll-offset bookkeeping and its three transition entry points."""

from __future__ import annotations

import logging

from listwindow.api.metrics import MetricsStrategy
from listwindow.api.types import Alignment, ListConfiguration, ScrollDirection, ScrollObservation, ScrollState
from listwindow.runtime.debounce import DebounceController
from listwindow.runtime.normalize import denormalize_offset, normalize_offset

logger = logging.getLogger(__name__)


def _direction(previous: float, current: float) -> ScrollDirection:
    return "forward" if previous < current else "backward"


class ScrollStateMachine:
    """Idle/scrolling machine over the list's scroll offset.

    State is only mutated through `observe`, `scroll_to`, `scroll_to_item`,
    and the debounce-driven `settle`/echo-correction steps. Each transition
    returns whether anything was committed; a transition that would leave
    the raw offset unchanged commits nothing and does not re-arm the
    debounce timer.
    """

    def __init__(
        self,
        *,
        offset: float,
        normalized_offset: float,
        debounce: DebounceController,
    ) -> None:
        self._offset = float(offset)
        self._normalized_offset = float(normalized_offset)
        self._direction: ScrollDirection = "forward"
        self._in_motion = False
        self._update_was_requested = False
        self._debounce = debounce

    @classmethod
    def initial(
        cls,
        config: ListConfiguration,
        metrics: MetricsStrategy,
        debounce: DebounceController,
    ) -> ScrollStateMachine:
        """Build the starting state from the configured initial offset."""
        initial = config.initial_scroll_offset
        if not config.is_horizontal:
            offset = float(initial) if initial is not None else 0.0
            return cls(offset=offset, normalized_offset=offset, debounce=debounce)

        direction = config.writing_direction
        viewport = config.viewport_extent
        extent = metrics.estimated_total_extent(config)
        if initial is None:
            # Logical start of the list, expressed natively.
            offset = max(0.0, denormalize_offset(direction, 0.0, min(viewport, extent), extent))
        else:
            offset = float(initial)
        normalized = max(0.0, normalize_offset(direction, offset, viewport, extent))
        return cls(offset=offset, normalized_offset=normalized, debounce=debounce)

    def snapshot(self) -> ScrollState:
        return ScrollState(
            offset=self._offset,
            normalized_offset=self._normalized_offset,
            direction=self._direction,
            in_motion=self._in_motion,
            update_was_requested=self._update_was_requested,
        )

    def observe(self, config: ListConfiguration, observation: ScrollObservation) -> bool:
        """Apply a native scroll event reported by the host."""
        raw = max(0.0, float(observation.raw_offset))
        if raw == self._offset:
            # Echo of an offset the engine already committed.
            return False

        if config.is_horizontal:
            normalized = max(
                0.0,
                normalize_offset(
                    config.writing_direction,
                    raw,
                    observation.viewport_extent,
                    observation.content_extent,
                ),
            )
            direction = _direction(self._normalized_offset, normalized)
        else:
            normalized = raw
            direction = _direction(self._offset, raw)

        self._commit(offset=raw, normalized=normalized, direction=direction, requested=False)
        self._in_motion = True
        self._debounce.arm()
        logger.debug("scroll_observed offset=%s direction=%s", raw, direction)
        return True

    def scroll_to(self, config: ListConfiguration, metrics: MetricsStrategy, offset: float) -> bool:
        """Apply a programmatic scroll to a host-native offset."""
        target = float(offset)
        if config.is_horizontal:
            direction_name = config.writing_direction
            viewport = config.viewport_extent
            extent = metrics.estimated_total_extent(config)
            normalized = normalize_offset(direction_name, target, viewport, extent)
            if normalized < 0:
                normalized = 0.0
                target = denormalize_offset(direction_name, normalized, viewport, extent)
            if target < 0:
                target = 0.0
                normalized = max(0.0, normalize_offset(direction_name, target, viewport, extent))
            if target == self._offset:
                return False
            direction = _direction(self._normalized_offset, normalized)
        else:
            target = max(0.0, target)
            normalized = target
            if target == self._offset:
                return False
            direction = _direction(self._offset, target)

        self._commit(offset=target, normalized=normalized, direction=direction, requested=True)
        self._debounce.arm()
        logger.debug("scroll_requested offset=%s direction=%s", target, direction)
        return True

    def scroll_to_item(
        self,
        config: ListConfiguration,
        metrics: MetricsStrategy,
        index: int,
        alignment: Alignment,
    ) -> bool:
        """Apply a programmatic scroll that brings `index` into view."""
        if config.item_count <= 0:
            return False
        index = max(0, min(int(index), config.item_count - 1))

        if config.is_horizontal:
            normalized = metrics.offset_for_index_and_alignment(
                config, index, alignment, self._normalized_offset
            )
            start = metrics.start_index_for_offset(config, normalized)
            stop = metrics.stop_index_for_start_index(config, start, normalized)
            direction = _direction(self._normalized_offset, normalized)
            forward = max(1, config.overscan_count or 1) if direction == "forward" else 1
            # Denormalize against the extent after measuring the target window.
            metrics.item_offset(config, max(0, min(config.item_count - 1, stop + forward)))
            extent = metrics.estimated_total_extent(config)
            target = denormalize_offset(
                config.writing_direction,
                normalized,
                min(config.viewport_extent, extent),
                extent,
            )
            target = max(0.0, target)
        else:
            target = metrics.offset_for_index_and_alignment(config, index, alignment, self._offset)
            normalized = target
            direction = _direction(self._offset, target)

        if target == self._offset:
            return False
        self._commit(offset=target, normalized=normalized, direction=direction, requested=True)
        self._debounce.arm()
        logger.debug(
            "scroll_to_item index=%s align=%s offset=%s direction=%s", index, alignment, target, direction
        )
        return True

    def settle(self) -> bool:
        """Leave the in-motion state; returns whether the flag changed."""
        if not self._in_motion:
            return False
        self._in_motion = False
        return True

    def correct_normalized(self, config: ListConfiguration, content_extent: float) -> bool:
        """Recompute the normalized offset once the host reports its real extent."""
        if not config.is_horizontal:
            return False
        normalized = max(
            0.0,
            normalize_offset(
                config.writing_direction, self._offset, config.viewport_extent, content_extent
            ),
        )
        if normalized == self._normalized_offset:
            return False
        self._normalized_offset = normalized
        return True

    def _commit(
        self,
        *,
        offset: float,
        normalized: float,
        direction: ScrollDirection,
        requested: bool,
    ) -> None:
        self._offset = offset
        self._normalized_offset = normalized
        self._direction = direction
        self._update_was_requested = requested


__all__ = ["ScrollStateMachine"]
