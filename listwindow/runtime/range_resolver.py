"""Render-window computation."""

from __future__ import annotations

from listwindow.api.metrics import MetricsStrategy
from listwindow.api.types import EMPTY_WINDOW, ListConfiguration, RenderWindow, ScrollState


def overscan_amounts(overscan_count: int, *, in_motion: bool, direction: str) -> tuple[int, int]:
    """Return (backward, forward) overscan for the current motion.

    At least one extra item is kept on each side so focus traversal does not
    wrap; the side trailing an active scroll shrinks to that single item.
    """
    full = max(1, overscan_count)
    backward = full if not in_motion or direction == "backward" else 1
    forward = full if not in_motion or direction == "forward" else 1
    return backward, forward


def driving_offset(config: ListConfiguration, state: ScrollState) -> float:
    return state.normalized_offset if config.is_horizontal else state.offset


def resolve_range(
    config: ListConfiguration,
    state: ScrollState,
    metrics: MetricsStrategy,
) -> RenderWindow:
    """Compute overscan and visible index bounds for one scroll state."""
    if config.item_count <= 0:
        return EMPTY_WINDOW

    offset = driving_offset(config, state)
    visible_start = metrics.start_index_for_offset(config, offset)
    visible_stop = metrics.stop_index_for_start_index(config, visible_start, offset)

    backward, forward = overscan_amounts(
        config.overscan_count or 0,
        in_motion=state.in_motion,
        direction=state.direction,
    )
    return RenderWindow(
        overscan_start=max(0, visible_start - backward),
        overscan_stop=max(0, min(config.item_count - 1, visible_stop + forward)),
        visible_start=visible_start,
        visible_stop=visible_stop,
    )


__all__ = ["driving_offset", "overscan_amounts", "resolve_range"]
