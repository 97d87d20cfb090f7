"""Scroll-to-index alignment policy shared by all metrics strategies."""

from __future__ import annotations

from listwindow.api.types import ALIGNMENTS
from listwindow.runtime.errors import ConfigurationError


def resolve_alignment_offset(
    *,
    alignment: str,
    item_offset: float,
    item_size: float,
    viewport_extent: float,
    current_offset: float,
    total_extent: float,
) -> float:
    """Return the offset that brings an item into view under `alignment`.

    Every result lies in `[0, max(0, total_extent - viewport_extent)]`.
    """
    if alignment not in ALIGNMENTS:
        raise ConfigurationError(
            f'invalid alignment "{alignment}"; expected one of {", ".join(ALIGNMENTS)}'
        )
    last_offset = max(0.0, total_extent - viewport_extent)
    # Item flush with the viewport start / flush with the viewport end.
    max_offset = max(0.0, min(last_offset, item_offset))
    min_offset = max(0.0, item_offset - viewport_extent + item_size)

    if alignment == "smart":
        near = min_offset - viewport_extent <= current_offset <= max_offset + viewport_extent
        alignment = "auto" if near else "center"

    if alignment == "start":
        return max_offset
    if alignment == "end":
        return min(min_offset, last_offset)
    if alignment == "center":
        centered = item_offset - (viewport_extent - item_size) / 2
        return max(0.0, min(last_offset, centered))
    if min_offset <= current_offset <= max_offset:
        return current_offset
    if current_offset < min_offset:
        return min(min_offset, last_offset)
    return max_offset


__all__ = ["resolve_alignment_offset"]
