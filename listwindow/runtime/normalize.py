"""Conversion between host-native and direction-agnostic scroll offsets.

Right-to-left surfaces have historically reported horizontal offsets in
three incompatible ways (negative from the right, positive descending,
positive ascending). The engine fixes one canonical native convention: an
rtl offset is measured from the left edge exactly like an ltr offset, so the
logical start of the list sits at `content - viewport`. Hosts with another
native convention translate once at their boundary.

Under that convention the rtl mapping is its own inverse, so the same
arithmetic serves both directions.
"""

from __future__ import annotations


def normalize_offset(
    direction: str,
    scroll_offset: float,
    viewport_extent: float,
    content_extent: float,
) -> float:
    """Return the logically-forward offset for a host-native one.

    The result is not clamped; callers decide how to treat a negative value.
    """
    if direction == "rtl":
        return content_extent - viewport_extent - scroll_offset
    return scroll_offset


def denormalize_offset(
    direction: str,
    normalized_offset: float,
    viewport_extent: float,
    content_extent: float,
) -> float:
    """Return the host-native offset for a normalized one."""
    if direction == "rtl":
        return content_extent - viewport_extent - normalized_offset
    return normalized_offset


__all__ = ["denormalize_offset", "normalize_offset"]
