"""Public value types shared by the windowing engine and its hosts."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Literal

type Layout = Literal["vertical", "horizontal"]
type WritingDirection = Literal["ltr", "rtl"]
type ScrollDirection = Literal["forward", "backward"]
type Alignment = Literal["auto", "smart", "center", "start", "end"]
type LeadingEdge = Literal["start", "end"]

type ItemSizeFn = Callable[[int], float]
type ItemSizeSpec = float | ItemSizeFn
type ItemKeyFn = Callable[[int, object], Hashable]

LAYOUTS: tuple[str, ...] = ("vertical", "horizontal")
WRITING_DIRECTIONS: tuple[str, ...] = ("ltr", "rtl")
LEGACY_DIRECTIONS: tuple[str, ...] = ("horizontal", "vertical")
ALIGNMENTS: tuple[str, ...] = ("auto", "smart", "center", "start", "end")


@dataclass(frozen=True, slots=True)
class ListConfiguration:
    """Immutable list shape supplied by the host on every reconfigure.

    `viewport_extent` is the height of a vertical list or the width of a
    horizontal one. `writing_direction` also accepts the legacy
    "horizontal"/"vertical" spellings, which are translated once when the
    configuration is accepted. `overscan_count` and `estimated_item_size`
    fall back to engine settings when left as None.
    """

    item_count: int
    item_size: ItemSizeSpec
    viewport_extent: float
    layout: str = "vertical"
    writing_direction: str = "ltr"
    overscan_count: int | None = None
    estimated_item_size: float | None = None
    cross_extent: float | None = None
    initial_scroll_offset: float | None = None
    use_is_scrolling: bool = False
    item_key: ItemKeyFn | None = None
    item_data: object | None = None

    @property
    def is_horizontal(self) -> bool:
        return self.layout == "horizontal"


@dataclass(frozen=True, slots=True)
class RenderWindow:
    """Index range the host must realize for the current scroll state."""

    overscan_start: int
    overscan_stop: int
    visible_start: int
    visible_stop: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.overscan_start, self.overscan_stop, self.visible_start, self.visible_stop)

    def indices(self) -> range:
        """Return the overscan range as an inclusive-stop iterable."""
        return range(self.overscan_start, self.overscan_stop + 1)


EMPTY_WINDOW = RenderWindow(0, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class Geometry:
    """Absolute placement of one realized item."""

    index: int
    offset: float
    size: float
    layout: str
    leading_edge: LeadingEdge = "start"
    cross_axis: str = "full"

    def style(self) -> dict[str, float | str]:
        """Return an absolute-position style mapping for style-driven hosts."""
        horizontal = self.layout == "horizontal"
        side = "right" if self.leading_edge == "end" else "left"
        return {
            "position": "absolute",
            side: self.offset if horizontal else 0,
            "top": 0 if horizontal else self.offset,
            "height": "100%" if horizontal else self.size,
            "width": self.size if horizontal else "100%",
        }


@dataclass(frozen=True, slots=True)
class ScrollObservation:
    """One native scroll notification from the host surface."""

    raw_offset: float
    viewport_extent: float
    content_extent: float


@dataclass(frozen=True, slots=True)
class ScrollState:
    """Read-only snapshot of the scroll state machine."""

    offset: float
    normalized_offset: float
    direction: ScrollDirection
    in_motion: bool
    update_was_requested: bool


@dataclass(frozen=True, slots=True)
class ScrollEvent:
    """Payload delivered to scroll-state listeners."""

    direction: ScrollDirection
    offset: float
    was_requested: bool


@dataclass(frozen=True, slots=True)
class RealizedItem:
    """One host node produced for an index inside the overscan range."""

    key: Hashable
    index: int
    geometry: Geometry
    node: object


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """Result of one render pass over the current window."""

    window: RenderWindow
    items: tuple[RealizedItem, ...]
    content_extent: float
    layout: str
    pointer_events_enabled: bool


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque listener token."""

    id: int


__all__ = [
    "ALIGNMENTS",
    "EMPTY_WINDOW",
    "LAYOUTS",
    "LEGACY_DIRECTIONS",
    "WRITING_DIRECTIONS",
    "Alignment",
    "Geometry",
    "ItemKeyFn",
    "ItemSizeFn",
    "ItemSizeSpec",
    "Layout",
    "LeadingEdge",
    "ListConfiguration",
    "RealizedItem",
    "RenderPlan",
    "RenderWindow",
    "ScrollDirection",
    "ScrollEvent",
    "ScrollObservation",
    "ScrollState",
    "Subscription",
    "WritingDirection",
]
