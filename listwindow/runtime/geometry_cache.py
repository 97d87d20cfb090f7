"""Per-index placement cache."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

from listwindow.api.types import Geometry

logger = logging.getLogger(__name__)

type GeometryFingerprint = tuple[Hashable, str, str]


def geometry_fingerprint(item_size: object | None, layout: str, direction: str) -> GeometryFingerprint:
    """Build the cache generation key from sizing-relevant configuration."""
    return (item_size if isinstance(item_size, Hashable) else id(item_size), layout, direction)


class GeometryCache:
    """Lazily filled index -> Geometry map with wholesale invalidation.

    There is no per-entry eviction: a generation lives until the fingerprint
    changes or `invalidate` is called.
    """

    def __init__(self) -> None:
        self._fingerprint: GeometryFingerprint | None = None
        self._entries: dict[int, Geometry] = {}
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def get(
        self,
        fingerprint: GeometryFingerprint,
        index: int,
        compute: Callable[[int], Geometry],
    ) -> Geometry:
        if fingerprint != self._fingerprint:
            if self._fingerprint is not None:
                logger.debug("geometry_cache_fingerprint_changed entries=%s", len(self._entries))
            self._replace(fingerprint)
        entry = self._entries.get(index)
        if entry is None:
            entry = compute(index)
            self._entries[index] = entry
        return entry

    def invalidate(self) -> None:
        """Discard the current generation."""
        self._replace(self._fingerprint)

    def _replace(self, fingerprint: GeometryFingerprint | None) -> None:
        self._fingerprint = fingerprint
        self._entries = {}
        self._generation += 1


__all__ = ["GeometryCache", "GeometryFingerprint", "geometry_fingerprint"]
