from __future__ import annotations

from listwindow.runtime.normalize import denormalize_offset, normalize_offset


def test_ltr_offsets_pass_through() -> None:
    assert normalize_offset("ltr", 125.0, 300.0, 5000.0) == 125.0
    assert denormalize_offset("ltr", 125.0, 300.0, 5000.0) == 125.0


def test_rtl_offset_measures_from_logical_start() -> None:
    assert normalize_offset("rtl", 4700.0, 300.0, 5000.0) == 0.0
    assert normalize_offset("rtl", 100.0, 300.0, 1000.0) == 600.0


def test_rtl_round_trip_over_scrollable_range() -> None:
    viewport, content = 300.0, 1000.0
    for raw in range(0, int(content - viewport) + 1, 25):
        normalized = normalize_offset("rtl", float(raw), viewport, content)
        assert 0.0 <= normalized <= content - viewport
        assert denormalize_offset("rtl", normalized, viewport, content) == raw


def test_rtl_normalize_is_unclamped_for_callers_to_decide() -> None:
    assert normalize_offset("rtl", 50.0, 300.0, 100.0) == -250.0
