from __future__ import annotations

import pytest

from listwindow.runtime.errors import ConfigurationError
from listwindow.runtime.fixed_metrics import FixedSizeMetrics
from tests.listwindow.conftest import fixed_config


def test_fixed_offsets_sizes_and_total() -> None:
    metrics = FixedSizeMetrics()
    config = fixed_config()
    assert metrics.item_offset(config, 0) == 0
    assert metrics.item_offset(config, 7) == 350
    assert metrics.item_size(config, 42) == 50
    assert metrics.estimated_total_extent(config) == 5000


def test_fixed_start_and_stop_indices() -> None:
    metrics = FixedSizeMetrics()
    config = fixed_config()
    assert metrics.start_index_for_offset(config, 0) == 0
    assert metrics.stop_index_for_start_index(config, 0, 0) == 5
    assert metrics.start_index_for_offset(config, 125) == 2
    # Item 2 is half scrolled out, so one extra item is needed at the end.
    assert metrics.stop_index_for_start_index(config, 2, 125) == 8


def test_fixed_indices_clamp_beyond_extent() -> None:
    metrics = FixedSizeMetrics()
    config = fixed_config()
    start = metrics.start_index_for_offset(config, 1_000_000)
    assert start == 99
    assert metrics.stop_index_for_start_index(config, start, 1_000_000) == 99


def test_fixed_single_item_list_stays_in_bounds() -> None:
    metrics = FixedSizeMetrics()
    config = fixed_config(item_count=1)
    assert metrics.start_index_for_offset(config, 400) == 0
    assert metrics.stop_index_for_start_index(config, 0, 400) == 0


def test_fixed_validate_rejects_non_numeric_and_non_positive_sizes() -> None:
    metrics = FixedSizeMetrics()
    with pytest.raises(ConfigurationError):
        metrics.validate(fixed_config(item_size=lambda index: 10.0))
    with pytest.raises(ConfigurationError):
        metrics.validate(fixed_config(item_size=0))
    with pytest.raises(ConfigurationError):
        metrics.validate(fixed_config(item_size=True))
    metrics.validate(fixed_config(item_size=12.5))
