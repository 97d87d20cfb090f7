from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from listwindow.api.types import ListConfiguration
from listwindow.runtime.config import EngineSettings
from listwindow.runtime.fixed_metrics import FixedSizeMetrics
from listwindow.runtime.list_engine import RuntimeListEngine
from listwindow.runtime.scheduler import ManualTimer
from listwindow.runtime.variable_metrics import VariableSizeMetrics

TEST_SETTINGS = EngineSettings(
    debounce_interval_ms=150.0,
    default_overscan_count=2,
    default_estimated_item_size=50.0,
    log_level="INFO",
)


@dataclass(slots=True)
class FakeScrollTarget:
    extent: float | None = None
    writes: list[tuple[str, float]] = field(default_factory=list)

    def write_offset(self, layout: str, offset: float) -> None:
        self.writes.append((layout, offset))

    def content_extent(self, layout: str) -> float | None:
        del layout
        return self.extent


def fixed_config(**overrides: object) -> ListConfiguration:
    values: dict[str, object] = {"item_count": 100, "item_size": 50, "viewport_extent": 300}
    values.update(overrides)
    return ListConfiguration(**values)  # type: ignore[arg-type]


def make_fixed_engine(timer: ManualTimer, **overrides: object) -> RuntimeListEngine:
    return RuntimeListEngine(
        fixed_config(**overrides),
        metrics=FixedSizeMetrics(),
        timer=timer,
        settings=TEST_SETTINGS,
    )


def make_variable_engine(timer: ManualTimer, **overrides: object) -> RuntimeListEngine:
    values: dict[str, object] = {"item_size": lambda index: 100.0}
    values.update(overrides)
    return RuntimeListEngine(
        fixed_config(**values),
        metrics=VariableSizeMetrics(),
        timer=timer,
        settings=TEST_SETTINGS,
    )


@pytest.fixture
def timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture
def settings() -> EngineSettings:
    return TEST_SETTINGS
