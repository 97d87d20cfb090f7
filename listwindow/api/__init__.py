"""Public windowing engine API contracts."""

from listwindow.api.host import RealizeFn, ScrollTarget, TimerPort
from listwindow.api.list_engine import (
    ListEngine,
    ResettableListEngine,
    create_fixed_size_list,
    create_list_engine,
    create_variable_size_list,
)
from listwindow.api.logging import LoggingConfig, configure_logging
from listwindow.api.metrics import (
    MetricsStrategy,
    ResettableMetricsStrategy,
    create_fixed_size_metrics,
    create_variable_size_metrics,
)
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

__all__ = [
    "Alignment",
    "Geometry",
    "ListConfiguration",
    "ListEngine",
    "LoggingConfig",
    "MetricsStrategy",
    "RealizeFn",
    "RealizedItem",
    "RenderPlan",
    "RenderWindow",
    "ResettableListEngine",
    "ResettableMetricsStrategy",
    "ScrollEvent",
    "ScrollObservation",
    "ScrollState",
    "ScrollTarget",
    "Subscription",
    "TimerPort",
    "configure_logging",
    "create_fixed_size_list",
    "create_fixed_size_metrics",
    "create_list_engine",
    "create_variable_size_list",
    "create_variable_size_metrics",
]
