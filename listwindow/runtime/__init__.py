"""Windowing engine runtime modules."""

from listwindow.runtime.config import EngineSettings, get_engine_settings, load_engine_settings
from listwindow.runtime.errors import (
    ConfigurationError,
    EngineClosedError,
    ListWindowError,
    MeasurementError,
)
from listwindow.runtime.fixed_metrics import FixedSizeMetrics
from listwindow.runtime.list_engine import RuntimeListEngine
from listwindow.runtime.scheduler import ManualTimer
from listwindow.runtime.variable_metrics import VariableSizeMetrics

__all__ = [
    "ConfigurationError",
    "EngineClosedError",
    "EngineSettings",
    "FixedSizeMetrics",
    "ListWindowError",
    "ManualTimer",
    "MeasurementError",
    "RuntimeListEngine",
    "VariableSizeMetrics",
    "get_engine_settings",
    "load_engine_settings",
]
