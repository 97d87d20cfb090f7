"""List windowing engine: render huge ordered collections one window at a time."""

from listwindow.api import (
    ListConfiguration,
    ListEngine,
    create_fixed_size_list,
    create_list_engine,
    create_variable_size_list,
)

__all__ = [
    "ListConfiguration",
    "ListEngine",
    "create_fixed_size_list",
    "create_list_engine",
    "create_variable_size_list",
]
