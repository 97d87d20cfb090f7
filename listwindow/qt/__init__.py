"""Optional Qt host adapters (requires PyQt6)."""

from listwindow.qt.adapters import QtScrollTarget, QtTimerPort

__all__ = ["QtScrollTarget", "QtTimerPort"]
