"""Keyboard interaction handlers for the graph widget."""
from __future__ import annotations

from typing import Callable

from PyQt5 import QtCore, QtGui

from grapher_core.graph import InteractiveGraph
from grapher_core.interaction import Direction

_NUDGE_KEYS = {
    QtCore.Qt.Key_Up: Direction.UP,
    QtCore.Qt.Key_Down: Direction.DOWN,
    QtCore.Qt.Key_Left: Direction.LEFT,
    QtCore.Qt.Key_Right: Direction.RIGHT,
}


class GraphKeyboardController:
    """Arrow keys nudge the focused point, Tab and Backtab move the focus."""

    def __init__(self, graph: InteractiveGraph, request_repaint: Callable[[], None]) -> None:
        self._graph = graph
        self._request_repaint = request_repaint

    def handle_key_press(self, event: QtGui.QKeyEvent) -> bool:
        if not self._graph.can_interact:
            return False
        key = event.key()
        if key == QtCore.Qt.Key_Tab:
            self._graph.focus_next()
            self._request_repaint()
            return True
        if key == QtCore.Qt.Key_Backtab:
            self._graph.focus_next(reverse=True)
            self._request_repaint()
            return True
        direction = _NUDGE_KEYS.get(key)
        if direction is None:
            return False
        if self._graph.nudge(direction):
            self._request_repaint()
        return True

    def handle_key_release(self, event: QtGui.QKeyEvent) -> bool:
        return False
