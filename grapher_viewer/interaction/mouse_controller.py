"""Mouse interaction logic for the graph widget."""
from __future__ import annotations

from typing import Callable

from PyQt5 import QtCore, QtGui

from grapher_core.graph import InteractiveGraph
from grapher_viewer.interaction import widget_to_surface


class GraphMouseController:
    """Forwards left button press/drag/release to the graph's drag machine."""

    def __init__(self, graph: InteractiveGraph, request_repaint: Callable[[], None]) -> None:
        self._graph = graph
        self._request_repaint = request_repaint

    def handle_mouse_press(self, event: QtGui.QMouseEvent) -> bool:
        if event.button() != QtCore.Qt.LeftButton:
            return False
        handled = self._graph.press(widget_to_surface(event.pos(), self._graph.mapper))
        if handled:
            self._request_repaint()
        return handled

    def handle_mouse_move(self, event: QtGui.QMouseEvent) -> bool:
        if not event.buttons() & QtCore.Qt.LeftButton:
            return False
        handled = self._graph.move(widget_to_surface(event.pos(), self._graph.mapper))
        if handled:
            self._request_repaint()
        return handled

    def handle_mouse_release(self, event: QtGui.QMouseEvent, size: QtCore.QSize) -> bool:
        if event.button() != QtCore.Qt.LeftButton:
            return False
        inside = QtCore.QRect(QtCore.QPoint(0, 0), size).contains(event.pos())
        # Off the widget the release finishes at the last position seen inside.
        cursor = widget_to_surface(event.pos(), self._graph.mapper) if inside else None
        handled = self._graph.release(cursor)
        if handled:
            self._request_repaint()
        return handled
