"""Qt event translation for the graph widget."""
from __future__ import annotations

from PyQt5 import QtCore

from grapher_core.geometry import SurfacePoint
from grapher_core.mapping import CoordinateMapper
from grapher_viewer.rendering import surface_transform


def widget_to_surface(pos: QtCore.QPoint | QtCore.QPointF, mapper: CoordinateMapper) -> SurfacePoint:
    """Undo the widget transform so a cursor position lands in surface units."""

    inverted, _invertible = surface_transform(mapper).inverted()
    point = inverted.map(QtCore.QPointF(pos))
    return SurfacePoint(point.x(), point.y())
