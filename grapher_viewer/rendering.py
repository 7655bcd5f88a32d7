"""QPainter drawing of a recorded graph scene."""
from __future__ import annotations

from PyQt5 import QtCore, QtGui

from grapher_core.geometry import Point
from grapher_core.mapping import CoordinateMapper
from grapher_core.renderer import (
    CurveItem,
    LabelItem,
    LineItem,
    PointItem,
    RegionItem,
    SceneRenderer,
    TickItem,
)

_TICK_HALF_LENGTH = 5.0
_LABEL_MARGIN = 4.0
_FOCUS_RING_GAP = 3.0


def surface_transform(mapper: CoordinateMapper) -> QtGui.QTransform:
    """Move the grid origin into place on the widget and flip the y axis."""

    settings = mapper.settings
    _width, height = mapper.surface_size
    tx = -settings.min_grid_x * mapper.scale_x
    ty = height + settings.min_grid_y * mapper.scale_y
    return QtGui.QTransform(1.0, 0.0, 0.0, -1.0, tx, ty)


def map_to_widget(point: Point, mapper: CoordinateMapper, transform: QtGui.QTransform) -> QtCore.QPointF:
    surface = mapper.grid_to_surface(point)
    return transform.map(QtCore.QPointF(surface.x, surface.y))


def paint_scene(painter: QtGui.QPainter, scene: SceneRenderer, mapper: CoordinateMapper) -> None:
    transform = surface_transform(mapper)
    painter.save()
    painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
    for item in scene.ordered_items():
        if isinstance(item, LineItem):
            _draw_line(painter, item, mapper, transform)
        elif isinstance(item, RegionItem):
            _draw_region(painter, item, mapper, transform)
        elif isinstance(item, CurveItem):
            _draw_curve(painter, item, mapper, transform)
        elif isinstance(item, PointItem):
            _draw_point(painter, item, mapper, transform)
        elif isinstance(item, LabelItem):
            _draw_label(painter, item, mapper, transform)
        elif isinstance(item, TickItem):
            _draw_tick(painter, item, mapper, transform)
    painter.restore()


def _set_pen(painter: QtGui.QPainter, color: str, width: float, dashed: bool = False) -> None:
    pen = QtGui.QPen(QtGui.QColor(color))
    pen.setWidthF(width)
    if dashed:
        pen.setStyle(QtCore.Qt.DashLine)
    painter.setPen(pen)


def _draw_line(painter, item: LineItem, mapper, transform) -> None:
    _set_pen(painter, item.color, 1.0)
    painter.drawLine(
        QtCore.QLineF(
            map_to_widget(item.start, mapper, transform),
            map_to_widget(item.end, mapper, transform),
        )
    )


def _draw_region(painter, item: RegionItem, mapper, transform) -> None:
    if len(item.polygon) < 3:
        return
    polygon = QtGui.QPolygonF([map_to_widget(point, mapper, transform) for point in item.polygon])
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(QtGui.QBrush(QtGui.QColor(item.color)))
    painter.drawPolygon(polygon)
    painter.setBrush(QtCore.Qt.NoBrush)


def _draw_curve(painter, item: CurveItem, mapper, transform) -> None:
    if len(item.points) < 2:
        return
    path = QtGui.QPainterPath()
    path.moveTo(map_to_widget(item.points[0], mapper, transform))
    for point in item.points[1:]:
        path.lineTo(map_to_widget(point, mapper, transform))
    _set_pen(painter, item.color, 2.0, dashed=item.dashed)
    painter.setBrush(QtCore.Qt.NoBrush)
    painter.drawPath(path)


def _draw_point(painter, item: PointItem, mapper, transform) -> None:
    center = map_to_widget(item.center, mapper, transform)
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(QtGui.QBrush(QtGui.QColor(item.color)))
    painter.drawEllipse(center, item.radius, item.radius)
    painter.setBrush(QtCore.Qt.NoBrush)
    if item.focused:
        ring = item.radius + _FOCUS_RING_GAP
        _set_pen(painter, "black", 1.5)
        painter.drawEllipse(center, ring, ring)


def _draw_label(painter, item: LabelItem, mapper, transform) -> None:
    anchor = map_to_widget(item.anchor, mapper, transform)
    metrics = painter.fontMetrics()
    width = metrics.horizontalAdvance(item.text)
    x = anchor.x() - width / 2
    y = anchor.y() - _LABEL_MARGIN
    if "left" in item.alignment:
        x = anchor.x() + _LABEL_MARGIN
    elif "right" in item.alignment:
        x = anchor.x() - width - _LABEL_MARGIN
    if "bottom" in item.alignment:
        y = anchor.y() + metrics.ascent() + _LABEL_MARGIN
    _set_pen(painter, "black", 1.0)
    painter.drawText(QtCore.QPointF(x, y), item.text)


def _draw_tick(painter, item: TickItem, mapper, transform) -> None:
    anchor = map_to_widget(item.anchor, mapper, transform)
    _set_pen(painter, "black", 1.0)
    if item.axis == "x":
        start = QtCore.QPointF(anchor.x(), anchor.y() - _TICK_HALF_LENGTH)
        end = QtCore.QPointF(anchor.x(), anchor.y() + _TICK_HALF_LENGTH)
    else:
        start = QtCore.QPointF(anchor.x() - _TICK_HALF_LENGTH, anchor.y())
        end = QtCore.QPointF(anchor.x() + _TICK_HALF_LENGTH, anchor.y())
    painter.drawLine(QtCore.QLineF(start, end))
