"""Main window of the standalone grapher viewer."""
from __future__ import annotations

import logging

from PyQt5 import QtWidgets

from grapher_core.equations import (
    exponential_coefficients,
    linear_coefficients,
    quadratic_coefficients,
)
from grapher_core.errors import DegenerateInputError
from grapher_core.geometry import Point
from grapher_core.properties import (
    GraphProperties,
    InequalityProperty,
    PointsProperty,
    QuadraticProperty,
)
from grapher_core.settings import GraphType, Inequality
from grapher_core.strategies import EXPONENTIAL_ASYMPTOTE_Y
from grapher_viewer.config import ViewerConfig
from grapher_viewer.widget import GraphWidget

logger = logging.getLogger(__name__)

_INEQUALITY_SYMBOLS = {
    Inequality.LT: "<",
    Inequality.LE: "<=",
    Inequality.GT: ">",
    Inequality.GE: ">=",
}


def _fmt(value: float) -> str:
    return f"{value:.4g}"


def describe_properties(properties: GraphProperties) -> str:
    """One line summary of the graph's current equation for the status bar."""

    prop = properties.property
    try:
        if isinstance(prop, QuadraticProperty):
            q = quadratic_coefficients(prop.vertex, prop.point)
            return f"y = {_fmt(q.a)}(x - {_fmt(q.vx)})^2 + {_fmt(q.vy)}"
        if isinstance(prop, InequalityProperty):
            point1, point2 = prop.points
            line = linear_coefficients(point1, point2)
            symbol = _INEQUALITY_SYMBOLS[prop.inequality]
            return f"y {symbol} {_fmt(line.m)}x + {_fmt(line.b)}"
        if isinstance(prop, PointsProperty) and properties.graph_type is GraphType.LINEAR:
            point1, point2 = prop.points
            line = linear_coefficients(point1, point2)
            return f"y = {_fmt(line.m)}x + {_fmt(line.b)}"
        if isinstance(prop, PointsProperty) and properties.graph_type is GraphType.EXPONENTIAL:
            point1, point2 = prop.points
            e = exponential_coefficients(EXPONENTIAL_ASYMPTOTE_Y, point1, point2)
            return f"y = {_fmt(e.a)} * {_fmt(e.b)}^x + {_fmt(e.c)}"
    except DegenerateInputError:
        return "undefined (points share an x coordinate)"
    if isinstance(prop, PointsProperty):
        return "points: " + ", ".join(f"({_fmt(p.x)}, {_fmt(p.y)})" for p in prop.points)
    return ""


class GraphWindow(QtWidgets.QMainWindow):
    def __init__(self, config: ViewerConfig) -> None:
        super().__init__()
        self.setWindowTitle(f"Grapher - {config.graph_type.value}")
        self._graph_widget = GraphWidget(config.graph_type, config.settings, self)
        self.setCentralWidget(self._graph_widget)
        self._graph_widget.pointChanged.connect(self._on_point_changed)
        self.statusBar().showMessage(describe_properties(self._graph_widget.graph.properties()))
        self.resize(520, 560)

    @property
    def graph_widget(self) -> GraphWidget:
        return self._graph_widget

    def _on_point_changed(self, moving_point: Point | None, properties: GraphProperties) -> None:
        logger.debug("Point changed to %s: %s", moving_point, properties.to_dict())
        self.statusBar().showMessage(describe_properties(properties))
