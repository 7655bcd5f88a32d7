"""The graph properties reported to the host after every committed change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from grapher_core.geometry import Point
from grapher_core.settings import GraphType, Inequality


@dataclass(frozen=True)
class PointsProperty:
    points: tuple[Point, ...]

    def to_dict(self) -> dict[str, object]:
        return {"points": [point.as_dict() for point in self.points]}


@dataclass(frozen=True)
class QuadraticProperty:
    vertex: Point
    point: Point

    def to_dict(self) -> dict[str, object]:
        return {"vertex": self.vertex.as_dict(), "point": self.point.as_dict()}


@dataclass(frozen=True)
class InequalityProperty:
    points: tuple[Point, ...]
    inequality: Inequality

    def to_dict(self) -> dict[str, object]:
        return {
            "points": [point.as_dict() for point in self.points],
            "inequality": self.inequality.value,
        }


GraphProperty = Union[PointsProperty, QuadraticProperty, InequalityProperty]


@dataclass(frozen=True)
class GraphProperties:
    graph_type: GraphType
    property: GraphProperty

    def to_dict(self) -> dict[str, object]:
        return {"graphType": self.graph_type.value, "property": self.property.to_dict()}
