from __future__ import annotations

from typing import Sequence

from grapher_core.errors import MissingInequalityError
from grapher_core.geometry import Point
from grapher_core.settings import Inequality


class GraphModel:
    """Authoritative control points (and inequality) of a single graph.

    The number of points is fixed when the model is built. Interaction code
    writes through :meth:`set_point_at`; it never keeps copies of the points.
    """

    def __init__(self, points: Sequence[Point], inequality: Inequality | None = None) -> None:
        self._points = list(points)
        self._inequality = inequality

    @property
    def point_count(self) -> int:
        return len(self._points)

    def get_points(self) -> list[Point]:
        return list(self._points)

    def get_point(self, index: int) -> Point:
        return self._points[index]

    def set_point_at(self, index: int, point: Point) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range for {len(self._points)} points.")
        self._points[index] = point

    @property
    def has_inequality(self) -> bool:
        return self._inequality is not None

    def get_inequality(self) -> Inequality:
        if self._inequality is None:
            raise MissingInequalityError("This graph has no inequality.")
        return self._inequality

    def set_inequality(self, value: Inequality) -> None:
        if self._inequality is None:
            raise MissingInequalityError("This graph has no inequality.")
        self._inequality = value
