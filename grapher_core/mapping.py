"""Grid <-> surface coordinate mapping plus grid clamping and step snapping."""

from __future__ import annotations

import math
from typing import Tuple

from grapher_core.geometry import Point, SurfacePoint
from grapher_core.settings import GraphSettings

SurfaceSize = Tuple[float, float]


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _pull_inside(value: float, lower: float, upper: float, step: float) -> float:
    """Move a value past a bound onto the outermost step multiple inside the bounds."""

    if lower <= value <= upper:
        return value
    first = math.ceil(lower / step - 1e-9) * step
    last = math.floor(upper / step + 1e-9) * step
    if first > last:
        # No step multiple fits between the bounds.
        return _clamp(value, lower, upper)
    return last if value > upper else first


class CoordinateMapper:
    """Scales grid coordinates onto a rendering surface, axis by axis.

    The origin of both spaces coincides and y is not flipped; translating the
    origin into view and flipping y belong to the renderer's own transform.
    """

    def __init__(self, settings: GraphSettings, surface_size: SurfaceSize) -> None:
        self._settings = settings
        self._width = 0.0
        self._height = 0.0
        self.resize(surface_size)

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def surface_size(self) -> SurfaceSize:
        return (self._width, self._height)

    def resize(self, surface_size: SurfaceSize) -> None:
        width, height = surface_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {surface_size}.")
        self._width = float(width)
        self._height = float(height)

    @property
    def scale_x(self) -> float:
        return self._width / self._settings.grid_width

    @property
    def scale_y(self) -> float:
        return self._height / self._settings.grid_height

    def grid_to_surface(self, point: Point) -> SurfacePoint:
        return SurfacePoint(point.x * self.scale_x, point.y * self.scale_y)

    def surface_to_grid(self, point: SurfacePoint) -> Point:
        return Point(point.x / self.scale_x, point.y / self.scale_y)

    def snap_to_step(self, point: Point) -> Point:
        step_x = self._settings.step_x
        step_y = self._settings.step_y
        return Point(
            _round_half_up(point.x / step_x) * step_x,
            _round_half_up(point.y / step_y) * step_y,
        )

    def clamp_to_grid(self, point: Point) -> Point:
        s = self._settings
        return Point(
            _clamp(point.x, s.min_grid_x, s.max_grid_x),
            _clamp(point.y, s.min_grid_y, s.max_grid_y),
        )

    def keep_on_grid(self, point: Point) -> Point:
        """Pull coordinates past a bound back onto the last step inside it."""

        s = self._settings
        return Point(
            _pull_inside(point.x, s.min_grid_x, s.max_grid_x, s.step_x),
            _pull_inside(point.y, s.min_grid_y, s.max_grid_y, s.step_y),
        )

    def commit_point(self, point: Point) -> Point:
        """Clamp into the grid first, then snap onto the step lattice.

        When a bound is not a multiple of the step, snapping can land one step
        outside the grid; such a coordinate is pulled back inside.
        """
        return self.keep_on_grid(self.snap_to_step(self.clamp_to_grid(point)))

    def pick_distance(self, a: Point, b: Point) -> float:
        sa = self.grid_to_surface(a)
        sb = self.grid_to_surface(b)
        return math.hypot(sa.x - sb.x, sa.y - sb.y)
