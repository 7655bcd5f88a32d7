"""Graph types, inequality values and the settings a host hands to a graph."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence, TypeVar

from grapher_core.errors import (
    InvalidSettingsError,
    MissingInequalityError,
    UnknownGraphTypeError,
)
from grapher_core.geometry import Point

T = TypeVar("T")

DEFAULT_MIN_GRID = -10.0
DEFAULT_MAX_GRID = 10.0
DEFAULT_STEP = 1.0
DEFAULT_POINT_SIZE = 5.0
DEFAULT_PICK_RADIUS = 10.0
DEFAULT_POINT_COLORS: tuple[str, ...] = (
    "#35605A",
    "#FF9F1C",
    "#4357AD",
    "#767522",
    "#643173",
)


class GraphType(Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    EXPONENTIAL = "exponential"
    LINEAR_INEQUALITY = "linear-inequality"
    SCATTER_POINTS = "scatter-points"
    EMPTY = "empty"

    @classmethod
    def parse(cls, value: "GraphType | str") -> "GraphType":
        if isinstance(value, GraphType):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownGraphTypeError(value) from None

    @property
    def control_point_count(self) -> int | None:
        """Fixed number of control points, or ``None`` when any count is allowed."""
        if self is GraphType.SCATTER_POINTS:
            return None
        if self is GraphType.EMPTY:
            return 0
        return 2


class Side(Enum):
    LESS = "less"
    GREATER = "greater"


class Inequality(Enum):
    """Strictness and side of a linear inequality, packed into four values."""

    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"

    @classmethod
    def from_parts(cls, side: Side, strict: bool) -> "Inequality":
        if side is Side.LESS:
            return cls.LT if strict else cls.LE
        return cls.GT if strict else cls.GE

    @property
    def is_strict(self) -> bool:
        return self in (Inequality.LT, Inequality.GT)

    @property
    def side(self) -> Side:
        return Side.LESS if self in (Inequality.LT, Inequality.LE) else Side.GREATER

    @property
    def is_dashed(self) -> bool:
        """Strict inequalities draw their boundary line dashed."""
        return self.is_strict

    def toggled_strictness(self) -> "Inequality":
        return Inequality.from_parts(self.side, not self.is_strict)

    def with_side(self, side: Side) -> "Inequality":
        return Inequality.from_parts(side, self.is_strict)


@dataclass(frozen=True)
class GraphSettings:
    """Configuration supplied by the host when a graph is set up.

    Point size and colours are rendering-only and are passed through
    untouched. ``curve_tolerance`` defaults to ``step_y`` when unset.
    """

    min_grid_x: float = DEFAULT_MIN_GRID
    max_grid_x: float = DEFAULT_MAX_GRID
    min_grid_y: float = DEFAULT_MIN_GRID
    max_grid_y: float = DEFAULT_MAX_GRID
    step_x: float = DEFAULT_STEP
    step_y: float = DEFAULT_STEP
    starting_points: tuple[Point, ...] = ()
    point_colors: tuple[str, ...] = DEFAULT_POINT_COLORS
    point_size: float = DEFAULT_POINT_SIZE
    inequality: Inequality | None = None
    show_bounding_labels: bool = False
    can_interact: bool = True
    pick_radius: float = DEFAULT_PICK_RADIUS
    curve_tolerance: float | None = None

    @property
    def grid_width(self) -> float:
        return self.max_grid_x - self.min_grid_x

    @property
    def grid_height(self) -> float:
        return self.max_grid_y - self.min_grid_y

    @property
    def effective_curve_tolerance(self) -> float:
        if self.curve_tolerance is None:
            return self.step_y
        return self.curve_tolerance

    def validate(self, graph_type: GraphType | str) -> "GraphSettings":
        """Check the settings against ``graph_type`` and return them unchanged."""

        graph_type = GraphType.parse(graph_type)
        if not self.min_grid_x < self.max_grid_x:
            raise InvalidSettingsError(
                f"min_grid_x ({self.min_grid_x}) must be below max_grid_x ({self.max_grid_x})."
            )
        if not self.min_grid_y < self.max_grid_y:
            raise InvalidSettingsError(
                f"min_grid_y ({self.min_grid_y}) must be below max_grid_y ({self.max_grid_y})."
            )
        if self.step_x <= 0 or self.step_y <= 0:
            raise InvalidSettingsError(
                f"Grid steps must be positive, got step_x={self.step_x}, step_y={self.step_y}."
            )
        if self.pick_radius < 0:
            raise InvalidSettingsError(f"pick_radius must not be negative, got {self.pick_radius}.")

        expected = graph_type.control_point_count
        if expected is not None and len(self.starting_points) != expected:
            raise InvalidSettingsError(
                f"A {graph_type.value} graph needs {expected} starting points, "
                f"got {len(self.starting_points)}."
            )
        if graph_type is GraphType.LINEAR_INEQUALITY and self.inequality is None:
            raise MissingInequalityError(
                "A linear-inequality graph needs an inequality in its settings."
            )
        return self


_DEFAULT_STARTING_POINTS: dict[GraphType, tuple[Point, ...]] = {
    GraphType.LINEAR: (Point(-1, -1), Point(1, 1)),
    GraphType.LINEAR_INEQUALITY: (Point(-1, -1), Point(1, 1)),
    GraphType.QUADRATIC: (Point(0, 0), Point(5, 5)),
    GraphType.EXPONENTIAL: (Point(0, 1), Point(2, 4)),
    GraphType.SCATTER_POINTS: tuple(Point(0, 0) for _ in range(5)),
    GraphType.EMPTY: (),
}


def cycle_to_length(values: Sequence[T], n: int) -> list[T]:
    """Repeat ``values`` until the result holds exactly ``n`` items."""

    if n <= 0:
        return []
    if not values:
        raise ValueError("Cannot build a non-empty list from an empty sequence.")
    return [values[i % len(values)] for i in range(n)]


def default_graph_settings(graph_type: GraphType | str, **overrides: object) -> GraphSettings:
    """Build settings for ``graph_type``, filling every ``None`` override with a default.

    An empty ``point_colors`` override also falls back to the default palette.
    """

    graph_type = GraphType.parse(graph_type)
    settings = GraphSettings(starting_points=_DEFAULT_STARTING_POINTS[graph_type])
    if graph_type is GraphType.LINEAR_INEQUALITY:
        settings = replace(settings, inequality=Inequality.LE)

    accepted = {name: value for name, value in overrides.items() if value is not None}
    unknown = set(accepted) - set(GraphSettings.__dataclass_fields__)
    if unknown:
        raise InvalidSettingsError(f"Unknown graph settings: {', '.join(sorted(unknown))}.")

    colors = accepted.get("point_colors")
    if colors is not None:
        if len(colors) == 0:
            accepted.pop("point_colors")
        else:
            accepted["point_colors"] = tuple(colors)
    if "starting_points" in accepted:
        accepted["starting_points"] = tuple(
            point if isinstance(point, Point) else Point(*point)
            for point in accepted["starting_points"]
        )
    if "inequality" in accepted and not isinstance(accepted["inequality"], Inequality):
        try:
            accepted["inequality"] = Inequality(accepted["inequality"])
        except ValueError:
            raise InvalidSettingsError(
                f"Unknown inequality {accepted['inequality']!r}, expected one of lt, le, gt, ge."
            ) from None
    return replace(settings, **accepted)


__all__ = [
    "DEFAULT_POINT_COLORS",
    "GraphSettings",
    "GraphType",
    "Inequality",
    "Side",
    "cycle_to_length",
    "default_graph_settings",
]
