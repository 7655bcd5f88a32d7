"""Per graph type behaviour plugged into the shared interaction machine.

A strategy is picked once, when the graph is set up. It knows how its control
points map to a curve, what the host is told after a change, and which domain
rule runs after a point moves.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from grapher_core.equations import (
    CurveFunction,
    exponential_function,
    is_point_below_function,
    is_point_close_to_function,
    linear_function,
    quadratic_function,
)
from grapher_core.errors import DegenerateInputError, UnknownGraphTypeError
from grapher_core.geometry import Point
from grapher_core.model import GraphModel
from grapher_core.properties import (
    GraphProperties,
    InequalityProperty,
    PointsProperty,
    QuadraticProperty,
)
from grapher_core.renderer import (
    CURVE_GROUP,
    INEQUALITY_SIDE_GROUP,
    POINTS_GROUP,
    Renderer,
)
from grapher_core.settings import GraphSettings, GraphType, Side, cycle_to_length

logger = logging.getLogger(__name__)

CURVE_COLOR = "blue"
INEQUALITY_SIDE_COLOR = "#1900ff00"
EXPONENTIAL_ASYMPTOTE_Y = 0.0


class GraphStrategy(ABC):
    """Shared protocol for the five graph types."""

    graph_type: GraphType
    # Linear inequalities report every move, even one that lands on the same step.
    always_notify = False

    def __init__(self, settings: GraphSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    def draggable_indices(self, model: GraphModel) -> range:
        return range(model.point_count)

    def compute_curve(self, model: GraphModel) -> CurveFunction | None:
        """Return the fitted curve, or ``None`` for graphs that have no curve."""
        return None

    def fitted_curve(self, model: GraphModel) -> CurveFunction | None:
        try:
            return self.compute_curve(model)
        except DegenerateInputError as exc:
            logger.debug("Skipping degenerate %s curve: %s", self.graph_type.value, exc)
            return None

    def apply_move(self, model: GraphModel, index: int, point: Point) -> None:
        model.set_point_at(index, point)

    def on_press_miss(self, model: GraphModel, grid_point: Point) -> bool:
        """Handle a press that picked no control point; True when the model changed."""
        return False

    def is_dashed(self, model: GraphModel) -> bool:
        return False

    @abstractmethod
    def properties(self, model: GraphModel) -> GraphProperties:
        """Snapshot of the mathematical properties the host receives."""

    def draw(self, renderer: Renderer, model: GraphModel, focused_index: int | None = None) -> None:
        self.draw_points(renderer, model, focused_index)
        self.draw_curve(renderer, model)

    def draw_points(
        self, renderer: Renderer, model: GraphModel, focused_index: int | None = None
    ) -> None:
        renderer.remove_group(POINTS_GROUP)
        points = model.get_points()
        colors = cycle_to_length(self._settings.point_colors, len(points))
        for index, (point, color) in enumerate(zip(points, colors)):
            renderer.create_point(
                POINTS_GROUP,
                point,
                self._settings.point_size,
                color,
                focused=index == focused_index,
            )

    def draw_curve(self, renderer: Renderer, model: GraphModel) -> None:
        renderer.remove_group(CURVE_GROUP)
        fn = self.fitted_curve(model)
        if fn is None:
            return
        s = self._settings
        renderer.create_curve(
            CURVE_GROUP,
            fn,
            (s.min_grid_x, s.max_grid_x, s.step_x),
            CURVE_COLOR,
            dashed=self.is_dashed(model),
        )


class LinearStrategy(GraphStrategy):
    graph_type = GraphType.LINEAR

    def compute_curve(self, model: GraphModel) -> CurveFunction | None:
        point1, point2 = model.get_points()
        return linear_function(point1, point2)

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(self.graph_type, PointsProperty(tuple(model.get_points())))


class QuadraticStrategy(GraphStrategy):
    """Point 0 is the vertex, point 1 sets the opening of the parabola."""

    graph_type = GraphType.QUADRATIC
    VERTEX_INDEX = 0
    POINT_INDEX = 1

    def compute_curve(self, model: GraphModel) -> CurveFunction | None:
        return quadratic_function(model.get_point(self.VERTEX_INDEX), model.get_point(self.POINT_INDEX))

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(
            self.graph_type,
            QuadraticProperty(
                vertex=model.get_point(self.VERTEX_INDEX),
                point=model.get_point(self.POINT_INDEX),
            ),
        )


class ExponentialStrategy(GraphStrategy):
    graph_type = GraphType.EXPONENTIAL
    asymptote_y = EXPONENTIAL_ASYMPTOTE_Y

    def compute_curve(self, model: GraphModel) -> CurveFunction | None:
        point1, point2 = model.get_points()
        return exponential_function(self.asymptote_y, point1, point2)

    def apply_move(self, model: GraphModel, index: int, point: Point) -> None:
        model.set_point_at(index, point)
        # When the moved point crosses the asymptote, mirror the other point
        # so both stay on the same side of it.
        other_index = 1 - index
        other = model.get_point(other_index)
        if (other.y > 0 and point.y < 0) or (other.y < 0 and point.y > 0):
            model.set_point_at(other_index, other.with_y(-other.y))
            logger.debug("Mirrored exponential point %d to y=%s", other_index, -other.y)

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(self.graph_type, PointsProperty(tuple(model.get_points())))


class ScatterPointsStrategy(GraphStrategy):
    graph_type = GraphType.SCATTER_POINTS

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(self.graph_type, PointsProperty(tuple(model.get_points())))


class LinearInequalityStrategy(GraphStrategy):
    """A boundary line plus the shaded half-plane that satisfies the inequality.

    A press that misses both points edits the inequality instead: on the line
    it toggles strictness, on the other side of the line it flips the side.
    """

    graph_type = GraphType.LINEAR_INEQUALITY
    always_notify = True

    def compute_curve(self, model: GraphModel) -> CurveFunction | None:
        point1, point2 = model.get_points()
        return linear_function(point1, point2)

    def is_dashed(self, model: GraphModel) -> bool:
        return model.get_inequality().is_dashed

    def on_press_miss(self, model: GraphModel, grid_point: Point) -> bool:
        fn = self.fitted_curve(model)
        if fn is None:
            return False
        current = model.get_inequality()
        if is_point_close_to_function(fn, grid_point, self._settings.effective_curve_tolerance):
            updated = current.toggled_strictness()
        else:
            clicked_side = Side.LESS if is_point_below_function(fn, grid_point) else Side.GREATER
            updated = current.with_side(clicked_side)
        if updated is current:
            return False
        model.set_inequality(updated)
        logger.debug("Inequality changed from %s to %s", current.value, updated.value)
        return True

    def shaded_region(self, model: GraphModel) -> list[Point] | None:
        fn = self.fitted_curve(model)
        if fn is None:
            return None
        s = self._settings
        end1 = Point(s.min_grid_x, float(fn(s.min_grid_x)))
        end2 = Point(s.max_grid_x, float(fn(s.max_grid_x)))
        corner_y = s.min_grid_y if model.get_inequality().side is Side.LESS else s.max_grid_y
        return [end1, Point(s.min_grid_x, corner_y), Point(s.max_grid_x, corner_y), end2]

    def draw_curve(self, renderer: Renderer, model: GraphModel) -> None:
        super().draw_curve(renderer, model)
        renderer.remove_group(INEQUALITY_SIDE_GROUP)
        polygon = self.shaded_region(model)
        if polygon is not None:
            renderer.create_shaded_region(INEQUALITY_SIDE_GROUP, polygon, INEQUALITY_SIDE_COLOR)

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(
            self.graph_type,
            InequalityProperty(tuple(model.get_points()), model.get_inequality()),
        )


class EmptyStrategy(GraphStrategy):
    """Grid only; there is nothing to drag."""

    graph_type = GraphType.EMPTY

    def draggable_indices(self, model: GraphModel) -> range:
        return range(0)

    def properties(self, model: GraphModel) -> GraphProperties:
        return GraphProperties(self.graph_type, PointsProperty(()))


_STRATEGIES: dict[GraphType, type[GraphStrategy]] = {
    strategy.graph_type: strategy
    for strategy in (
        LinearStrategy,
        QuadraticStrategy,
        ExponentialStrategy,
        ScatterPointsStrategy,
        LinearInequalityStrategy,
        EmptyStrategy,
    )
}


def create_strategy(graph_type: GraphType | str, settings: GraphSettings) -> GraphStrategy:
    graph_type = GraphType.parse(graph_type)
    try:
        strategy_cls = _STRATEGIES[graph_type]
    except KeyError:
        raise UnknownGraphTypeError(graph_type.value) from None
    return strategy_cls(settings)


def registered_graph_types() -> Sequence[GraphType]:
    return tuple(_STRATEGIES)
