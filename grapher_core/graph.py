"""One interactive graph instance, owned by the host that created it."""

from __future__ import annotations

import logging

from grapher_core.geometry import Point, SurfacePoint
from grapher_core.grid import draw_grid
from grapher_core.interaction import Direction, InteractionStateMachine, PointChangedCallback
from grapher_core.mapping import CoordinateMapper, SurfaceSize
from grapher_core.model import GraphModel
from grapher_core.properties import GraphProperties
from grapher_core.renderer import GROUP_ORDER, Renderer
from grapher_core.settings import GraphSettings, GraphType
from grapher_core.strategies import GraphStrategy, create_strategy

logger = logging.getLogger(__name__)

DEFAULT_SURFACE_SIZE: SurfaceSize = (400.0, 400.0)


class InteractiveGraph:
    """Wires settings, model, mapper, strategy and interaction for one graph.

    Setup validates the settings and raises on an unknown graph type, an
    invalid grid or a linear inequality without an inequality. When
    ``settings.can_interact`` is false no interaction machine is attached and
    every gesture method returns ``False``.
    """

    def __init__(
        self,
        graph_type: GraphType | str,
        renderer: Renderer,
        on_point_changed: PointChangedCallback,
        settings: GraphSettings,
        surface_size: SurfaceSize = DEFAULT_SURFACE_SIZE,
    ) -> None:
        self.graph_type = GraphType.parse(graph_type)
        self.settings = settings.validate(self.graph_type)
        inequality = settings.inequality if self.graph_type is GraphType.LINEAR_INEQUALITY else None
        self.model = GraphModel(settings.starting_points, inequality)
        self.mapper = CoordinateMapper(settings, surface_size)
        self.strategy: GraphStrategy = create_strategy(self.graph_type, settings)
        self.renderer = renderer
        self.interaction: InteractionStateMachine | None = None
        if settings.can_interact and self.graph_type is not GraphType.EMPTY:
            self.interaction = InteractionStateMachine(
                self.strategy,
                self.model,
                self.mapper,
                on_point_changed,
                on_changed=self.redraw,
            )

        draw_grid(renderer, settings)
        self.redraw()
        logger.info(
            "Set up %s graph with %d control points (interactive=%s)",
            self.graph_type.value,
            self.model.point_count,
            self.interaction is not None,
        )

    @property
    def can_interact(self) -> bool:
        return self.interaction is not None

    def properties(self) -> GraphProperties:
        return self.strategy.properties(self.model)

    def redraw(self) -> None:
        focused = None if self.interaction is None else self.interaction.focused_index
        self.strategy.draw(self.renderer, self.model, focused)

    def resize(self, surface_size: SurfaceSize) -> None:
        self.mapper.resize(surface_size)

    def grid_to_surface(self, point: Point) -> SurfacePoint:
        return self.mapper.grid_to_surface(point)

    def surface_to_grid(self, point: SurfacePoint) -> Point:
        return self.mapper.surface_to_grid(point)

    def press(self, cursor: SurfacePoint) -> bool:
        return self.interaction is not None and self.interaction.press(cursor)

    def move(self, cursor: SurfacePoint) -> bool:
        return self.interaction is not None and self.interaction.move(cursor)

    def release(self, cursor: SurfacePoint | None = None) -> bool:
        return self.interaction is not None and self.interaction.release(cursor)

    def nudge(self, direction: Direction) -> bool:
        return self.interaction is not None and self.interaction.nudge(direction)

    def focus_next(self, reverse: bool = False) -> int | None:
        if self.interaction is None:
            return None
        return self.interaction.focus_next(reverse)

    def destroy(self) -> None:
        for group in GROUP_ORDER:
            self.renderer.remove_group(group)
        self.interaction = None


def setup_graph(
    graph_type: GraphType | str,
    renderer: Renderer,
    on_point_changed: PointChangedCallback,
    settings: GraphSettings,
    surface_size: SurfaceSize = DEFAULT_SURFACE_SIZE,
) -> InteractiveGraph:
    return InteractiveGraph(graph_type, renderer, on_point_changed, settings, surface_size)
