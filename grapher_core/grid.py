"""Background grid: minor lines every step, the two axes and the bound labels."""

from __future__ import annotations

import math

from grapher_core.geometry import Point
from grapher_core.renderer import GRID_GROUP, LABEL_GROUP, TICK_GROUP, Renderer
from grapher_core.settings import GraphSettings

GRID_LINE_COLOR = "#eeeeee"
AXIS_COLOR = "black"

# Below this minimum y the x axis labels no longer get cut off at the bottom
# edge, so they can sit level with the axis.
_LABEL_CUTOFF_Y = -4


def grid_positions(start: float, stop: float, step: float) -> list[float]:
    """Multiples of ``step`` from ``start`` up to (excluding) ``stop``, minus zero."""

    count = int(math.ceil((stop - start) / step - 1e-9))
    positions = (start + i * step for i in range(max(count, 0)))
    return [value for value in positions if abs(value) > 1e-9]


def _format_bound(value: float) -> str:
    return f"{value:g}"


def draw_grid(renderer: Renderer, settings: GraphSettings) -> None:
    s = settings
    for x in grid_positions(s.min_grid_x, s.max_grid_x, s.step_x):
        renderer.create_line(GRID_GROUP, Point(x, s.min_grid_y), Point(x, s.max_grid_y), GRID_LINE_COLOR)
    for y in grid_positions(s.min_grid_y, s.max_grid_y, s.step_y):
        renderer.create_line(GRID_GROUP, Point(s.min_grid_x, y), Point(s.max_grid_x, y), GRID_LINE_COLOR)

    min_x_axis = Point(s.min_grid_x, 0)
    max_x_axis = Point(s.max_grid_x, 0)
    min_y_axis = Point(0, s.min_grid_y)
    max_y_axis = Point(0, s.max_grid_y)
    renderer.create_line(GRID_GROUP, min_x_axis, max_x_axis, AXIS_COLOR)
    renderer.create_line(GRID_GROUP, min_y_axis, max_y_axis, AXIS_COLOR)

    if not s.show_bounding_labels:
        return

    if s.min_grid_y > _LABEL_CUTOFF_Y:
        min_x_alignment: tuple[str, ...] = ("bottom", "left")
        max_x_alignment: tuple[str, ...] = ("bottom", "right")
    else:
        min_x_alignment = ("left",)
        max_x_alignment = ("right",)
    renderer.create_label(LABEL_GROUP, min_x_axis, _format_bound(s.min_grid_x), min_x_alignment)
    renderer.create_label(LABEL_GROUP, max_x_axis, _format_bound(s.max_grid_x), max_x_alignment)
    renderer.create_tick(TICK_GROUP, max_x_axis, "x")
    renderer.create_tick(TICK_GROUP, min_x_axis, "x")

    renderer.create_label(LABEL_GROUP, min_y_axis, _format_bound(s.min_grid_y), ("bottom",))
    renderer.create_tick(TICK_GROUP, min_y_axis, "y")
    renderer.create_label(LABEL_GROUP, max_y_axis, _format_bound(s.max_grid_y), ("left",))
    renderer.create_tick(TICK_GROUP, max_y_axis, "y")
