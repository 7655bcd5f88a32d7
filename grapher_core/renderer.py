"""Drawing contract between the graph engine and whatever paints it.

The engine talks to a :class:`Renderer` in grid coordinates and groups every
drawable under a name so a whole layer (the curve, the shaded side, ...) can
be dropped and redrawn after a gesture. :class:`SceneRenderer` keeps the
drawables in memory; a toolkit front end paints that scene.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from grapher_core.equations import CurveFunction, sample_curve
from grapher_core.geometry import Point

GRID_GROUP = "grid"
LABEL_GROUP = "label"
TICK_GROUP = "tick"
POINTS_GROUP = "points"
CURVE_GROUP = "curve"
INEQUALITY_SIDE_GROUP = "inequality-side"

# Painting order, back to front.
GROUP_ORDER = (
    GRID_GROUP,
    INEQUALITY_SIDE_GROUP,
    CURVE_GROUP,
    TICK_GROUP,
    LABEL_GROUP,
    POINTS_GROUP,
)

CurveDomain = tuple[float, float, float]


class Renderer(Protocol):
    def create_point(
        self, group: str, center: Point, radius: float, color: str, *, focused: bool = False
    ) -> None: ...

    def create_curve(
        self,
        group: str,
        fn: CurveFunction,
        domain: CurveDomain,
        color: str,
        dashed: bool = False,
    ) -> None: ...

    def create_shaded_region(self, group: str, polygon: Sequence[Point], color: str) -> None: ...

    def create_line(self, group: str, start: Point, end: Point, color: str) -> None: ...

    def create_label(
        self, group: str, anchor: Point, text: str, alignment: Sequence[str]
    ) -> None: ...

    def create_tick(self, group: str, anchor: Point, axis: str) -> None: ...

    def remove_group(self, group: str) -> None: ...


@dataclass(frozen=True)
class PointItem:
    center: Point
    radius: float
    color: str
    focused: bool = False


@dataclass(frozen=True)
class CurveItem:
    points: tuple[Point, ...]
    color: str
    dashed: bool = False


@dataclass(frozen=True)
class RegionItem:
    polygon: tuple[Point, ...]
    color: str


@dataclass(frozen=True)
class LineItem:
    start: Point
    end: Point
    color: str


@dataclass(frozen=True)
class LabelItem:
    anchor: Point
    text: str
    alignment: tuple[str, ...]


@dataclass(frozen=True)
class TickItem:
    anchor: Point
    axis: str


SceneItem = PointItem | CurveItem | RegionItem | LineItem | LabelItem | TickItem


@dataclass
class SceneRenderer:
    """In-memory :class:`Renderer` that records drawables per group."""

    groups: dict[str, list[SceneItem]] = field(default_factory=dict)
    revision: int = 0

    def _add(self, group: str, item: SceneItem) -> None:
        self.groups.setdefault(group, []).append(item)
        self.revision += 1

    def items(self, group: str) -> list[SceneItem]:
        return list(self.groups.get(group, []))

    def ordered_items(self) -> list[SceneItem]:
        ordered: list[SceneItem] = []
        for group in GROUP_ORDER:
            ordered.extend(self.groups.get(group, []))
        for group, items in self.groups.items():
            if group not in GROUP_ORDER:
                ordered.extend(items)
        return ordered

    def create_point(
        self, group: str, center: Point, radius: float, color: str, *, focused: bool = False
    ) -> None:
        self._add(group, PointItem(center, radius, color, focused))

    def create_curve(
        self,
        group: str,
        fn: CurveFunction,
        domain: CurveDomain,
        color: str,
        dashed: bool = False,
    ) -> None:
        min_x, max_x, step = domain
        self._add(group, CurveItem(tuple(sample_curve(fn, min_x, max_x, step)), color, dashed))

    def create_shaded_region(self, group: str, polygon: Sequence[Point], color: str) -> None:
        self._add(group, RegionItem(tuple(polygon), color))

    def create_line(self, group: str, start: Point, end: Point, color: str) -> None:
        self._add(group, LineItem(start, end, color))

    def create_label(
        self, group: str, anchor: Point, text: str, alignment: Sequence[str]
    ) -> None:
        self._add(group, LabelItem(anchor, text, tuple(alignment)))

    def create_tick(self, group: str, anchor: Point, axis: str) -> None:
        self._add(group, TickItem(anchor, axis))

    def remove_group(self, group: str) -> None:
        if self.groups.pop(group, None) is not None:
            self.revision += 1
