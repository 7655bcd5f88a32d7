from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in grid coordinates."""

    x: float
    y: float

    def with_y(self, y: float) -> "Point":
        return Point(self.x, y)

    def translated(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class SurfacePoint:
    """A point in rendering surface units."""

    x: float
    y: float


def dist2(a: SurfacePoint, b: SurfacePoint) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy
