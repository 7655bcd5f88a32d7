"""Drag and keyboard state machine for the control points of one graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from grapher_core.geometry import Point, SurfacePoint, dist2
from grapher_core.mapping import CoordinateMapper
from grapher_core.model import GraphModel
from grapher_core.properties import GraphProperties
from grapher_core.strategies import GraphStrategy

logger = logging.getLogger(__name__)

PointChangedCallback = Callable[[Point | None, GraphProperties], None]


class InteractionMode(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class Direction(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


@dataclass
class DragSession:
    """The point being dragged and where the cursor was last seen."""

    index: int
    last_cursor: SurfacePoint


class InteractionStateMachine:
    """Turns press/move/release and nudge gestures into model updates.

    The machine never copies points: every change is written into the
    :class:`GraphModel`. After a change ``on_changed`` lets the owner redraw,
    then ``on_point_changed`` reports the new properties to the host, both
    inside the call that handled the gesture.
    """

    def __init__(
        self,
        strategy: GraphStrategy,
        model: GraphModel,
        mapper: CoordinateMapper,
        on_point_changed: PointChangedCallback,
        on_changed: Callable[[], None] | None = None,
    ) -> None:
        self._strategy = strategy
        self._model = model
        self._mapper = mapper
        self._on_point_changed = on_point_changed
        self._on_changed = on_changed
        self._session: DragSession | None = None
        self._focused_index: int | None = None

    @property
    def mode(self) -> InteractionMode:
        return InteractionMode.IDLE if self._session is None else InteractionMode.DRAGGING

    @property
    def session(self) -> DragSession | None:
        return self._session

    @property
    def active_index(self) -> int | None:
        return None if self._session is None else self._session.index

    @property
    def focused_index(self) -> int | None:
        return self._focused_index

    # ------------------------------------------------------------------
    # Pointer gestures
    # ------------------------------------------------------------------
    def pick(self, cursor: SurfacePoint) -> int | None:
        """Index of the closest draggable point within the pick radius."""

        radius = self._mapper.settings.pick_radius
        best_index = None
        best_d2 = radius * radius
        for index in self._strategy.draggable_indices(self._model):
            surface = self._mapper.grid_to_surface(self._model.get_point(index))
            d2 = dist2(surface, cursor)
            if d2 <= best_d2 and (best_index is None or d2 < best_d2):
                best_index = index
                best_d2 = d2
        return best_index

    def press(self, cursor: SurfacePoint) -> bool:
        if self._session is not None:
            # A second press without a release closes the open drag where it
            # was last seen before starting over.
            logger.debug("Press while dragging point %d, releasing it first", self._session.index)
            self.release()

        index = self.pick(cursor)
        if index is None:
            grid_point = self._mapper.surface_to_grid(cursor)
            if not self._strategy.on_press_miss(self._model, grid_point):
                return False
            self._changed()
            self._notify(self._mapper.commit_point(grid_point))
            return True

        logger.debug("Start dragging point %d", index)
        self._session = DragSession(index=index, last_cursor=cursor)
        if self._focused_index != index:
            self._focused_index = index
            self._changed()
        self._move_active(cursor)
        return True

    def move(self, cursor: SurfacePoint) -> bool:
        if self._session is None:
            return False
        self._session.last_cursor = cursor
        return self._move_active(cursor)

    def release(self, cursor: SurfacePoint | None = None) -> bool:
        session = self._session
        if session is None:
            return False
        if cursor is None:
            cursor = session.last_cursor
        session.last_cursor = cursor
        handled = self._move_active(cursor)
        self._session = None
        logger.debug("Stop dragging point %d", session.index)
        return handled

    # ------------------------------------------------------------------
    # Keyboard gestures
    # ------------------------------------------------------------------
    def focus_point(self, index: int) -> None:
        if index not in self._strategy.draggable_indices(self._model):
            raise IndexError(f"Point {index} cannot take keyboard focus.")
        self._focused_index = index
        self._changed()

    def focus_next(self, reverse: bool = False) -> int | None:
        indices = list(self._strategy.draggable_indices(self._model))
        if not indices:
            return None
        if self._focused_index not in indices:
            self._focused_index = indices[-1] if reverse else indices[0]
        else:
            position = indices.index(self._focused_index)
            position += -1 if reverse else 1
            self._focused_index = indices[position % len(indices)]
        self._changed()
        return self._focused_index

    def clear_focus(self) -> None:
        if self._focused_index is not None:
            self._focused_index = None
            self._changed()

    def nudge(self, direction: Direction) -> bool:
        """Move the focused point one step in ``direction``, kept on the grid."""

        if self._session is not None or self._focused_index is None:
            return False
        settings = self._mapper.settings
        dx, dy = direction.delta
        current = self._model.get_point(self._focused_index)
        target = self._mapper.keep_on_grid(
            current.translated(dx * settings.step_x, dy * settings.step_y)
        )
        # An off-step point near a bound would be pulled back against the nudge.
        if (target.x - current.x) * dx < 0 or (target.y - current.y) * dy < 0:
            return False
        return self._commit(self._focused_index, target)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _move_active(self, cursor: SurfacePoint) -> bool:
        assert self._session is not None
        target = self._mapper.commit_point(self._mapper.surface_to_grid(cursor))
        return self._commit(self._session.index, target)

    def _commit(self, index: int, target: Point) -> bool:
        before = self._model.get_points()
        self._strategy.apply_move(self._model, index, target)
        changed = self._model.get_points() != before
        if changed:
            self._changed()
        if changed or self._strategy.always_notify:
            self._notify(target)
            return True
        return False

    def _changed(self) -> None:
        if self._on_changed is not None:
            self._on_changed()

    def _notify(self, moving_point: Point | None) -> None:
        self._on_point_changed(moving_point, self._strategy.properties(self._model))
