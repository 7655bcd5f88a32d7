from __future__ import annotations

from PyQt5 import QtCore, QtGui, QtWidgets

from grapher_core.geometry import Point
from grapher_core.graph import InteractiveGraph, setup_graph
from grapher_core.properties import GraphProperties
from grapher_core.renderer import SceneRenderer
from grapher_core.settings import GraphSettings, GraphType
from grapher_viewer.interaction.keyboard_controller import GraphKeyboardController
from grapher_viewer.interaction.mouse_controller import GraphMouseController
from grapher_viewer.rendering import paint_scene

_DEFAULT_SIZE = (400, 400)


class GraphWidget(QtWidgets.QWidget):
    """Hosts one interactive graph and paints its scene."""

    pointChanged = QtCore.pyqtSignal(object, object)

    def __init__(
        self,
        graph_type: GraphType | str,
        settings: GraphSettings,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(240, 240)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)

        palette = self.palette()
        palette.setColor(QtGui.QPalette.Window, QtGui.QColor("white"))
        self.setPalette(palette)
        self.setAutoFillBackground(True)

        self._scene = SceneRenderer()
        self._graph = setup_graph(
            graph_type,
            self._scene,
            self._on_point_changed,
            settings,
            surface_size=_DEFAULT_SIZE,
        )
        self._mouse = GraphMouseController(self._graph, self.update)
        self._keyboard = GraphKeyboardController(self._graph, self.update)
        self.resize(*_DEFAULT_SIZE)

    @property
    def graph(self) -> InteractiveGraph:
        return self._graph

    @property
    def scene(self) -> SceneRenderer:
        return self._scene

    def _on_point_changed(self, moving_point: Point | None, properties: GraphProperties) -> None:
        self.pointChanged.emit(moving_point, properties)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: D401
        super().resizeEvent(event)
        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self._graph.resize((size.width(), size.height()))
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401
        _ = event
        painter = QtGui.QPainter(self)
        paint_scene(painter, self._scene, self._graph.mapper)
        painter.end()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if not self._mouse.handle_mouse_press(event):
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if not self._mouse.handle_mouse_move(event):
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if not self._mouse.handle_mouse_release(event, self.size()):
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # noqa: D401
        if not self._keyboard.handle_key_press(event):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QtGui.QKeyEvent) -> None:  # noqa: D401
        if not self._keyboard.handle_key_release(event):
            super().keyReleaseEvent(event)

    def focusNextPrevChild(self, next: bool) -> bool:  # noqa: A002
        # Tab cycles the control points instead of leaving the widget.
        if self._graph.can_interact:
            return False
        return super().focusNextPrevChild(next)
