import os
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

try:  # pragma: no cover - allows tests to be skipped in headless CI without PyQt5
    from PyQt5 import QtCore, QtGui, QtWidgets
    from grapher_viewer.app import GraphWindow, describe_properties
    from grapher_viewer.config import ViewerConfig
    from grapher_viewer.interaction import widget_to_surface
    from grapher_viewer.main import build_parser
    from grapher_viewer.rendering import map_to_widget, paint_scene, surface_transform
    from grapher_viewer.widget import GraphWidget
except ImportError:  # pragma: no cover
    pytest.skip("PyQt5 not available", allow_module_level=True)

from grapher_core.geometry import Point, SurfacePoint
from grapher_core.properties import GraphProperties, InequalityProperty, PointsProperty
from grapher_core.settings import GraphType, Inequality, default_graph_settings


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


def _widget(graph_type="linear", **overrides):
    widget = GraphWidget(graph_type, default_graph_settings(graph_type, **overrides))
    received = []
    widget.pointChanged.connect(lambda moving, props: received.append((moving, props)))
    return widget, received


def _mouse(event_type, pos, buttons=QtCore.Qt.LeftButton):
    button = QtCore.Qt.NoButton if event_type == QtCore.QEvent.MouseMove else QtCore.Qt.LeftButton
    return QtGui.QMouseEvent(event_type, QtCore.QPointF(pos), button, buttons, QtCore.Qt.NoModifier)


def _key(key):
    return QtGui.QKeyEvent(QtCore.QEvent.KeyPress, key, QtCore.Qt.NoModifier)


def test_surface_transform_fills_widget(qapp):
    widget, _received = _widget()
    mapper = widget.graph.mapper
    transform = surface_transform(mapper)

    assert map_to_widget(Point(-10, -10), mapper, transform) == QtCore.QPointF(0, 400)
    assert map_to_widget(Point(10, 10), mapper, transform) == QtCore.QPointF(400, 0)
    assert map_to_widget(Point(-1, -1), mapper, transform) == QtCore.QPointF(180, 220)
    assert widget_to_surface(QtCore.QPoint(180, 220), mapper) == SurfacePoint(-20, -20)


def test_mouse_drag_emits_point_changed(qapp):
    widget, received = _widget()

    widget.mousePressEvent(_mouse(QtCore.QEvent.MouseButtonPress, QtCore.QPoint(180, 220)))
    widget.mouseMoveEvent(_mouse(QtCore.QEvent.MouseMove, QtCore.QPoint(160, 260)))
    widget.mouseReleaseEvent(
        _mouse(QtCore.QEvent.MouseButtonRelease, QtCore.QPoint(160, 260), QtCore.Qt.NoButton)
    )

    assert len(received) == 1
    moving, props = received[0]
    assert moving == Point(-2, -3)
    assert props.property.points == (Point(-2, -3), Point(1, 1))


def test_release_outside_widget_keeps_last_position(qapp):
    widget, _received = _widget()

    widget.mousePressEvent(_mouse(QtCore.QEvent.MouseButtonPress, QtCore.QPoint(180, 220)))
    widget.mouseMoveEvent(_mouse(QtCore.QEvent.MouseMove, QtCore.QPoint(160, 260)))
    widget.mouseReleaseEvent(
        _mouse(QtCore.QEvent.MouseButtonRelease, QtCore.QPoint(-50, 900), QtCore.Qt.NoButton)
    )

    assert widget.graph.model.get_point(0) == Point(-2, -3)
    assert widget.graph.interaction.session is None


def test_keyboard_focus_and_nudge(qapp):
    widget, received = _widget()

    widget.keyPressEvent(_key(QtCore.Qt.Key_Tab))
    assert widget.graph.interaction.focused_index == 0
    widget.keyPressEvent(_key(QtCore.Qt.Key_Right))

    assert widget.graph.model.get_point(0) == Point(0, -1)
    assert received[-1][0] == Point(0, -1)


def test_paint_scene_draws_points_on_top(qapp):
    widget, _received = _widget()
    image = QtGui.QImage(400, 400, QtGui.QImage.Format_ARGB32)
    image.fill(QtGui.QColor("white"))

    painter = QtGui.QPainter(image)
    paint_scene(painter, widget.scene, widget.graph.mapper)
    painter.end()

    assert image.pixelColor(180, 220).name() == "#35605a"
    assert image.pixelColor(395, 70).name() == "#ffffff"


def test_paint_scene_handles_inequality_and_labels(qapp):
    widget, _received = _widget("linear-inequality", inequality="lt", show_bounding_labels=True)
    image = QtGui.QImage(400, 400, QtGui.QImage.Format_ARGB32)
    image.fill(QtGui.QColor("white"))

    painter = QtGui.QPainter(image)
    paint_scene(painter, widget.scene, widget.graph.mapper)
    painter.end()

    # The shaded side of y < x covers the lower right corner.
    assert image.pixelColor(390, 390).name() != "#ffffff"
    assert image.pixelColor(10, 70).name() == "#ffffff"


def test_describe_properties():
    linear = GraphProperties(GraphType.LINEAR, PointsProperty((Point(-1, -1), Point(1, 1))))
    assert describe_properties(linear) == "y = 1x + 0"

    inequality = GraphProperties(
        GraphType.LINEAR_INEQUALITY,
        InequalityProperty((Point(0, 1), Point(2, 5)), Inequality.GE),
    )
    assert describe_properties(inequality) == "y >= 2x + 1"

    vertical = GraphProperties(GraphType.LINEAR, PointsProperty((Point(1, 0), Point(1, 4))))
    assert describe_properties(vertical).startswith("undefined")


def test_window_shows_equation_in_status_bar(qapp):
    config = ViewerConfig(GraphType.QUADRATIC, default_graph_settings("quadratic"))
    window = GraphWindow(config)

    assert window.statusBar().currentMessage() == "y = 0.2(x - 0)^2 + 0"

    widget = window.graph_widget
    widget.keyPressEvent(_key(QtCore.Qt.Key_Tab))
    widget.keyPressEvent(_key(QtCore.Qt.Key_Up))
    assert window.statusBar().currentMessage() == "y = 0.16(x - 0)^2 + 1"


def test_parser_accepts_registered_graph_types():
    args = build_parser().parse_args(["scatter-points", "--config", "custom.ini", "-v"])
    assert args.graph_type == "scatter-points"
    assert str(args.config) == "custom.ini"
    assert args.verbose

    with pytest.raises(SystemExit):
        build_parser().parse_args(["circle"])
