import pytest

from grapher_core import (
    GraphSettings,
    InvalidSettingsError,
    MissingInequalityError,
    Point,
    SceneRenderer,
    UnknownGraphTypeError,
    default_graph_settings,
    setup_graph,
)
from grapher_core.renderer import CURVE_GROUP, GRID_GROUP, POINTS_GROUP
from grapher_core.settings import DEFAULT_POINT_COLORS


def _ignore(_moving_point, _properties):
    pass


def test_setup_draws_points_and_curve():
    scene = SceneRenderer()
    graph = setup_graph("linear", scene, _ignore, default_graph_settings("linear"))

    points = scene.items(POINTS_GROUP)
    assert [item.center for item in points] == [Point(-1, -1), Point(1, 1)]
    assert [item.color for item in points] == list(DEFAULT_POINT_COLORS[:2])
    assert all(item.radius == 5 for item in points)

    curve = scene.items(CURVE_GROUP)[0]
    assert len(curve.points) == 21
    assert curve.points[0] == Point(-10, -10)
    assert graph.can_interact


def test_point_colors_cycle_over_scatter_points():
    scene = SceneRenderer()
    setup_graph(
        "scatter-points",
        scene,
        _ignore,
        default_graph_settings("scatter-points", point_colors=["red", "green"]),
    )

    assert [item.color for item in scene.items(POINTS_GROUP)] == [
        "red",
        "green",
        "red",
        "green",
        "red",
    ]
    assert scene.items(CURVE_GROUP) == []


def test_unknown_graph_type_is_rejected():
    with pytest.raises(UnknownGraphTypeError, match="circle"):
        setup_graph("circle", SceneRenderer(), _ignore, GraphSettings())


def test_linear_inequality_needs_inequality():
    settings = GraphSettings(starting_points=(Point(-1, -1), Point(1, 1)))
    with pytest.raises(MissingInequalityError):
        setup_graph("linear-inequality", SceneRenderer(), _ignore, settings)


def test_invalid_grid_is_rejected():
    settings = default_graph_settings("linear", min_grid_x=3, max_grid_x=-3)
    with pytest.raises(InvalidSettingsError):
        setup_graph("linear", SceneRenderer(), _ignore, settings)


def test_read_only_graph_ignores_gestures():
    calls = []
    scene = SceneRenderer()
    graph = setup_graph(
        "linear",
        scene,
        lambda *args: calls.append(args),
        default_graph_settings("linear", can_interact=False),
    )

    assert graph.interaction is None
    assert not graph.press(graph.grid_to_surface(Point(-1, -1)))
    assert not graph.move(graph.grid_to_surface(Point(4, 4)))
    assert not graph.release()
    assert graph.focus_next() is None
    assert calls == []
    assert len(scene.items(POINTS_GROUP)) == 2


def test_empty_graph_draws_grid_only():
    scene = SceneRenderer()
    graph = setup_graph("empty", scene, _ignore, default_graph_settings("empty"))

    assert scene.items(GRID_GROUP)
    assert scene.items(POINTS_GROUP) == []
    assert not graph.can_interact
    assert graph.properties().to_dict() == {"graphType": "empty", "property": {"points": []}}


def test_resize_keeps_grid_points_in_place():
    graph = setup_graph("linear", SceneRenderer(), _ignore, default_graph_settings("linear"))

    graph.resize((200, 100))

    surface = graph.grid_to_surface(Point(1, 1))
    assert (surface.x, surface.y) == (10, 5)
    assert graph.surface_to_grid(surface) == Point(1, 1)


def test_destroy_clears_every_group():
    scene = SceneRenderer()
    graph = setup_graph("linear", scene, _ignore, default_graph_settings("linear"))

    graph.destroy()

    assert scene.ordered_items() == []
    assert not graph.press(graph.grid_to_surface(Point(-1, -1)))
