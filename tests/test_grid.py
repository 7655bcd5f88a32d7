from grapher_core.geometry import Point
from grapher_core.grid import AXIS_COLOR, draw_grid, grid_positions
from grapher_core.renderer import GRID_GROUP, LABEL_GROUP, TICK_GROUP, SceneRenderer
from grapher_core.settings import GraphSettings


def test_grid_positions_skip_zero_and_stop():
    assert grid_positions(-2, 2, 1) == [-2, -1, 1]
    assert grid_positions(0, 1, 0.25) == [0.25, 0.5, 0.75]


def test_grid_lines_and_axes():
    scene = SceneRenderer()
    draw_grid(scene, GraphSettings())

    lines = scene.items(GRID_GROUP)
    assert len(lines) == 40
    axes = [line for line in lines if line.color == AXIS_COLOR]
    assert [(axis.start, axis.end) for axis in axes] == [
        (Point(-10, 0), Point(10, 0)),
        (Point(0, -10), Point(0, 10)),
    ]
    assert scene.items(LABEL_GROUP) == []
    assert scene.items(TICK_GROUP) == []


def test_bounding_labels_sit_on_axes():
    scene = SceneRenderer()
    draw_grid(scene, GraphSettings(show_bounding_labels=True))

    labels = scene.items(LABEL_GROUP)
    assert [label.text for label in labels] == ["-10", "10", "-10", "10"]
    assert labels[0].alignment == ("left",)
    assert labels[1].alignment == ("right",)
    assert len(scene.items(TICK_GROUP)) == 4


def test_x_labels_drop_below_axis_on_shallow_grids():
    scene = SceneRenderer()
    draw_grid(scene, GraphSettings(min_grid_y=-2, max_grid_y=8, show_bounding_labels=True))

    labels = scene.items(LABEL_GROUP)
    assert labels[0].alignment == ("bottom", "left")
    assert labels[1].alignment == ("bottom", "right")
    assert labels[2].text == "-2"
