import pytest

from grapher_core.geometry import Point, SurfacePoint
from grapher_core.mapping import CoordinateMapper
from grapher_core.settings import GraphSettings

_SAMPLE_POINTS = [
    Point(-10, -10),
    Point(10, 10),
    Point(0, 0),
    Point(3.25, -7.5),
    Point(-0.1, 9.9),
]


@pytest.fixture
def mapper():
    return CoordinateMapper(GraphSettings(), (400, 400))


def test_grid_to_surface_scales_each_axis(mapper):
    assert mapper.grid_to_surface(Point(1, 2)) == SurfacePoint(20, 40)

    wide = CoordinateMapper(GraphSettings(min_grid_x=0, max_grid_x=5), (100, 400))
    assert wide.grid_to_surface(Point(2, -1)) == SurfacePoint(40, -20)


def test_surface_round_trip(mapper):
    mapper.resize((333, 517))
    for point in _SAMPLE_POINTS:
        back = mapper.surface_to_grid(mapper.grid_to_surface(point))
        assert back.x == pytest.approx(point.x)
        assert back.y == pytest.approx(point.y)


def test_clamp_is_idempotent(mapper):
    for point in [Point(15, -30), Point(-11, 4), Point(2, 2)]:
        once = mapper.clamp_to_grid(point)
        assert mapper.clamp_to_grid(once) == once
    assert mapper.clamp_to_grid(Point(15, -30)) == Point(10, -10)


def test_snap_rounds_to_nearest_step():
    mapper = CoordinateMapper(GraphSettings(step_x=0.5, step_y=2), (400, 400))
    assert mapper.snap_to_step(Point(0.7, 2.9)) == Point(0.5, 2)
    assert mapper.snap_to_step(Point(0.8, 3.1)) == Point(1.0, 4)


def test_snap_rounds_halfway_values_up(mapper):
    assert mapper.snap_to_step(Point(0.5, -0.5)) == Point(1, 0)


def test_snap_is_idempotent():
    mapper = CoordinateMapper(GraphSettings(step_x=0.5, step_y=3), (400, 400))
    for point in _SAMPLE_POINTS:
        once = mapper.snap_to_step(point)
        assert mapper.snap_to_step(once) == once


def test_commit_clamps_before_snapping():
    mapper = CoordinateMapper(GraphSettings(step_x=3), (400, 400))
    assert mapper.commit_point(Point(11, 0)) == Point(9, 0)


def test_pick_distance_is_measured_on_the_surface(mapper):
    assert mapper.pick_distance(Point(0, 0), Point(0.3, 0.4)) == pytest.approx(10.0)


def test_resize_rejects_empty_surface(mapper):
    with pytest.raises(ValueError):
        mapper.resize((0, 100))


def test_commit_stays_inside_bounds_off_the_step_lattice():
    mapper = CoordinateMapper(
        GraphSettings(min_grid_x=0, max_grid_x=10, min_grid_y=-9.5, max_grid_y=10, step_x=4, step_y=2),
        (400, 400),
    )

    assert mapper.commit_point(Point(30, 30)) == Point(8, 10)
    assert mapper.commit_point(Point(-30, -30)) == Point(0, -8)
    assert mapper.commit_point(Point(5, 3)) == Point(4, 4)


def test_keep_on_grid_leaves_inside_points_alone():
    mapper = CoordinateMapper(GraphSettings(min_grid_x=0, max_grid_x=10, step_x=4), (400, 400))

    assert mapper.keep_on_grid(Point(9.5, 3)) == Point(9.5, 3)
    assert mapper.keep_on_grid(Point(12, 3)) == Point(8, 3)
