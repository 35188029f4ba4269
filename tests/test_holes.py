import math

import pytest

from backwalls.config import DoorConfig, HoleShape
from backwalls.geometry import Rotator, Vec2, Vec3
from backwalls.holes import generate_wall_with_hole, irregular_polygon, point_in_polygon
from backwalls.mesh import MeshData, WallCorners

SQUARE = [Vec2(-1.0, -1.0), Vec2(1.0, -1.0), Vec2(1.0, 1.0), Vec2(-1.0, 1.0)]


def _corners(width, height, thickness):
    return WallCorners.centered(width, height, thickness, Rotator(), Vec3())


def _circle(size, seed=12345):
    return DoorConfig(
        has_door=True,
        hole_shape=HoleShape.IRREGULAR,
        irregular_size=size,
        irregularity=0.0,
        irregular_points=24,
        irregular_smoothness=1.0,
        random_seed=seed,
    )


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vec2(0.0, 0.0), True),
        (Vec2(0.5, -0.5), True),
        (Vec2(2.0, 0.0), False),
        (Vec2(0.0, -3.0), False),
        (Vec2(-1.5, 0.5), False),
    ],
)
def test_point_in_square(point, expected):
    assert point_in_polygon(point, SQUARE) is expected


def test_point_in_empty_polygon_is_outside():
    assert point_in_polygon(Vec2(0.0, 0.0), []) is False


def test_polygon_without_smoothing_has_base_points():
    door = DoorConfig(irregular_points=6, irregular_smoothness=0.0, irregularity=0.3)
    assert len(irregular_polygon(door, 50.0)) == 6


@pytest.mark.parametrize("smoothness, per_segment", [(1.0, 4), (0.5, 2), (0.1, 0)])
def test_polygon_smoothing_adds_interpolated_points(smoothness, per_segment):
    door = DoorConfig(irregular_points=5, irregular_smoothness=smoothness)
    assert len(irregular_polygon(door, 40.0)) == 5 * (1 + per_segment)


def test_regular_polygon_points_lie_on_or_inside_circle():
    door = DoorConfig(irregular_points=8, irregularity=0.0, irregular_smoothness=0.0)
    for p in irregular_polygon(door, 30.0):
        assert math.hypot(p.x, p.y) == pytest.approx(30.0)


def test_interpolated_points_never_exceed_radius():
    door = DoorConfig(irregular_points=12, irregularity=0.0, irregular_smoothness=1.0)
    for p in irregular_polygon(door, 30.0):
        assert math.hypot(p.x, p.y) <= 30.0 + 1e-9


def test_irregular_radii_stay_in_range():
    door = DoorConfig(irregular_points=16, irregularity=0.5, irregular_smoothness=0.0)
    for p in irregular_polygon(door, 100.0):
        assert 50.0 - 1e-9 <= math.hypot(p.x, p.y) <= 150.0 + 1e-9


def test_polygon_is_deterministic_for_seed():
    door = DoorConfig(
        irregular_points=10, irregularity=0.8, irregular_smoothness=0.0, random_seed=66666
    )
    first = irregular_polygon(door, 75.0)
    second = irregular_polygon(door, 75.0)
    assert len(first) == 10
    assert [(p.x, p.y) for p in first] == [(p.x, p.y) for p in second]
    for p in first:
        assert 15.0 - 1e-9 <= math.hypot(p.x, p.y) <= 135.0 + 1e-9


def test_rotation_turns_first_point():
    door = DoorConfig(
        irregular_points=4, irregularity=0.0, irregular_smoothness=0.2, irregular_rotation=90.0
    )
    first = irregular_polygon(door, 10.0)[0]
    assert first.x == pytest.approx(0.0, abs=1e-9)
    assert first.y == pytest.approx(10.0)


def test_whole_wall_hole_falls_back_to_plain_wall():
    mesh = MeshData()
    count = generate_wall_with_hole(mesh, _corners(1.0, 1.0, 0.2), 1.0, 1.0, _circle(5.0), 0.2)
    assert count == 0
    assert len(mesh.vertices) == 8
    assert len(mesh.triangles) == 12


def test_wall_with_hole_buffers_are_consistent():
    mesh = MeshData()
    count = generate_wall_with_hole(mesh, _corners(4.0, 3.0, 0.2), 4.0, 3.0, _circle(0.8), 0.2)
    assert count >= 8
    assert len(mesh.vertices) == len(mesh.normals) == len(mesh.uvs)
    assert len(mesh.triangles) % 6 == 0
    assert len(mesh.triangles) // 6 * 4 == len(mesh.vertices)
    assert max(mesh.triangles) < len(mesh.vertices)
    frame_vertices = len(mesh.vertices) - 24 * count
    assert frame_vertices > 0
    assert frame_vertices % 4 == 0


def test_wall_with_hole_leaves_hole_centre_uncovered():
    mesh = MeshData()
    generate_wall_with_hole(mesh, _corners(4.0, 3.0, 0.2), 4.0, 3.0, _circle(1.0), 0.2)
    # the hole is centred on the wall, which is centred on the origin
    for v in mesh.vertices:
        assert math.hypot(v.x, v.z) > 30.0


def test_wall_with_hole_is_deterministic():
    first, second = MeshData(), MeshData()
    door = DoorConfig(irregular_size=1.0, irregularity=0.6, irregular_points=6, random_seed=77777)
    generate_wall_with_hole(first, _corners(4.0, 3.0, 0.2), 4.0, 3.0, door, 0.2)
    generate_wall_with_hole(second, _corners(4.0, 3.0, 0.2), 4.0, 3.0, door, 0.2)
    assert first == second


def test_zero_size_hole_is_rejected():
    with pytest.raises(ValueError):
        generate_wall_with_hole(
            MeshData(), _corners(4.0, 3.0, 0.2), 4.0, 3.0, DoorConfig(irregular_size=0.0), 0.2
        )