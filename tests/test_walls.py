from dataclasses import replace

import pytest

from backwalls.config import DoorConfig, HoleShape
from backwalls.geometry import Rotator, Vec3
from backwalls.holes import generate_wall_with_hole
from backwalls.mesh import MeshData, WallCorners
from backwalls.walls import (
    generate_rectangle_hole,
    generate_thick_wall,
    generate_wall_with_door,
    generate_wall_with_doors,
    hole_interior_faces,
)


def _corners(width=3.0, height=3.0, thickness=0.2):
    return WallCorners.centered(width, height, thickness, Rotator(), Vec3())


def _assert_consistent(mesh):
    assert len(mesh.triangles) % 3 == 0
    assert len(mesh.normals) == len(mesh.vertices)
    assert len(mesh.uvs) == len(mesh.vertices)
    assert all(0 <= i < len(mesh.vertices) for i in mesh.triangles)


def test_thick_wall_matches_single_segment():
    corners = _corners()
    mesh = MeshData()
    generate_thick_wall(mesh, corners, 3.0, 3.0, 0.2)
    expected = MeshData()
    expected.add_thick_segment(corners, 3.0, 3.0, 0.2)
    assert mesh == expected
    _assert_consistent(mesh)


def test_hole_interior_faces_normals_point_into_opening():
    mesh = MeshData()
    hole_interior_faces(mesh, _corners(), 100.0, 200.0, 0.0, 150.0)
    _assert_consistent(mesh)
    assert len(mesh.vertices) == 16
    assert mesh.normals[0] == Vec3(-1.0, 0.0, 0.0)
    assert mesh.normals[4] == Vec3(1.0, 0.0, 0.0)
    assert mesh.normals[8] == Vec3(0.0, 0.0, -1.0)
    assert mesh.normals[12] == Vec3(0.0, 0.0, 1.0)


def test_hole_interior_vertices_lie_on_hole_bounds():
    corners = _corners()
    mesh = MeshData()
    hole_interior_faces(mesh, corners, 100.0, 200.0, 0.0, 150.0)
    left = corners.inner_bl.x + 100.0
    right = corners.inner_bl.x + 200.0
    for v in mesh.vertices:
        assert v.x == pytest.approx(left) or v.x == pytest.approx(right)


def test_tiny_rectangle_falls_back_to_solid():
    corners = _corners()
    mesh = MeshData()
    generate_rectangle_hole(mesh, corners, 3.0, 3.0, DoorConfig(width=0.05, height=2.0), 0.2)
    solid = MeshData()
    generate_thick_wall(solid, corners, 3.0, 3.0, 0.2)
    assert mesh == solid


def test_rectangle_doorway_leaves_opening_empty():
    corners = _corners()
    mesh = MeshData()
    generate_rectangle_hole(mesh, corners, 3.0, 3.0, DoorConfig(width=0.8, height=2.0), 0.2)
    _assert_consistent(mesh)
    floor = corners.inner_bl.z
    for v in mesh.vertices:
        inside = -39.0 < v.x < 39.0 and floor < v.z < floor + 199.0
        assert not inside
    # Three side segments plus four lining quads; no bottom segment at floor level.
    assert len(mesh.vertices) == 3 * 24 + 16


def test_rectangle_doorway_clamped_to_wall():
    corners = _corners()
    mesh = MeshData()
    door = DoorConfig(width=0.8, height=2.0, offset_from_center=5.0)
    generate_rectangle_hole(mesh, corners, 3.0, 3.0, door, 0.2)
    _assert_consistent(mesh)
    for v in mesh.vertices:
        assert corners.inner_bl.x - 1e-6 <= v.x <= corners.inner_br.x + 1e-6


def test_rectangle_doorway_shifted_right_removes_geometry_there():
    corners = _corners()
    centered = MeshData()
    generate_rectangle_hole(centered, corners, 3.0, 3.0, DoorConfig(), 0.2)
    shifted = MeshData()
    generate_rectangle_hole(shifted, corners, 3.0, 3.0, DoorConfig(offset_from_center=0.5), 0.2)
    assert len(shifted.vertices) == len(centered.vertices)
    assert shifted.vertices != centered.vertices


def test_wall_with_door_dispatches_rectangle():
    corners = _corners()
    door = DoorConfig(hole_shape=HoleShape.RECTANGLE)
    a = MeshData()
    generate_wall_with_door(a, corners, 3.0, 3.0, door, 0.2)
    b = MeshData()
    generate_rectangle_hole(b, corners, 3.0, 3.0, door, 0.2)
    assert a == b


def test_wall_with_door_dispatches_irregular():
    corners = _corners()
    door = DoorConfig(hole_shape=HoleShape.IRREGULAR, irregular_size=1.0)
    a = MeshData()
    generate_wall_with_door(a, corners, 3.0, 3.0, door, 0.2)
    b = MeshData()
    generate_wall_with_hole(b, corners, 3.0, 3.0, door, 0.2)
    assert a == b
    _assert_consistent(a)


def test_wall_with_door_circle_uses_smooth_outline():
    corners = _corners()
    door = DoorConfig(hole_shape=HoleShape.CIRCLE, radius=0.5)
    a = MeshData()
    generate_wall_with_door(a, corners, 3.0, 3.0, door, 0.2)
    circle = replace(
        door,
        hole_shape=HoleShape.IRREGULAR,
        irregular_size=1.0,
        irregularity=0.0,
        irregular_points=24,
        irregular_smoothness=1.0,
        irregular_rotation=0.0,
    )
    b = MeshData()
    generate_wall_with_hole(b, corners, 3.0, 3.0, circle, 0.2)
    assert a == b


def test_no_doors_builds_solid_wall():
    corners = _corners()
    mesh = MeshData()
    generate_wall_with_doors(mesh, corners, 3.0, 3.0, [], 0.2)
    solid = MeshData()
    generate_thick_wall(solid, corners, 3.0, 3.0, 0.2)
    assert mesh == solid


def test_single_door_matches_wall_with_door():
    corners = _corners()
    door = DoorConfig()
    a = MeshData()
    generate_wall_with_doors(a, corners, 3.0, 3.0, [door], 0.2)
    b = MeshData()
    generate_wall_with_door(b, corners, 3.0, 3.0, door, 0.2)
    assert a == b


def test_several_rectangles_become_square_outlines():
    corners = _corners()
    doors = [DoorConfig(width=0.6, height=1.0), DoorConfig(width=1.0, height=0.5)]
    mesh = MeshData()
    generate_wall_with_doors(mesh, corners, 3.0, 3.0, doors, 0.2)
    expected = MeshData()
    for door in doors:
        square = replace(
            door,
            hole_shape=HoleShape.IRREGULAR,
            irregular_size=max(door.width, door.height),
            irregularity=0.0,
            irregular_points=4,
            irregular_smoothness=1.0,
            irregular_rotation=45.0,
        )
        generate_wall_with_hole(expected, corners, 3.0, 3.0, square, 0.2)
    assert mesh == expected
    _assert_consistent(mesh)


def test_mixed_doors_processed_in_order():
    corners = _corners()
    doors = [
        DoorConfig(),
        DoorConfig(hole_shape=HoleShape.IRREGULAR, irregular_size=0.8),
    ]
    mesh = MeshData()
    generate_wall_with_doors(mesh, corners, 3.0, 3.0, doors, 0.2)
    expected = MeshData()
    for door in doors:
        generate_wall_with_door(expected, corners, 3.0, 3.0, door, 0.2)
    assert mesh == expected