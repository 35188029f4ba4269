"""Thick walls: solid slabs, rectangular doorways and dispatch by hole shape."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from .config import DoorConfig, HoleShape
from .geometry import Vec2, Vec3, meters_to_units
from .holes import generate_wall_with_hole
from .mesh import Face, MeshData, WallCorners

_MIN_HOLE_EXTENT = 10.0
_MIN_SEGMENT_EXTENT = 1.0
_UNIT_UVS = (Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0))


def generate_thick_wall(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
) -> None:
    """Append a solid wall slab without any opening."""
    mesh.add_thick_segment(corners, wall_width, wall_height, wall_thickness)


def _directions(corners: WallCorners) -> tuple[Vec3, Vec3, Vec3, Vec3]:
    c = corners
    return (
        (c.inner_br - c.inner_bl).safe_normal(),
        (c.inner_tl - c.inner_bl).safe_normal(),
        (c.outer_br - c.outer_bl).safe_normal(),
        (c.outer_tl - c.outer_bl).safe_normal(),
    )


def hole_interior_faces(
    mesh: MeshData,
    corners: WallCorners,
    hole_left: float,
    hole_right: float,
    hole_bottom: float,
    hole_top: float,
) -> None:
    """Append the four faces lining a rectangular opening.

    Hole bounds are in world units measured from the bottom-left corner.
    """
    c = corners
    width_dir, height_dir, outer_width_dir, outer_height_dir = _directions(corners)

    def inner(x: float, z: float) -> Vec3:
        return c.inner_bl + width_dir * x + height_dir * z

    def outer(x: float, z: float) -> Vec3:
        return c.outer_bl + outer_width_dir * x + outer_height_dir * z

    ibl, ibr = inner(hole_left, hole_bottom), inner(hole_right, hole_bottom)
    itl, itr = inner(hole_left, hole_top), inner(hole_right, hole_top)
    obl, obr = outer(hole_left, hole_bottom), outer(hole_right, hole_bottom)
    otl, otr = outer(hole_left, hole_top), outer(hole_right, hole_top)

    quads = (
        ((ibl, obl, otl, itl), -width_dir),
        ((obr, ibr, itr, otr), width_dir),
        ((obl, ibl, ibr, obr), -height_dir),
        ((itl, otl, otr, itr), height_dir),
    )
    for vertices, normal in quads:
        mesh.add_quad_face(Face(vertices, normal, _UNIT_UVS))


def _cut_rectangle(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    hole_left: float,
    hole_right: float,
    hole_bottom: float,
    hole_top: float,
) -> None:
    """Build a wall around a rectangular opening given in world units."""
    width_cm = meters_to_units(wall_width)
    height_cm = meters_to_units(wall_height)

    hole_left = max(0.0, hole_left)
    hole_right = min(width_cm, hole_right)
    hole_bottom = max(0.0, hole_bottom)
    hole_top = min(height_cm, hole_top)

    if hole_right - hole_left < _MIN_HOLE_EXTENT or hole_top - hole_bottom < _MIN_HOLE_EXTENT:
        generate_thick_wall(mesh, corners, wall_width, wall_height, wall_thickness)
        return

    c = corners
    width_dir, height_dir, outer_width_dir, outer_height_dir = _directions(corners)

    def inner(x: float, z: float) -> Vec3:
        return c.inner_bl + width_dir * x + height_dir * z

    def outer(x: float, z: float) -> Vec3:
        return c.outer_bl + outer_width_dir * x + outer_height_dir * z

    hole_span = (hole_top - hole_bottom) / 100.0

    if hole_bottom > _MIN_SEGMENT_EXTENT:
        segment = WallCorners(
            c.inner_bl, c.inner_br, inner(width_cm, hole_bottom), inner(0.0, hole_bottom),
            c.outer_bl, c.outer_br, outer(width_cm, hole_bottom), outer(0.0, hole_bottom),
        )
        mesh.add_thick_segment(segment, wall_width, hole_bottom / 100.0, wall_thickness)

    if height_cm - hole_top > _MIN_SEGMENT_EXTENT:
        segment = WallCorners(
            inner(0.0, hole_top), inner(width_cm, hole_top), c.inner_tr, c.inner_tl,
            outer(0.0, hole_top), outer(width_cm, hole_top), c.outer_tr, c.outer_tl,
        )
        mesh.add_thick_segment(segment, wall_width, (height_cm - hole_top) / 100.0, wall_thickness)

    if hole_left > _MIN_SEGMENT_EXTENT:
        segment = WallCorners(
            inner(0.0, hole_bottom), inner(hole_left, hole_bottom),
            inner(hole_left, hole_top), inner(0.0, hole_top),
            outer(0.0, hole_bottom), outer(hole_left, hole_bottom),
            outer(hole_left, hole_top), outer(0.0, hole_top),
        )
        mesh.add_thick_segment(segment, hole_left / 100.0, hole_span, wall_thickness)

    if width_cm - hole_right > _MIN_SEGMENT_EXTENT:
        segment = WallCorners(
            inner(hole_right, hole_bottom), inner(width_cm, hole_bottom),
            inner(width_cm, hole_top), inner(hole_right, hole_top),
            outer(hole_right, hole_bottom), outer(width_cm, hole_bottom),
            outer(width_cm, hole_top), outer(hole_right, hole_top),
        )
        mesh.add_thick_segment(segment, (width_cm - hole_right) / 100.0, hole_span, wall_thickness)

    hole_interior_faces(mesh, corners, hole_left, hole_right, hole_bottom, hole_top)


def generate_rectangle_hole(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    door: DoorConfig,
    wall_thickness: float,
) -> None:
    """Append a wall with a floor-level rectangular doorway.

    The doorway is centred horizontally, shifted by ``door.offset_from_center``.
    Openings narrower or lower than 10 cm after clamping yield a solid wall.
    """
    width_cm = meters_to_units(wall_width)
    hole_width = meters_to_units(door.width)
    center_x = width_cm * 0.5 + meters_to_units(door.offset_from_center)
    _cut_rectangle(
        mesh,
        corners,
        wall_width,
        wall_height,
        wall_thickness,
        center_x - hole_width * 0.5,
        center_x + hole_width * 0.5,
        0.0,
        meters_to_units(door.height),
    )


def generate_wall_with_door(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    door: DoorConfig,
    wall_thickness: float,
) -> None:
    """Append a wall with one opening, choosing the generator by hole shape."""
    if door.hole_shape is HoleShape.CIRCLE:
        circle = replace(
            door,
            hole_shape=HoleShape.IRREGULAR,
            irregular_size=door.radius * 2.0,
            irregularity=0.0,
            irregular_points=24,
            irregular_smoothness=1.0,
            irregular_rotation=0.0,
        )
        generate_wall_with_hole(mesh, corners, wall_width, wall_height, circle, wall_thickness)
    elif door.hole_shape is HoleShape.IRREGULAR:
        generate_wall_with_hole(mesh, corners, wall_width, wall_height, door, wall_thickness)
    else:
        generate_rectangle_hole(mesh, corners, wall_width, wall_height, door, wall_thickness)


def generate_wall_with_doors(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    doors: Sequence[DoorConfig],
    wall_thickness: float,
) -> None:
    """Append a wall for each opening in ``doors``; overlaps are not merged.

    With no doors a solid wall is built. When there are several doors and all
    are rectangular, each is cut as a square outline sized by its larger side.
    """
    if not doors:
        generate_thick_wall(mesh, corners, wall_width, wall_height, wall_thickness)
        return
    if len(doors) == 1:
        generate_wall_with_door(mesh, corners, wall_width, wall_height, doors[0], wall_thickness)
        return

    if all(door.hole_shape is HoleShape.RECTANGLE for door in doors):
        doors = [
            replace(
                door,
                hole_shape=HoleShape.IRREGULAR,
                irregular_size=max(door.width, door.height),
                irregularity=0.0,
                irregular_points=4,
                irregular_smoothness=1.0,
                irregular_rotation=45.0,
            )
            for door in doors
        ]

    for door in doors:
        generate_wall_with_door(mesh, corners, wall_width, wall_height, door, wall_thickness)