"""Doorways and seeded irregular openings at positions given as wall fractions."""

from __future__ import annotations

import random
from typing import Optional

from .config import DoorConfig, HoleShape
from .geometry import Rotator, Vec3, meters_to_units
from .holes import generate_wall_with_hole
from .mesh import MeshData, WallCorners
from .walls import _cut_rectangle


def generate_custom_square_hole(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    hole_width: float = 0.8,
    hole_height: float = 2.0,
    center_x: float = 0.5,
    center_y: float = 0.5,
) -> None:
    """Append a wall with a rectangular opening centred at a fraction of the wall.

    ``center_x`` runs from 0 at the left edge to 1 at the right edge and
    ``center_y`` from 0 at the bottom to 1 at the top. Sizes are in metres.
    An opening smaller than 10 cm either way after clamping gives a solid wall.
    """
    width_cm = meters_to_units(wall_width)
    height_cm = meters_to_units(wall_height)
    half_w = meters_to_units(hole_width) * 0.5
    half_h = meters_to_units(hole_height) * 0.5
    cx = center_x * width_cm
    cy = center_y * height_cm
    _cut_rectangle(
        mesh,
        corners,
        wall_width,
        wall_height,
        wall_thickness,
        cx - half_w,
        cx + half_w,
        cy - half_h,
        cy + half_h,
    )


def generate_doorway(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    door_width: float = 0.8,
    door_height: float = 2.0,
    horizontal: float = 0.5,
    vertical: float = 0.0,
) -> None:
    """Append a wall with a doorway.

    A ``vertical`` of exactly 0 places the doorway on the floor; any other
    value is the fraction of the wall height at which the doorway is centred.
    """
    center_y = vertical
    if vertical == 0.0:
        if wall_height <= 0.0:
            raise ValueError("wall_height must be positive")
        center_y = (door_height * 0.5) / wall_height
    generate_custom_square_hole(
        mesh,
        corners,
        wall_width,
        wall_height,
        wall_thickness,
        door_width,
        door_height,
        horizontal,
        center_y,
    )


def generate_random_hole(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    hole_size: float = 1.0,
    irregularity: float = 0.5,
    seed: int = 12345,
    rotation: Optional[float] = None,
) -> int:
    """Append a wall with a seeded irregular hole in its centre.

    More irregular holes get more outline points and less smoothing. When
    ``rotation`` is None the outline is turned by a random angle. Returns the
    number of wall segments generated.
    """
    if rotation is None:
        rotation = random.random() * 360.0
    door = DoorConfig(
        has_door=True,
        hole_shape=HoleShape.IRREGULAR,
        irregular_size=hole_size,
        irregularity=irregularity,
        irregular_points=8 + int(irregularity * 12),
        irregular_smoothness=1.0 - irregularity,
        random_seed=seed,
        irregular_rotation=rotation,
    )
    return generate_wall_with_hole(mesh, corners, wall_width, wall_height, door, wall_thickness)


def wall_mesh_with_doorway(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    door_width: float = 0.8,
    door_height: float = 2.0,
    horizontal: float = 0.5,
    vertical: float = 0.0,
) -> MeshData:
    """A double-sided mesh of a wall centred on ``position`` with a doorway."""
    corners = WallCorners.centered(wall_width, wall_height, wall_thickness, rotation, position)
    mesh = MeshData()
    generate_doorway(
        mesh,
        corners,
        wall_width,
        wall_height,
        wall_thickness,
        door_width,
        door_height,
        horizontal,
        vertical,
    )
    return mesh.double_sided()