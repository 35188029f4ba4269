"""Ready-made wall meshes: solid walls, doorways and walls with shaped holes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .config import DoorConfig, HoleShape
from .doorways import wall_mesh_with_doorway
from .geometry import Color, Rotator, Vec3
from .holes import generate_wall_with_hole
from .mesh import MeshData, WallCorners
from .walls import generate_thick_wall

logger = logging.getLogger(__name__)

_CIRCLE_POINTS = 16
_CIRCLE_SEED = 30000


@dataclass(frozen=True)
class Wall:
    """A finished, double-sided wall mesh with its colour and placement."""

    mesh: MeshData
    color: Color
    position: Vec3
    rotation: Rotator


@dataclass(frozen=True)
class HoleSpec:
    """An opening to cut into a wall. Sizes and centre are in metres.

    Without a centre the opening is a doorway: centred horizontally and
    standing on the floor. With ``center_x`` and ``center_y`` it is centred at
    that point, measured from the wall's bottom-left corner.
    """

    width: float = 0.8
    height: float = 2.0
    name: str = ""
    shape: HoleShape = HoleShape.RECTANGLE
    center_x: Optional[float] = None
    center_y: Optional[float] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("hole width and height must not be negative")
        if (self.center_x is None) != (self.center_y is None):
            raise ValueError("center_x and center_y must be given together")

    def normalized_position(self, wall_width: float, wall_height: float) -> tuple[float, float]:
        """Horizontal and vertical position as fractions of the wall size.

        A vertical fraction of 0 means the opening stands on the floor.
        """
        if self.center_x is None or self.center_y is None:
            return 0.5, 0.0
        if wall_width <= 0 or wall_height <= 0:
            raise ValueError("wall size must be positive")
        return self.center_x / wall_width, self.center_y / wall_height


def doorway_wall(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    color: Color,
    door_width: float = 0.8,
    door_height: float = 2.0,
    horizontal: float = 0.5,
    vertical: float = 0.0,
) -> Wall:
    """A wall centred on ``position`` with a rectangular doorway."""
    mesh = wall_mesh_with_doorway(
        position,
        rotation,
        wall_width,
        wall_height,
        wall_thickness,
        door_width,
        door_height,
        horizontal,
        vertical,
    )
    return Wall(mesh, color, position, rotation)


def solid_wall(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    color: Color,
) -> Wall:
    """A solid wall slab centred on ``position``."""
    corners = WallCorners.centered(wall_width, wall_height, wall_thickness, rotation, position)
    mesh = MeshData()
    generate_thick_wall(mesh, corners, wall_width, wall_height, wall_thickness)
    return Wall(mesh.double_sided(), color, position, rotation)


_PRESETS = {
    "Circle": dict(irregular_points=24, irregularity=0.0, irregular_smoothness=1.0,
                   irregular_rotation=0.0, random_seed=12345),
    "Triangle": dict(irregular_points=3, irregularity=0.1, irregular_smoothness=0.1,
                     irregular_rotation=0.0, random_seed=11111),
    "Square": dict(irregular_points=4, irregularity=0.0, irregular_smoothness=0.2,
                   irregular_rotation=45.0, random_seed=22222),
    "Hexagon": dict(irregular_points=6, irregularity=0.0, irregular_smoothness=0.5,
                    irregular_rotation=0.0, random_seed=33333),
    "Star": dict(irregular_points=8, irregularity=0.5, irregular_smoothness=0.1,
                 irregular_rotation=22.5, random_seed=44444),
    "Flower": dict(irregular_points=12, irregularity=0.4, irregular_smoothness=0.8,
                   irregular_rotation=15.0, random_seed=55555),
    "Crystal": dict(irregular_points=6, irregularity=0.6, irregular_smoothness=0.0,
                    irregular_rotation=30.0, random_seed=77777),
}


def shape_preset(name: str, rng: Optional[random.Random] = None) -> DoorConfig:
    """Irregular-hole settings for a named shape.

    Known names give fixed outlines; "Blob" has a random rotation and any
    other name gives a random organic shape with a random seed.
    """
    rng = rng if rng is not None else random.Random()
    base = DoorConfig(has_door=True, hole_shape=HoleShape.IRREGULAR)
    if name in _PRESETS:
        return replace(base, **_PRESETS[name])
    if name == "Blob":
        return replace(
            base,
            irregular_points=10,
            irregularity=0.8,
            irregular_smoothness=0.9,
            irregular_rotation=rng.uniform(0.0, 360.0),
            random_seed=66666,
        )
    rotation = rng.uniform(0.0, 360.0)
    seed = rng.randint(1000, 99999)
    return replace(
        base,
        irregularity=0.7,
        irregular_points=12,
        irregular_smoothness=0.3,
        irregular_rotation=rotation,
        random_seed=seed,
    )


def _outlined_hole_wall(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    color: Color,
    door: DoorConfig,
) -> Wall:
    corners = WallCorners.centered(wall_width, wall_height, wall_thickness, rotation, position)
    mesh = MeshData()
    generate_wall_with_hole(mesh, corners, wall_width, wall_height, door, wall_thickness)
    return Wall(mesh.double_sided(), color, position, rotation)


def wall_with_hole(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    color: Color,
    hole: HoleSpec,
    rng: Optional[random.Random] = None,
) -> Wall:
    """A wall with one opening, built by the generator suited to its shape.

    Irregular and circular openings are centred vertically; only their
    horizontal position is taken from ``hole``.
    """
    horizontal, vertical = hole.normalized_position(wall_width, wall_height)

    if hole.shape is HoleShape.RECTANGLE:
        return doorway_wall(
            position, rotation, wall_width, wall_height, wall_thickness, color,
            hole.width, hole.height, horizontal, vertical,
        )

    offset = (horizontal - 0.5) * wall_width
    size = max(hole.width, hole.height)
    if hole.shape is HoleShape.IRREGULAR:
        door = replace(shape_preset(hole.name, rng), irregular_size=size, offset_from_center=offset)
    else:
        door = DoorConfig(
            has_door=True,
            hole_shape=HoleShape.IRREGULAR,
            irregular_size=size,
            irregular_points=_CIRCLE_POINTS,
            irregularity=0.0,
            irregular_smoothness=1.0,
            irregular_rotation=0.0,
            random_seed=_CIRCLE_SEED,
            offset_from_center=offset,
        )
    return _outlined_hole_wall(position, rotation, wall_width, wall_height, wall_thickness, color, door)


def wall_with_holes(
    position: Vec3,
    rotation: Rotator,
    wall_width: float,
    wall_height: float,
    wall_thickness: float,
    color: Color,
    holes: Sequence[HoleSpec],
    rng: Optional[random.Random] = None,
) -> Wall:
    """A wall with openings; only the first of several is cut, none gives a solid wall."""
    if not holes:
        return solid_wall(position, rotation, wall_width, wall_height, wall_thickness, color)
    if len(holes) > 1:
        logger.warning("%d holes requested, cutting the first only", len(holes))
    return wall_with_hole(
        position, rotation, wall_width, wall_height, wall_thickness, color, holes[0], rng
    )