"""Hole and door settings shared by the wall generators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HoleShape(Enum):
    """Outline of an opening cut into a wall."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    IRREGULAR = "irregular"


class WallSide(Enum):
    """Which side of a room a wall stands on."""

    NONE = "none"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass(frozen=True)
class DoorConfig:
    """Describes one opening in a wall. Sizes are in metres, angles in degrees."""

    has_door: bool = False
    wall_side: WallSide = WallSide.NONE
    hole_shape: HoleShape = HoleShape.RECTANGLE
    width: float = 0.8
    height: float = 2.0
    offset_from_center: float = 0.0
    radius: float = 0.5
    irregular_size: float = 1.0
    irregularity: float = 0.5
    irregular_points: int = 8
    irregular_smoothness: float = 0.5
    irregular_rotation: float = 0.0
    random_seed: int = 12345

    def __post_init__(self) -> None:
        if self.irregular_points < 1:
            raise ValueError("irregular_points must be at least 1")
        for name in ("width", "height", "radius", "irregular_size"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")