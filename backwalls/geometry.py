"""Vector, colour and rotation types used by the wall mesh builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

UNITS_PER_METER = 100.0
_SMALL_NUMBER = 1e-8


def meters_to_units(meters: float) -> float:
    """Convert metres to world units (centimetres)."""
    return meters * UNITS_PER_METER


@dataclass(frozen=True)
class Vec2:
    """A 2D vector, used for texture coordinates and hole outlines."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec3:
    """A 3D vector in world units."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3:
        return Vec3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def safe_normal(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if too short."""
        squared = self.dot(self)
        if squared == 1.0:
            return self
        if squared < _SMALL_NUMBER:
            return Vec3()
        return self / math.sqrt(squared)


@dataclass(frozen=True)
class Color:
    """A linear RGBA colour."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __mul__(self, scale: float) -> Color:
        return Color(self.r * scale, self.g * scale, self.b * scale, self.a * scale)

    __rmul__ = __mul__

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)


@dataclass(frozen=True)
class Rotator:
    """A rotation given as pitch, yaw and roll in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def matrix(self) -> tuple[Vec3, Vec3, Vec3]:
        """Images of the X, Y and Z axes under this rotation."""
        sp, cp = math.sin(math.radians(self.pitch)), math.cos(math.radians(self.pitch))
        sy, cy = math.sin(math.radians(self.yaw)), math.cos(math.radians(self.yaw))
        sr, cr = math.sin(math.radians(self.roll)), math.cos(math.radians(self.roll))
        x_axis = Vec3(cp * cy, cp * sy, sp)
        y_axis = Vec3(sr * sp * cy - cr * sy, sr * sp * sy + cr * cy, -sr * cp)
        z_axis = Vec3(-(cr * sp * cy + sr * sy), cy * sr - cr * sp * sy, cr * cp)
        return x_axis, y_axis, z_axis

    def rotate(self, point: Vec3) -> Vec3:
        x_axis, y_axis, z_axis = self.matrix()
        return x_axis * point.x + y_axis * point.y + z_axis * point.z