"""Walls with polygonal openings built from a grid of small slab segments."""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from .config import DoorConfig
from .geometry import Vec2, Vec3, meters_to_units
from .mesh import Face, MeshData, WallCorners

logger = logging.getLogger(__name__)

_MAX_HOLE_FRACTION = 0.95
_MIN_SEGMENTS = 8
_MIN_SEGMENT_EXTENT = 1.0


def point_in_polygon(point: Vec2, polygon: Sequence[Vec2]) -> bool:
    """Whether ``point`` lies inside ``polygon``, by ray casting."""
    inside = False
    if not polygon:
        return inside
    previous = polygon[-1]
    for current in polygon:
        if (current.y > point.y) != (previous.y > point.y):
            crossing_x = (previous.x - current.x) * (point.y - current.y) / (
                previous.y - current.y
            ) + current.x
            if point.x < crossing_x:
                inside = not inside
        previous = current
    return inside


def irregular_polygon(door: DoorConfig, base_size_cm: float) -> list[Vec2]:
    """Outline of an irregular hole around the origin, seeded by ``door.random_seed``."""
    rng = random.Random(door.random_seed)
    count = door.irregular_points
    angle_step = 2.0 * math.pi / count
    irregularity = door.irregularity

    base_points: list[Vec2] = []
    for i in range(count):
        angle = i * angle_step
        radius = rng.uniform(
            base_size_cm * (1.0 - irregularity), base_size_cm * (1.0 + irregularity)
        )
        final_angle = angle + rng.uniform(-irregularity * 0.5, irregularity * 0.5)
        base_points.append(Vec2(math.cos(final_angle) * radius, math.sin(final_angle) * radius))

    if door.irregular_smoothness <= 0.0:
        return base_points

    per_segment = math.floor(door.irregular_smoothness * 4.0 + 0.5)
    points: list[Vec2] = []
    for current, following in zip(base_points, base_points[1:] + base_points[:1]):
        points.append(current)
        for j in range(1, per_segment + 1):
            alpha = j / (per_segment + 1)
            points.append(current + (following - current) * alpha)

    if door.irregular_rotation != 0.0:
        rad = math.radians(door.irregular_rotation)
        cos_r, sin_r = math.cos(rad), math.sin(rad)
        points = [Vec2(p.x * cos_r - p.y * sin_r, p.x * sin_r + p.y * cos_r) for p in points]

    return points


def _square_uvs(u: float, v: float) -> tuple[Vec2, Vec2, Vec2, Vec2]:
    return (Vec2(0.0, 0.0), Vec2(u, 0.0), Vec2(u, v), Vec2(0.0, v))


def _add_segment(mesh: MeshData, seg: WallCorners, size_uv: float, thickness_uv: float) -> None:
    inner_normal = (seg.inner_br - seg.inner_bl).safe_normal().cross(
        (seg.inner_tl - seg.inner_bl).safe_normal()
    )
    s, t = size_uv, thickness_uv
    faces = (
        Face((seg.inner_bl, seg.inner_br, seg.inner_tr, seg.inner_tl), inner_normal, _square_uvs(s, s)),
        Face(
            (seg.outer_bl, seg.outer_br, seg.outer_tr, seg.outer_tl),
            -inner_normal,
            _square_uvs(s, s),
            reverse_winding=True,
        ),
        Face(
            (seg.inner_bl, seg.outer_bl, seg.outer_br, seg.inner_br),
            Vec3(0.0, 0.0, -1.0),
            _square_uvs(t, s),
        ),
        Face(
            (seg.inner_tl, seg.inner_tr, seg.outer_tr, seg.outer_tl),
            Vec3(0.0, 0.0, 1.0),
            _square_uvs(s, t),
        ),
        Face(
            (seg.inner_tl, seg.outer_tl, seg.outer_bl, seg.inner_bl),
            (seg.outer_bl - seg.inner_bl).safe_normal(),
            (Vec2(0.0, s), Vec2(t, s), Vec2(t, 0.0), Vec2(0.0, 0.0)),
        ),
        Face(
            (seg.inner_br, seg.outer_br, seg.outer_tr, seg.inner_tr),
            (seg.outer_br - seg.inner_br).safe_normal(),
            _square_uvs(t, s),
            reverse_winding=True,
        ),
    )
    for face in faces:
        mesh.add_quad_face(face)


def generate_wall_with_hole(
    mesh: MeshData,
    corners: WallCorners,
    wall_width: float,
    wall_height: float,
    door: DoorConfig,
    wall_thickness: float,
) -> int:
    """Append a wall with an irregular hole to ``mesh``.

    The wall is tiled with square segments; segments touching the hole outline
    are left out and exposed edges get frame faces. If fewer than eight segments
    remain, a plain two-faced wall is appended as well. Returns the number of
    segments generated.
    """
    base_size = meters_to_units(door.irregular_size)
    offset = meters_to_units(door.offset_from_center)
    width_cm = meters_to_units(wall_width)
    height_cm = meters_to_units(wall_height)

    center_x = width_cm * 0.5 + offset
    center_z = height_cm * 0.5

    base_size = min(base_size, min(width_cm, height_cm) * _MAX_HOLE_FRACTION)

    outline = irregular_polygon(door, base_size)
    logger.info(
        "Generated irregular hole with %d points, size=%.0fcm, irregularity=%.2f, seed=%d",
        door.irregular_points, base_size, door.irregularity, door.random_seed,
    )

    if door.irregular_smoothness >= 0.8:
        segment = max(base_size * 0.1, 15.0)
    else:
        segment = max(base_size * 0.2, 25.0)
    segment = min(segment, base_size * 0.4)
    if segment <= 0.0:
        raise ValueError("hole and wall must have a positive size")

    grid_x = math.ceil(width_cm / segment)
    grid_z = math.ceil(height_cm / segment)
    total_cells = grid_x * grid_z
    logger.info(
        "Irregular hole: %.0fcm segments, %dx%d grid (%d cells) for %.0fx%.0fcm wall",
        segment, grid_x, grid_z, total_cells, width_cm, height_cm,
    )

    def cell_bounds(gx: int, gz: int) -> tuple[float, float, float, float]:
        sx = gx * segment
        sz = gz * segment
        return sx, sx + segment, sz, sz + segment

    def in_hole(gx: int, gz: int) -> bool:
        sx, ex, sz, ez = cell_bounds(gx, gz)
        probes = ((sx, sz), (ex, sz), (ex, ez), (sx, ez), ((sx + ex) * 0.5, (sz + ez) * 0.5))
        return any(point_in_polygon(Vec2(px - center_x, pz - center_z), outline) for px, pz in probes)

    def outside_wall(sx: float, ex: float, sz: float, ez: float) -> bool:
        return sx < 0 or ex > width_cm or sz < 0 or ez > height_cm

    c = corners
    width_dir = (c.inner_br - c.inner_bl).safe_normal()
    height_dir = (c.inner_tl - c.inner_bl).safe_normal()
    outer_width_dir = (c.outer_br - c.outer_bl).safe_normal()
    outer_height_dir = (c.outer_tl - c.outer_bl).safe_normal()

    def segment_corners(sx: float, ex: float, sz: float, ez: float) -> WallCorners:
        def inner(x: float, z: float) -> Vec3:
            return c.inner_bl + width_dir * x + height_dir * z

        def outer(x: float, z: float) -> Vec3:
            return c.outer_bl + outer_width_dir * x + outer_height_dir * z

        return WallCorners(
            inner(sx, sz), inner(ex, sz), inner(ex, ez), inner(sx, ez),
            outer(sx, sz), outer(ex, sz), outer(ex, ez), outer(sx, ez),
        )

    def clamp(sx: float, ex: float, sz: float, ez: float) -> tuple[float, float, float, float] | None:
        sx, ex = max(0.0, sx), min(width_cm, ex)
        sz, ez = max(0.0, sz), min(height_cm, ez)
        if ex - sx < _MIN_SEGMENT_EXTENT or ez - sz < _MIN_SEGMENT_EXTENT:
            return None
        return sx, ex, sz, ez

    cells = [(gx, gz) for gx in range(grid_x) for gz in range(grid_z)]

    generated = 0
    for gx, gz in cells:
        if in_hole(gx, gz):
            continue
        bounds = clamp(*cell_bounds(gx, gz))
        if bounds is None:
            continue
        _add_segment(mesh, segment_corners(*bounds), segment / 100.0, wall_thickness)
        generated += 1

    coverage = generated / total_cells * 100.0 if total_cells else 0.0

    if generated < _MIN_SEGMENTS:
        logger.error(
            "Irregular hole too large! Only %d segments generated (%.1f%% coverage). "
            "Falling back to solid wall.",
            generated, coverage,
        )
        normal = (c.inner_br - c.inner_bl).safe_normal().cross((c.inner_tl - c.inner_bl).safe_normal())
        uvs = _square_uvs(wall_width, wall_height)
        mesh.add_quad_face(Face((c.inner_bl, c.inner_br, c.inner_tr, c.inner_tl), normal, uvs))
        mesh.add_quad_face(
            Face((c.outer_bl, c.outer_br, c.outer_tr, c.outer_tl), -normal, uvs, reverse_winding=True)
        )
        return generated

    def neighbour_missing(gx: int, gz: int) -> bool:
        if not (0 <= gx < grid_x and 0 <= gz < grid_z):
            return True
        if outside_wall(*cell_bounds(gx, gz)):
            return True
        return in_hole(gx, gz)

    for gx, gz in cells:
        if in_hole(gx, gz):
            continue
        raw = cell_bounds(gx, gz)
        if outside_wall(*raw):
            continue
        bounds = clamp(*raw)
        if bounds is None:
            continue
        sx, ex, sz, ez = bounds
        seg = segment_corners(sx, ex, sz, ez)
        vertical = (ez - sz) / 100.0
        horizontal = (ex - sx) / 100.0

        if neighbour_missing(gx - 1, gz):
            mesh.add_door_frame(seg.inner_bl, seg.outer_bl, seg.outer_tl, seg.inner_tl, wall_thickness, vertical)
        if neighbour_missing(gx + 1, gz):
            mesh.add_door_frame(seg.inner_br, seg.outer_br, seg.outer_tr, seg.inner_tr, wall_thickness, vertical)
        if neighbour_missing(gx, gz - 1):
            mesh.add_door_frame(seg.inner_bl, seg.outer_bl, seg.outer_br, seg.inner_br, wall_thickness, horizontal)
        if neighbour_missing(gx, gz + 1):
            mesh.add_door_frame(seg.inner_tl, seg.outer_tl, seg.outer_tr, seg.inner_tr, wall_thickness, horizontal)

    logger.info(
        "Irregular hole complete: %d segments (%.1f%% coverage) from %d grid cells, "
        "%d polygon points, seed %d",
        generated, coverage, total_cells, door.irregular_points, door.random_seed,
    )
    return generated