"""Mesh buffers and the quad primitives that thick walls are built from."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Sequence

from .geometry import Rotator, Vec2, Vec3, meters_to_units

_FRONT_WINDING = (0, 1, 2, 0, 2, 3)
_REVERSED_WINDING = (0, 2, 1, 0, 3, 2)


@dataclass(frozen=True)
class Face:
    """A quad with one normal shared by its four vertices."""

    vertices: Sequence[Vec3]
    normal: Vec3
    uvs: Sequence[Vec2]
    reverse_winding: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "uvs", tuple(self.uvs))
        if len(self.vertices) != 4 or len(self.uvs) != 4:
            raise ValueError("a quad face needs exactly four vertices and four UVs")


@dataclass(frozen=True)
class WallCorners:
    """The eight corners of a thick wall slab: inner and outer faces."""

    inner_bl: Vec3
    inner_br: Vec3
    inner_tr: Vec3
    inner_tl: Vec3
    outer_bl: Vec3
    outer_br: Vec3
    outer_tr: Vec3
    outer_tl: Vec3

    @classmethod
    def centered(
        cls,
        width: float,
        height: float,
        thickness: float,
        rotation: Rotator,
        position: Vec3,
    ) -> WallCorners:
        """Corners of a wall of the given size in metres, centred on ``position``."""
        hw = meters_to_units(width) * 0.5
        hh = meters_to_units(height) * 0.5
        ht = meters_to_units(thickness) * 0.5

        def place(x: float, y: float, z: float) -> Vec3:
            return rotation.rotate(Vec3(x, y, z)) + position

        return cls(
            inner_bl=place(-hw, -ht, -hh),
            inner_br=place(hw, -ht, -hh),
            inner_tr=place(hw, -ht, hh),
            inner_tl=place(-hw, -ht, hh),
            outer_bl=place(-hw, ht, -hh),
            outer_br=place(hw, ht, -hh),
            outer_tr=place(hw, ht, hh),
            outer_tl=place(-hw, ht, hh),
        )

    def _corners(self) -> Iterator[Vec3]:
        for f in fields(self):
            yield getattr(self, f.name)

    def center(self) -> Vec3:
        """Geometric centre of the eight corners."""
        total = Vec3()
        for corner in self._corners():
            total = total + corner
        return total / 8.0


@dataclass
class MeshData:
    """Vertex, index, normal and UV buffers of a procedural mesh."""

    vertices: list[Vec3] = field(default_factory=list)
    triangles: list[int] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)

    def add_quad_face(self, face: Face) -> None:
        base = len(self.vertices)
        self.vertices.extend(face.vertices)
        self.normals.extend([face.normal] * 4)
        self.uvs.extend(face.uvs)
        order = _REVERSED_WINDING if face.reverse_winding else _FRONT_WINDING
        self.triangles.extend(base + i for i in order)

    def add_door_frame(
        self,
        inner1: Vec3,
        outer1: Vec3,
        outer2: Vec3,
        inner2: Vec3,
        frame_thickness: float,
        frame_size: float,
    ) -> None:
        """Add a quad spanning the wall thickness along one hole edge."""
        normal = (outer1 - inner1).safe_normal().cross((inner2 - inner1).safe_normal())
        self.add_quad_face(
            Face(
                vertices=(inner1, outer1, outer2, inner2),
                normal=normal,
                uvs=(
                    Vec2(0.0, 0.0),
                    Vec2(frame_thickness, 0.0),
                    Vec2(frame_thickness, frame_size),
                    Vec2(0.0, frame_size),
                ),
            )
        )

    def add_thick_segment(
        self,
        corners: WallCorners,
        segment_width: float,
        segment_height: float,
        wall_thickness: float,
    ) -> None:
        """Add the six faces of a solid slab bounded by ``corners``."""
        c = corners
        inner_normal = (c.inner_br - c.inner_bl).cross(c.inner_tl - c.inner_bl).safe_normal()
        w, h, t = segment_width, segment_height, wall_thickness

        faces = (
            Face(
                (c.inner_bl, c.inner_br, c.inner_tr, c.inner_tl),
                inner_normal,
                (Vec2(0, 0), Vec2(w, 0), Vec2(w, h), Vec2(0, h)),
            ),
            Face(
                (c.outer_bl, c.outer_br, c.outer_tr, c.outer_tl),
                -inner_normal,
                (Vec2(0, 0), Vec2(w, 0), Vec2(w, h), Vec2(0, h)),
                reverse_winding=True,
            ),
            Face(
                (c.inner_bl, c.outer_bl, c.outer_br, c.inner_br),
                Vec3(0.0, 0.0, -1.0),
                (Vec2(0, 0), Vec2(t, 0), Vec2(t, w), Vec2(0, w)),
            ),
            Face(
                (c.inner_tl, c.inner_tr, c.outer_tr, c.outer_tl),
                Vec3(0.0, 0.0, 1.0),
                (Vec2(0, 0), Vec2(w, 0), Vec2(w, t), Vec2(0, t)),
            ),
            Face(
                (c.inner_tl, c.outer_tl, c.outer_bl, c.inner_bl),
                (c.outer_bl - c.inner_bl).safe_normal(),
                (Vec2(0, h), Vec2(t, h), Vec2(t, 0), Vec2(0, 0)),
            ),
            Face(
                (c.inner_br, c.outer_br, c.outer_tr, c.inner_tr),
                (c.outer_br - c.inner_br).safe_normal(),
                (Vec2(0, 0), Vec2(t, 0), Vec2(t, h), Vec2(0, h)),
                reverse_winding=True,
            ),
        )
        for face in faces:
            self.add_quad_face(face)

    def double_sided(self) -> MeshData:
        """A copy with every triangle also added in reverse order.

        Normals are appended negated and UVs duplicated; the vertex list is
        left as it is.
        """
        tris = self.triangles
        reversed_tris = [
            index
            for a, b, c in zip(tris[0::3], tris[1::3], tris[2::3])
            for index in (c, b, a)
        ]
        return MeshData(
            vertices=list(self.vertices),
            triangles=tris + reversed_tris,
            normals=self.normals + [-n for n in self.normals],
            uvs=self.uvs + list(self.uvs),
        )