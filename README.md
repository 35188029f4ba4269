# backwalls

Procedural generation of thick wall meshes with openings: floor-level
doorways, rectangular windows placed anywhere on a wall, circles, and seeded
irregular outlines (triangles, stars, blobs and so on). The output is plain
triangle-mesh data: vertices, triangle indices, per-vertex normals and UVs.
Sizes are given in metres and the geometry is produced in centimetre units
(1 m = 100 units).

The package has no dependencies beyond the standard library.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

- `backwalls.geometry`: `Vec2`, `Vec3` (with `dot`, `cross`, `length`,
  `safe_normal`), `Color` (with constants such as `Color.WHITE`, `Color.RED`,
  `Color.YELLOW`), `Rotator` (pitch, yaw and roll in degrees, with `matrix`
  and `rotate`) and `meters_to_units`.
- `backwalls.mesh`: `Face`, a quad with one shared normal, and `MeshData`,
  which holds the mesh buffers and grows through `add_quad_face`,
  `add_door_frame` and `add_thick_segment`. `double_sided()` returns a copy in
  which every triangle is also present in reverse order, with negated normals
  and duplicated UVs appended. `WallCorners` holds the eight corners of a slab.
  `WallCorners.centered(width, height, thickness, rotation, position)` builds
  them for a rotated wall centred on a point, and `center()` averages them.
- `backwalls.config`: `HoleShape` (`RECTANGLE`, `CIRCLE`, `IRREGULAR`),
  `WallSide` and `DoorConfig`, a frozen description of one opening.
  `DoorConfig` raises `ValueError` for negative sizes or fewer than one
  outline point.
- `backwalls.holes`: `irregular_polygon` builds a hole outline from a door
  config and its seed. `point_in_polygon` is a ray-casting test.
  `generate_wall_with_hole` tiles the wall with square segments, leaves out
  those that touch the outline, and adds frame faces along exposed edges. If
  fewer than eight segments remain, it appends a plain two-faced wall as well.
  It returns the number of segments generated.
- `backwalls.walls`: `generate_thick_wall` builds a solid slab.
  `generate_rectangle_hole` cuts a floor-level doorway.
  `hole_interior_faces` lines a rectangular opening.
  `generate_wall_with_door` picks the generator by hole shape.
  `generate_wall_with_doors` handles several openings: each is built
  separately and overlaps are not merged.
- `backwalls.doorways`: `generate_custom_square_hole` places a rectangular
  opening centred at fractions of the wall width and height.
  `generate_doorway` is a doorway that stands on the floor when `vertical` is
  0. `generate_random_hole` cuts a seeded irregular hole, with a random
  rotation unless one is given. `wall_mesh_with_doorway` returns a finished,
  double-sided `MeshData`.
- `backwalls.builders`: ready-made `Wall` objects, each holding `mesh`,
  `color`, `position` and `rotation`. They come from `solid_wall`,
  `doorway_wall`, `wall_with_hole` and `wall_with_holes`, and openings are
  described by a `HoleSpec`. `shape_preset` returns the irregular-hole
  settings for a named shape.

## Example

```python
import random

from backwalls.builders import HoleSpec, solid_wall, wall_with_hole
from backwalls.config import HoleShape
from backwalls.geometry import Color, Rotator, Vec3

floor = solid_wall(Vec3(0, 0, -150), Rotator(0, 0, 90), 4.0, 4.0, 0.2, Color(0.6, 0.6, 0.6))

star = HoleSpec(width=1.5, height=1.5, name="Star", shape=HoleShape.IRREGULAR)
wall = wall_with_hole(Vec3(0, 200, 0), Rotator(), 4.0, 3.0, 0.2,
                      Color(1.0, 1.0, 0.0), star, random.Random(7))
print(len(wall.mesh.vertices), len(wall.mesh.triangles) // 3)
```

### HoleSpec positioning

A `HoleSpec` without `center_x` and `center_y` is a doorway. It is centred
horizontally and stands on the floor. With both given, in metres from the
wall's bottom-left corner, a rectangular opening is centred at that point.
Circular and irregular openings take only the horizontal position and are
always centred vertically. Giving only one of the two raises `ValueError`.

### Shape presets

The named irregular presets are `Circle`, `Triangle`, `Square`, `Hexagon`,
`Star`, `Flower`, `Blob` and `Crystal`. They have fixed outlines, except
`Blob`, whose rotation is drawn from the supplied random generator. Any other
name gives a random organic outline with a random seed, also drawn from that
generator. `wall_with_holes` cuts only the first of several openings and logs
a warning. With no openings it gives a solid wall.

Generation progress and fallbacks are reported through the standard
`logging` module.

## What it does not do

`backwalls` only produces mesh data in memory. It does not:

- render anything;
- write meshes to files;
- assign materials;
- build collision;
- lay out rooms or levels.

There is no command-line interface. Feed the `MeshData` buffers to the
renderer, engine or exporter of your choice.