# meshgeom

Geometry building blocks for interactive 3D viewers. The package is plain
Python and NumPy and has no rendering backend of its own. Matrices are 4×4
NumPy arrays in row-major order that act on column vectors.

## Modules

### `meshgeom.bounds`

- `Aabb` is an axis-aligned box. It starts empty, or holds a single point
  if one is given. `add_point` and `add_box` grow it. `reset` empties it
  again, and `diagonal` returns `max - min`.
- `BoundingBox` is a box given by its six limits. It has these methods:
  - `set_limits` and `limits` set and read the limits.
  - `center` returns the middle of the box.
  - `bounding_radius` gives the distance from the center to the maximum
    corner.
  - `contains` tests a point and counts the faces as inside.
  - `add_box` grows the box to take in another one.
  - `corners` returns the eight corner points.
  - `project` takes a model-view matrix, a projection matrix, a viewport
    `(x, y, width, height)` and a window height. It returns an integer
    `Rect(x, y, width, height)` whose y axis points down from the top of
    the window.
- `BoundingSphere` has a `center`, a `radius` and `set_center`. It also
  has two methods:
  - `add_sphere` grows the sphere so that it encloses another sphere.
  - `intersects_with_ray` tests a ray given by a start point and a
    direction.
- `solve_quadratic(a, b, c)` returns the real roots in ascending order. It
  returns `None` when there are none.

### `meshgeom.material`

`Material` holds the following values:

- the ambient, diffuse, specular and emissive colours, plus the shininess
  and the `metallic` flag;
- the PBR values: `albedo_color`, `metalness` and `roughness`;
- the opacity.

Every colour you assign is clamped to `[0, 1]`.

A material can be made in three more ways:

- `Material.from_pbr(albedo, metalness, roughness, opacity)` builds one
  from PBR values.
- `Material.default()` returns the material given to new objects.
- `Material.predefined(kind)` returns one of the library materials. There
  are brass, bronze, copper, gold, silver, chrome, six gems and stones,
  six plastics and six rubbers. `kind` is a `PredefinedMaterial` member or
  its integer value; an unknown value raises `ValueError`.

Two materials compare equal when all their values are equal.

### `meshgeom.camera`

`Camera(width, height, view_range, fov)` keeps the following state:

- a position;
- the view, up and right vectors;
- a zoom factor;
- a `ProjectionType`, which is `ORTHOGRAPHIC` (the default) or
  `PERSPECTIVE`.

From that state it builds `view_matrix` and `projection_matrix`. Its
methods fall into these groups:

- **Screen and projection:** `set_screen_size`, plus the `fov`,
  `view_range` and `projection_type` properties. Each of these rebuilds
  the projection matrix. The `screen_size` and `aspect_ratio` properties
  only read values.
- **Orientation:** `rotate_x`, `rotate_y` and `rotate_z` take angles in
  degrees. `rotation_angles()` returns the angles about the y, z and x
  axes, in degrees, read from the view matrix.
- **Position:** `move`, `move_forward` (which moves against the view
  direction), `move_upward`, `move_across` and `set_position`.
- **Zoom:** the `zoom` property scales the view matrix.
- **Views:**
  - `set_view(ViewProjection.…)` orients the camera along one of the
    standard views and keeps its position. The views are top, bottom,
    front, rear, left, right, the four isometric views, dimetric and
    trimetric.
  - `set_view_vectors` sets the position and all three vectors directly.
  - `reset_all` puts the camera back at the origin looking down −z.
- **Stereo:** `compute_stereo_view_projection(width, height, iod,
  depth_z, left_eye)` multiplies one eye's off-axis frustum and shifted
  view onto the current matrices.

The module-level helpers `look_at`, `ortho`, `perspective` and `frustum`
build the matrices themselves. Each returns the identity for degenerate
input.

### `meshgeom.surfaces`

`ParametricSurface(radius)` is the abstract base of a set of closed-form
surfaces. Each surface has a `name`, a `u_range` and a `v_range` for its
parameter domain, and `point_at(u, v)`, which returns an `(x, y, z)`
array scaled by `radius`. The surfaces are:

- `AppleSurface`
- `BentHorns`
- `BowTie`
- `BoySurface`
- `BreatherSurface`
- `ConeShell`
- `Crescent`
- `DoubleCone`
- `Figure8KleinBottle`
- `Folium`

`SURFACES` lists all of these classes.

### `meshgeom.primitives`

Each builder returns a `MeshData`:

- `make_cone(radius, height, slices, stacks, s_max=1, t_max=1)` builds a
  cone with its base at z = −height/2 and its apex at z = height/2.
- `make_cylinder(...)` builds a closed cylinder about the z axis, centred
  at the origin. It takes the same arguments as `make_cone`.
- `make_cube(size=1.0)` builds a cube centred at the origin.

A `MeshData` holds these values:

- the vertex attributes: `positions`, `normals`, `tangents`,
  `bitangents` and `tex_coords`;
- `indices`, a flat triangle index list (see also `triangles`, grouped
  three to a row);
- `vertex_count`;
- `bounding_box` and `bounding_sphere`.

Fewer than one slice or stack raises `ValueError`.

## What it does not do

meshgeom computes geometry only. It does not draw anything. It has no
window or user interface, and it does not read or write model files or
textures. Meshes built from the parametric surfaces are left to the caller:
sample `point_at` over `u_range` × `v_range` to build one.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from meshgeom.bounds import BoundingSphere
from meshgeom.material import Material, PredefinedMaterial
from meshgeom.camera import Camera, ViewProjection
from meshgeom.surfaces import Figure8KleinBottle
from meshgeom.primitives import make_cube

sphere = BoundingSphere(0.0, 0.0, 0.0, 1.0)
hit = sphere.intersects_with_ray((0.0, 0.0, 5.0), (0.0, 0.0, -1.0))

gold = Material.predefined(PredefinedMaterial.GOLD)

camera = Camera(800, 600, 200, 45)
camera.set_view(ViewProjection.FRONT_VIEW)
view_projection = camera.projection_matrix @ camera.view_matrix

bottle = Figure8KleinBottle(1.0)
point = bottle.point_at(0.5, 1.0)

cube = make_cube(2.0)
print(cube.vertex_count, len(cube.triangles))  # 24 12
```