# raytracer

A small ray tracer with no dependencies outside the standard library. It has
these parts:

- 3D points, vectors and colours
- 4×4 transformation matrices
- spheres with Phong materials
- a point light that casts shadows
- a world that holds the objects and the light
- a pinhole camera

The camera renders a world onto a canvas. The canvas can be saved as a PPM
image, either plain-text (`P3`) or binary (`P6`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering the demonstration scenes

```
raytracer [SCENE ...] [--output-dir DIR]
```

With no scene names the command renders every scene. Images go into
`--output-dir`, which defaults to the current directory. The scenes are:

| Scene           | File           | Format | What it shows                                       |
|-----------------|----------------|--------|-----------------------------------------------------|
| `projectile`    | `chapter1.ppm` | P6     | the arc of a projectile under gravity and wind      |
| `clock`         | `chapter4.ppm` | P3     | the twelve hour positions of a clock face           |
| `silhouette`    | `chapter5.ppm` | P3     | the silhouette of a scaled, rotated, sheared sphere |
| `shaded-sphere` | `chapter6.ppm` | P6     | one Phong-shaded sphere, 1000×1000                  |
| `world`         | `chapter7.ppm` | P6     | three balls on a floor between two walls, 1000×1000 |

An unknown scene name is reported as a usage error. When an image cannot be
written, the command prints a message, goes on with the remaining scenes, and
exits with status 1.

The larger scenes are traced in pure Python and take a while to render.

Each scene can also be rendered from Python. Every one of these functions
writes its file and returns its path:

- `projectile_scene(path)`
- `clock_scene(path)`
- `silhouette_scene(path)`
- `shaded_sphere_scene(path)`
- `world_scene(path)`

All of them are in `raytracer.scenes`.

## Using the library

```python
from raytracer.camera import Camera
from raytracer.canvas import PpmFormat
from raytracer.transformations import PI, view_transform
from raytracer.tuples import Point, Vector
from raytracer.worlds import World

world = World.default()
camera = Camera(200, 100, PI / 3)
camera.set_transform(
    view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0))
)
canvas = camera.render(world)
canvas.write_ppm("scene.ppm", PpmFormat.P6)
```

### The modules

- `raytracer.tuples`
  - `Point`, `Vector` and `Color`, with arithmetic operators.
  - `Vector.magnitude`, `normalize`, `dot`, `cross` and `reflect`.
- `raytracer.matrices`
  - `Matrix`, which also offers `identity` and `then`.
  - `transpose`, `submatrix`, `minor`, `cofactor` and `determinant`.
  - `is_invertible`, and `inverse`, which returns `None` for a singular matrix.
- `raytracer.transformations`
  - `translation`, `scaling`, `shearing` and `view_transform`.
  - `rotation_x`, `rotation_y` and `rotation_z`.
  - `radians`, which converts degrees to radians.
- `raytracer.rays`: `Ray`, with `position(t)` and `transform(matrix)`.
- `raytracer.spheres`: `Sphere`, with `intersect`, `set_transform` and `normal_at`.
- `raytracer.intersections`
  - `Intersection` and `Computations`.
  - `Intersections`, a collection kept sorted by `t`. Its `hit()` returns the lowest positive `t`.
- `raytracer.materials`: `Material`, and `lighting`, which implements the Phong reflection model.
- `raytracer.lights`: `PointLight`.
- `raytracer.worlds`: `World`, with `default`, `intersect_world`, `shade_hit`, `color_at` and `is_shadowed`.
- `raytracer.camera`: `Camera(hsize, vsize, field_of_view)`, with `ray_for_pixel`, `set_transform` and `render`.
- `raytracer.canvas`
  - `Canvas(width, height, max_color)`, addressed as `canvas[row, col]`.
  - `Canvas.write_pixel`, which scales and clamps a colour.
  - `to_bytes`, `to_ppm` and `write_ppm`, with `PpmFormat.P3` or `PpmFormat.P6`.
- `raytracer.colors`: `Pixel`, an 8-bit RGB pixel.

Transformations chain in reading order with `Matrix.then`. For example,
`scaling(0.5, 0.5, 0.5).then(translation(1.5, 0.5, -0.5))` scales first and
then translates.

Comparisons are approximate. Points, vectors and colours compare equal when
each component is within `0.001` of the other's. Matrices compare equal when
no entries differ by more than `0.001`.

## What it does not do

- Spheres are the only shape. There are no planes, cubes or meshes.
- A world has at most one light.
- Shading is ambient, diffuse and specular, with shadows. There is no
  reflection, refraction, transparency or texture pattern.
- Images are written as PPM only. No other image format can be written, and
  no format can be read.