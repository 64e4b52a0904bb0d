# softrender

Building blocks for a software renderer in plain Python with NumPy and
Pillow: turning triangles into pixels on the CPU, plus the vector,
object and scene types for ray tracing spheres and triangle meshes.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

Python 3.10 or later is required.

## What is in the package

- `softrender.rasterizer` – `RasterizerBase` with the colour and depth
  buffers, the `model`, `view` and `projection` matrices, and
  `load_positions`, `load_indices`, `load_colors`, `load_normals`,
  `clear` and `frame_buffer`; the `Buffers` flags (`COLOR`, `DEPTH`),
  the `Primitive` enum and the buffer id types.
- `softrender.wireframe.WireframeRasterizer` – projects indexed
  triangles and draws their edges in white with Bresenham lines; pixels
  off screen are skipped.
- `softrender.flat.FlatRasterizer` – fills indexed triangles with the
  colour of their first vertex, keeping the nearest depth per pixel.
  `compute_barycentric_2d` and `inside_triangle` are available on their
  own.
- `softrender.transforms` – `get_view_matrix`, `rotation_z_matrix`,
  `identity_model_matrix`, `spot_model_matrix`, `perspective_matrix`,
  `reversed_z_perspective_matrix` and `spot_projection_matrix`, all
  returning 4×4 NumPy arrays.
- `softrender.triangle.Triangle` – per-vertex positions (homogeneous),
  colours (set in 0–255, stored in 0–1), normals and texture
  coordinates.
- `softrender.texture.Texture` – an RGB image (`Texture.from_file`
  loads one with Pillow) sampled with `get_color(u, v)`, coordinates
  clamped to `[0, 1]`.
- `softrender.bezier` – `recursive_bezier` evaluates a curve of any
  degree with de Casteljau's algorithm; `naive_bezier` marks the cubic
  formula in the red channel, `bezier` the recursive evaluation in the
  green channel, and `render_curves` draws both plus white rings at the
  control points, so a correct curve comes out yellow.
- `softrender.obj.model` – `Vector2`, `Vector3`, `Vertex`, `Material`
  and `Mesh` data types for Wavefront OBJ/MTL content.
- `softrender.obj.text` – `split`, `tail`, `first_token` and
  `get_element` (1-based and negative OBJ indices) for reading OBJ and
  MTL lines.
- `softrender.raytrace.vector` – `Vector3f`, `Vector2f`,
  `MaterialType`, `lerp`, `normalize`, `dot_product`, `cross_product`,
  `clamp`, `solve_quadratic`, `random_float`, `progress_bar` and
  `update_progress`.
- `softrender.raytrace.objects` – `Sphere`, `MeshTriangle` (with a
  checkerboard diffuse colour), `Light`, the `SceneObject` base class
  with its material properties, `Intersection` and
  `ray_triangle_intersect`.
- `softrender.raytrace.scene.Scene` – render settings (size, field of
  view, background colour, maximum depth, epsilon) and the objects and
  lights added with `add`.

## Example: a wireframe triangle

```python
from PIL import Image

from softrender.rasterizer import Buffers, Primitive
from softrender.transforms import get_view_matrix, perspective_matrix, rotation_z_matrix
from softrender.wireframe import WireframeRasterizer

r = WireframeRasterizer(700, 700)
pos = r.load_positions([(2, 0, -2), (0, 2, -2), (-2, 0, -2)])
ind = r.load_indices([(0, 1, 2)])

r.clear(Buffers.COLOR | Buffers.DEPTH)
r.model = rotation_z_matrix(20)
r.view = get_view_matrix((0, 0, 5))
r.projection = perspective_matrix(45, 1, 0.1, 50)
r.draw(pos, ind, Primitive.TRIANGLE)

pixels = r.frame_buffer().reshape(700, 700, 3).clip(0, 255).astype("uint8")
Image.fromarray(pixels).save("output.png")
```

`FlatRasterizer` is used the same way, with a colour buffer from
`load_colors` (channels in 0–255) passed to `draw`; it pairs with
`identity_model_matrix` and `reversed_z_perspective_matrix`.

## Example: intersecting a ray

```python
from softrender.raytrace.objects import Sphere
from softrender.raytrace.vector import Vector3f, normalize

sphere = Sphere(Vector3f(0, 0, -5), 1)
hit = sphere.intersect(Vector3f(0, 0, 0), normalize(Vector3f(0, 0, -1)))
print(hit.t_near)  # 4.0
```

## What the package does not do

- There is no command-line program; everything is used as a library.
- The ray-tracing package provides vectors, objects, lights and scenes
  with intersection and surface queries, but no render loop: it does not
  cast rays for an image, shade hits or write image files.
- There is no OBJ or MTL file reader; only the data types and the line
  helpers are provided.
- There is no per-pixel shaded rasterizer and there are no fragment
  shaders; the rasterizers draw wireframes and flat-coloured triangles.
- Nothing opens a window or handles keyboard or mouse input; images are
  NumPy arrays that you save yourself, for example with Pillow.