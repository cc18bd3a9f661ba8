# softraster

Pure-Python building blocks for a CPU software rasterizer, built on numpy.
Matrices are 4×4 and act on column vectors (`matrix @ vector`).

## What it provides

- `softraster.transformations`: `rotation_matrix(angle, axis)`,
  `x_rotation_matrix`, `y_rotation_matrix`, `z_rotation_matrix`,
  `translation_matrix` and `scaling_matrix`, each returning a numpy 4×4 array.
- `softraster.transform`: `Transform` holds `position`, `euler_angles` and
  `scale` as properties. `world_matrix()` returns
  translation · rotation Y · rotation X · rotation Z · scaling. `load` and
  `save` read and write the three vectors through the scene format.
- `softraster.clipping`: `clip_polygon(vertices)` clips a polygon of
  homogeneous points against the six planes `-w <= x, y, z <= w` and returns
  the remaining vertices. A fully clipped polygon gives an empty list.
  `is_point_visible(point)` tests one point against the same planes.
- `softraster.interpolator`: `TriangleInterpolator(instance_count)` keeps three
  vertex values (`init_triangle_values`) and one set of barycentric weights per
  instance (`set_barycentric_weights`). `value(instance)` returns the weighted
  sum. `Interpolators` groups the `world_pos`, `uv` and `tbn` interpolators
  used for one triangle.
- `softraster.bounded_buffer`: `BoundedBuffer(capacity=10)` is a thread-safe
  FIFO. `add` blocks while it is full, `remove` blocks while it is empty, and
  `wait_until_empty` blocks until it has drained.
- `softraster.mesh`: `Mesh` holds vertices, normals, tangent-binormal-normal
  matrices, triangle index lists and UVs. The setters check their shapes, and
  they check that triangle indices refer to existing vertices and normals.
  `MeshGenerator` is the base class for parametric generators. Its methods are
  `build_mesh`, `set_parameters`, `copy`, `load` and `save`. `MeshType`
  numbers the generator kinds in scene files.
- `softraster.sphere`: `SphereMeshGenerator(radius, vertical_lines,
  horizontal_lines)` builds a UV sphere with separate pole normals and UVs.
- `softraster.generators`: `sphere_mesh(...)` is a shortcut for the sphere
  generator. `load_generator(reader)` reads a generator from a scene stream,
  and `load_mesh(reader)` reads one and builds its mesh.
- `softraster.sampler`: `StaticColorSampler` returns one colour for every UV.
  `load_sampler(reader)` reads a sampler from a scene stream.
- `softraster.raycast`: `Raycast(scene_objects).cast_ray(origin, direction)`
  returns the nearest object hit. Objects need `mesh` and `transform`
  attributes. `ray_intersects_triangle` is the Möller–Trumbore test and returns
  the hit distance or `None`.
- `softraster.scene_data`: `SceneDataReader` and `SceneDataWriter` handle the
  binary scene format. It uses little-endian 32-bit ints and floats, vectors,
  column-major 4×4 matrices and length-prefixed byte strings. A short read
  raises `EOFError`.
- `softraster.persistent_storage`: `PersistentStorage(slot, directory="data")`
  saves an object to `<directory>/save<slot>` and loads it back. Loading a
  missing slot raises `FileNotFoundError`.
- `softraster.shader_source`: `split_shader_sources` splits a combined shader
  file on `#type vertex` / `#type fragment` (or `pixel`) lines into a dict keyed
  by `ShaderType`. `shader_type_from_string` maps a stage name to a
  `ShaderType`. `shader_name(filepath)` returns the file name without its
  directory and extension.
- `softraster.text_box`: `TextBox` holds the text and the selection state of
  an input field. `handle_input(characters, backspace)` appends the typed
  characters while the text stays shorter than `max_chars - 1`, then applies
  one backspace.
- `softraster.rasterizer`: `scan_triangle(v1, v2, v3)` splits a screen-space
  triangle into `ScanLineSpan` rows. It does this through two halves that each
  have a horizontal base (`horizontal_base_spans`). `ScanLineSpan.depth_at(x)`
  interpolates the depth along a row. `is_front_facing(v1, v2, v3)` is the
  back-face test for clip-space triangles.

## What it does not do

- It opens no window, keeps no frame buffer and draws no pixels. It produces
  matrices, clipped polygons, spans and interpolated values, and does no
  shading or display.
- The sphere is the only mesh generator. `load_generator` raises `ValueError`
  for cube, cylinder and cone entries.
- Image samplers are not available. `load_sampler` raises `ValueError` for
  image data.
- Shader sources are split, never compiled.
- `TextBox` handles editing only and does no drawing or text layout.

## Installation

```
pip install .
```

## Example

```python
import numpy as np
from softraster.generators import sphere_mesh
from softraster.clipping import clip_polygon

mesh = sphere_mesh(1.0, 16, 8)
print(len(mesh.vertices), len(mesh.triangles))

triangle = [
    np.array([-2.0, 0.0, 0.0, 1.0]),
    np.array([0.5, 0.5, 0.0, 1.0]),
    np.array([0.5, -0.5, 0.0, 1.0]),
]
print(clip_polygon(triangle))
```

## Running the tests

```
pip install .[test]
pytest
```