# rasterpot

A small software rasterizer written with NumPy. It projects triangle meshes
through a perspective camera, fills them into a colour buffer with a depth
buffer, samples diffuse textures, and applies a single directional light.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `rasterpot.transform`

4×4 matrix helpers for column vectors (`matrix @ point`). Each builder
composes on the right of the matrix it is given.

- `identity()` – a fresh 4×4 identity matrix.
- `translate(matrix, offset)`, `rotate_x(matrix, angle)`,
  `rotate_y(matrix, angle)`, `rotate_z(matrix, angle)` – angles in radians.
- `perspective(fovy, aspect, near, far)` – an OpenGL-style projection;
  raises `ValueError` when `aspect` is zero or `near == far`.
- `look_at(eye, center, up)` – a view matrix.
- `normalize(vector)` – unit vector, or zeros for a vector too short to
  normalize.

### `rasterpot.graphics`

- `Framebuffer(width, height)` – an RGB float colour buffer `color`
  (height × width × 3) and a depth buffer `depth` filled with infinity.
  Non-positive sizes raise `ValueError`. `clear()` resets both buffers;
  `draw_triangle(ctx)` fills the triangle of a `ShaderContext`, keeping a pixel
  only where its interpolated depth is not greater than the stored one.
- `Vertex` – screen position (x, y, depth), normal, texture coordinate and
  colour.
- `Material` – `diffuse_color` and an optional `diffuse_map`, an index into
  the list of textures.
- `ShaderContext` – exactly three vertices, the direction towards the light
  (`to_light`), a material and the textures. Textures are float arrays of
  shape (height, width, channels) with values in [0, 1].
- `signed_area(a, b, c)`, `barycentric(triangle, point)` (returns `None` for
  points outside the triangle) and `shade(ctx, weights)`, which samples the
  diffuse texture or uses the diffuse colour, then scales by the interpolated
  normal dotted with `to_light`, never less than 0.01.

### `rasterpot.camera`

`Camera` holds a position, a facing direction, yaw/pitch/roll in degrees, a
vertical field of view (`fovy`, default 90°) and a speed (default 5).

- `key_down(key)` / `key_up(key)` take key names: `w`, `a`, `s`, `d` move
  forward, left, back and right, `q` and `e` move up and down (tracked as
  `Movement` flags), `z` calls `zoom_in()` and `x` calls `zoom_out()`.
  `key_down` returns `True` for `escape`, meaning the caller should quit.
- `zoom_in()` / `zoom_out()` change `fovy` in 15° steps within 15°–90°.
- `mouse_motion(dx, dy)` adds a tenth of each delta to yaw and pitch.
- `update(dt)` recomputes the direction from the angles and moves the camera
  for `dt` seconds.

### `rasterpot.scene`

- `Model` – vertex positions, texture coordinates and normals, a list of
  face corners as `(position, texcoord, normal)` indices counted from 1 (every
  three corners make a triangle), a material index, and a placement
  (`position`, `yaw`, `pitch`, `roll`). `matrix()` gives its model-to-world
  transform.
- `view_projection(camera, aspect)` – the camera's projection times view
  matrix, with near and far planes at 0.1 and 10.
- `render(framebuffer, camera, models, materials, textures, light)` – draws
  every model, skipping triangles with no corner inside the view box, returns
  a copy of the colour buffer and then clears the framebuffer. `light` is the
  direction the light travels in.

## Example

    import numpy as np

    from rasterpot.camera import Camera
    from rasterpot.graphics import Framebuffer, Material
    from rasterpot.scene import Model, render

    triangle = Model(
        positions=[(-1, -1, 0), (1, -1, 0), (0, 1, 0)],
        texcoords=[(0, 0)],
        normals=[(0, 0, -1)],
        faces=[(1, 1, 1), (2, 1, 1), (3, 1, 1)],
        position=(0, 0, 5),
    )
    materials = [Material(diffuse_color=(1.0, 0.5, 0.2))]

    framebuffer = Framebuffer(640, 480)
    camera = Camera()
    camera.update(0.0)
    image = render(framebuffer, camera, [triangle], materials, [], light=(0, 0, 1))
    # image is a 480 × 640 × 3 float array

## What it does not do

rasterpot renders frames into memory only. It opens no window, runs no event
loop, reads no mesh or material files and loads no images: meshes, materials
and textures are built by the caller, and showing or saving the returned image
is left to the caller as well. There is no command-line program.