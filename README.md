# gzrender

A small, dependency-free software renderer built in three layers:

1. **Display** (`gzrender.framebuffer`): a grid of pixels holding 12-bit
   RGB intensities, alpha and a signed depth, written out as a binary PPM
   (`P6`) image or packed into a blue-green-red frame buffer.
2. **Rasterizer** (`gzrender.rasterizer`): scan conversion of flat-shaded
   triangles given in screen coordinates, with z-buffer hidden-surface
   removal.
3. **Renderer** (`gzrender.renderer`): a camera (position, look-at point,
   world-up vector, field of view) and a matrix stack that takes triangles
   from model space to screen space before rasterizing them.

`gzrender.transforms` builds the 4×4 matrices the renderer uses:
`identity`, `rotate_x`, `rotate_y`, `rotate_z` (angles in degrees),
`translate`, `scale`, plus `matmul` and `transform_point`.
`gzrender.types` holds the shared value types: `Token`, `Pixel`, `Camera`
and `UserInput`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `gzrender`, with three subcommands.
Each takes an optional input file and an optional output file; the output
defaults to `output.ppm`.

```
gzrender framebuffer [input] [output]   # input defaults to "rects"
gzrender rasterize   [input] [output]   # input defaults to "pot4.screen.asc"
gzrender transform   [input] [output]   # input defaults to "pot4.asc"
gzrender --help
```

* **framebuffer** reads rectangles, seven integers each:
  `ulx uly lrx lry r g b` (corners inclusive, colour as 12-bit
  intensities), and fills them into a 512×512 display. Reading stops at the
  first incomplete or non-numeric rectangle; pixels outside the display are
  skipped.
* **rasterize** reads triangles already in screen space and draws them into
  a 256×256 display, each flat-shaded from the normal of its first vertex.
* **transform** reads triangles in model space, views them through a fixed
  camera after fixed scale and rotation transforms, and draws them into a
  256×256 display.

Triangle files hold, for each triangle, a leading word followed by three
vertices of eight numbers each: position `x y z`, normal `nx ny nz` and
texture coordinates `u v`. An incomplete triangle is an error.

The command exits with status 0 on success and 1 when a file cannot be
opened or the input is malformed.

## Library use

The same pipelines are available in `gzrender.apps` as `run_framebuffer`,
`run_rasterization` and `run_transformations`. Each takes an input and an
output, either as paths or as open file objects (text for input, binary for
output), and returns the display it drew into. The readers `read_rects` and
`read_triangles` parse the input formats into `Rect` and `Triangle` values,
and `shade` gives the flat colour used for a normal.

Drawing pixels directly:

```python
from gzrender.framebuffer import Display

display = Display(64, 48)              # starts filled with the background
display.put(10, 5, 4095, 0, 0, 1, 0)   # x, y, red, green, blue, alpha, z
pixel = display.get(10, 5)             # a Pixel

with open("out.ppm", "wb") as stream:
    display.write_ppm(stream)

bgr = display.to_framebuffer()         # bytes in blue, green, red order
```

Writes or reads outside the display raise `OutOfBoundsError`. A display
larger than 1024×1024 raises `ValueError`. Intensities above 4095
saturate to 255 in the output (`clamp_intensity`); others are shifted down
to 8 bits.

Drawing triangles:

```python
from gzrender.rasterizer import Rasterizer
from gzrender.types import Token

raster = Rasterizer(32, 32)
raster.put_attribute({Token.RGB_COLOR: (1.0, 0.5, 0.0)})
raster.put_triangle({Token.POSITION: [(2, 2, 10), (30, 4, 10), (10, 28, 10)]})
```

`put_attribute` and `put_triangle` take a mapping or a sequence of
`(token, value)` pairs; tokens other than `RGB_COLOR` and `POSITION` are
ignored.

Building transforms:

```python
from gzrender.transforms import matmul, rotate_y, scale, transform_point, translate

model = matmul(translate((0.0, -3.25, 3.5)), matmul(rotate_y(30.0), scale((3.25, 3.25, 3.25))))
print(transform_point(model, (1.0, 0.0, 0.0)))
```

`transform_point` raises `ValueError` when the point maps to w = 0.

Using the renderer:

```python
from gzrender.renderer import Renderer
from gzrender.transforms import rotate_x
from gzrender.types import Camera, Token

renderer = Renderer(256, 256)
renderer.put_camera(Camera(position=(0.0, 0.0, -10.0), lookat=(0.0, 0.0, 0.0), fov=45.0))
renderer.begin_render()            # stack: Xsp, Xsp·Xpi, Xsp·Xpi·Xiw
renderer.push_matrix(rotate_x(30.0))
renderer.put_triangle({Token.POSITION: [(-1, -1, 0), (1, -1, 0), (0, 1, 0)]})
```

Triangles with any vertex at or behind the image plane are skipped.
`begin_render` raises `CameraError` for an unusable camera (a look-at point
equal to the position, or an up vector parallel to the view direction).
The matrix stack holds at most 100 matrices; pushing beyond that, or
popping an empty stack, raises `MatrixStackError`.

## What it does not do

There is no window or on-screen viewer: `to_framebuffer` only produces the
blue-green-red bytes, and images are seen by opening the PPM file.
`UserInput` only holds rotation, translation and scale values; nothing
applies them interactively. The renderer draws flat-coloured triangles
only, with no lighting, texturing or per-vertex shading of its own.