"""Ready-made scenes: filled rectangles, screen-space triangles and a camera view."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import IO, Any, Union

from gzrender.framebuffer import Display, OutOfBoundsError
from gzrender.rasterizer import Rasterizer
from gzrender.renderer import Renderer
from gzrender.types import Camera, Matrix, Token, Vector

Target = Union[str, "os.PathLike[str]", IO[Any]]

FRAMEBUFFER_SIZE = (512, 512)
RASTERIZATION_SIZE = (256, 256)
TRANSFORMATIONS_SIZE = (256, 256)

DEFAULT_OUTPUT = "output.ppm"
DEFAULT_RECTS_INPUT = "rects"
DEFAULT_SCREEN_INPUT = "pot4.screen.asc"
DEFAULT_MODEL_INPUT = "pot4.asc"

LIGHT_DIRECTION: Vector = (0.707, 0.5, 0.5)
SURFACE_COLOR: Vector = (0.95, 0.65, 0.88)

SCENE_SCALE: Matrix = (
    (3.25, 0.0, 0.0, 0.0),
    (0.0, 3.25, 0.0, -3.25),
    (0.0, 0.0, 3.25, 3.5),
    (0.0, 0.0, 0.0, 1.0),
)
SCENE_ROTATE_X: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 0.7071, 0.7071, 0.0),
    (0.0, -0.7071, 0.7071, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)
SCENE_ROTATE_Y: Matrix = (
    (0.866, 0.0, -0.5, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.5, 0.0, 0.866, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)
SCENE_CAMERA = Camera(
    position=(13.2, -8.7, -14.8),
    lookat=(0.8, 0.7, 4.5),
    worldup=(-0.2, 1.0, 0.0),
    fov=53.7,
)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle, corners inclusive, with a 12-bit colour."""

    ulx: int
    uly: int
    lrx: int
    lry: int
    red: int
    green: int
    blue: int

    def pixels(self) -> Iterator[tuple[int, int]]:
        """Every (x, y) covered, row by row."""
        for y in range(self.uly, self.lry + 1):
            for x in range(self.ulx, self.lrx + 1):
                yield x, y


@dataclass(frozen=True)
class Triangle:
    """Three vertices with their normals and texture coordinates."""

    vertices: tuple[Vector, Vector, Vector]
    normals: tuple[Vector, Vector, Vector]
    uvs: tuple[tuple[float, float], tuple[float, float], tuple[float, float]]


def shade(normal: Sequence[float]) -> Vector:
    """Colour for a surface normal under a fixed directional light."""
    coef = abs(sum(light * n for light, n in zip(LIGHT_DIRECTION, normal)))
    coef = min(coef, 1.0)
    red, green, blue = (coef * c for c in SURFACE_COLOR)
    return (red, green, blue)


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_rects(stream: IO[str]) -> Iterator[Rect]:
    """Yield rectangles given as seven integers each; stop at the first incomplete one."""
    tokens = _tokens(stream)
    while True:
        values = []
        for token in tokens:
            try:
                values.append(int(token))
            except ValueError:
                return
            if len(values) == 7:
                break
        if len(values) < 7:
            return
        yield Rect(*values)


def read_triangles(stream: IO[str]) -> Iterator[Triangle]:
    """Yield triangles: a word, then x y z nx ny nz u v for each of three vertices.

    Raises ValueError on a triangle with missing or non-numeric values.
    """
    tokens = _tokens(stream)
    for _word in tokens:
        numbers = []
        for token in tokens:
            numbers.append(float(token))
            if len(numbers) == 24:
                break
        if len(numbers) < 24:
            raise ValueError("incomplete triangle: expected 24 numbers")
        rows = [numbers[i : i + 8] for i in range(0, 24, 8)]
        yield Triangle(
            vertices=tuple((r[0], r[1], r[2]) for r in rows),  # type: ignore[arg-type]
            normals=tuple((r[3], r[4], r[5]) for r in rows),  # type: ignore[arg-type]
            uvs=tuple((r[6], r[7]) for r in rows),  # type: ignore[arg-type]
        )


@contextlib.contextmanager
def _opened(target: Target, mode: str) -> Iterator[IO[Any]]:
    if isinstance(target, (str, os.PathLike)):
        with open(target, mode) as handle:
            yield handle
    else:
        yield target


def _flush(display: Display, outfile: IO[bytes]) -> None:
    display.write_ppm(outfile)
    display.to_framebuffer()


def run_framebuffer(infile: Target, outfile: Target) -> Display:
    """Fill rectangles read from infile on a 512x512 display and write a PPM."""
    display = Display(*FRAMEBUFFER_SIZE)
    with contextlib.ExitStack() as stack:
        source = stack.enter_context(_opened(infile, "r"))
        sink = stack.enter_context(_opened(outfile, "wb"))
        for rect in read_rects(source):
            for x, y in rect.pixels():
                try:
                    display.put(x, y, rect.red, rect.green, rect.blue, 1, 0)
                except OutOfBoundsError:
                    continue
        _flush(display, sink)
    return display


def _draw_triangles(target: Rasterizer, source: IO[str]) -> None:
    for triangle in read_triangles(source):
        target.put_attribute({Token.RGB_COLOR: shade(triangle.normals[0])})
        try:
            target.put_triangle({Token.POSITION: triangle.vertices})
        except ValueError:
            continue


def run_rasterization(infile: Target, outfile: Target) -> Rasterizer:
    """Draw screen-space triangles on a 256x256 display and write a PPM."""
    rasterizer = Rasterizer(*RASTERIZATION_SIZE)
    with contextlib.ExitStack() as stack:
        source = stack.enter_context(_opened(infile, "r"))
        sink = stack.enter_context(_opened(outfile, "wb"))
        _draw_triangles(rasterizer, source)
        _flush(rasterizer, sink)
    return rasterizer


def run_transformations(infile: Target, outfile: Target) -> Renderer:
    """Project model-space triangles through the scene camera and write a PPM."""
    renderer = Renderer(*TRANSFORMATIONS_SIZE)
    renderer.put_camera(SCENE_CAMERA)
    renderer.begin_render()
    for matrix in (SCENE_SCALE, SCENE_ROTATE_Y, SCENE_ROTATE_X):
        renderer.push_matrix(matrix)
    renderer.reset()
    with contextlib.ExitStack() as stack:
        source = stack.enter_context(_opened(infile, "r"))
        sink = stack.enter_context(_opened(outfile, "wb"))
        _draw_triangles(renderer, source)
        _flush(renderer, sink)
    return renderer


_COMMANDS = {
    "framebuffer": (run_framebuffer, DEFAULT_RECTS_INPUT),
    "rasterize": (run_rasterization, DEFAULT_SCREEN_INPUT),
    "transform": (run_transformations, DEFAULT_MODEL_INPUT),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one scene from the command line; returns 0 on success, 1 on failure."""
    parser = argparse.ArgumentParser(prog="gzrender", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_run, default_input) in _COMMANDS.items():
        sub = commands.add_parser(name)
        sub.add_argument("input", nargs="?", default=default_input)
        sub.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    run, _default = _COMMANDS[args.command]
    try:
        run(args.input, args.output)
    except OSError as error:
        print(f"gzrender: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"gzrender: {args.input}: {error}", file=sys.stderr)
        return 1
    return 0