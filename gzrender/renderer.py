"""A camera-driven renderer: model transforms, projection and a matrix stack."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from gzrender.rasterizer import Parts, Rasterizer
from gzrender.transforms import identity, matmul, transform_point
from gzrender.types import DEPTH_MAX, ZERO_MATRIX, Camera, Matrix, Token, Vector

MAX_MATRIX_LEVELS = 100


class CameraError(ValueError):
    """Raised when the camera cannot define a view (degenerate axes)."""


class MatrixStackError(IndexError):
    """Raised on matrix stack overflow or underflow."""


def _pairs(items: Parts) -> Iterable[tuple[Any, Any]]:
    if isinstance(items, Mapping):
        return items.items()
    return items


def _normalized(vector: Sequence[float], what: str) -> Vector:
    length = math.sqrt(sum(c * c for c in vector))
    if length == 0.0:
        raise CameraError(f"camera {what} axis has zero length")
    x, y, z = (c / length for c in vector)
    return (x, y, z)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(p * q for p, q in zip(a, b))


class Renderer(Rasterizer):
    """A rasterizer that projects model-space triangles through a camera."""

    def __init__(self, width: int, height: int) -> None:
        self.camera = Camera.default()
        self.xsp: Matrix = ZERO_MATRIX
        self._stack: list[Matrix] = []
        super().__init__(width, height)

    @property
    def matrix_stack(self) -> tuple[Matrix, ...]:
        """The accumulated transforms, bottom first."""
        return tuple(self._stack)

    @property
    def top(self) -> Matrix:
        """The current model-to-screen transform."""
        if not self._stack:
            raise MatrixStackError("matrix stack is empty")
        return self._stack[-1]

    def reset(self) -> None:
        """Start a new frame; pixels start with alpha 1."""
        super().reset()
        self._pixels = [dataclasses.replace(pixel, alpha=1) for pixel in self._pixels]

    def put_camera(self, camera: Camera) -> None:
        """Take position, look-at point, up vector and field of view from a camera."""
        self.camera = dataclasses.replace(
            self.camera,
            position=tuple(float(c) for c in camera.position),
            lookat=tuple(float(c) for c in camera.lookat),
            worldup=tuple(float(c) for c in camera.worldup),
            fov=float(camera.fov),
        )

    def begin_render(self) -> None:
        """Build Xsp, Xpi and Xiw and set the stack to Xsp, Xsp.Xpi, Xsp.Xpi.Xiw."""
        one_over_d = math.tan(math.radians(self.camera.fov) / 2.0)
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        xsp: Matrix = (
            (half_w, 0.0, 0.0, half_w),
            (0.0, -half_h, 0.0, half_h),
            (0.0, 0.0, DEPTH_MAX * one_over_d, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        xpi: Matrix = (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, one_over_d, 1.0),
        )

        position = self.camera.position
        z_axis = _normalized(
            [a - b for a, b in zip(self.camera.lookat, position)], "view"
        )
        up = self.camera.worldup
        up_z = _dot(up, z_axis)
        y_axis = _normalized([u - up_z * z for u, z in zip(up, z_axis)], "up")
        x_axis: Vector = (
            y_axis[1] * z_axis[2] - y_axis[2] * z_axis[1],
            y_axis[2] * z_axis[0] - y_axis[0] * z_axis[2],
            y_axis[0] * z_axis[1] - y_axis[1] * z_axis[0],
        )
        rows = [(*axis, -_dot(axis, position)) for axis in (x_axis, y_axis, z_axis)]
        xiw: Matrix = (rows[0], rows[1], rows[2], (0.0, 0.0, 0.0, 1.0))

        self.xsp = xsp
        self.camera = dataclasses.replace(self.camera, xiw=xiw, xpi=xpi)
        self._stack = [xsp]
        self.push_matrix(xpi)
        self.push_matrix(xiw)

    def push_matrix(self, matrix: Sequence[Sequence[float]]) -> None:
        """Multiply the top of the stack by a matrix and push the product."""
        if len(self._stack) >= MAX_MATRIX_LEVELS:
            raise MatrixStackError(f"matrix stack full ({MAX_MATRIX_LEVELS} levels)")
        base = self._stack[-1] if self._stack else identity()
        self._stack.append(matmul(base, matrix))

    def pop_matrix(self) -> Matrix:
        """Remove and return the top of the stack."""
        if not self._stack:
            raise MatrixStackError("matrix stack is empty")
        return self._stack.pop()

    def put_triangle(self, parts: Parts) -> None:
        """Transform the position part to screen space and draw it.

        A triangle with any vertex at or behind the image plane is skipped.
        Raises ValueError when a vertex maps to infinity.
        """
        for token, value in _pairs(parts):
            if token != Token.POSITION:
                continue
            top = self.top
            screen = []
            for vertex in value:
                point = transform_point(top, vertex)
                if point[2] <= 0.0:
                    return
                screen.append(point)
            self.draw_screen_triangle(screen)