"""4x4 homogeneous transform matrices and point transformation."""

from __future__ import annotations

import math
from collections.abc import Sequence

from gzrender.types import Matrix, Vector


def _matrix(rows: Sequence[Sequence[float]]) -> Matrix:
    return tuple(tuple(float(value) for value in row) for row in rows)  # type: ignore[return-value]


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return _matrix(
        (
            (1, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 0, 1, 0),
            (0, 0, 0, 1),
        )
    )


def matmul(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Matrix:
    """Return left x right."""
    columns = tuple(zip(*right))
    return _matrix(
        [sum(a * b for a, b in zip(row, column)) for column in columns] for row in left
    )


def _sin_cos(degrees: float) -> tuple[float, float]:
    radians = math.radians(degrees)
    return math.sin(radians), math.cos(radians)


def rotate_x(degrees: float) -> Matrix:
    """Rotation about the x axis."""
    s, c = _sin_cos(degrees)
    return _matrix(
        (
            (1, 0, 0, 0),
            (0, c, -s, 0),
            (0, s, c, 0),
            (0, 0, 0, 1),
        )
    )


def rotate_y(degrees: float) -> Matrix:
    """Rotation about the y axis."""
    s, c = _sin_cos(degrees)
    return _matrix(
        (
            (c, 0, s, 0),
            (0, 1, 0, 0),
            (-s, 0, c, 0),
            (0, 0, 0, 1),
        )
    )


def rotate_z(degrees: float) -> Matrix:
    """Rotation about the z axis."""
    s, c = _sin_cos(degrees)
    return _matrix(
        (
            (c, -s, 0, 0),
            (s, c, 0, 0),
            (0, 0, 1, 0),
            (0, 0, 0, 1),
        )
    )


def translate(offset: Sequence[float]) -> Matrix:
    """Translation by an (x, y, z) offset."""
    x, y, z = offset
    return _matrix(
        (
            (1, 0, 0, x),
            (0, 1, 0, y),
            (0, 0, 1, z),
            (0, 0, 0, 1),
        )
    )


def scale(factors: Sequence[float]) -> Matrix:
    """Scaling by (x, y, z) factors."""
    x, y, z = factors
    return _matrix(
        (
            (x, 0, 0, 0),
            (0, y, 0, 0),
            (0, 0, z, 0),
            (0, 0, 0, 1),
        )
    )


def transform_point(matrix: Sequence[Sequence[float]], point: Sequence[float]) -> Vector:
    """Apply a homogeneous transform to a point and divide by w.

    Raises ValueError when w is zero.
    """
    homogeneous = (*point, 1.0)
    x, y, z, w = (sum(a * b for a, b in zip(row, homogeneous)) for row in matrix)
    if w == 0.0:
        raise ValueError("point maps to infinity (w == 0)")
    return (x / w, y / w, z / w)