"""Scan-line rasterization of flat-shaded screen-space triangles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Union

from gzrender.framebuffer import Display
from gzrender.types import Token

INTENSITY_SCALE = (1 << 12) - 1

Parts = Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]]


def color_to_intensity(color: float) -> int:
    """Convert a colour component in 0..1 to a 12-bit signed-short intensity."""
    value = int(color * INTENSITY_SCALE)
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _pairs(items: Parts) -> Iterable[tuple[Any, Any]]:
    if isinstance(items, Mapping):
        return items.items()
    return items


def _div(numerator: float, denominator: float) -> float:
    """Division that follows IEEE rules instead of raising on a zero divisor."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Rasterizer(Display):
    """A display that scan-converts triangles with a z-buffer and a flat colour."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.flat_color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def put_attribute(self, attributes: Parts) -> None:
        """Set renderer state; only the flat RGB colour is understood."""
        for token, value in _pairs(attributes):
            if token == Token.RGB_COLOR:
                red, green, blue = value
                self.flat_color = (float(red), float(green), float(blue))

    def put_triangle(self, parts: Parts) -> None:
        """Draw the triangle given by the position part; other parts are ignored."""
        for token, value in _pairs(parts):
            if token == Token.POSITION:
                self.draw_screen_triangle(value)

    def draw_screen_triangle(self, vertices: Sequence[Sequence[float]]) -> None:
        """Scan-convert one triangle whose vertices are already in screen space."""
        verts = [[float(c) for c in vertex] for vertex in vertices]
        if len(verts) != 3 or any(len(vertex) != 3 for vertex in verts):
            raise ValueError("a triangle needs three (x, y, z) vertices")
        if not all(math.isfinite(c) for vertex in verts for c in vertex):
            return

        for a, b in ((0, 2), (1, 2), (0, 1)):
            if verts[a][1] > verts[b][1] or (
                verts[a][1] == verts[b][1] and verts[a][0] > verts[b][1]
            ):
                verts[a], verts[b] = verts[b], verts[a]

        edges = [
            (
                _div(verts[head][0] - verts[tail][0], verts[head][1] - verts[tail][1]),
                _div(verts[head][2] - verts[tail][2], verts[head][1] - verts[tail][1]),
            )
            for head, tail in ((1, 0), (2, 0), (2, 1))
        ]

        left_start, right_start = 0, 0
        left_edge, right_edge = 0, 1
        if verts[0][1] == verts[1][1]:
            right_start = 1
            left_edge, right_edge = 1, 2
        elif edges[1][0] < edges[0][0]:
            left_edge, right_edge = 1, 0

        color = tuple(color_to_intensity(c) for c in self.flat_color)

        for half in (0, 1):
            top_y = float(math.ceil(verts[0][1]))
            if verts[0][1] != verts[1][1] and verts[0][1] == top_y:
                top_y += 1.0
            first_row = max(int(top_y), 0)
            last_row = min(math.ceil(verts[half + 1][1]), self.height)
            for row in range(first_row, last_row):
                self._fill_span(
                    row,
                    row - verts[half][1],
                    verts[left_start],
                    verts[right_start],
                    edges[left_edge],
                    edges[right_edge],
                    color,
                )

            if half == 0 and verts[0][1] != verts[1][1] and verts[1][1] != verts[2][1]:
                dy = verts[1][1] - verts[0][1]
                mid = [
                    verts[0][0] + edges[1][0] * dy,
                    verts[1][1],
                    verts[0][2] + edges[1][1] * dy,
                ]
                if mid[0] < verts[1][0]:
                    verts[0] = mid
                    left_edge, right_edge = 1, 2
                else:
                    verts[0] = verts[1]
                    verts[1] = mid
                    left_edge, right_edge = 2, 1
                right_start = 1
            else:
                break

    def _fill_span(
        self,
        row: int,
        dy: float,
        left_vertex: Sequence[float],
        right_vertex: Sequence[float],
        left_slopes: tuple[float, float],
        right_slopes: tuple[float, float],
        color: tuple[int, ...],
    ) -> None:
        left_x = left_vertex[0] + left_slopes[0] * dy
        right_x = right_vertex[0] + right_slopes[0] * dy
        left_z = left_vertex[2] + left_slopes[1] * dy
        right_z = right_vertex[2] + right_slopes[1] * dy
        if not (math.isfinite(left_x) and math.isfinite(right_x)):
            return
        slope_z = _div(right_z - left_z, right_x - left_x)

        red, green, blue = color
        first_col = max(math.ceil(left_x), 0)
        last_col = min(math.ceil(right_x), self.width)
        for col in range(first_col, last_col):
            z = left_z + slope_z * (col - left_x)
            if not math.isfinite(z):
                continue
            depth = int(z)
            if depth < self.get(col, row).z:
                self.put(col, row, red, green, blue, 1, depth)