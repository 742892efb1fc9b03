"""A pixel buffer with PPM and BGR frame-buffer output."""

from __future__ import annotations

from typing import BinaryIO

from gzrender.types import INTENSITY_MAX, MAX_X_RES, MAX_Y_RES, Pixel


class OutOfBoundsError(IndexError):
    """Raised when a pixel coordinate lies outside the display."""


def clamp_intensity(value: int) -> int:
    """Map a 12-bit intensity to an 8-bit byte value, saturating above 0x0FFF."""
    if value > INTENSITY_MAX:
        return 0xFF
    return (value >> 4) & 0xFF


class Display:
    """A width x height grid of pixels plus a BGR frame buffer for display."""

    def __init__(self, width: int, height: int) -> None:
        if not 0 < width <= MAX_X_RES or not 0 < height <= MAX_Y_RES:
            raise ValueError(
                f"resolution {width}x{height} outside 1..{MAX_X_RES}x1..{MAX_Y_RES}"
            )
        self.width = width
        self.height = height
        self.framebuffer = bytearray(width * height * 3)
        self._pixels: list[Pixel] = []
        self.reset()

    def _index(self, x: int, y: int) -> int:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise OutOfBoundsError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} display"
            )
        return x + y * self.width

    def reset(self) -> None:
        """Start a new frame: clear the frame buffer and fill with the background."""
        self.framebuffer[:] = bytes(len(self.framebuffer))
        self._pixels = [Pixel.background()] * (self.width * self.height)

    def put(self, x: int, y: int, red: int, green: int, blue: int, alpha: int, z: int) -> None:
        """Write one pixel."""
        self._pixels[self._index(x, y)] = Pixel(red, green, blue, alpha, z)

    def get(self, x: int, y: int) -> Pixel:
        """Read one pixel."""
        return self._pixels[self._index(x, y)]

    def write_ppm(self, stream: BinaryIO) -> None:
        """Write the image to a binary stream as a P6 PPM file."""
        stream.write(f"P6 {self.width} {self.height} 255\n".encode("ascii"))
        stream.write(
            bytes(
                clamp_intensity(channel)
                for pixel in self._pixels
                for channel in (pixel.red, pixel.green, pixel.blue)
            )
        )

    def to_framebuffer(self) -> bytes:
        """Copy the pixels into the frame buffer in blue, green, red order."""
        self.framebuffer[:] = bytes(
            clamp_intensity(channel)
            for pixel in self._pixels
            for channel in (pixel.blue, pixel.green, pixel.red)
        )
        return bytes(self.framebuffer)