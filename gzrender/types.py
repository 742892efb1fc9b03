"""Core value types shared by the display, rasterizer and renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

MAX_X_RES = 1024
MAX_Y_RES = 1024

INTENSITY_MAX = 0x0FFF
DEPTH_MAX = 2**31 - 1

Vector = tuple[float, float, float]
Matrix = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

ZERO_MATRIX: Matrix = (
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
)

DEFAULT_FOV = 35.0
DEFAULT_IMAGE_POSITION: Vector = (-10.0, 5.0, -10.0)
DEFAULT_LOOKAT: Vector = (0.0, 0.0, 0.0)
DEFAULT_WORLDUP: Vector = (0.0, 1.0, 0.0)


class Token(enum.IntEnum):
    """Names of triangle parts and renderer attributes."""

    NULL_TOKEN = 0
    POSITION = 1
    NORMAL = 2
    TEXTURE_INDEX = 3
    AMBIENT_LIGHT = 78
    DIRECTIONAL_LIGHT = 79
    SHADER = 96
    RGB_COLOR = 99
    AMBIENT_COEFFICIENT = 1001
    DIFFUSE_COEFFICIENT = 1002
    SPECULAR_COEFFICIENT = 1003
    DISTRIBUTION_COEFFICIENT = 1004
    TEXTURE_MAP = 1010


class ShadeMode(enum.IntFlag):
    """Shading components that a shade mode combines."""

    NONE = 0
    AMBIENT = 1
    DIFFUSE = 2
    SPECULAR = 4


class Interpolation(enum.IntEnum):
    """What the shader interpolates across a triangle."""

    COLOR = 1
    NORMALS = 2


def _to_int16(value: int) -> int:
    value = int(value)
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _to_int32(value: int) -> int:
    value = int(value)
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


@dataclass(frozen=True)
class Pixel:
    """One pixel: 12-bit colour intensities, alpha and a signed depth."""

    red: int
    green: int
    blue: int
    alpha: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _to_int16(self.red))
        object.__setattr__(self, "green", _to_int16(self.green))
        object.__setattr__(self, "blue", _to_int16(self.blue))
        object.__setattr__(self, "alpha", _to_int16(self.alpha))
        object.__setattr__(self, "z", _to_int32(self.z))

    @classmethod
    def background(cls) -> Pixel:
        """The pixel a new frame starts with: a dim grey at the farthest depth."""
        return cls(red=0x0800, green=0x0700, blue=0x0600, alpha=0, z=DEPTH_MAX)


@dataclass
class Camera:
    """Camera placement, field of view and its derived transforms."""

    position: Vector = DEFAULT_IMAGE_POSITION
    lookat: Vector = DEFAULT_LOOKAT
    worldup: Vector = DEFAULT_WORLDUP
    fov: float = DEFAULT_FOV
    xiw: Matrix = ZERO_MATRIX
    xpi: Matrix = ZERO_MATRIX

    @classmethod
    def default(cls) -> Camera:
        """The camera a renderer uses unless another is given."""
        return cls()


@dataclass
class UserInput:
    """Object transform values entered by a user, and a camera."""

    rotation: Vector = (0.0, 0.0, 0.0)
    translation: Vector = (0.0, 0.0, 0.0)
    scale: Vector = (1.0, 1.0, 1.0)
    camera: Camera = field(default_factory=Camera.default)