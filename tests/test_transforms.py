import math

import pytest

from gzrender.transforms import (
    identity,
    matmul,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    transform_point,
    translate,
)
from gzrender.types import ZERO_MATRIX


def _flat(matrix):
    return [value for row in matrix for value in row]


def _length(v):
    return math.sqrt(sum(c * c for c in v))


def test_identity_leaves_points_unchanged():
    assert transform_point(identity(), (3.0, -2.0, 7.5)) == (3.0, -2.0, 7.5)


def test_identity_is_neutral_for_matmul():
    m = matmul(rotate_x(30.0), translate((1.0, 2.0, 3.0)))
    assert matmul(identity(), m) == m
    assert matmul(m, identity()) == m


def test_translate_moves_origin_to_offset():
    assert transform_point(translate((1.0, 2.0, 3.0)), (0.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)


def test_translate_round_trip():
    p = (4.0, -5.0, 6.0)
    moved = transform_point(translate((1.5, 2.5, -3.5)), p)
    assert transform_point(translate((-1.5, -2.5, 3.5)), moved) == pytest.approx(p)


def test_scale_unit_point_gives_factors():
    assert transform_point(scale((2.0, 3.0, 4.0)), (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)


def test_rotate_z_quarter_turn():
    assert transform_point(rotate_z(90.0), (1.0, 0.0, 0.0)) == pytest.approx(
        (0.0, 1.0, 0.0), abs=1e-9
    )


def test_rotate_x_quarter_turn():
    assert transform_point(rotate_x(90.0), (0.0, 1.0, 0.0)) == pytest.approx(
        (0.0, 0.0, 1.0), abs=1e-9
    )


def test_rotate_y_quarter_turn():
    assert transform_point(rotate_y(90.0), (0.0, 0.0, 1.0)) == pytest.approx(
        (1.0, 0.0, 0.0), abs=1e-9
    )


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
@pytest.mark.parametrize("angle", [10.0, 45.0, 123.0, -270.0])
def test_rotation_inverse_is_negative_angle(rotate, angle):
    product = matmul(rotate(angle), rotate(-angle))
    assert _flat(product) == pytest.approx(_flat(identity()), abs=1e-9)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_full_turn_is_identity(rotate):
    assert _flat(rotate(360.0)) == pytest.approx(_flat(identity()), abs=1e-9)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_preserves_length(rotate):
    p = (1.0, -2.0, 3.0)
    assert _length(transform_point(rotate(37.0), p)) == pytest.approx(_length(p))


def test_matmul_composes_transforms():
    a = matmul(translate((1.0, 2.0, 3.0)), rotate_y(25.0))
    b = matmul(scale((2.0, 0.5, 3.0)), rotate_x(-60.0))
    p = (0.3, -1.2, 4.0)
    combined = transform_point(matmul(a, b), p)
    stepwise = transform_point(a, transform_point(b, p))
    assert combined == pytest.approx(stepwise)


def test_homogeneous_scaling_does_not_change_result():
    m = matmul(translate((1.0, -1.0, 2.0)), rotate_z(33.0))
    doubled = tuple(tuple(2.0 * v for v in row) for row in m)
    p = (5.0, 6.0, -7.0)
    assert transform_point(doubled, p) == pytest.approx(transform_point(m, p))


def test_zero_w_raises():
    with pytest.raises(ValueError):
        transform_point(ZERO_MATRIX, (1.0, 2.0, 3.0))