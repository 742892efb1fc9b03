import io

import pytest

from gzrender.framebuffer import Display, OutOfBoundsError, clamp_intensity
from gzrender.types import Pixel


def test_clamp_saturates_above_twelve_bits():
    assert clamp_intensity(0x1000) == 0xFF
    assert clamp_intensity(0x7FFF) == 0xFF


@pytest.mark.parametrize("byte", [0, 1, 17, 128, 200, 255])
def test_clamp_drops_low_four_bits(byte):
    assert clamp_intensity(byte << 4) == byte
    assert clamp_intensity((byte << 4) | 0xF) == byte


def test_clamp_result_is_always_a_byte():
    for value in range(-0x8000, 0x8000, 97):
        assert 0 <= clamp_intensity(value) <= 0xFF


def test_new_display_is_background():
    display = Display(4, 3)
    assert display.get(3, 2) == Pixel.background()
    assert len(display.framebuffer) == 4 * 3 * 3


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (1025, 4), (4, -1)])
def test_bad_resolution_rejected(size):
    with pytest.raises(ValueError):
        Display(*size)


def test_put_get_round_trip():
    display = Display(8, 8)
    display.put(2, 5, 100, 200, 300, 1, 42)
    assert display.get(2, 5) == Pixel(100, 200, 300, 1, 42)
    assert display.get(5, 2) == Pixel.background()


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_out_of_bounds(coord):
    display = Display(8, 8)
    with pytest.raises(OutOfBoundsError):
        display.put(*coord, 1, 1, 1, 1, 0)
    with pytest.raises(IndexError):
        display.get(*coord)


def test_reset_restores_background():
    display = Display(3, 3)
    display.put(1, 1, 4095, 4095, 4095, 1, 0)
    display.to_framebuffer()
    display.reset()
    assert display.get(1, 1) == Pixel.background()
    assert display.framebuffer == bytearray(27)


def test_write_ppm_header_and_rgb_order():
    display = Display(2, 1)
    display.put(0, 0, 4095, 0x0100, 0, 1, 0)
    out = io.BytesIO()
    display.write_ppm(out)
    data = out.getvalue()
    header = b"P6 2 1 255\n"
    assert data.startswith(header)
    body = data[len(header):]
    assert len(body) == 2 * 1 * 3
    assert body[0:3] == bytes(
        [clamp_intensity(4095), clamp_intensity(0x0100), clamp_intensity(0)]
    )
    background = Pixel.background()
    assert body[3:6] == bytes(
        [
            clamp_intensity(background.red),
            clamp_intensity(background.green),
            clamp_intensity(background.blue),
        ]
    )


def test_framebuffer_is_bgr():
    display = Display(2, 2)
    display.put(1, 1, 4095, 0x0200, 0, 1, 0)
    frame = display.to_framebuffer()
    offset = (1 + 1 * 2) * 3
    assert frame[offset:offset + 3] == bytes(
        [clamp_intensity(0), clamp_intensity(0x0200), clamp_intensity(4095)]
    )
    assert bytes(display.framebuffer) == frame


def test_ppm_and_framebuffer_agree_up_to_channel_order():
    display = Display(3, 2)
    display.put(0, 0, 10 << 4, 20 << 4, 30 << 4, 1, 0)
    display.put(2, 1, 5000, -16, 64, 1, 0)
    out = io.BytesIO()
    display.write_ppm(out)
    rgb = out.getvalue()[len(b"P6 3 2 255\n"):]
    bgr = display.to_framebuffer()
    for start in range(0, len(rgb), 3):
        assert rgb[start:start + 3] == bgr[start:start + 3][::-1]