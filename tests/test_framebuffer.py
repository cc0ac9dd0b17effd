import pytest

from lumari import config
from lumari.framebuffer import Framebuffer


def test_new_buffer_is_black():
    fb = Framebuffer(4, 3)
    assert fb.to_bytes() == bytes(4 * 3 * 2)
    assert set(fb) == {0}


def test_default_size_matches_screen():
    fb = Framebuffer()
    assert (fb.width, fb.height) == (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)


def test_put_get_round_trip():
    fb = Framebuffer(5, 5)
    fb.put(2, 3, 0xF800)
    assert fb.get(2, 3) == 0xF800
    assert fb.get(3, 2) == 0


def test_clear_fills_every_pixel():
    fb = Framebuffer(6, 2)
    fb.put(0, 0, 0x001F)
    fb.clear(0x07E0)
    assert set(fb) == {0x07E0}


def test_to_bytes_is_little_endian_row_major():
    fb = Framebuffer(2, 2)
    fb.put(0, 0, 0x1234)
    fb.put(1, 1, 0xABCD)
    data = fb.to_bytes()
    assert data[0:2] == b"\x34\x12"
    assert data[6:8] == b"\xcd\xab"
    assert len(data) == 8


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_access_raises(x, y):
    fb = Framebuffer(4, 3)
    with pytest.raises(IndexError):
        fb.get(x, y)
    with pytest.raises(IndexError):
        fb.put(x, y, 1)


@pytest.mark.parametrize("color", [-1, 0x10000])
def test_invalid_color_raises(color):
    fb = Framebuffer(2, 2)
    with pytest.raises(ValueError):
        fb.put(0, 0, color)
    with pytest.raises(ValueError):
        fb.clear(color)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-2, 3)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        Framebuffer(width, height)