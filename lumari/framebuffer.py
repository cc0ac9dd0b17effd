"""In-memory RGB565 framebuffer."""

import sys
from array import array
from collections.abc import Iterator

from . import config


def _check_color(color: int) -> None:
    if not 0 <= color <= 0xFFFF:
        raise ValueError(f"color {color!r} is not a 16-bit RGB565 value")


class Framebuffer:
    """A width x height grid of 16-bit RGB565 pixels, initially black."""

    def __init__(self, width: int = config.SCREEN_WIDTH,
                 height: int = config.SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = array("H", [0]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside the {self.width}x{self.height} buffer"
            )
        return y * self.width + x

    def clear(self, color: int) -> None:
        """Set every pixel to ``color``."""
        _check_color(color)
        self._pixels = array("H", [color]) * (self.width * self.height)

    def get(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        return self._pixels[self._index(x, y)]

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to ``color``."""
        _check_color(color)
        self._pixels[self._index(x, y)] = color

    def to_bytes(self) -> bytes:
        """Row-major pixel data, two little-endian bytes per pixel."""
        data = array("H", self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()

    def __iter__(self) -> Iterator[int]:
        return iter(self._pixels)