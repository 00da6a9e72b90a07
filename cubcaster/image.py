"""An in-memory 32-bit pixel buffer and the primitives that draw into it."""

from __future__ import annotations

import math
import sys
from array import array
from dataclasses import dataclass

from cubcaster.geometry import Vector

_COLOR_MASK = 0xFFFFFFFF


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and RGB channels into one 0xTTRRGGBB integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass
class Rect:
    """An axis-aligned rectangle with a fill colour."""

    size: Vector
    pos: Vector
    color: int


def _count(extent: float) -> int:
    """Number of integer steps 0, 1, ... that stay below ``extent``."""
    return max(math.ceil(extent), 0)


class Image:
    """A width x height grid of 0xTTRRGGBB pixels, row major."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", bytes(4 * width * height))

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def draw_rectangle(self, rect: Rect) -> None:
        """Fill ``rect``, skipping the parts that fall outside the image."""
        for dy in range(_count(rect.size.y)):
            y = dy + rect.pos.y
            if y < 0:
                continue
            if y > self.height:
                break
            for dx in range(_count(rect.size.x)):
                x = dx + rect.pos.x
                if x >= 0:
                    self.put_pixel(int(x), int(y), rect.color)

    def draw_line(self, start: Vector, angle: float, length: float, color: int) -> None:
        """Step one unit at a time from ``start`` along ``angle`` for ``length`` steps."""
        dx, dy = math.cos(angle), math.sin(angle)
        x, y = start.x, start.y
        step = 0
        while step < length:
            step += 1
            x += dx
            y += dy
            if y < 0 or y > self.height or x < 0 or x > self.width:
                break
            self.put_pixel(math.floor(x + 0.5), math.floor(y + 0.5), color)

    def rgb_bytes(self) -> bytes:
        """The image as packed 8-bit R, G, B triples, row by row."""
        raw = self.pixels.tobytes()
        if sys.byteorder == "little":
            r, g, b = raw[2::4], raw[1::4], raw[0::4]
        else:
            r, g, b = raw[1::4], raw[2::4], raw[3::4]
        out = bytearray(len(self.pixels) * 3)
        out[0::3] = r
        out[1::3] = g
        out[2::3] = b
        return bytes(out)