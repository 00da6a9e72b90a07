"""Drawing the scene: background, textured wall columns and the minimap."""

from __future__ import annotations

import math
from array import array
from collections.abc import Sequence
from dataclasses import dataclass

from cubcaster.geometry import Vector, reset_angle
from cubcaster.image import Image, Rect, create_trgb

_COLOR_MASK = 0xFFFFFFFF
_PLAYER_COLOR = create_trgb(0, 255, 223, 18)
_WALL_COLOR = create_trgb(0, 0, 0, 0)
_FLOOR_COLOR = create_trgb(0, 255, 255, 255)
_HALF_PI = math.pi / 2


@dataclass
class Textures:
    """Wall textures for the four faces and the floor/ceiling colours."""

    north: Image
    south: Image
    east: Image
    west: Image
    floor: int
    ceiling: int


def _fraction(value: float) -> float:
    return value - math.floor(value) if math.isfinite(value) else 0.0


def texture_for_ray(ray, textures: Textures) -> tuple[Image, float]:
    """Pick the face texture a ray hit and the texture column it hit."""
    if not ray.vert:
        column = _fraction(ray.end.x)
        if 0 < ray.angle < math.pi:
            texture = textures.south
            column = 1.0 - column
        else:
            texture = textures.north
    else:
        column = _fraction(ray.end.y)
        if _HALF_PI < ray.angle < 3 * _HALF_PI:
            texture = textures.east
            column = 1.0 - column
        else:
            texture = textures.west
    return texture, column * texture.width


def _texel(texture: Image, x: float, y: float) -> int:
    index = int(y) * texture.width + int(x)
    index = min(max(index, 0), len(texture.pixels) - 1)
    return texture.pixels[index]


def draw_textured_ray(img: Image, rect: Rect, ray, textures: Textures) -> None:
    """Draw one wall column, stretching its texture column over ``rect``."""
    if not (math.isfinite(rect.size.y) and math.isfinite(rect.pos.y)):
        return
    if rect.size.y <= 0:
        return
    texture, column = texture_for_ray(ray, textures)
    step = texture.height / rect.size.y
    rows = int(rect.size.y)
    cols = int(rect.size.x)
    top = int(rect.pos.y)
    left = int(rect.pos.x)
    # Rows above the image draw nothing; start at the first visible one.
    y = max(0, -top)
    drawn = False
    while y < rows and y + top <= img.height and left + (cols if drawn else 0) <= img.width:
        color = _texel(texture, column, y * step)
        py = int(y + rect.pos.y)
        for x in range(cols):
            if x + rect.pos.x >= 0:
                img.put_pixel(int(x + rect.pos.x), py, color)
        drawn = cols > 0
        y += 1


def draw_background(img: Image, textures: Textures) -> None:
    """Fill the top half with the ceiling colour and the next half with the floor."""
    half = img.width * (img.height // 2)
    ceiling = array("I", [textures.ceiling & _COLOR_MASK]) * half
    floor = array("I", [textures.floor & _COLOR_MASK]) * half
    img.pixels[0:half] = ceiling
    img.pixels[half:2 * half] = floor


def draw_player(img: Image, player, wall_size: int) -> None:
    """Draw the player as a square on the minimap."""
    x = player.pos.x * wall_size
    y = player.pos.y * wall_size
    half = player.size // 2
    img.draw_rectangle(
        Rect(
            Vector(player.size, player.size),
            Vector(x - half, y - half),
            _PLAYER_COLOR,
        )
    )


def draw_map(img: Image, rows: Sequence[str], wall_size: int) -> None:
    """Draw the minimap: walls black, walkable cells white, voids skipped."""
    size = Vector(wall_size - 1, wall_size - 1)
    color = 0
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == " ":
                continue
            if char == "1":
                color = _WALL_COLOR
            elif char in "NWSE0":
                color = _FLOOR_COLOR
            img.draw_rectangle(Rect(size, Vector(x * wall_size, y * wall_size), color))


def draw_rays_2d(img: Image, rays: Sequence, map_size: int) -> None:
    """Draw every ray on the minimap, scaled by the minimap cell size."""
    for ray in rays:
        img.draw_line(ray.start.scaled(map_size), ray.angle, ray.length * map_size, ray.color)


def draw_rays_3d(img: Image, rays: Sequence, player, textures: Textures) -> None:
    """Draw one textured wall column per ray, left to right."""
    if not rays:
        return
    width = img.width // len(rays)
    x = 0.0
    for ray in rays:
        angle = reset_angle(player.angle - ray.angle)
        distance = ray.length * math.cos(angle)
        height = img.height / distance if distance else math.inf
        rect = Rect(Vector(width, height), Vector(x, (img.height - height) / 2), 0)
        draw_textured_ray(img, rect, ray, textures)
        x += width