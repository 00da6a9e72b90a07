"""Grid ray casting against the wall cells of a map."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubcaster.geometry import DOF, FOV, RAYS, Vector, calc_hyp, reset_angle
from cubcaster.image import create_trgb

_HORIZONTAL_COLOR = create_trgb(0, 214, 15, 15)
_VERTICAL_COLOR = create_trgb(0, 118, 137, 245)
_FAR = Vector(1000000.0, 1000000.0)
_NUDGE = 0.0001
_HALF_PI = math.pi / 2


@dataclass
class Ray:
    """One cast ray: where it starts and stops, and what it hit."""

    start: Vector
    end: Vector
    length: float
    vert: bool
    angle: float
    color: int


def _horizontal(pos: Vector, angle: float) -> tuple[Vector, Vector]:
    """First crossing of a horizontal grid line, and the step between crossings."""
    tangent = math.tan(angle)
    arctan = -1 / tangent if tangent != 0 else -math.copysign(math.inf, tangent)
    if angle > math.pi:
        end_y = int(pos.y) - _NUDGE
        off_y = -1.0
    else:
        end_y = int(pos.y) + 1.0
        off_y = 1.0
    end_x = (pos.y - end_y) * arctan + pos.x
    return Vector(end_x, end_y), Vector(-off_y * arctan, off_y)


def _vertical(pos: Vector, angle: float) -> tuple[Vector, Vector]:
    """First crossing of a vertical grid line, and the step between crossings."""
    if angle == _HALF_PI or angle == _HALF_PI * 3:
        return _FAR, Vector(0.0, 0.0)
    ntan = -math.tan(angle)
    if _HALF_PI < angle < _HALF_PI * 3:
        end_x = int(pos.x) - _NUDGE
        off_x = -1.0
    else:
        end_x = int(pos.x) + 1.0
        off_x = 1.0
    end_y = (pos.x - end_x) * ntan + pos.y
    return Vector(end_x, end_y), Vector(off_x, -off_x * ntan)


def _march(end: Vector, offset: Vector, rows: Sequence[str], dof: int) -> Vector:
    """Step along grid crossings until a wall, the map edge or ``dof`` steps."""
    x, y = end.x, end.y
    steps = 0
    while steps < dof and offset.x:
        if not (math.isfinite(x) and math.isfinite(y)):
            break
        if y < 0 or y >= len(rows) or x < 0:
            break
        row = rows[int(y)]
        if x >= len(row) or row[int(x)] == "1":
            break
        x += offset.x
        y += offset.y
        steps += 1
    return Vector(x, y)


def _ray(pos: Vector, end: Vector, angle: float, vert: bool) -> Ray:
    color = _VERTICAL_COLOR if vert else _HORIZONTAL_COLOR
    return Ray(pos, end, calc_hyp(pos, end), vert, angle, color)


def cast_single(pos: Vector, angle: float, rows: Sequence[str], dof: int = DOF) -> Ray:
    """Cast one ray from ``pos`` and return the nearer of its two grid hits."""
    h_end, h_off = _horizontal(pos, angle)
    v_end, v_off = _vertical(pos, angle)
    vertical = _ray(pos, _march(v_end, v_off, rows, dof), angle, True)
    horizontal = _ray(pos, _march(h_end, h_off, rows, dof), angle, False)
    if vertical.length < horizontal.length:
        return vertical
    return horizontal


def cast_rays(player, rows: Sequence[str], dof: int = DOF) -> list[Ray]:
    """Cast the full field of view around the player, left to right."""
    step = (math.pi / 180) * (FOV / RAYS)
    angle = player.angle - step * (RAYS // 2)
    rays = []
    for _ in range(RAYS):
        angle = reset_angle(angle)
        rays.append(cast_single(player.pos, angle, rows, dof))
        angle += step
    return rays