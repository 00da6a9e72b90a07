"""The player: spawning from the map, movement and turning."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from cubcaster.geometry import (
    PLAYER_HITBOX,
    PLAYER_LOOK,
    PLAYER_SPEED,
    Vector,
    reset_angle,
)
from cubcaster.map_check import MapError

_START_ANGLES = {
    "N": math.pi / 2 * 3,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}
_WALL = "1"
_FLOOR = "0"


def find_start(rows: Sequence[str]) -> tuple[int, int, str]:
    """Return (x, y, direction) of the first start marker, scanning row by row."""
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in _START_ANGLES:
                return x, y, char
    raise MapError("Missing player start")


def _heading(angle: float) -> Vector:
    """The per-step movement vector for a facing angle."""
    return Vector(math.cos(angle) * PLAYER_SPEED, math.sin(angle) * PLAYER_SPEED)


def _cell(rows: Sequence[str], x: float, y: float) -> str:
    """Map character under (x, y); anything outside the grid counts as wall."""
    col, row = int(x), int(y)
    if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
        return rows[row][col]
    return _WALL


@dataclass
class Player:
    """Position, facing and input state of the player."""

    pos: Vector = field(default_factory=Vector)
    angle: float = 0.0
    delta: Vector = field(default_factory=lambda: _heading(0.0))
    size: int = 0
    m_up: bool = False
    m_down: bool = False
    m_left: bool = False
    m_right: bool = False
    l_left: bool = False
    l_right: bool = False
    show_map: bool = True
    use: bool = False

    @classmethod
    def spawn(cls, rows: list[str], wall_size: int) -> Player:
        """Create the player on the map's start marker.

        The marker in ``rows`` is replaced by a floor cell in place.
        """
        x, y, direction = find_start(rows)
        row = rows[y]
        rows[y] = row[:x] + _FLOOR + row[x + 1:]
        angle = _START_ANGLES[direction]
        return cls(
            pos=Vector(x + 0.5, y + 0.5),
            angle=angle,
            delta=_heading(angle),
            size=int(wall_size / 2),
        )

    def move(self) -> None:
        """Apply the held movement keys without any collision test."""
        sign = 1
        x, y = self.pos.x, self.pos.y
        dx, dy = self.delta.x, self.delta.y
        if self.m_up != self.m_down:
            if self.m_down:
                sign = -1
            y += dy * sign
            x += dx * sign
        # The sign chosen for forward/backward carries over into strafing.
        if self.m_left != self.m_right:
            if self.m_left:
                sign = -1
            y += dx * sign
            x += dy * -sign
        self.pos = Vector(x, y)

    def move_with_collision(self, rows: Sequence[str]) -> None:
        """Apply the held movement keys, refusing each axis step that meets a wall."""
        hit_x = -PLAYER_HITBOX if self.delta.x < 0 else PLAYER_HITBOX
        hit_y = -PLAYER_HITBOX if self.delta.y < 0 else PLAYER_HITBOX
        sign = 1
        x, y = self.pos.x, self.pos.y
        dx, dy = self.delta.x, self.delta.y
        if self.m_up != self.m_down:
            if self.m_down:
                sign = -1
            if _cell(rows, x, y + hit_y * sign) != _WALL:
                y += dy * sign
            if _cell(rows, x + hit_x * sign, y) != _WALL:
                x += dx * sign
        if self.m_left != self.m_right:
            if self.m_left:
                sign = -1
            if _cell(rows, x, y + hit_x * sign) != _WALL:
                y += dx * sign
            if _cell(rows, x + hit_y * -sign, y) != _WALL:
                x += dy * -sign
        self.pos = Vector(x, y)

    def look(self, refresh_delta: bool = False) -> None:
        """Turn with the held look keys.

        The movement vector follows the new angle when exactly one look key
        is held, or always when ``refresh_delta`` is true.
        """
        turning = self.l_left != self.l_right
        angle = self.angle
        if self.l_right:
            angle += PLAYER_LOOK
        if self.l_left:
            angle -= PLAYER_LOOK
        self.angle = reset_angle(angle)
        if refresh_delta or turning:
            self.delta = _heading(self.angle)

    def within_bounds(self, rows: Sequence[str]) -> bool:
        """Whether the player stands on a floor cell of the map."""
        x, y = self.pos.x, self.pos.y
        if x < 0 or y < 0 or y >= len(rows):
            return False
        row = rows[int(y)]
        return x < len(row) and row[int(x)] == _FLOOR