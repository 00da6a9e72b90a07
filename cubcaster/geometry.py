"""Vectors, angles and the fixed constants of the caster."""

from __future__ import annotations

import math
from dataclasses import dataclass

WIN_HEIGHT = 1080
WIN_WIDTH = 1920
WALL_SIZE = 32
MMAP_RATIO = 25
BONUS_MMAP_RATIO = 50

PLAYER_HITBOX = 0.6
PLAYER_LOOK = 0.1
PLAYER_SPEED = 0.1
PLAYER_SIZE = 9
DEGREE_IN_RADIANS = 0.0174533

DOF = 20
BONUS_DOF = 100000
FOV = 60
RAYS = 1920

TWO_PI = math.pi * 2


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Vector) -> float:
        """Euclidean distance to another vector."""
        return calc_hyp(self, other)

    def scaled(self, factor: float) -> Vector:
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)


def reset_angle(angle: float) -> float:
    """Wrap an angle back into [0, 2*pi] by at most one turn."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return (math.pi / 180.0) * degrees


def calc_hyp(side1: Vector, side2: Vector) -> float:
    """Length of the segment between two points."""
    return math.sqrt((side1.x - side2.x) ** 2 + (side1.y - side2.y) ** 2)