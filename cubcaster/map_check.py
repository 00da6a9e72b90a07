"""Validation of the grid part of a .cub scene."""

from __future__ import annotations

from collections.abc import Sequence

_START = "NSWE"
_COUNTED = "NSWE01"
_WALL_OR_VOID = "1 "


class MapError(Exception):
    """Raised when a .cub file, its configuration or its map is invalid."""


def _is_open(rows: Sequence[str], x: int, y: int) -> bool:
    """Whether a floor cell touches the outside of the map."""
    row = rows[y]
    return (
        y == 0
        or x == 0
        or y + 1 >= len(rows)
        or row[x - 1] == " "
        or x + 1 >= len(row)
        or row[x + 1] == " "
        or len(rows[y + 1]) <= x
        or len(rows[y - 1]) <= x
    )


def _neighbours(rows: Sequence[str], x: int, y: int):
    """Cells the flood fill may step into from (x, y)."""
    row = rows[y]
    if x > 0 and row[x - 1] != " ":
        yield x - 1, y
    if x + 1 < len(row) and row[x + 1] != " ":
        yield x + 1, y
    if y > 0 and len(rows[y - 1]) > x and rows[y - 1][x] != " ":
        yield x, y - 1
    # The fill never steps down out of the first row.
    if y + 1 < len(rows) and y > 0 and len(rows[y + 1]) > x and rows[y + 1][x] != " ":
        yield x, y + 1


def _flood_fill(rows: Sequence[str], start: tuple[int, int]) -> int:
    """Count the cells reachable from ``start``."""
    filled: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell in filled:
            continue
        filled.add(cell)
        stack.extend(n for n in _neighbours(rows, *cell) if n not in filled)
    return len(filled)


def check_map(rows: Sequence[str]) -> tuple[int, int]:
    """Validate a map grid and return the (x, y) of the player start.

    Raises MapError when the map holds an unknown character, an open floor
    cell, no start or several starts, or cells cut off from the start.
    """
    start: tuple[int, int] | None = None
    count = 0
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in _COUNTED:
                if char == "0" and _is_open(rows, x, y):
                    raise MapError("Map not closed")
                if char in _START:
                    if start is not None:
                        raise MapError("Duplicate start position")
                    start = (x, y)
                count += 1
            elif char not in _WALL_OR_VOID:
                raise MapError("Invalid char")
    if start is None:
        raise MapError("Missing player start")
    if _flood_fill(rows, start) != count:
        raise MapError("Map contains island")
    return start