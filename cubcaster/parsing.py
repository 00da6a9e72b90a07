"""Reading .cub scene files: the texture/colour header and the map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cubcaster.image import create_trgb
from cubcaster.map_check import MapError, check_map

_BLANK = "\t\n "
_RGB_SEPARATORS = "\n,"


class Identifier(Enum):
    """Header keys, in the order they are tried against a line."""

    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"
    F = "F"
    C = "C"

    @property
    def is_texture(self) -> bool:
        return self not in (Identifier.F, Identifier.C)


@dataclass(frozen=True)
class Paths:
    """Texture files and packed floor/ceiling colours from a .cub header."""

    north: Path
    south: Path
    east: Path
    west: Path
    floor: int
    ceiling: int


def is_blank(line: str) -> bool:
    """Whether a line holds only spaces, tabs and newlines."""
    return all(char in _BLANK for char in line)


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Read up to three comma separated values from the rest of a header line.

    ``text`` is expected to keep its newline. Missing values come back as -1;
    values past the third are ignored. A malformed value raises MapError.
    """
    values = [-1, -1, -1]
    pos = 0
    for index in range(3):
        if pos >= len(text):
            break
        if not text[pos].isdigit():
            raise MapError("RGB value incorrect")
        end = pos
        while end < len(text) and text[end].isdigit():
            end += 1
        values[index] = int(text[pos:end])
        if end >= len(text) or text[end] not in _RGB_SEPARATORS:
            raise MapError("RGB value incorrect")
        pos = end + 1
    return values[0], values[1], values[2]


def _readable(path: Path) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def _header_entry(line: str, found: dict, base: Path, count: int) -> int:
    """Apply one header line; return the new count, or -1 if it is rejected."""
    for ident in Identifier:
        if not line.startswith(ident.value):
            continue
        rest = line[len(ident.value):].lstrip(" ")
        if ident in found:
            return -1
        if ident.is_texture:
            path = base / rest.rstrip("\n")
            if not _readable(path):
                return -1
            found[ident] = path
        else:
            rgb = parse_rgb(rest)
            if not all(0 <= value <= 255 for value in rgb):
                return -1
            found[ident] = create_trgb(0, *rgb)
        return count + 1
    return -1


def parse_header(lines: Iterable[str], base_dir: str | os.PathLike | None = None):
    """Read the six header entries from ``lines``.

    Texture paths are resolved against ``base_dir`` (the working directory
    when None) and must be readable. Returns the Paths and the list of lines
    that follow the sixth entry.
    """
    base = Path.cwd() if base_dir is None else Path(base_dir)
    found: dict[Identifier, object] = {}
    count = 0
    it = iter(lines)
    for line in it:
        if count >= len(Identifier):
            return _paths(found), [line, *it]
        if not is_blank(line):
            count = _header_entry(line, found, base, count)
    if count != len(Identifier):
        raise MapError("Missing texture or RGB config!")
    return _paths(found), []


def _paths(found: dict) -> Paths:
    return Paths(
        north=found[Identifier.NO],
        south=found[Identifier.SO],
        east=found[Identifier.EA],
        west=found[Identifier.WE],
        floor=found[Identifier.F],
        ceiling=found[Identifier.C],
    )


def parse_map_lines(lines: Iterable[str]) -> list[str]:
    """Turn the lines after the header into map rows.

    Leading empty lines are skipped; any blank line after the first map
    line raises MapError.
    """
    it = iter(lines)
    first = next((line for line in it if not line.startswith("\n")), None)
    if first is None:
        return []
    parts = [first]
    for line in it:
        if is_blank(line):
            raise MapError("Map contains empty line")
        parts.append(line)
    return [row for row in "".join(parts).split("\n") if row]


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def parse_file(path: str | os.PathLike) -> tuple[list[str], Paths]:
    """Read and validate a .cub file; return its map rows and its Paths."""
    try:
        text = Path(path).read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise MapError("Couldn't open map!") from exc
    paths, rest = parse_header(_split_lines(text), None)
    rows = parse_map_lines(rest)
    check_map(rows)
    return rows, paths