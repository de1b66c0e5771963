"""Map grid analysis: sizes, cells and the player's starting position."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

CARDINALS = "NSWE"


class CubError(ValueError):
    """Raised for a map or map file that cannot be used."""


@dataclass
class MapInfo:
    """Counts for a map: total characters, widest row and number of rows."""

    points: int
    size_x: int
    size_y: int


@dataclass(frozen=True)
class Cell:
    """One character of the map at column ``x`` and row ``y``."""

    x: int
    y: int
    type: str


@dataclass
class Player:
    """Player position in map units and the two camera angles in radians."""

    x: float
    y: float
    camera_x: float
    camera_y: float

    @property
    def cell_x(self) -> int:
        return int(self.x)

    @property
    def cell_y(self) -> int:
        return int(self.y)


def count_points(rows: Sequence[str]) -> MapInfo:
    """Total characters, widest row length and row count of ``rows``."""
    return MapInfo(
        points=sum(len(row) for row in rows),
        size_x=max((len(row) for row in rows), default=0),
        size_y=len(rows),
    )


def build_cells(rows: Sequence[str]) -> list[Cell]:
    """Every character of the map as a cell, row by row."""
    return [
        Cell(x, y, ch)
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
    ]


def direction_angles(cardinal: str) -> tuple[float, float]:
    """The camera angles for a player facing ``cardinal`` (N, S, W or E)."""
    angles = {
        "N": (math.pi / 2, 0.0),
        "S": (3 * math.pi / 2, math.pi),
        "W": (math.pi, math.pi / 2),
        "E": (0.0, 3 * math.pi / 2),
    }
    try:
        return angles[cardinal]
    except KeyError:
        raise CubError(f"unknown direction {cardinal!r}") from None


def find_player(cells: Iterable[Cell]) -> Optional[Player]:
    """The player standing on the first N, S, W or E cell, or None."""
    for cell in cells:
        if cell.type in CARDINALS and cell.type:
            camera_x, camera_y = direction_angles(cell.type)
            return Player(cell.x + 0.5, cell.y + 0.5, camera_x, camera_y)
    return None


def is_cub_file(name: str) -> bool:
    """True when the text from the first dot of ``name`` is exactly ``.cub``.

    A name that is nothing but ``.cub`` raises CubError.
    """
    dot = name.find(".")
    if dot < 0 or name[dot:] != ".cub":
        return False
    if dot == 0:
        raise CubError(".cub must be an extension")
    return True