"""Board coordinates and the battle grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 15
HEIGHT = 11
UNSET = -1
# Cells holding a value above this hold the id of the unit standing there.
OCCUPIED_ABOVE = 10

Grid = list[list[int]]


class TileState(IntEnum):
    """Marker values a grid cell can hold besides unit ids."""

    EMPTY = 0
    REACHABLE = 1
    MELEE_TARGET = 2
    RANGED_TARGET = 3


@dataclass
class Coords:
    """A column/row position on the board; x of -1 means no position."""

    x: int = UNSET
    y: int = UNSET

    def is_set(self) -> bool:
        """Return whether this holds a selected position."""
        return self.x != UNSET

    def unset(self) -> None:
        """Clear the selection."""
        self.x = UNSET


def new_grid() -> Grid:
    """Return an empty board, indexed as grid[x][y]."""
    return [[int(TileState.EMPTY)] * HEIGHT for _ in range(WIDTH)]


def find_in_map(grid: Grid, entity_id: int) -> Coords:
    """Return the first cell holding entity_id, or an unset Coords."""
    for x, column in enumerate(grid):
        for y, value in enumerate(column):
            if value == entity_id:
                return Coords(x, y)
    return Coords()