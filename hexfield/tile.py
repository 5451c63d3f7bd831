"""Screen geometry, colouring and captions of board tiles and buttons."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .coords import HEIGHT, WIDTH, TileState

TILE_SIZE = 40
BOARD_LEFT = 200
BOARD_TOP = 50
STATS_OFFSET = 35

Colour = tuple[int, int, int, int]

INACTIVE: Colour = (55, 55, 55, 55)
IDLE: Colour = (0, 255, 0, 255)
HOVER: Colour = (14, 136, 200, 255)
PRESSED: Colour = (255, 0, 0, 255)

# Button column -> (left margin, column offset in tiles).
_BUTTON_COLUMNS = {-2: (200, 16), -3: (205, 17)}
_INTERACTIVE = (TileState.REACHABLE, TileState.MELEE_TARGET, TileState.RANGED_TARGET)


def format_stats(hp: int, base_hp: int, quantity: int) -> str:
    """Return the caption shown under a unit: count and health of the top creature."""
    if base_hp == 0:
        raise ValueError("health per creature must not be zero")
    remainder = int(math.fmod(hp, base_hp))
    shown = base_hp if remainder == 0 else remainder
    return f"{quantity}, hp: {shown}/{base_hp}"


@dataclass(frozen=True)
class Tile:
    """A clickable square: a board cell (x >= 0) or a button (x of -2 or -3)."""

    x: int
    y: int
    width: float = TILE_SIZE
    height: float = TILE_SIZE

    def __post_init__(self) -> None:
        if self.x >= 0:
            if not (self.x < WIDTH and 0 <= self.y < HEIGHT):
                raise ValueError(f"cell outside the board: ({self.x}, {self.y})")
        elif self.x not in _BUTTON_COLUMNS:
            raise ValueError(f"unknown button column: {self.x}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("tile size must be positive")

    @property
    def left(self) -> float:
        """Screen x of the tile's left edge."""
        if self.x >= 0:
            return BOARD_LEFT + self.x * TILE_SIZE
        margin, column = _BUTTON_COLUMNS[self.x]
        return margin + column * TILE_SIZE

    @property
    def top(self) -> float:
        """Screen y of the tile's top edge."""
        return BOARD_TOP + self.y * TILE_SIZE

    @property
    def stats_position(self) -> tuple[float, float]:
        """Where the caption of a unit standing here is drawn."""
        return (self.left, self.top + STATS_OFFSET)

    def contains(self, point: tuple[float, float]) -> bool:
        """Return whether a screen point lies inside the tile."""
        px, py = point
        return (
            self.left <= px < self.left + self.width
            and self.top <= py < self.top + self.height
        )

    def colour(self, state: int | None, hovered: bool, pressed: bool) -> Colour | None:
        """Return the tint for a cell in the given state, or None to keep the old one.

        A state of None stands for a button, which always reacts to the pointer.
        """
        if state is not None and state not in _INTERACTIVE:
            return INACTIVE if state == TileState.EMPTY else None
        if not hovered:
            return IDLE
        return PRESSED if pressed else HOVER