"""Computer opponent: picks a victim, walks towards it and strikes."""

from __future__ import annotations

from collections.abc import Iterator

from .coords import HEIGHT, WIDTH, Coords, Grid, TileState
from .unit import Entity

# Units at or above this much health are never chosen as a focus.
_HP_CEILING = 999_999_999


def _adjacent(place: Coords) -> Iterator[Coords]:
    """Yield the on-board cells around place, in the order they are tried."""
    for i, j in ((1, 1), (1, 0)):
        for dx, dy in ((j, i), (-j, -i), (i, -j), (-i, j)):
            x, y = place.x + dx, place.y + dy
            if 0 <= x < WIDTH and 0 <= y < HEIGHT:
                yield Coords(x, y)


class Ai:
    """Chooses moves and attacks for the units of the computer's side."""

    def __init__(self) -> None:
        self.enemy_focus = 0

    def find_enemy(self, entities: list[Entity]) -> int:
        """Focus on the player's unit with the least health; return its index."""
        lowest = _HP_CEILING
        for index, entity in enumerate(entities):
            if entity.friendly and entity.unit.health < lowest:
                lowest = entity.unit.health
                self.enemy_focus = index
        return self.enemy_focus

    def seek_enemy(self, seeker_index: int, grid: Grid, entities: list[Entity]) -> Coords:
        """Return a reachable cell next to the focus, or the nearest row towards it.

        An unset Coords is returned when no reachable cell is found.
        """
        target = entities[self.enemy_focus].unit.place
        seeker = entities[seeker_index].unit.place

        for cell in _adjacent(target):
            if grid[cell.x][cell.y] == TileState.REACHABLE:
                return cell

        if seeker.y < target.y:
            rows = range(target.y, -1, -1)
        else:
            rows = range(target.y, HEIGHT)
        if seeker.x < target.x:
            columns = range(WIDTH - 1, -1, -1)
        else:
            columns = range(WIDTH)

        for y in rows:
            for x in columns:
                if grid[x][y] == TileState.REACHABLE:
                    return Coords(x, y)
        return Coords()

    def attack_enemy(self, grid: Grid) -> Coords:
        """Return the last cell marked as a melee target, or an unset Coords."""
        found = Coords()
        for x, column in enumerate(grid):
            for y, value in enumerate(column):
                if value == TileState.MELEE_TARGET:
                    found = Coords(x, y)
        return found