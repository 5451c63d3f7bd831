"""A unit that strikes and then returns to where it started."""

from __future__ import annotations

from typing import Any

from .coords import Coords, Grid
from .unit import Entity, Unit


class Runner(Unit):
    """Hit-and-run unit: after attacking it goes back to its last position."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.starting_place = Coords()

    def attack_target(self, grid: Grid, target: Coords, entities: list[Entity]) -> int | None:
        """Strike the unit on target, then return to the starting place."""
        victim = self._unit_at(target, entities)
        damage = self.deal_damage(victim) if victim is not None else None
        self.move(grid, self.starting_place)
        return damage

    def move(self, grid: Grid, target: Coords) -> None:
        """Move to target, remembering where the move began."""
        self.starting_place = self.place
        super().move(grid, target)