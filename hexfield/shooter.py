"""A unit that can fire at any enemy on the board."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from .coords import Coords, Grid, TileState
from .unit import Entity, Unit


class Shooter(Unit):
    """Ranged unit: adjacent enemies are hit in melee, the rest at half damage."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.shooting_targets: list[Coords] = []

    def check_attack(self, grid: Grid, friendly: bool, entities: list[Entity]) -> list[Coords]:
        """Return melee targets followed by the remaining ranged targets."""
        melee = super().check_attack(grid, friendly, entities)
        self.shooting_targets = [
            replace(e.unit.place) for e in entities if e.friendly != friendly
        ]
        return melee + [cell for cell in self.shooting_targets if cell not in melee]

    def show_attack(self, grid: Grid, targets: Iterable[Coords]) -> None:
        """Mark ranged targets, then mark adjacent targets as melee."""
        for cell in self.shooting_targets:
            grid[cell.x][cell.y] = TileState.RANGED_TARGET
        for cell in targets:
            if max(abs(cell.x - self.place.x), abs(cell.y - self.place.y)) == 1:
                grid[cell.x][cell.y] = TileState.MELEE_TARGET

    def attack_target(self, grid: Grid, target: Coords, entities: list[Entity]) -> int | None:
        """Strike the unit on target; return the damage dealt or None."""
        victim = self._unit_at(target, entities)
        if victim is None or not self.shooting_targets:
            return None
        # Only the first recorded shooting target is struck at range.
        if target == self.shooting_targets[0]:
            return self.deal_ranged_damage(victim)
        return self.deal_damage(victim)

    def deal_ranged_damage(self, enemy: Unit) -> int:
        """Roll damage, apply half of it to enemy and return what was applied."""
        damage = self._roll()
        dealt = damage // 2 if damage >= 0 else -(-damage // 2)
        enemy.modify_hp(-dealt)
        return dealt