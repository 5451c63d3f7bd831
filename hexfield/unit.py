"""Battle units: movement range, melee targeting and damage."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .coords import HEIGHT, OCCUPIED_ABOVE, WIDTH, Coords, Grid, TileState

log = logging.getLogger(__name__)

_NEIGHBOUR_ROWS = ((1, 1), (1, 0))


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Unit:
    """A stack of identical creatures fighting on the board."""

    def __init__(
        self,
        entity_id: int = 99,
        attack: int = 10,
        defense: int = 4,
        damage_min: int = 1000,
        damage_max: int = 2000,
        health: int = 10,
        health_per_creature: int = 1,
        speed: int = 8,
        texture: str = "BLOB.png",
        amount: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        self.entity_id = entity_id
        self.attack = attack
        self.defense = defense
        self.damage_min = damage_min
        self.damage_max = damage_max
        self.health = health
        self.health_per_creature = health_per_creature
        self.speed = speed
        self.texture = texture
        self.amount = amount
        self.rng = rng if rng is not None else random.Random()
        self.place = Coords()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.entity_id}, hp={self.health}, "
            f"amount={self.amount}, place=({self.place.x}, {self.place.y}))"
        )

    def _cells(self, rows: Iterable[tuple[int, int]]) -> Iterator[Coords]:
        for i, j in rows:
            for dx, dy in ((j, i), (-j, -i), (i, -j), (-i, j)):
                x, y = self.place.x + dx, self.place.y + dy
                if _in_bounds(x, y):
                    yield Coords(x, y)

    def _neighbours(self) -> Iterator[Coords]:
        return self._cells(_NEIGHBOUR_ROWS)

    @staticmethod
    def _unit_at(target: Coords, entities: list[Entity]) -> Unit | None:
        return next((e.unit for e in entities if e.unit.place == target), None)

    def _roll(self) -> int:
        return sum(
            self.rng.randrange(self.damage_min, self.damage_max)
            for _ in range(self.amount)
        )

    def attack_target(self, grid: Grid, target: Coords, entities: list[Entity]) -> int | None:
        """Strike the unit standing on target; return the damage or None."""
        victim = self._unit_at(target, entities)
        if victim is None:
            return None
        damage = self.deal_damage(victim)
        log.info("unit %d attacked unit %d", self.entity_id, victim.entity_id)
        return damage

    def deal_damage(self, enemy: Unit) -> int:
        """Roll damage once per creature, apply it to enemy and return it."""
        damage = self._roll()
        enemy.modify_hp(-damage)
        log.info("%d damage", damage)
        return damage

    def modify_hp(self, delta: int) -> None:
        """Change health and recompute how many creatures remain."""
        self.health += delta
        self.amount = _trunc_div(self.health - 1, self.health_per_creature) + 1
        log.debug("health %d amount %d", self.health, self.amount)

    def check_living(self, grid: Grid, entities: list[Entity]) -> bool:
        """Return whether the unit is on the board and alive; remove it if dead."""
        if not self.place.is_set():
            return False
        if self.health <= 0:
            grid[self.place.x][self.place.y] = TileState.EMPTY
            for index, entity in enumerate(entities):
                if entity.unit.entity_id == self.entity_id:
                    del entities[index]
                    break
            return False
        return True

    def show_range(self, grid: Grid) -> None:
        """Mark every empty cell within walking distance as reachable."""
        rows = (
            (i, j)
            for i in range(self.speed, 0, -1)
            for j in range(self.speed - i, -1, -1)
        )
        for cell in self._cells(rows):
            if grid[cell.x][cell.y] == TileState.EMPTY:
                grid[cell.x][cell.y] = TileState.REACHABLE

    def show_attack(self, grid: Grid, targets: Iterable[Coords]) -> None:
        """Mark the given cells as melee targets."""
        for cell in targets:
            grid[cell.x][cell.y] = TileState.MELEE_TARGET

    def check_attack(self, grid: Grid, friendly: bool, entities: list[Entity]) -> list[Coords]:
        """Return the adjacent cells holding units of the other side."""
        occupied = [
            cell for cell in self._neighbours() if grid[cell.x][cell.y] > OCCUPIED_ABOVE
        ]
        allies = [e.unit.place for e in entities if e.friendly == friendly]
        return [cell for cell in occupied if cell not in allies]

    def move(self, grid: Grid, target: Coords) -> None:
        """Move to target, updating the grid."""
        if not _in_bounds(target.x, target.y):
            raise ValueError(f"cannot move outside the board: ({target.x}, {target.y})")
        if self.place.is_set():
            grid[self.place.x][self.place.y] = TileState.EMPTY
        grid[target.x][target.y] = self.entity_id
        self.place = Coords(target.x, target.y)


@dataclass
class Entity:
    """A unit on the board together with the side it fights for."""

    friendly: bool
    unit: Unit