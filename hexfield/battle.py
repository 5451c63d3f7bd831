"""Turn order and the flow of a battle between the player and the computer."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from enum import Enum

from .ai import Ai
from .coords import HEIGHT, WIDTH, Coords, Grid, TileState, new_grid
from .runner import Runner
from .shooter import Shooter
from .unit import Entity, Unit

log = logging.getLogger(__name__)

WAIT_BUTTON = Coords(-2, -1)
DEFEND_BUTTON = Coords(-3, -1)
# Seconds the computer pauses before each of its actions.
AI_DELAY = 0.9

_SELECTABLE = (TileState.REACHABLE, TileState.MELEE_TARGET, TileState.RANGED_TARGET)
_STARTING_PLACES = ((0, 7), (13, 6), (0, 10), (14, 8), (0, 4), (13, 1), (0, 1))


class Outcome(Enum):
    """How the battle stands."""

    ONGOING = "ongoing"
    VICTORY = "victory"
    DEFEAT = "defeat"


def clear_map(grid: Grid, entities: Iterable[Entity]) -> None:
    """Wipe all markers from the grid and write every unit's id at its place."""
    for column in grid:
        for y, value in enumerate(column):
            if value <= TileState.RANGED_TARGET:
                column[y] = int(TileState.EMPTY)
    for entity in entities:
        place = entity.unit.place
        if place.is_set():
            grid[place.x][place.y] = entity.unit.entity_id


def default_roster(rng: random.Random | None = None) -> list[Entity]:
    """Return the standard line-up, placed on its starting cells."""
    rng = random.Random() if rng is None else rng
    stats = dict(
        attack=20,
        defense=10,
        damage_min=5,
        damage_max=10,
        health=200,
        health_per_creature=20,
        amount=10,
        rng=rng,
    )
    roster = [
        Entity(True, Unit(rng=rng)),
        Entity(False, Unit(11, speed=6, texture="PLOMYK1.png", **stats)),
        Entity(True, Unit(12, speed=4, texture="PLOMYK1.png", **stats)),
        Entity(False, Unit(13, speed=5, texture="PLOMYK1.png", **stats)),
        Entity(True, Runner(15, speed=7, texture="runner.png", **stats)),
        Entity(False, Runner(17, speed=7, texture="runner.png", **stats)),
        Entity(True, Shooter(16, speed=7, texture="SHOOTER.png", **stats)),
    ]
    for entity, (x, y) in zip(roster, _STARTING_PLACES):
        entity.unit.place = Coords(x, y)
    return roster


class Battle:
    """The state of one battle, driven by tile selections and elapsed time."""

    def __init__(
        self,
        entities: Iterable[Entity] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        roster = default_roster(rng) if entities is None else list(entities)
        roster.sort(key=lambda entity: entity.unit.speed, reverse=True)
        self.entities: list[Entity] = roster
        self.grid: Grid = new_grid()
        self.ai = Ai()
        self.pressed = Coords()
        self.targets: list[Coords] = []
        self.wait_queue: list[int] = []
        self.current = 0
        self.finished = False
        self._attack_phase = False
        self._clicked = False
        self._ai_turn = False
        self._can_attack = False
        self._redraw = True
        self._reap = False
        self._from_queue = False
        self._turn_done = False
        self._clock = 0.0
        clear_map(self.grid, self.entities)

    def select(self, tile: Coords) -> bool:
        """Choose a board cell or a button; return whether it was accepted."""
        if self.finished:
            return False
        if tile.x not in (WAIT_BUTTON.x, DEFEND_BUTTON.x):
            if not (0 <= tile.x < WIDTH and 0 <= tile.y < HEIGHT):
                return False
            if self.grid[tile.x][tile.y] not in _SELECTABLE:
                return False
        self.pressed = Coords(tile.x, tile.y)
        self._clicked = True
        return True

    def advance(self, elapsed: float = 0.0) -> Outcome:
        """Run one step of the battle after elapsed seconds; return the outcome."""
        if not self.finished and self.entities:
            self._clock += elapsed
            self._step()
        result = self.outcome()
        if result is not Outcome.ONGOING:
            self.finished = True
        return result

    def outcome(self) -> Outcome:
        """Return whether one side has been wiped out."""
        allies = any(entity.friendly for entity in self.entities)
        enemies = any(not entity.friendly for entity in self.entities)
        if allies and not enemies:
            return Outcome.VICTORY
        if enemies and not allies:
            return Outcome.DEFEAT
        return Outcome.ONGOING

    def _step(self) -> None:
        if self.current >= len(self.entities):
            self.current = 0
        if self._redraw:
            self._refresh()
        if self._clicked or self._ai_turn:
            self._act()
        if self._reap:
            for entity in self.entities:
                if not entity.unit.check_living(self.grid, self.entities):
                    break
            self._reap = False
        self._next_turn()

    def _refresh(self) -> None:
        clear_map(self.grid, self.entities)
        entity = self.entities[self.current]
        if not self._attack_phase:
            if entity.unit.check_living(self.grid, self.entities):
                entity.unit.show_range(self.grid)
                self._redraw = False
                if not entity.friendly:
                    self.ai.find_enemy(self.entities)
                    self._ai_turn = True
                    self._clock = 0.0
                else:
                    self._ai_turn = False
        else:
            if entity.unit.check_living(self.grid, self.entities):
                entity.unit.show_attack(self.grid, self.targets)
                self._redraw = False
        if self.current < len(self.entities) and not self.entities[self.current].friendly:
            self._clicked = True
            log.info("computer's move, unit %d", self.current)

    def _act(self) -> None:
        if self.current >= len(self.entities):
            return
        entity = self.entities[self.current]
        if not self._attack_phase:
            if self._ai_turn and self._clock >= AI_DELAY:
                choice = self.ai.seek_enemy(self.current, self.grid, self.entities)
                self.pressed = choice if choice.is_set() else Coords(DEFEND_BUTTON.x, DEFEND_BUTTON.y)
            if self.pressed.is_set() and self.pressed.x >= 0:
                entity.unit.move(self.grid, self.pressed)
                self._begin_attack_phase(entity)
            if self.pressed.x == WAIT_BUTTON.x:
                self._begin_attack_phase(entity)
                if not self._from_queue:
                    self.wait_queue.append(self.current)
            if self.pressed.x == DEFEND_BUTTON.x:
                self._end_turn()
        if self._attack_phase:
            if self._can_attack:
                if self._ai_turn and self._clock >= AI_DELAY:
                    self.pressed = self.ai.attack_enemy(self.grid)
                if self.pressed.is_set():
                    entity.unit.attack_target(self.grid, self.pressed, self.entities)
                    self._reap = True
                    self._end_turn()
            else:
                self._end_turn()

    def _begin_attack_phase(self, entity: Entity) -> None:
        self.targets = entity.unit.check_attack(self.grid, entity.friendly, self.entities)
        self._can_attack = bool(self.targets)
        self._attack_phase = True
        self._clicked = False
        self._redraw = True
        self._clock = 0.0
        self.pressed.unset()
        clear_map(self.grid, self.entities)

    def _end_turn(self) -> None:
        self._turn_done = True
        self._attack_phase = False
        self._clicked = False
        self._redraw = True
        self.pressed.unset()
        clear_map(self.grid, self.entities)

    def _next_turn(self) -> None:
        if self._turn_done and not self._from_queue:
            self.current += 1
            self._turn_done = False
            log.info("move finished")
            if self.current >= len(self.entities):
                self._from_queue = True
                log.info("round finished, waiting units move now")
        if self._from_queue:
            while self.wait_queue and self.wait_queue[-1] >= len(self.entities):
                self.wait_queue.pop()
            if not self.wait_queue:
                self.current = 0
                self._turn_done = False
                self._from_queue = False
                log.info("new round")
            else:
                self.current = self.wait_queue[-1]
                if self._turn_done:
                    self._turn_done = False
                    self.wait_queue.pop()
            self._redraw = True