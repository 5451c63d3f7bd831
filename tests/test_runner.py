import random

from hexfield.coords import Coords, TileState, new_grid
from hexfield.runner import Runner
from hexfield.unit import Entity, Unit


def make(cls, entity_id):
    return cls(
        entity_id=entity_id,
        attack=20,
        defense=10,
        damage_min=5,
        damage_max=10,
        health=200,
        health_per_creature=20,
        speed=7,
        texture="runner.png",
        amount=10,
        rng=random.Random(3),
    )


def put(grid, unit, x, y):
    unit.place = Coords(x, y)
    grid[x][y] = unit.entity_id


def test_move_remembers_start():
    grid = new_grid()
    runner = make(Runner, 15)
    put(grid, runner, 0, 4)
    runner.move(grid, Coords(3, 4))
    assert runner.starting_place == Coords(0, 4)
    assert runner.place == Coords(3, 4)
    assert grid[0][4] == TileState.EMPTY


def test_attack_returns_to_start():
    grid = new_grid()
    runner = make(Runner, 15)
    enemy = make(Unit, 13)
    put(grid, runner, 0, 4)
    put(grid, enemy, 5, 4)
    entities = [Entity(True, runner), Entity(False, enemy)]
    runner.move(grid, Coords(4, 4))
    damage = runner.attack_target(grid, Coords(5, 4), entities)
    assert enemy.health == 200 - damage
    assert runner.place == Coords(0, 4)
    assert grid[0][4] == runner.entity_id
    assert grid[4][4] == TileState.EMPTY
    assert grid[5][4] == enemy.entity_id


def test_attack_on_empty_cell_still_returns():
    grid = new_grid()
    runner = make(Runner, 15)
    put(grid, runner, 0, 4)
    entities = [Entity(True, runner)]
    runner.move(grid, Coords(2, 4))
    assert runner.attack_target(grid, Coords(9, 9), entities) is None
    assert runner.place == Coords(0, 4)