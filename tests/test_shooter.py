import random

from hexfield.coords import Coords, TileState, new_grid
from hexfield.shooter import Shooter
from hexfield.unit import Entity, Unit


def make(cls, entity_id, damage_min=5, damage_max=10):
    return cls(
        entity_id=entity_id,
        attack=20,
        defense=10,
        damage_min=damage_min,
        damage_max=damage_max,
        health=200,
        health_per_creature=20,
        speed=7,
        texture="SHOOTER.png",
        amount=10,
        rng=random.Random(5),
    )


def put(grid, unit, x, y):
    unit.place = Coords(x, y)
    grid[x][y] = unit.entity_id


def board(damage_min=5, damage_max=10):
    grid = new_grid()
    shooter = make(Shooter, 16, damage_min, damage_max)
    far = make(Unit, 13)
    near = make(Unit, 17)
    ally = make(Unit, 12)
    put(grid, shooter, 5, 5)
    put(grid, far, 10, 2)
    put(grid, near, 6, 5)
    put(grid, ally, 4, 5)
    entities = [
        Entity(True, shooter),
        Entity(False, far),
        Entity(False, near),
        Entity(True, ally),
    ]
    return grid, shooter, far, near, entities


def test_check_attack_lists_melee_then_ranged():
    grid, shooter, far, near, entities = board()
    targets = shooter.check_attack(grid, True, entities)
    assert targets == [Coords(6, 5), Coords(10, 2)]
    assert shooter.shooting_targets == [Coords(10, 2), Coords(6, 5)]


def test_check_attack_without_enemies():
    grid = new_grid()
    shooter = make(Shooter, 16)
    ally = make(Unit, 12)
    put(grid, shooter, 5, 5)
    put(grid, ally, 6, 5)
    entities = [Entity(True, shooter), Entity(True, ally)]
    assert shooter.check_attack(grid, True, entities) == []
    assert shooter.shooting_targets == []


def test_show_attack_marks_ranged_and_melee():
    grid, shooter, far, near, entities = board()
    targets = shooter.check_attack(grid, True, entities)
    shooter.show_attack(grid, targets)
    assert grid[10][2] == TileState.RANGED_TARGET
    assert grid[6][5] == TileState.MELEE_TARGET
    assert grid[4][5] == 12


def test_ranged_attack_deals_half_of_melee():
    grid, shooter, far, near, entities = board(damage_min=5, damage_max=6)
    shooter.check_attack(grid, True, entities)
    ranged = shooter.attack_target(grid, Coords(10, 2), entities)
    melee = shooter.attack_target(grid, Coords(6, 5), entities)
    assert ranged == melee // 2
    assert far.health == 200 - ranged
    assert near.health == 200 - melee


def test_deal_ranged_damage_bounds():
    shooter = make(Shooter, 16)
    enemy = make(Unit, 13)
    dealt = shooter.deal_ranged_damage(enemy)
    assert shooter.amount * 5 // 2 <= dealt <= shooter.amount * 9 // 2
    assert enemy.health == 200 - dealt


def test_attack_without_check_does_nothing():
    grid, shooter, far, near, entities = board()
    assert shooter.attack_target(grid, Coords(10, 2), entities) is None
    assert far.health == 200