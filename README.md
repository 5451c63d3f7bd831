# hexfield

A small turn-based tactical battle fought on a 15 by 11 grid. Your units and
the computer's take turns in order of speed, fastest first. On its turn a unit
may move to a cell within its range, then attack a neighbouring enemy.

- A **shooter** may also pick any enemy on the board as a target. A hit on the
  first of those ranged targets deals half damage; any other target takes
  full damage.
- A **runner** strikes and then goes back to the cell it stood on before its
  move.
- Computer units focus on the player's unit with the least health and walk to
  a free cell next to it, or as close as they can get.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
hexfield [--assets DIR] [--seed N] [--frames N]
```

- `--assets DIR` — directory holding the images and font (default: the
  current directory).
- `--seed N` — seed for the damage rolls, for a repeatable battle.
- `--frames N` — close the window after this many frames.

The game looks in the assets directory for `arial.ttf`, `walka_tlo.png`
(background), `battle_tile_basic.png`, `wait.png`, `defend.png`,
`wygrana.png` (victory banner), `przegrana.png` (defeat banner) and the unit
images `BLOB.png`, `PLOMYK1.png`, `runner.png` and `SHOOTER.png`. These files
are not part of the package. A missing image is logged and drawn as a plain
white square, and a missing font falls back to pygame's default font.

Controls:

- Click a highlighted cell to move the active unit there.
- After moving, click a highlighted enemy to attack it. If no enemy can be
  attacked, the turn ends.
- **Wait** skips the move but still lets the unit attack from where it
  stands; the unit then acts again once the round is over. Waiting units get
  their extra turn in reverse order of waiting.
- **Defend** ends the unit's turn without moving or attacking.

Computer units pause for 0.9 seconds before each action. The battle ends when
only one side has units left, and a victory or defeat banner is shown.

## Using the rules in code

The rules work without a window.

- `hexfield.battle.Battle(entities=None, rng=None)` holds a roster (the
  standard one by default), sorted by speed, and the grid.
  `Battle.select(tile)` passes the player's choice as a `Coords` and returns
  whether it was accepted; `Battle.advance(elapsed)` runs one step after
  `elapsed` seconds; `Battle.outcome()` returns an `Outcome` of `ONGOING`,
  `VICTORY` or `DEFEAT`.
- `hexfield.battle.default_roster(rng)` builds the standard line-up of
  `Unit`, `Runner` and `Shooter` pieces on their starting cells, and
  `clear_map(grid, entities)` rewrites a grid from a roster.
- `hexfield.unit.Unit`, `hexfield.runner.Runner` and
  `hexfield.shooter.Shooter` are the pieces; `hexfield.unit.Entity` pairs a
  piece with its side.
- `hexfield.ai.Ai` chooses moves and attacks for the computer's side.
- `hexfield.coords` has `Coords`, the `TileState` markers, `new_grid()` and
  `find_in_map(grid, entity_id)`.
- `hexfield.tile` has the screen geometry of cells and buttons (`Tile`) and
  `format_stats(hp, base_hp, quantity)`, the caption drawn under each unit.

## What it does not do

There is only the one fixed battle: no army building, map choice, saving or
loading, and no sound.

## Running the tests

```
pip install .[test]
pytest
```