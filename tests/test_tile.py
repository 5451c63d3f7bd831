import pytest

from hexfield.coords import HEIGHT, WIDTH, TileState
from hexfield.tile import (
    BOARD_LEFT,
    BOARD_TOP,
    HOVER,
    IDLE,
    INACTIVE,
    PRESSED,
    TILE_SIZE,
    Tile,
    format_stats,
)


def test_full_top_creature_shows_base_health():
    assert format_stats(200, 20, 10) == "10, hp: 20/20"


def test_wounded_top_creature_shows_remainder():
    assert format_stats(195, 20, 10) == "10, hp: 15/20"


def test_negative_health_keeps_sign():
    assert format_stats(-5, 20, 0) == "0, hp: -5/20"


def test_zero_base_health_rejected():
    with pytest.raises(ValueError):
        format_stats(10, 0, 1)


def test_first_cell_at_board_origin():
    tile = Tile(0, 0)
    assert (tile.left, tile.top) == (BOARD_LEFT, BOARD_TOP)


def test_stats_below_tile():
    tile = Tile(4, 2)
    x, y = tile.stats_position
    assert x == tile.left
    assert y > tile.top


def test_contains_edges():
    tile = Tile(3, 4)
    assert tile.contains((tile.left, tile.top))
    assert not tile.contains((tile.left + tile.width, tile.top))
    assert not tile.contains((tile.left, tile.top + tile.height))
    assert not tile.contains((tile.left - 1, tile.top))


def test_every_cell_centre_in_exactly_one_tile():
    tiles = [Tile(x, y) for x in range(WIDTH) for y in range(HEIGHT)]
    for tile in tiles:
        centre = (tile.left + TILE_SIZE / 2, tile.top + TILE_SIZE / 2)
        assert sum(other.contains(centre) for other in tiles) == 1


def test_buttons_do_not_overlap_board_or_each_other():
    wait = Tile(-2, -1, 30, 30)
    defend = Tile(-3, -1, 30, 30)
    for button in (wait, defend):
        corner = (button.left, button.top)
        assert not any(
            Tile(x, y).contains(corner) for x in range(WIDTH) for y in range(HEIGHT)
        )
    assert not wait.contains((defend.left, defend.top))
    assert not defend.contains((wait.left, wait.top))


@pytest.mark.parametrize("x, y", [(-5, 0), (WIDTH, 0), (0, HEIGHT), (0, -1)])
def test_invalid_positions_rejected(x, y):
    with pytest.raises(ValueError):
        Tile(x, y)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Tile(0, 0, 0, 10)


def test_empty_cell_is_dimmed():
    assert Tile(1, 1).colour(TileState.EMPTY, True, True) == INACTIVE
    assert INACTIVE == (55, 55, 55, 55)


@pytest.mark.parametrize(
    "state", [TileState.REACHABLE, TileState.MELEE_TARGET, TileState.RANGED_TARGET]
)
def test_interactive_cell_reacts_to_pointer(state):
    tile = Tile(1, 1)
    assert tile.colour(state, False, False) == IDLE
    assert tile.colour(state, True, False) == HOVER
    assert tile.colour(state, True, True) == PRESSED


def test_pressed_is_red():
    assert Tile(0, 0).colour(TileState.REACHABLE, True, True) == (255, 0, 0, 255)


def test_unit_cell_keeps_colour():
    assert Tile(2, 2).colour(11, True, True) is None


def test_button_always_interactive():
    button = Tile(-2, -1)
    assert button.colour(None, False, True) == IDLE
    assert button.colour(None, True, True) == PRESSED