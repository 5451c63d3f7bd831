"""Window, drawing and input for playing a battle."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

import pygame

from .battle import DEFEND_BUTTON, WAIT_BUTTON, Battle, Outcome
from .coords import HEIGHT, WIDTH, TileState
from .tile import TILE_SIZE, Colour, Tile, format_stats

log = logging.getLogger(__name__)

WINDOW_SIZE = (1000, 500)
TITLE = "Fun and interactive game"
FPS = 60
ENTITY_SCALE = 1.5
ENTITY_ORIGIN = (19, 35)
ENEMY_SHIFT = 40
BUTTON_SCALE = 1 / 3
BANNER_POSITION = (67.5, 0.0)
TEXT_SIZE = 10

_WHITE: Colour = (255, 255, 255, 255)
_RED: Colour = (255, 0, 0, 255)
_BLACK = (0, 0, 0)
_DRAWN_STATES = (
    TileState.EMPTY,
    TileState.REACHABLE,
    TileState.MELEE_TARGET,
    TileState.RANGED_TARGET,
)


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hexfield", description="Play a turn-based battle.")
    parser.add_argument("--assets", type=Path, default=Path("."), help="directory with images and font")
    parser.add_argument("--seed", type=int, default=None, help="seed for damage rolls")
    parser.add_argument("--frames", type=_positive, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        log.warning("could not open %s", path)
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
        surface.fill(_WHITE)
        return surface


def _load_font(path: Path) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), TEXT_SIZE)
    except (pygame.error, OSError):
        log.warning("could not open %s", path)
        return pygame.font.Font(None, TEXT_SIZE)


def _tinted(image: pygame.Surface, colour: Colour) -> pygame.Surface:
    out = image.convert_alpha() if pygame.display.get_surface() else image.copy()
    out = out.copy()
    out.fill(colour, special_flags=pygame.BLEND_RGBA_MULT)
    return out


def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
    width, height = image.get_size()
    size = (max(1, round(width * factor)), max(1, round(height * factor)))
    return pygame.transform.scale(image, size)


class _Assets:
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.font = _load_font(directory / "arial.ttf")
        background = _load_image(directory / "walka_tlo.png")
        width, height = background.get_size()
        self.background = pygame.transform.scale(background, (width * 2, height))
        self.tile = _load_image(directory / "battle_tile_basic.png")
        self.wait = _scaled(_load_image(directory / "wait.png"), BUTTON_SCALE)
        self.defend = _scaled(_load_image(directory / "defend.png"), BUTTON_SCALE)
        self.banners = {
            Outcome.VICTORY: _load_image(directory / "wygrana.png"),
            Outcome.DEFEAT: _load_image(directory / "przegrana.png"),
        }
        self._units: dict[str, pygame.Surface] = {}

    def unit(self, name: str) -> pygame.Surface:
        if name not in self._units:
            self._units[name] = _scaled(_load_image(self.directory / name), ENTITY_SCALE)
        return self._units[name]


def _draw_entity(
    screen: pygame.Surface,
    image: pygame.Surface,
    tile: Tile,
    friendly: bool,
    caption: pygame.Surface,
) -> None:
    origin_x = ENTITY_ORIGIN[0] * ENTITY_SCALE
    origin_y = ENTITY_ORIGIN[1] * ENTITY_SCALE
    top = tile.top - origin_y
    if friendly:
        left = tile.left - origin_x
    else:
        image = _tinted(pygame.transform.flip(image, True, False), _RED)
        left = tile.left + ENEMY_SHIFT + origin_x - image.get_width()
    screen.blit(image, (left, top))
    screen.blit(caption, tile.stats_position)


def _tile_at(tiles: list[Tile], point: tuple[int, int]) -> Tile | None:
    return next((tile for tile in tiles if tile.contains(point)), None)


def main(argv: list[str] | None = None) -> int:
    """Open the battle window and run until it is closed."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        assets = _Assets(args.assets)

        tile_width, tile_height = assets.tile.get_size()
        board = [
            Tile(x, y, tile_width, tile_height) for x in range(WIDTH) for y in range(HEIGHT)
        ]
        wait = Tile(WAIT_BUTTON.x, WAIT_BUTTON.y, *assets.wait.get_size())
        defend = Tile(DEFEND_BUTTON.x, DEFEND_BUTTON.y, *assets.defend.get_size())
        buttons = [(defend, assets.defend), (wait, assets.wait)]
        colours: dict[tuple[int, int], Colour] = {}

        battle = Battle(rng=rng)
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running:
            elapsed = clock.tick(FPS) / 1000
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    chosen = _tile_at(board + [wait, defend], event.pos)
                    if chosen is not None:
                        battle.select_from = chosen  # keep the last click for drawing
                        battle.select(type(battle.pressed)(chosen.x, chosen.y))

            outcome = battle.advance(elapsed)

            pointer = pygame.mouse.get_pos()
            held = pygame.mouse.get_pressed()[0]
            screen.fill(_BLACK)
            screen.blit(assets.background, (0, 0))

            for tile in board:
                state = battle.grid[tile.x][tile.y]
                colour = tile.colour(state, tile.contains(pointer), held)
                if colour is not None:
                    colours[(tile.x, tile.y)] = colour
                if state in _DRAWN_STATES:
                    tint = colours.get((tile.x, tile.y), _WHITE)
                    screen.blit(_tinted(assets.tile, tint), (tile.left, tile.top))

            for entity in battle.entities:
                unit = entity.unit
                if not unit.place.is_set():
                    continue
                caption = assets.font.render(
                    format_stats(unit.health, unit.health_per_creature, unit.amount),
                    True,
                    _BLACK,
                )
                cell = Tile(unit.place.x, unit.place.y, tile_width, tile_height)
                _draw_entity(screen, assets.unit(unit.texture), cell, entity.friendly, caption)

            for button, image in buttons:
                tint = button.colour(None, button.contains(pointer), held)
                screen.blit(_tinted(image, tint or _WHITE), (button.left, button.top))

            banner = assets.banners.get(outcome)
            if banner is not None:
                screen.blit(banner, BANNER_POSITION)

            pygame.display.flip()
            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        pygame.font.quit()
        pygame.display.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())