# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, BODY_COLOR, FOOD_COLOR, HEAD_COLOR, TEXT, Config
from .game import BODY, FOOD, HEAD, GameState, SeedError, Snapshot
from .ticker import TickClock

logger = logging.getLogger(__name__)

CELL_COLORS = {
    BODY: BODY_COLOR,
    HEAD: HEAD_COLOR,
    FOOD: FOOD_COLOR,
}


# ---------- Command line ----------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrapping grid.")
    parser.add_argument("--width", type=int, default=defaults.width, help="Grid columns.")
    parser.add_argument("--height", type=int, default=defaults.height, help="Grid rows.")
    parser.add_argument("--tick-rate", type=int, default=defaults.tick_rate,
                        help="Snake moves per second.")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help="Pixels per grid cell.")
    parser.add_argument("--fps", type=int, default=defaults.render_fps, help="Frame cap.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Fixed RNG seed (default: from the OS).")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        width=args.width,
        height=args.height,
        tick_rate=args.tick_rate,
        cell_size=args.cell_size,
        render_fps=args.fps,
        seed=args.seed,
    )


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, cfg: Config, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * cfg.cell_size, gy * cfg.cell_size, cfg.cell_size, cfg.cell_size)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, cfg: Config, snap: Snapshot) -> None:
    screen.fill(BG)
    cells = snap.grid()
    for code, color in CELL_COLORS.items():
        for gy, gx in np.argwhere(cells == code):
            draw_cell(screen, cfg, int(gx), int(gy), color)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, cfg: Config, score: int) -> None:
    width, height = cfg.screen_size
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Score: {score}", True, TEXT)
    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 16)))


# ---------- Loop ----------
def handle_events(game: GameState) -> bool:
    """Feed key-presses to the game. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            game.on_direction_input(pygame.key.name(event.key))
    return True

def run(cfg: Config) -> int:
    game = GameState(cfg)
    ticker = TickClock(cfg.tick_rate)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 48)
        screen = pygame.display.set_mode(cfg.screen_size)
        pygame.display.set_caption("Snake!")
        clock = pygame.time.Clock()

        while handle_events(game):
            # input first, then every tick that came due since the last frame
            ticker.add(clock.tick(cfg.render_fps))
            game.advance(ticker.drain())

            snap = game.snapshot()
            draw_game(screen, cfg, snap)
            if snap.gameover:
                draw_game_over(screen, font, cfg, snap.score)
            pygame.display.flip()
    finally:
        pygame.quit()
    return game.score

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        cfg = build_config(args)
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    try:
        score = run(cfg)
    except SeedError as e:
        logger.error("Could not initialise the random source: %s", e)
        return 1
    logger.info("Final score: %d", score)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
