"""
Grid Walk
Move a square one grid cell at a time with the arrow keys.

Controls:
  Arrows   Move (hold two for a diagonal step)
  Escape   Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from gridwalk import GameConfig, MoveIntent, Transform, build_engine, move_state
from gridwalk.config import BG_COLOR, WINDOW_TITLE

from ui.input import read_arrow_keys
from ui.renderer import draw_grid, draw_hud, draw_sprites

logger = logging.getLogger("grid-walk")


def parse_args() -> argparse.Namespace:
    defaults = GameConfig()
    p = argparse.ArgumentParser(description="Grid Walk - gridwalk visual demo")
    p.add_argument("--speed", type=float, default=defaults.speed,
                   help=f"Movement speed in units/s (default: {defaults.speed})")
    p.add_argument("--cell-size", type=float, default=defaults.cell_size,
                   help=f"Distance of one move (default: {defaults.cell_size})")
    p.add_argument("--cells-x", type=int, default=defaults.cells_x,
                   help=f"Grid columns (default: {defaults.cells_x})")
    p.add_argument("--cells-y", type=int, default=defaults.cells_y,
                   help=f"Grid rows (default: {defaults.cells_y})")
    p.add_argument("--fps", type=int, default=defaults.fps,
                   help=f"Frame cap (default: {defaults.fps})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = GameConfig(
            cell_size=args.cell_size,
            cells_x=args.cells_x,
            cells_y=args.cells_y,
            speed=args.speed,
            fps=args.fps,
        )
    except ValueError as e:
        sys.exit(f"grid-walk: {e}")

    pygame.init()
    screen = pygame.display.set_mode(
        (int(config.window_width), int(config.window_height))
    )
    pygame.display.set_caption(WINDOW_TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    engine, player = build_engine(read_arrow_keys, config)
    moves = [0]

    def count_move(world, eid, intent: MoveIntent) -> None:
        moves[0] += 1

    engine.world.on_detach(MoveIntent, count_move)
    engine.on_stop(lambda world, ctx: logger.info(
        "stopped after %d frames, %.1fs, %d moves",
        ctx.tick_number, ctx.elapsed, moves[0],
    ))

    engine.start()
    running = True
    while running:
        dt = pg_clock.tick(config.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        engine.step(dt)

        screen.fill(BG_COLOR)
        draw_grid(screen, config)
        draw_sprites(screen, engine.world, config)

        x, y, _ = engine.world.get(player, Transform).position
        draw_hud(screen, font, [
            f"{move_state(engine.world, player).value:<6}  "
            f"pos ({x:.0f}, {y:.0f})  moves {moves[0]}  "
            f"FPS {pg_clock.get_fps():.0f}",
        ])
        pygame.display.flip()

    engine.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
