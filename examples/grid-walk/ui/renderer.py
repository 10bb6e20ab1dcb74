"""Grid overlay, player sprite and HUD drawing."""
from __future__ import annotations

import pygame

from gridwalk import GameConfig, Sprite, Transform, World, grid_lines, to_screen
from gridwalk.config import GRID_COLOR, HUD_COLOR


def draw_grid(surface: pygame.Surface, config: GameConfig) -> None:
    w, h = config.window_width, config.window_height
    for seg in grid_lines(w, h, config.cells_x, config.cells_y):
        pygame.draw.line(
            surface,
            GRID_COLOR,
            to_screen(seg.start, w, h),
            to_screen(seg.end, w, h),
        )


def draw_sprites(surface: pygame.Surface, world: World, config: GameConfig) -> None:
    """Draw every sprite as a filled square centered on its position, lowest z first."""
    w, h = config.window_width, config.window_height
    drawn = sorted(
        world.query(Transform, Sprite),
        key=lambda match: match[1][0].position[2],
    )
    for _, (transform, sprite) in drawn:
        cx, cy = to_screen(transform.position, w, h)
        sw, sh = transform.scale[0], transform.scale[1]
        rect = pygame.Rect(int(cx - sw / 2), int(cy - sh / 2), int(sw), int(sh))
        pygame.draw.rect(surface, sprite.color, rect)


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, lines: list[str]) -> None:
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR)
        surface.blit(surf, (6, 4 + i * 16))
