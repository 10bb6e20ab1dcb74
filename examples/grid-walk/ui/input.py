"""pygame keyboard state mapped onto gridwalk keys."""
from __future__ import annotations

import pygame

from gridwalk import HeldKeys, Key

ARROW_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


def read_arrow_keys() -> HeldKeys:
    pressed = pygame.key.get_pressed()
    return HeldKeys(key for code, key in ARROW_KEYS.items() if pressed[code])
