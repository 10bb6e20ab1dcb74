"""Tests for startup configuration."""
from __future__ import annotations

import dataclasses

import pytest

from gridwalk.config import (
    CELL_X_COUNT,
    GRID_SIZE,
    PLAYER_SIZE,
    PLAYER_SPEED,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameConfig,
)


def test_defaults_match_constants() -> None:
    config = GameConfig()
    assert config.window_width == WINDOW_WIDTH == 500.0
    assert config.window_height == WINDOW_HEIGHT == 500.0
    assert config.cell_size == GRID_SIZE == 50.0
    assert config.cells_x == CELL_X_COUNT == 10
    assert config.speed == PLAYER_SPEED == 100.0
    assert config.player_size == PLAYER_SIZE == (50.0, 50.0, 10.0)


def test_config_is_frozen() -> None:
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.speed = 5.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"speed": 0.0},
        {"cell_size": -1.0},
        {"cells_x": 0},
        {"cells_y": -2},
        {"window_width": 0.0},
        {"fps": 0},
    ],
)
def test_invalid_values_raise(overrides) -> None:
    with pytest.raises(ValueError):
        GameConfig(**overrides)
