"""gridwalk - One-cell-at-a-time grid movement on a small tick engine."""

from gridwalk import vec
from gridwalk.clock import Clock
from gridwalk.components import MoveIntent, Player, Sprite, Transform
from gridwalk.config import GameConfig
from gridwalk.engine import Engine
from gridwalk.filters import Not
from gridwalk.geometry import LineSegment, grid_lines, to_screen
from gridwalk.keys import HeldKeys, Key, KeyState
from gridwalk.scene import build_engine, spawn_player
from gridwalk.systems import (
    MoveState,
    direction_from_keys,
    make_intent_system,
    make_motion_system,
    move_state,
)
from gridwalk.types import EntityId, TickContext, UnknownEntityError
from gridwalk.world import World

__all__ = [
    "Clock",
    "Engine",
    "EntityId",
    "GameConfig",
    "HeldKeys",
    "Key",
    "KeyState",
    "LineSegment",
    "MoveIntent",
    "MoveState",
    "Not",
    "Player",
    "Sprite",
    "TickContext",
    "Transform",
    "UnknownEntityError",
    "World",
    "build_engine",
    "direction_from_keys",
    "grid_lines",
    "make_intent_system",
    "make_motion_system",
    "move_state",
    "spawn_player",
    "to_screen",
    "vec",
]
