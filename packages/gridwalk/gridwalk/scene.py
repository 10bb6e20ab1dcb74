"""Scene construction: the controlled entity and a wired engine."""
from __future__ import annotations

from typing import Callable

from gridwalk.components import Player, Sprite, Transform
from gridwalk.config import GameConfig
from gridwalk.engine import Engine
from gridwalk.keys import KeyState
from gridwalk.systems import make_intent_system, make_motion_system
from gridwalk.types import EntityId
from gridwalk.world import World


def spawn_player(world: World, config: GameConfig | None = None) -> EntityId:
    config = config or GameConfig()
    eid = world.spawn()
    world.attach(eid, Player())
    world.attach(eid, Transform(position=(0.0, 0.0, 0.0), scale=config.player_size))
    world.attach(eid, Sprite(color=config.player_color))
    return eid


def build_engine(
    read_keys: Callable[[], KeyState],
    config: GameConfig | None = None,
) -> tuple[Engine, EntityId]:
    """Engine with input translation ahead of motion, plus one player."""
    config = config or GameConfig()
    engine = Engine()
    engine.add_system(make_intent_system(read_keys, cell_size=config.cell_size))
    engine.add_system(make_motion_system(speed=config.speed))
    player = spawn_player(engine.world, config)
    return engine, player
