"""System factories for one-cell-at-a-time grid movement."""
from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Callable

from gridwalk import vec
from gridwalk.components import MoveIntent, Player, Transform
from gridwalk.config import GRID_SIZE, PLAYER_SPEED
from gridwalk.filters import Not
from gridwalk.keys import Key, KeyState

if TYPE_CHECKING:
    from gridwalk.types import EntityId, TickContext
    from gridwalk.world import World

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[Key, vec.Vec] = {
    Key.LEFT: (-1.0, 0.0, 0.0),
    Key.RIGHT: (1.0, 0.0, 0.0),
    Key.UP: (0.0, 1.0, 0.0),
    Key.DOWN: (0.0, -1.0, 0.0),
}


class MoveState(enum.Enum):
    IDLE = "idle"
    MOVING = "moving"


def move_state(world: World, eid: EntityId) -> MoveState:
    if world.has(eid, MoveIntent):
        return MoveState.MOVING
    return MoveState.IDLE


def direction_from_keys(keys: KeyState) -> vec.Vec:
    """Sum the unit vectors of every held key. Opposite keys cancel."""
    direction = vec.zero(3)
    for key, step in KEY_DIRECTIONS.items():
        if keys.pressed(key):
            direction = vec.add(direction, step)
    return direction


def make_intent_system(
    read_keys: Callable[[], KeyState],
    cell_size: float = GRID_SIZE,
) -> Callable[[World, TickContext], None]:
    """Commit a one-cell move for the idle player from the held keys.

    Only an entity without a MoveIntent is considered, so input held
    during a move is never read.
    """

    def intent_system(world: World, ctx: TickContext) -> None:
        match = world.single(Player, Transform, Not(MoveIntent))
        if match is None:
            return
        eid, (_, transform) = match

        direction = direction_from_keys(read_keys())
        if vec.magnitude(direction) == 0.0:
            return

        intent = MoveIntent(
            direction=direction,
            destination=vec.add(
                transform.position, vec.scale(direction, cell_size)
            ),
        )
        world.attach(eid, intent)
        logger.debug(
            "tick %d: entity %d moving %s -> %s",
            ctx.tick_number, eid, intent.direction, intent.destination,
        )

    return intent_system


def make_motion_system(
    speed: float = PLAYER_SPEED,
    on_arrive: Callable[[World, TickContext, EntityId, MoveIntent], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Advance the moving player at constant speed; stop exactly on arrival.

    Arrival is detected by overshoot: once the remaining vector points
    against the direction of travel, the position is snapped to the
    destination and the intent is removed.
    """

    def motion_system(world: World, ctx: TickContext) -> None:
        match = world.single(Player, Transform, MoveIntent)
        if match is None:
            return
        eid, (_, transform, intent) = match

        transform.position = vec.add(
            transform.position, vec.scale(intent.direction, speed * ctx.dt)
        )

        remaining = vec.sub(intent.destination, transform.position)
        if vec.dot(intent.direction, remaining) < 0.0:
            transform.position = intent.destination
            world.detach(eid, MoveIntent)
            logger.debug(
                "tick %d: entity %d arrived at %s",
                ctx.tick_number, eid, intent.destination,
            )
            if on_arrive is not None:
                on_arrive(world, ctx, eid, intent)

    return motion_system
