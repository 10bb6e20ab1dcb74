"""Shared type aliases and protocols for gridwalk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class UnknownEntityError(KeyError):
    """Raised when operating on an entity id the world never spawned."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from gridwalk.world import World

System = Callable[["World", TickContext], None]
