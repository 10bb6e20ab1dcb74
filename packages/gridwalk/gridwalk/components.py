"""Movement components."""
from __future__ import annotations

from dataclasses import dataclass

from gridwalk.vec import Vec


@dataclass
class Player:
    """Marks the controlled entity."""


@dataclass
class Transform:
    """Position and scale. ``position[2]`` is draw order only."""

    position: Vec
    scale: Vec = (1.0, 1.0, 1.0)


@dataclass
class Sprite:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class MoveIntent:
    """A committed one-cell move. Present only while the entity is moving."""

    direction: Vec
    destination: Vec
