"""Query filter sentinels for World.query() and World.single()."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Not:
    """Exclude entities that have this component type.

    ``world.query(Player, Not(MoveIntent))`` matches idle players only.
    """

    ctype: type
