"""Directional keys and the held-key query the input systems consume."""
from __future__ import annotations

import enum
from typing import Iterable, Protocol


class Key(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class KeyState(Protocol):
    def pressed(self, key: Key) -> bool: ...


class HeldKeys:
    """Immutable set of keys held during one frame."""

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[Key] = ()) -> None:
        self._keys = frozenset(keys)

    def pressed(self, key: Key) -> bool:
        return key in self._keys

    def __repr__(self) -> str:
        names = sorted(k.value for k in self._keys)
        return f"HeldKeys({names})"
