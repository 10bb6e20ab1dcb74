"""World - entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Callable, Generator, TypeVar, Union, cast

from gridwalk.filters import Not
from gridwalk.types import UnknownEntityError, EntityId

T = TypeVar("T")

# Query arguments: plain component types or filter sentinels.
QueryArg = Union[type, Not]

# Hook callback signature.
HookCallback = Callable[["World", EntityId, Any], None]

Match = tuple[EntityId, tuple[Any, ...]]


class World:
    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._spawned: set[int] = set()
        self._on_attach: dict[type, list[HookCallback]] = {}
        self._on_detach: dict[type, list[HookCallback]] = {}

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._spawned.add(eid)
        return eid

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._spawned:
            raise UnknownEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to unknown entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component
        self._fire(self._on_attach, ctype, entity_id, component)

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        store = self._components.get(component_type)
        if store is None:
            return
        component = store.pop(entity_id, None)
        if component is not None:
            self._fire(self._on_detach, component_type, entity_id, component)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._spawned:
            raise UnknownEntityError(
                entity_id, f"Entity {entity_id} was never spawned"
            )
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._spawned:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(self, *args: QueryArg) -> Generator[Match, None, None]:
        if not args:
            return

        required = [arg for arg in args if not isinstance(arg, Not)]
        excluded = [arg.ctype for arg in args if isinstance(arg, Not)]

        # Iterate the first required store, or every spawned entity when
        # the query holds only Not filters.
        if required:
            base_store = self._components.get(required[0])
            if base_store is None:
                return
            candidates = list(base_store)
        else:
            candidates = sorted(self._spawned)

        for eid in candidates:
            if any(self._stored(eid, ctype) for ctype in excluded):
                continue

            components: list[Any] = []
            for ctype in required:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def single(self, *args: QueryArg) -> Match | None:
        """Return the only match for a query, or None.

        None covers both "nothing matched" and "more than one entity
        matched"; callers that drive a single controlled entity treat
        either case as nothing to do this frame.
        """
        found: Match | None = None
        for match in self.query(*args):
            if found is not None:
                return None
            found = match
        return found

    def _stored(self, entity_id: EntityId, ctype: type) -> bool:
        store = self._components.get(ctype)
        return store is not None and entity_id in store

    def _fire(
        self,
        hooks: dict[type, list[HookCallback]],
        ctype: type,
        entity_id: EntityId,
        component: Any,
    ) -> None:
        for cb in list(hooks.get(ctype, ())):
            cb(self, entity_id, component)

    # -- Change detection hooks --

    def on_attach(self, ctype: type, callback: HookCallback) -> None:
        self._on_attach.setdefault(ctype, []).append(callback)

    def on_detach(self, ctype: type, callback: HookCallback) -> None:
        self._on_detach.setdefault(ctype, []).append(callback)
