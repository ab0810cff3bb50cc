"""A small entity-component registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping


class Registry:
    """Entities are integers; each holds at most one component per type."""

    def __init__(self) -> None:
        self._entities: set[int] = set()
        self._next_id = 0
        self._pools: dict[type, dict[int, Any]] = {}

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def create(self, entity: int | None = None) -> int:
        """Create an entity, using ``entity`` as the identifier when it is free."""
        if entity is None or entity < 0 or entity in self._entities:
            while self._next_id in self._entities:
                self._next_id += 1
            entity = self._next_id
        self._entities.add(entity)
        return entity

    def valid(self, entity: int) -> bool:
        return entity in self._entities

    def emplace(self, entity: int, component: Any) -> Any:
        """Attach ``component`` to ``entity``, keyed by its type."""
        if entity not in self._entities:
            raise KeyError(f"entity {entity} does not exist")
        pool = self._pools.setdefault(type(component), {})
        if entity in pool:
            raise ValueError(
                f"entity {entity} already has a {type(component).__name__}"
            )
        pool[entity] = component
        return component

    def get(self, entity: int, component_type: type) -> Any:
        try:
            return self._pools[component_type][entity]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__}"
            ) from None

    def all_of(self, entity: int, *args: type) -> bool:
        return all(entity in self._pools.get(kind, ()) for kind in args)

    def storage(
        self, component_type: type | None = None
    ) -> Mapping[int, Any] | dict[type, Mapping[int, Any]]:
        """Return the read-only pool of one component type, or all pools."""
        if component_type is None:
            return {kind: MappingProxyType(pool) for kind, pool in self._pools.items()}
        return MappingProxyType(self._pools.get(component_type, {}))

    def view(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every given type."""
        if not args:
            raise TypeError("view needs at least one component type")
        pools = [self._pools.get(kind, {}) for kind in args]
        for entity in list(pools[0]):
            if all(entity in pool for pool in pools):
                yield (entity, *(pool[entity] for pool in pools))