"""Entity-component storage built on packed sparse sets."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

Entity = int
INVALID_ENTITY: Entity = 0xFFFFFFFF

T = TypeVar("T")


class ComponentPool(Generic[T]):
    """Packed storage of one component type, indexed by entity."""

    def __init__(self) -> None:
        self._components: list[T] = []
        self._owners: list[Entity] = []
        self._indexes: dict[Entity, int] = {}

    def add(self, entity: Entity, component: T) -> None:
        """Attach a component to an entity that does not have one yet."""
        if self.has(entity):
            raise ValueError(f"Component already exists for entity {entity}")
        self._indexes[entity] = len(self._components)
        self._components.append(component)
        self._owners.append(entity)

    def remove_from(self, entity: Entity) -> None:
        """Remove the entity's component, moving the last one into its slot."""
        if not self.has(entity):
            raise KeyError(f"Entity {entity} has no component to remove")
        removed_index = self._indexes.pop(entity)
        last_component = self._components.pop()
        last_entity = self._owners.pop()
        if removed_index < len(self._components):
            self._components[removed_index] = last_component
            self._owners[removed_index] = last_entity
            self._indexes[last_entity] = removed_index

    def has(self, entity: Entity) -> bool:
        return entity in self._indexes

    def get(self, entity: Entity) -> T:
        try:
            return self._components[self._indexes[entity]]
        except KeyError:
            raise KeyError(f"Entity {entity} has no such component") from None

    def entities(self) -> tuple[Entity, ...]:
        """Owners of the stored components, in packed order."""
        return tuple(self._owners)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._indexes


class Registry:
    """Creates entities and keeps one component pool per component type."""

    def __init__(self) -> None:
        self._next_entity: Entity = 0
        self._pools: dict[type, ComponentPool[Any]] = {}

    def _pool(self, component_type: type) -> ComponentPool[Any]:
        pool = self._pools.get(component_type)
        if pool is None:
            pool = ComponentPool()
            self._pools[component_type] = pool
        return pool

    def create_entity(self) -> Entity:
        entity = self._next_entity
        self._next_entity += 1
        return entity

    def add(self, entity: Entity, component: Any) -> None:
        """Attach a component, stored under its own type."""
        self._pool(type(component)).add(entity, component)

    def remove_from(self, component_type: type, entity: Entity) -> None:
        self._pool(component_type).remove_from(entity)

    def has(self, component_type: type, entity: Entity) -> bool:
        return self._pool(component_type).has(entity)

    def get(self, component_type: type, entity: Entity) -> Any:
        return self._pool(component_type).get(entity)

    def for_each(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield (entity, component, ...) for entities holding every given type.

        Entities are visited in the packed order of the first type's pool.
        """
        if not args:
            raise TypeError("for_each needs at least one component type")
        first_pool = self._pool(args[0])
        other_pools = [self._pool(component_type) for component_type in args[1:]]
        return self._iterate(first_pool, other_pools)

    @staticmethod
    def _iterate(
        first_pool: ComponentPool[Any], other_pools: list[ComponentPool[Any]]
    ) -> Iterator[tuple[Any, ...]]:
        for entity in first_pool.entities():
            if first_pool.has(entity) and all(pool.has(entity) for pool in other_pools):
                yield (
                    entity,
                    first_pool.get(entity),
                    *(pool.get(entity) for pool in other_pools),
                )