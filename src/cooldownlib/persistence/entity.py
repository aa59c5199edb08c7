from __future__ import annotations

from typing import Any

from esper import World

from cooldownlib.components.persistent_data import PersistentData
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.container import MemoryDataContainer
from cooldownlib.persistence.data_type import PersistentDataType


class EntityDataContainer:
    """Container view over the ``PersistentData`` component of one entity.

    The component is added on the first write and kept afterwards, even when
    empty. Reads on an entity without it behave as an empty container.
    """

    def __init__(self, world: World, entity: int) -> None:
        self.world = world
        self.entity = entity

    def _component(self) -> PersistentData | None:
        try:
            return self.world.component_for_entity(self.entity, PersistentData)
        except KeyError:
            return None

    def _ensure_component(self) -> PersistentData:
        component = self._component()
        if component is None:
            component = PersistentData()
            self.world.add_component(self.entity, component)
        return component

    def _view(self) -> MemoryDataContainer:
        component = self._component()
        return MemoryDataContainer(component.entries if component is not None else {})

    def get(self, key: NamespacedKey, data_type: PersistentDataType) -> Any | None:
        return self._view().get(key, data_type)

    def set(self, key: NamespacedKey, data_type: PersistentDataType, value: Any) -> None:
        value = data_type.validate(value)
        self._ensure_component().entries[key] = (data_type, value)

    def has(self, key: NamespacedKey, data_type: PersistentDataType | None = None) -> bool:
        return self._view().has(key, data_type)

    def remove(self, key: NamespacedKey) -> None:
        component = self._component()
        if component is None:
            return
        component.entries.pop(key, None)

    def keys(self) -> set[NamespacedKey]:
        return self._view().keys()

    def is_empty(self) -> bool:
        return self._view().is_empty()


class EntityDataHolder:
    """Adapts an esper entity to the data holder contract."""

    def __init__(self, world: World, entity: int) -> None:
        self.world = world
        self.entity = entity
        self._container = EntityDataContainer(world, entity)

    @property
    def persistent_data_container(self) -> EntityDataContainer:
        return self._container

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityDataHolder):
            return NotImplemented
        return self.world is other.world and self.entity == other.entity

    def __hash__(self) -> int:
        return hash((id(self.world), self.entity))

    def __repr__(self) -> str:
        return f"EntityDataHolder(entity={self.entity})"
