from __future__ import annotations

from typing import Protocol, runtime_checkable

from cooldownlib.persistence.container import MemoryDataContainer, PersistentDataContainer


@runtime_checkable
class PersistentDataHolder(Protocol):
    """Anything exposing a ``persistent_data_container``."""

    @property
    def persistent_data_container(self) -> PersistentDataContainer: ...


class SimpleDataHolder:
    """Standalone holder owning a container (in-memory unless one is given)."""

    def __init__(self, container: PersistentDataContainer | None = None) -> None:
        self._container = container if container is not None else MemoryDataContainer()

    @property
    def persistent_data_container(self) -> PersistentDataContainer:
        return self._container
