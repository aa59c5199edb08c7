from __future__ import annotations

from typing import Any, Dict, Protocol, Tuple, runtime_checkable

from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.data_type import PersistentDataType


@runtime_checkable
class PersistentDataContainer(Protocol):
    """Typed key-value attribute store owned by a data holder."""

    def get(self, key: NamespacedKey, data_type: PersistentDataType) -> Any | None: ...

    def set(self, key: NamespacedKey, data_type: PersistentDataType, value: Any) -> None: ...

    def has(self, key: NamespacedKey, data_type: PersistentDataType | None = None) -> bool: ...

    def remove(self, key: NamespacedKey) -> None: ...

    def keys(self) -> set[NamespacedKey]: ...

    def is_empty(self) -> bool: ...


class MemoryDataContainer:
    """Dict-backed container; the reference implementation of the contract."""

    def __init__(self, entries: Dict[NamespacedKey, Tuple[PersistentDataType, Any]] | None = None) -> None:
        self._entries: Dict[NamespacedKey, Tuple[PersistentDataType, Any]] = entries if entries is not None else {}

    def get(self, key: NamespacedKey, data_type: PersistentDataType) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_type, value = entry
        if stored_type != data_type:
            raise TypeError(f"{key} holds a {stored_type.name} value, not {data_type.name}")
        return value

    def set(self, key: NamespacedKey, data_type: PersistentDataType, value: Any) -> None:
        self._entries[key] = (data_type, data_type.validate(value))

    def has(self, key: NamespacedKey, data_type: PersistentDataType | None = None) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        return data_type is None or entry[0] == data_type

    def remove(self, key: NamespacedKey) -> None:
        self._entries.pop(key, None)

    def keys(self) -> set[NamespacedKey]:
        return set(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._entries)} entries)"
