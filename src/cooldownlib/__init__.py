from cooldownlib.cooldown import Cooldown
from cooldownlib.errors import InvalidArgument
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence import (
    LONG,
    EntityDataHolder,
    JsonFileDataContainer,
    MemoryDataContainer,
    PersistentDataContainer,
    PersistentDataHolder,
    PersistentDataType,
    SimpleDataHolder,
)

__all__ = [
    "Cooldown",
    "InvalidArgument",
    "NamespacedKey",
    "LONG",
    "EntityDataHolder",
    "JsonFileDataContainer",
    "MemoryDataContainer",
    "PersistentDataContainer",
    "PersistentDataHolder",
    "PersistentDataType",
    "SimpleDataHolder",
]
