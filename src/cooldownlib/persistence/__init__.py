from cooldownlib.persistence.data_type import LONG, PersistentDataType
from cooldownlib.persistence.container import MemoryDataContainer, PersistentDataContainer
from cooldownlib.persistence.holder import PersistentDataHolder, SimpleDataHolder
from cooldownlib.persistence.json_container import JsonFileDataContainer
from cooldownlib.persistence.entity import EntityDataContainer, EntityDataHolder

__all__ = [
    "LONG",
    "PersistentDataType",
    "PersistentDataContainer",
    "MemoryDataContainer",
    "PersistentDataHolder",
    "SimpleDataHolder",
    "JsonFileDataContainer",
    "EntityDataContainer",
    "EntityDataHolder",
]
