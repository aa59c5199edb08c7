from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.data_type import PersistentDataType


@dataclass(slots=True)
class PersistentData:
    """Typed key-value attributes stored on an entity (see EntityDataHolder)."""

    entries: Dict[NamespacedKey, Tuple[PersistentDataType, Any]] = field(default_factory=dict)
