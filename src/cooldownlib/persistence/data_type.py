from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cooldownlib.constants import LONG_MAX, LONG_MIN


@dataclass(frozen=True, slots=True)
class PersistentDataType:
    """Describes the values a container may hold under a key.

    Fields:
      name: Tag written alongside the value by file-backed containers.
      python_type: Accepted runtime type (``bool`` is never accepted for ``int``).
      min_value / max_value: Optional inclusive bounds for numeric types.
    """

    name: str
    python_type: type
    min_value: int | None = None
    max_value: int | None = None

    def is_instance(self, value: Any) -> bool:
        if isinstance(value, bool) and self.python_type is not bool:
            return False
        return isinstance(value, self.python_type)

    def validate(self, value: Any) -> Any:
        if not self.is_instance(value):
            raise TypeError(
                f"{self.name} expects {self.python_type.__name__}, got {type(value).__name__}"
            )
        if self.min_value is not None and value < self.min_value:
            raise OverflowError(f"{value} is below the {self.name} minimum {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            raise OverflowError(f"{value} is above the {self.name} maximum {self.max_value}")
        return value


LONG = PersistentDataType("long", int, LONG_MIN, LONG_MAX)

DATA_TYPES: dict[str, PersistentDataType] = {LONG.name: LONG}


def data_type_by_name(name: str) -> PersistentDataType:
    try:
        return DATA_TYPES[name]
    except KeyError:
        raise ValueError(f"Unknown persistent data type {name!r}") from None
