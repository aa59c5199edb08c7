from __future__ import annotations

import re
from dataclasses import dataclass

from cooldownlib.constants import DEFAULT_NAMESPACE, MAX_KEY_LENGTH
from cooldownlib.errors import InvalidArgument

_NAMESPACE_RE = re.compile(r"[a-z0-9._-]+")
_KEY_RE = re.compile(r"[a-z0-9/._-]+")


@dataclass(frozen=True, slots=True)
class NamespacedKey:
    """Identifier of one stored value: a namespace plus a name.

    ``str(key)`` gives the canonical ``namespace:key`` form, which
    ``from_string`` parses back.
    """

    namespace: str
    key: str

    def __post_init__(self) -> None:
        if self.namespace is None:
            raise InvalidArgument("namespace must not be None")
        if self.key is None:
            raise InvalidArgument("key must not be None")
        if not isinstance(self.namespace, str) or not isinstance(self.key, str):
            raise InvalidArgument(
                f"namespace and key must be str, got {type(self.namespace).__name__} and {type(self.key).__name__}"
            )
        if not _NAMESPACE_RE.fullmatch(self.namespace):
            raise InvalidArgument(f"Invalid namespace {self.namespace!r}, must match [a-z0-9._-]")
        if not _KEY_RE.fullmatch(self.key):
            raise InvalidArgument(f"Invalid key {self.key!r}, must match [a-z0-9/._-]")
        if len(self.namespace) + 1 + len(self.key) > MAX_KEY_LENGTH:
            raise InvalidArgument(f"NamespacedKey must be at most {MAX_KEY_LENGTH} characters")

    @classmethod
    def from_string(cls, value: str, default_namespace: str = DEFAULT_NAMESPACE) -> NamespacedKey:
        if value is None:
            raise InvalidArgument("value must not be None")
        namespace, sep, key = value.partition(":")
        if not sep:
            return cls(default_namespace, value)
        if ":" in key:
            raise InvalidArgument(f"Invalid namespaced key {value!r}, expected a single ':'")
        return cls(namespace or default_namespace, key)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.key}"
