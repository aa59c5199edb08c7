from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from time import time
from typing import Callable, Union

from cooldownlib.errors import InvalidArgument
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.data_type import LONG
from cooldownlib.persistence.holder import PersistentDataHolder

logger = logging.getLogger(__name__)

DurationLike = Union[timedelta, int, float]

_ZERO = timedelta(0)


def _require_holder(holder: PersistentDataHolder | None) -> None:
    if holder is None:
        raise InvalidArgument("PersistentDataHolder must not be None")


def _to_timedelta(duration: DurationLike | None) -> timedelta:
    if duration is None:
        raise InvalidArgument("Duration must not be None")
    if isinstance(duration, timedelta):
        return duration
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise InvalidArgument(f"Duration must be a timedelta or seconds, got {type(duration).__name__}")
    return timedelta(seconds=duration)


@dataclass(frozen=True, slots=True)
class Cooldown:
    """A cooldown stored inside a data holder's persistent container.

    The cooldown itself only knows its key. The expiration is kept by the
    holder as a ``LONG`` epoch-seconds value, so one ``Cooldown`` can be used
    against any number of holders, and two cooldowns with equal keys are
    interchangeable. ``clock`` returns epoch seconds (``time.time`` by default)
    and is ignored by equality and hashing.
    """

    key: NamespacedKey
    clock: Callable[[], float] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.key is None:
            raise InvalidArgument("NamespacedKey must not be None")
        if isinstance(self.key, str):
            object.__setattr__(self, "key", NamespacedKey.from_string(self.key))
        elif not isinstance(self.key, NamespacedKey):
            raise InvalidArgument(f"key must be a NamespacedKey, got {type(self.key).__name__}")

    def _now(self) -> float:
        return (self.clock or time)()

    def set(self, holder: PersistentDataHolder, duration: DurationLike) -> None:
        """Start (or restart) the cooldown on ``holder`` for ``duration``."""
        _require_holder(holder)
        delta = _to_timedelta(duration)
        expiration = math.floor(self._now() + delta.total_seconds())
        holder.persistent_data_container.set(self.key, LONG, expiration)
        logger.debug("Cooldown %s set on %r until %d", self.key, holder, expiration)

    def is_set(self, holder: PersistentDataHolder) -> bool:
        """True when a record exists, whether or not it has expired."""
        _require_holder(holder)
        return holder.persistent_data_container.has(self.key, LONG)

    def expiration(self, holder: PersistentDataHolder) -> datetime | None:
        """The stored expiry as an aware UTC datetime, or None when not set."""
        _require_holder(holder)
        epoch_second = holder.persistent_data_container.get(self.key, LONG)
        if epoch_second is None:
            return None
        return datetime.fromtimestamp(epoch_second, tz=timezone.utc)

    def remaining_time(self, holder: PersistentDataHolder) -> timedelta:
        """Time left before expiry; zero when not set or already expired.

        The stored expiry is whole seconds; the current time is not rounded.
        """
        _require_holder(holder)
        epoch_second = holder.persistent_data_container.get(self.key, LONG)
        if epoch_second is None:
            return _ZERO
        now = self._now()
        if epoch_second > now:
            return timedelta(seconds=epoch_second - now)
        return _ZERO

    def is_expired(self, holder: PersistentDataHolder) -> bool:
        """True when not set or the expiry has passed."""
        _require_holder(holder)
        return self.remaining_time(holder) == _ZERO

    def remove(self, holder: PersistentDataHolder) -> bool:
        """Delete the record. Returns False if there was nothing to delete."""
        _require_holder(holder)
        if not self.is_set(holder):
            return False
        holder.persistent_data_container.remove(self.key)
        logger.debug("Cooldown %s removed from %r", self.key, holder)
        return True

    def remove_if_expired(self, holder: PersistentDataHolder) -> bool:
        """Delete the record only if it exists and has expired.

        Returns False both when nothing is set and when the cooldown is still
        running.
        """
        _require_holder(holder)
        if not self.is_set(holder) or not self.is_expired(holder):
            return False
        holder.persistent_data_container.remove(self.key)
        logger.debug("Expired cooldown %s removed from %r", self.key, holder)
        return True
