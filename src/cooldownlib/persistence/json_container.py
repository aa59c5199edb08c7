from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Tuple

from cooldownlib.constants import JSON_INDENT
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.container import MemoryDataContainer
from cooldownlib.persistence.data_type import PersistentDataType, data_type_by_name

logger = logging.getLogger(__name__)


class JsonFileDataContainer(MemoryDataContainer):
    """Container whose entries are written through to a JSON file.

    The file maps ``namespace:key`` to ``{"type": <type name>, "value": <value>}``.
    A missing file starts an empty container; it is created on the first write.
    Each mutation rewrites the whole file via a temporary file and ``os.replace``.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(self._load(self.path))

    @staticmethod
    def _load(path: Path) -> Dict[NamespacedKey, Tuple[PersistentDataType, Any]]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise ValueError(f"Corrupt persistent data file {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Corrupt persistent data file {path}: expected an object")
        entries: Dict[NamespacedKey, Tuple[PersistentDataType, Any]] = {}
        for raw_key, record in payload.items():
            if not isinstance(record, dict) or "type" not in record or "value" not in record:
                raise ValueError(f"Corrupt persistent data file {path}: bad record for {raw_key!r}")
            try:
                data_type = data_type_by_name(record["type"])
                value = data_type.validate(record["value"])
            except (TypeError, ValueError, OverflowError) as exc:
                raise ValueError(f"Corrupt persistent data file {path}: bad record for {raw_key!r}") from exc
            entries[NamespacedKey.from_string(raw_key)] = (data_type, value)
        logger.debug("Loaded %d persistent entries from %s", len(entries), path)
        return entries

    def set(self, key: NamespacedKey, data_type: PersistentDataType, value: Any) -> None:
        previous = self._entries.get(key)
        super().set(key, data_type, value)
        self._save_or_restore(key, previous)

    def remove(self, key: NamespacedKey) -> None:
        previous = self._entries.get(key)
        if previous is None:
            return
        super().remove(key)
        self._save_or_restore(key, previous)

    def _save_or_restore(self, key: NamespacedKey, previous: Tuple[PersistentDataType, Any] | None) -> None:
        # memory must not run ahead of the file when the write fails
        try:
            self.save()
        except BaseException:
            if previous is None:
                self._entries.pop(key, None)
            else:
                self._entries[key] = previous
            raise

    def save(self) -> None:
        payload = {
            str(key): {"type": data_type.name, "value": value}
            for key, (data_type, value) in sorted(self._entries.items(), key=lambda item: str(item[0]))
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=JSON_INDENT)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Wrote %d persistent entries to %s", len(payload), self.path)
