import json
from datetime import timedelta
from pathlib import Path

import pytest

from cooldownlib.cooldown import Cooldown
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.data_type import LONG
from cooldownlib.persistence.holder import SimpleDataHolder
from cooldownlib.persistence.json_container import JsonFileDataContainer
from tests.helpers import FakeClock

KEY = NamespacedKey("plugin", "fireball_cooldown")


def test_json_container_missing_file_starts_empty(tmp_path) -> None:
    path = Path(tmp_path) / "holder.json"
    container = JsonFileDataContainer(path)

    assert container.is_empty()
    assert not path.exists()


def test_json_container_writes_through_on_set_and_remove(tmp_path) -> None:
    path = Path(tmp_path) / "nested" / "holder.json"
    container = JsonFileDataContainer(path)

    container.set(KEY, LONG, 1_700_000_030)
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert payload == {"plugin:fireball_cooldown": {"type": "long", "value": 1_700_000_030}}

    container.remove(KEY)
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert payload == {}
    assert [p.name for p in path.parent.iterdir()] == ["holder.json"]


def test_cooldown_survives_reload(tmp_path) -> None:
    path = Path(tmp_path) / "player.json"
    clock = FakeClock()
    cooldown = Cooldown(KEY, clock=clock)

    cooldown.set(SimpleDataHolder(JsonFileDataContainer(path)), timedelta(seconds=30))
    clock.advance(10)

    reloaded = SimpleDataHolder(JsonFileDataContainer(path))
    assert cooldown.is_set(reloaded)
    assert cooldown.remaining_time(reloaded) == timedelta(seconds=20)

    clock.advance(25)
    assert cooldown.remove_if_expired(reloaded) is True
    assert JsonFileDataContainer(path).is_empty()


def test_json_container_rejects_corrupt_file(tmp_path) -> None:
    path = Path(tmp_path) / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonFileDataContainer(path)

    path.write_text(json.dumps({"plugin:x": {"type": "long"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        JsonFileDataContainer(path)

    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        JsonFileDataContainer(path)


@pytest.mark.parametrize(
    "record",
    [
        {"type": "long", "value": "soon"},
        {"type": "long", "value": 1.5},
        {"type": "long", "value": 2 ** 70},
        {"type": "long", "value": True},
        {"type": ["long"], "value": 5},
        {"type": "string", "value": 5},
    ],
)
def test_json_container_rejects_bad_records(tmp_path, record) -> None:
    path = Path(tmp_path) / "broken.json"
    path.write_text(json.dumps({"plugin:x": record}), encoding="utf-8")
    with pytest.raises(ValueError, match="bad record"):
        JsonFileDataContainer(path)


def test_json_container_failed_write_leaves_file_untouched(tmp_path) -> None:
    path = Path(tmp_path) / "holder.json"
    container = JsonFileDataContainer(path)
    container.set(KEY, LONG, 5)

    with pytest.raises(OverflowError):
        container.set(NamespacedKey("plugin", "other"), LONG, 2 ** 64)

    assert JsonFileDataContainer(path).keys() == {KEY}


def test_json_container_keeps_memory_in_step_when_write_fails(tmp_path, monkeypatch) -> None:
    path = Path(tmp_path) / "holder.json"
    container = JsonFileDataContainer(path)
    container.set(KEY, LONG, 5)
    other = NamespacedKey("plugin", "other")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("cooldownlib.persistence.json_container.os.replace", _fail)

    with pytest.raises(OSError):
        container.set(KEY, LONG, 99)
    assert container.get(KEY, LONG) == 5

    with pytest.raises(OSError):
        container.set(other, LONG, 7)
    assert not container.has(other)

    with pytest.raises(OSError):
        container.remove(KEY)
    assert container.get(KEY, LONG) == 5

    monkeypatch.undo()
    assert JsonFileDataContainer(path).keys() == {KEY}
    assert [p.name for p in path.parent.iterdir()] == ["holder.json"]
