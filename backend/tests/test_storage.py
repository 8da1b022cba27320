import json
import os
from datetime import datetime, timezone

import pytest

from project_engine.config import Settings
from project_engine.models import Project, Version
from project_engine.repositories import storage as storage_module
from project_engine.repositories import (
    InMemoryStorage,
    JsonFileStorage,
    RedisStorage,
    get_storage,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeRedis:
    """Just enough of redis.Redis for string get/set."""

    def __init__(self):
        self.values: dict[str, str] = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        return True


def sample_projects() -> list[Project]:
    version = Version(
        id="version_1",
        prompt="a red button",
        files={"index.html": "<button>Go</button>", "style.css": "button { color: red; }"},
        snapshot="data:image/jpeg;base64,AAA",
        timestamp=NOW,
    )
    return [
        Project(id="project_1", title="Button", versions=[version], created_at=NOW, updated_at=NOW),
        Project(id="project_2", title="Empty", versions=[], created_at=NOW, updated_at=NOW),
    ]


def test_in_memory_round_trip():
    storage = InMemoryStorage()

    storage.save(sample_projects())

    assert isinstance(storage.data, str)
    assert storage.load() == sample_projects()


def test_json_file_round_trip(tmp_path):
    storage = JsonFileStorage(tmp_path / "history", "project_engine_history")

    storage.save(sample_projects())

    assert storage.path == tmp_path / "history" / "project_engine_history.json"
    assert JsonFileStorage(tmp_path / "history", "project_engine_history").load() == sample_projects()
    assert list(storage.path.parent.iterdir()) == [storage.path]


def test_failed_write_keeps_error_and_cleans_up(tmp_path, monkeypatch):
    storage = JsonFileStorage(tmp_path, "history")

    def full_disk(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(storage_module.os, "replace", full_disk)

    with pytest.raises(OSError, match="disk full"):
        storage.save(sample_projects())
    assert list(tmp_path.iterdir()) == []


def test_failed_write_error_survives_missing_temp_file(tmp_path, monkeypatch):
    storage = JsonFileStorage(tmp_path, "history")

    def vanish_then_fail(src, dst):
        os.unlink(src)
        raise PermissionError("read-only directory")

    monkeypatch.setattr(storage_module.os, "replace", vanish_then_fail)

    with pytest.raises(PermissionError, match="read-only directory"):
        storage.save(sample_projects())


def test_stored_layout_is_a_plain_array(tmp_path):
    storage = JsonFileStorage(tmp_path, "history")
    storage.save(sample_projects())

    data = json.loads(storage.path.read_text(encoding="utf-8"))

    assert [p["id"] for p in data] == ["project_1", "project_2"]
    assert data[0]["versions"][0]["files"]["index.html"] == "<button>Go</button>"


def test_missing_file_loads_empty(tmp_path):
    assert JsonFileStorage(tmp_path, "history").load() == []


def test_corrupt_file_loads_empty(tmp_path):
    (tmp_path / "history.json").write_text("[{broken", encoding="utf-8")

    assert JsonFileStorage(tmp_path, "history").load() == []


def test_shape_mismatch_loads_empty():
    storage = InMemoryStorage(json.dumps({"projects": []}))

    assert storage.load() == []


def test_records_missing_fields_load_empty():
    storage = InMemoryStorage(json.dumps([{"id": "project_1", "title": "No dates"}]))

    assert storage.load() == []


def test_redis_round_trip():
    client = FakeRedis()
    storage = RedisStorage("project_engine_history", client=client)

    storage.save(sample_projects())

    assert set(client.values) == {"project_engine_history"}
    assert RedisStorage("project_engine_history", client=client).load() == sample_projects()


def test_redis_missing_key_loads_empty():
    assert RedisStorage("history", client=FakeRedis()).load() == []


def test_get_storage_selects_backend(tmp_path):
    file_storage = get_storage(Settings(storage_backend="file", storage_dir=str(tmp_path)))
    memory_storage = get_storage(Settings(storage_backend="memory"))

    assert isinstance(file_storage, JsonFileStorage)
    assert file_storage.path == tmp_path / "project_engine_history.json"
    assert isinstance(memory_storage, InMemoryStorage)
