from __future__ import annotations

import json
from pathlib import Path

import pytest

from ohriv.scoring import FileStorage, KeyValueStorage, MemoryStorage


def test_backends_satisfy_protocol(tmp_path: Path):
    assert isinstance(MemoryStorage(), KeyValueStorage)
    assert isinstance(FileStorage(tmp_path / "s.json"), KeyValueStorage)


def test_missing_file_reads_as_empty(tmp_path: Path):
    storage = FileStorage(tmp_path / "absent.json")

    assert storage.get_item("ksaScores") is None
    storage.remove_item("ksaScores")
    assert not storage.path.exists()


def test_set_item_creates_parent_and_leaves_no_temp_files(tmp_path: Path):
    path = tmp_path / "nested" / "storage.json"
    storage = FileStorage(path)

    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.remove_item("a")

    assert json.loads(path.read_text(encoding="utf-8")) == {"b": "2"}
    assert [p.name for p in path.parent.iterdir()] == ["storage.json"]


def test_non_object_document_rejected(tmp_path: Path):
    path = tmp_path / "storage.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        FileStorage(path).get_item("ksaScores")


def test_memory_storage_seeded_copy():
    seed = {"k": "v"}
    storage = MemoryStorage(seed)
    storage.set_item("k", "w")

    assert seed == {"k": "v"}
    assert storage.get_item("k") == "w"
