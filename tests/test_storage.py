#!/usr/bin/env python3
"""Tests for the key/value stores."""

import pytest

from garage import JsonFileStorage, MemoryStorage, StorageError


class TestMemoryStorage:
    def test_set_get_remove(self):
        storage = MemoryStorage()
        assert storage.get_item("k") is None
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        storage.remove_item("k")
        storage.remove_item("k")
        assert storage.get_item("k") is None


class TestJsonFileStorage:
    """Tests for the file-backed store."""

    def test_missing_key_returns_none(self, tmp_path):
        assert JsonFileStorage(tmp_path).get_item("virtualGarage") is None

    def test_creates_directory_and_writes_file(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nested" / "dir")
        storage.set_item("virtualGarage", '{"car": null}')
        path = tmp_path / "nested" / "dir" / "virtualGarage.json"
        assert path.read_text() == '{"car": null}'
        assert storage.get_item("virtualGarage") == '{"car": null}'

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.set_item("virtualGarage", "1")
        storage.set_item("virtualGarage", "2")
        assert storage.get_item("virtualGarage") == "2"
        assert [p.name for p in tmp_path.iterdir()] == ["virtualGarage.json"]

    def test_remove_missing_is_noop(self, tmp_path):
        JsonFileStorage(tmp_path).remove_item("virtualGarage")

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(StorageError):
            JsonFileStorage(blocker).set_item("virtualGarage", "{}")
