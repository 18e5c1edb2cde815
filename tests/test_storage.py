"""Mini README: Tests for the snapshot storage backends."""

from __future__ import annotations

from pathlib import Path

import pytest

from balancetracker.ledger import Ledger
from balancetracker.storage import JsonFileStorage, KeyValueStorage, MemoryStorage


def test_memory_storage_round_trips_text() -> None:
    storage = MemoryStorage()
    assert storage.get("missing") is None
    storage.set("key", "value")
    assert storage.get("key") == "value"
    assert isinstance(storage, KeyValueStorage)


def test_json_file_storage_writes_one_file_per_key(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "nested")

    assert storage.get("balance_tracker_v1") is None
    storage.set("balance_tracker_v1", '{"version": 1}')
    storage.set("balance_tracker_v1", '{"version": 2}')

    assert storage.get("balance_tracker_v1") == '{"version": 2}'
    assert sorted(path.name for path in (tmp_path / "nested").iterdir()) == ["balance_tracker_v1.json"]


@pytest.mark.parametrize("key", ["../escape", "a/b", "", ".hidden"])
def test_json_file_storage_rejects_unsafe_keys(tmp_path: Path, key: str) -> None:
    storage = JsonFileStorage(tmp_path)

    with pytest.raises(ValueError):
        storage.set(key, "x")


def test_ledger_survives_restart_with_file_storage(tmp_path: Path) -> None:
    Ledger(JsonFileStorage(tmp_path)).add_entry("120", "Pocket money")

    reopened = Ledger(JsonFileStorage(tmp_path))

    assert reopened.state.balance == pytest.approx(120)
    assert reopened.state.history[0].description == "Pocket money"


def test_unreadable_snapshot_file_falls_back_to_defaults(tmp_path: Path) -> None:
    (tmp_path / "balance_tracker_v1.json").write_bytes(b"\xff\xfe\x00garbage")

    ledger = Ledger(JsonFileStorage(tmp_path))

    assert ledger.state.balance == 0
    assert ledger.state.history == []
