"""Mini README: Shared fixtures keeping tests away from the real data directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from balancetracker.configuration import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the data directory at a temporary folder and reload settings."""

    data_directory = tmp_path / "data"
    monkeypatch.setenv("BALANCE_TRACKER_DATA_DIRECTORY", str(data_directory))
    get_settings.cache_clear()
    yield data_directory
    get_settings.cache_clear()
