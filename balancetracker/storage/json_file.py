"""Mini README: File-backed storage, one JSON document per key.

Structure:
    * JsonFileStorage - maps ``key`` to ``<directory>/<key>.json``.

Writes go to a temporary file in the same directory which then replaces the
target, so a reader sees either the previous snapshot or the new one.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..logging_utils import get_logger
from .base import KeyValueStorage

LOGGER = get_logger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStorage(KeyValueStorage):
    """Persist values as UTF-8 files inside ``directory``."""

    backend_name = "json-file"

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        LOGGER.debug("JSON file storage rooted at %s", self.directory)

    def path_for(self, key: str) -> Path:
        """Return the file backing ``key``."""

        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Storage key {key!r} is not a safe file name.")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        descriptor, temp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(temp_name, path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote %s bytes to %s", len(value), path)
