"""Durable key/value storage on the local filesystem.

Each key is a single file holding a string value. Writes go through a
temporary file and ``os.replace`` so a reader never sees a half-written
value.
"""

import os
import re
import tempfile
from pathlib import Path

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """String key/value store, one file per key."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        """Remove a key; removing an absent key is not an error."""
        self._path(key).unlink(missing_ok=True)

    def has_item(self, key: str) -> bool:
        return self._path(key).exists()
