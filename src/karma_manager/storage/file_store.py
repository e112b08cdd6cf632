from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageError
from .repository import KeyValueStore

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.\-]+$")


class JsonFileStore(KeyValueStore):
    """One file per key inside a directory (``<dir>/<key>.json``).

    Writes go to a temporary file in the same directory, then ``os.replace``
    swaps it in, so readers see either the old or the new payload.
    """

    def __init__(self, directory: str | Path):
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError(f"Invalid store key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e
