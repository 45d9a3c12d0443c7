from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from .repository import KeyValueStorage

_SAFE_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileStorage(KeyValueStorage):
    """One UTF-8 file per key under ``directory``.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace``, so a reader never sees a half-written value.
    """

    def __init__(self, directory: Path | str):
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY_RE.match(key):
            raise ValueError(f"Unsupported storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self._dir.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
