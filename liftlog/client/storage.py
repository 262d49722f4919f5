"""Best-effort key-value side store for client-local data (drafts, routines).

Storage failures never reach the caller: load returns None, save and clear
become no-ops, and the failure is logged at debug level.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def load(self, key: str) -> Any | None: ...

    def save(self, key: str, value: Any) -> None: ...

    def clear(self, key: str) -> None: ...


class MemoryStore:
    """In-process store; values are kept as JSON text like the file store."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.debug("Ignoring malformed value for %s", key)
            return None

    def save(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError):
            logger.debug("Could not serialize value for %s", key)

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """One JSON document per key under `directory`, written atomically."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)
        return self.directory / f"{safe}.json"

    def load(self, key: str) -> Any | None:
        path = self._path(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError:
            logger.debug("Could not read %s", path, exc_info=True)
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.debug("Ignoring malformed JSON in %s", path)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            payload = json.dumps(value, indent=2, sort_keys=True) + "\n"
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile("w", dir=path.parent, delete=False, encoding="utf-8") as tmp:
                tmp.write(payload)
                temp_path = Path(tmp.name)
            temp_path.replace(path)
        except (OSError, TypeError, ValueError):
            logger.debug("Could not write %s", path, exc_info=True)

    def clear(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove %s", self._path(key), exc_info=True)
