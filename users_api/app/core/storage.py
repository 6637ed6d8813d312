"""
JSON file persistence for the user collection.

The whole collection lives in one file as a pretty‑printed JSON array
and is read and rewritten in full on every operation; nothing is cached
between calls.  A missing, unreadable or corrupt file is treated as an
empty collection and reset to ``[]`` on the spot.

Writes go to a sibling ``.tmp`` file which then replaces the backing
file, so readers never observe a half‑written array.  Read‑modify‑write
sequences must go through :meth:`JsonFileStore.transaction`, which holds
the store lock for the whole sequence; this keeps concurrent mutations
from overwriting each other within one process.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .config import settings

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Flat‑file store holding the user collection as a JSON array."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def read_all(self) -> List[Dict[str, Any]]:
        """Load the entire collection.

        Returns an empty list (after resetting the file) when the file is
        absent, cannot be read, is not valid JSON or does not hold a JSON
        array.  Parse and I/O errors never reach the caller.
        """
        with self._lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("Data file %s does not exist, creating it", self.path)
                self.reset()
                return []
            except OSError as exc:
                logger.warning("Cannot read data file %s (%s), resetting it", self.path, exc)
                self.reset()
                return []
            try:
                users = json.loads(raw)
            except json.JSONDecodeError as exc:
                logger.warning("Data file %s is not valid JSON (%s), resetting it", self.path, exc)
                self.reset()
                return []
            if not isinstance(users, list):
                logger.warning("Data file %s does not hold a JSON array, resetting it", self.path)
                self.reset()
                return []
            return users

    def write_all(self, users: List[Dict[str, Any]]) -> None:
        """Replace the file contents with ``users``.

        Raises ``OSError`` when the file cannot be written.
        """
        self._write(json.dumps(users, ensure_ascii=False, indent=2))

    def reset(self) -> None:
        """Truncate the collection to an empty array, creating the file if needed."""
        self._write("[]")

    @contextmanager
    def transaction(self) -> Iterator[List[Dict[str, Any]]]:
        """Yield the collection for in‑place mutation and persist it afterwards.

        The store lock is held from the read until the write completes.
        If the block raises, nothing is written.
        """
        with self._lock:
            users = self.read_all()
            yield users
            self.write_all(users)

    def _write(self, text: str) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self.path)


_store: Optional[JsonFileStore] = None
_store_lock = threading.Lock()


def get_data_path() -> Path:
    """Compute the path of the backing file from ``settings.data_file``.

    Absolute paths are used as is; relative ones are resolved against
    the current working directory.
    """
    return Path(settings.data_file).expanduser().resolve()


def get_store() -> JsonFileStore:
    """Return the process‑wide store for the configured data file.

    A new store is created when ``settings.data_file`` points somewhere
    else than the current one (tests rely on this).
    """
    global _store
    path = get_data_path()
    with _store_lock:
        if _store is None or _store.path != path:
            _store = JsonFileStore(path)
        return _store
