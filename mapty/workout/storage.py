"""Durable key/value surfaces backing the workout store."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol


def _default_storage_dir() -> Path:
    return Path.home() / ".mapty" / "storage"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """One ``<key>.json`` file per key; each write replaces the file whole."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._root = base_dir or _default_storage_dir()

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        return self._root / f"{key}.json"

    def get(self, key: str) -> str | None:
        target = self._path(key)
        if not target.exists():
            return None
        return target.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._root.mkdir(parents=True, exist_ok=True)
        target = self._path(key)
        tmp = target.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, target)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
