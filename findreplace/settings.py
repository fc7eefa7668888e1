"""Grouped key/value settings store persisted as JSON."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

__all__ = ["Settings"]


class Settings:
    """Key/value settings with nested groups, optionally backed by a JSON file.

    Keys inside a group are stored as ``group/key``.  With ``path`` set to
    None the store lives in memory only.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._values: dict[str, Any] = {}
        self._groups: list[str] = []
        if self._path is not None and self._path.exists():
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"settings file {self._path} does not hold an object")
            self._values.update(data)

    @property
    def path(self) -> Path | None:
        return self._path

    @contextmanager
    def group(self, prefix: str) -> Iterator[Settings]:
        """Scope all keys used inside the block under ``prefix``."""
        self._groups.append(prefix.strip("/"))
        try:
            yield self
        finally:
            self._groups.pop()

    def _full_key(self, key: str) -> str:
        return "/".join(part for part in (*self._groups, key) if part)

    def set_value(self, key: str, value: Any) -> None:
        self._values[self._full_key(key)] = value

    def value(self, key: str, default: Any = None) -> Any:
        return self._values.get(self._full_key(key), default)

    def __contains__(self, key: str) -> bool:
        return self._full_key(key) in self._values

    def keys(self) -> list[str]:
        """Keys under the current group, relative to it."""
        prefix = self._full_key("")
        if not prefix:
            return sorted(self._values)
        head = prefix + "/"
        return sorted(k[len(head):] for k in self._values if k.startswith(head))

    def sync(self) -> None:
        """Write the store to its file; does nothing for an in-memory store."""
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8"
        )