"""Persisted registry of citation hashes that have already been published."""

from __future__ import annotations

from collections.abc import MutableSet
import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10_000


class HashRegistry(MutableSet):
    """Set of hashes that remembers insertion order."""

    def __init__(self, hashes: Iterable[str] = ()):
        self._items: dict[str, None] = dict.fromkeys(hashes)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: str) -> None:
        self._items.setdefault(value, None)

    def discard(self, value: str) -> None:
        self._items.pop(value, None)

    def __repr__(self) -> str:
        return f"HashRegistry({list(self._items)!r})"


class RegistryStore:
    """Loads and saves the hash registry as a JSON array."""

    def __init__(self, path: str | Path, limit: int = DEFAULT_LIMIT):
        self.path = Path(path)
        self.limit = limit

    def load(self) -> HashRegistry:
        """Return the persisted registry, or an empty one if it cannot be read."""

        payload = read_json_list(self.path)
        return HashRegistry(item for item in payload if isinstance(item, str))

    def save(self, hashes: Iterable[str]) -> None:
        """Overwrite the registry file with the most recent ``limit`` hashes."""

        entries = list(hashes)
        if self.limit >= 0 and len(entries) > self.limit:
            entries = entries[len(entries) - self.limit :]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(entries, f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.debug("Saved %d hashes to %s", len(entries), self.path)


def read_json_list(path: Path) -> list:
    """Read a JSON array from ``path``; anything else degrades to ``[]``."""

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable file %s: %s", path, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Ignoring %s: expected a JSON array, got %s", path, type(data).__name__)
        return []
    return data
