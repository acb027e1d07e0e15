"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used entry."""

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        # Most recently used entries sit at the end.
        self._entries: OrderedDict[Hashable, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and mark it used; -1 when absent."""
        if key not in self._entries:
            return self.MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def items(self) -> list[tuple[Hashable, int]]:
        """Entries from most to least recently used."""
        return list(reversed(self._entries.items()))

    def __str__(self) -> str:
        return " ".join(f"{key}:{value}" for key, value in self.items())