"""Insertion-ordered map that reports key collisions."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

log = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(kw_only=True, eq=False)
class ConflictMap(Mapping[K, V], Generic[K, V]):
    """Mapping whose inserts keep the latest value and log overwrites.

    A colliding insert with an equal value is silent. A colliding insert with
    a different value replaces the earlier one and logs a warning naming the
    map, so misattributions surface in the run log instead of vanishing.
    """

    name: str
    _items: dict[K, V] = field(default_factory=dict)

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, logging when it replaces another."""
        if key in self._items and self._items[key] != value:
            log.warning(
                "Collision in %s for key %.120s, keeping the latest value",
                self.name,
                key,
            )
        self._items[key] = value

    def update(self, other: Mapping[K, V]) -> None:
        """Insert every entry of ``other``."""
        for key, value in other.items():
            self.insert(key, value)

    def __getitem__(self, key: K) -> V:
        return self._items[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
