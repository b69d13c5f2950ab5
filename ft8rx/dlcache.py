"""A small ring of recently decoded messages, used to suppress repeats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

CACHE_SIZE = 32
_MASK = CACHE_SIZE - 1


@dataclass(frozen=True)
class CacheEntry:
    """One remembered decode."""

    strength: float = 0.0
    frequency: float = 0.0
    message: str = ""


class DecodeCache:
    """Fixed ring of 32 entries; the size argument is accepted but not used."""

    def __init__(self, size: int = CACHE_SIZE) -> None:
        self._entries = [CacheEntry() for _ in range(CACHE_SIZE)]
        self._next = 0

    def __iter__(self) -> Iterator[CacheEntry]:
        """Entries from oldest to newest."""
        for i in range(self._next, self._next + CACHE_SIZE):
            yield self._entries[i & _MASK]

    def add(self, message: str, strength: float, frequency: float) -> None:
        """Store a message, overwriting the oldest entry."""
        self._entries[self._next] = CacheEntry(strength, frequency, message)
        self._next = (self._next + 1) & _MASK

    def update(self, strength: float, frequency: float, message: str) -> bool:
        """Return True if the message was already known; otherwise remember it.

        A known message seen again with more strength is moved to the
        newest position with the new values.
        """
        p = self._next
        for i in range(p, p + CACHE_SIZE):
            if self._entries[i & _MASK].message != message:
                continue
            if self._entries[i & _MASK].strength < strength:
                for j in range(i, p - 1 + CACHE_SIZE):
                    self._entries[j & _MASK] = self._entries[(j + 1) & _MASK]
                self._entries[(p - 1 + CACHE_SIZE) & _MASK] = CacheEntry(
                    strength, frequency, message
                )
            return True
        self.add(message, strength, frequency)
        return False