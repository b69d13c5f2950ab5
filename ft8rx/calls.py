"""Extracting newly heard callsigns and locators for spot reporting."""

from __future__ import annotations

from typing import Protocol, Sequence

from .callsign import HASH_END, decode_callsign, decode_grid, get_bits
from .hashes import HashTable


class CallsignLookup(Protocol):
    def lookup(self, key: int) -> str: ...


class CallExtractor:
    """Yields the caller of each message once, with its locator if given."""

    def __init__(self, hash_table: CallsignLookup | None = None) -> None:
        self.hash_table = hash_table if hash_table is not None else HashTable()
        self._seen: set[int] = set()

    def extract_call(self, bits: Sequence[int]) -> list[str]:
        """Return [call] or [call, grid] for a station not reported before."""
        i3 = get_bits(bits, 74, 3)
        if i3 in (1, 2):
            return self._from_standard(bits)
        if i3 == 3:
            return self._from_type3(bits)
        return []

    def _first_sighting(self, c28: int) -> str | None:
        if c28 <= HASH_END or c28 in self._seen:
            return None
        self._seen.add(c28)
        return decode_callsign(c28, self.hash_table)

    def _from_standard(self, bits: Sequence[int]) -> list[str]:
        call = self._first_sighting(get_bits(bits, 29, 28))
        if call is None:
            return []
        g15 = get_bits(bits, 59, 15)
        if g15 == 0:
            return [call]
        grid = decode_grid(g15)
        if grid[0] in ("A", "R"):
            return [call]
        return [call, grid]

    def _from_type3(self, bits: Sequence[int]) -> list[str]:
        call = self._first_sighting(get_bits(bits, 30, 28))
        return [] if call is None else [call]