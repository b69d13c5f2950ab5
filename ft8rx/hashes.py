"""Persistent table of hashed callsigns."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

MISSING = "<....>"
"""What a lookup yields for a hash that has not been seen."""

DEFAULT_PATH = "/tmp/xxx"


def _parse_line(line: str) -> tuple[int, str] | None:
    line = line.rstrip("\r\n")
    if not line.startswith("<") or ":" not in line:
        return None
    body = line[1:]
    if body.endswith(">"):
        body = body[:-1]
    key_text, value = body.split(":", 1)
    try:
        key = int(key_text, 16)
    except ValueError:
        return None
    return key, value


class HashTable:
    """Maps callsign hashes to the callsigns they were seen with.

    The table is read from ``path`` when created and written back by
    :meth:`save` (or when used as a context manager). A path of ``None``
    keeps the table in memory only.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._table: dict[int, str] = {}
        if self.path is not None:
            self._read()

    def __enter__(self) -> "HashTable":
        return self

    def __exit__(self, *exc: object) -> None:
        self.save()

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self._table.items())

    def _read(self) -> None:
        try:
            text = self.path.read_text(encoding="latin-1")
        except OSError:
            return
        for line in text.splitlines():
            entry = _parse_line(line)
            if entry is not None:
                self._table.setdefault(*entry)

    def add_hash(self, key: int, value: str) -> None:
        """Remember a callsign for a hash; a key already known is kept."""
        self._table.setdefault(int(key), value)

    def lookup(self, key: int) -> str:
        """Return the callsign for a hash, or ``"<....>"`` if unknown."""
        return self._table.get(int(key), MISSING)

    def save(self) -> None:
        """Write the table to its file, one ``<KEY:value>`` line per entry."""
        if self.path is None:
            return
        lines = "".join(f"<{key:X}:{value}>\n" for key, value in self._table.items())
        try:
            self.path.write_text(lines, encoding="latin-1", errors="replace")
        except OSError:
            return