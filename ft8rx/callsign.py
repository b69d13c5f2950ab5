"""Bit extraction and callsign, report and grid decoding for FT8 payloads."""

from __future__ import annotations

from typing import Protocol, Sequence

from .hashes import MISSING

CQ_3DIGITS = 3
CQ_3DIGITS_E = 1002
CQ_1LETTER = 1004
CQ_1LETTER_E = 1029
CQ_2LETTER = 1031
CQ_2LETTER_E = 1731
CQ_3LETTER = 1760
CQ_3LETTER_E = 20685
CQ_4LETTER = 21443
CQ_4LETTER_E = 532443
HASH_START = 2063592
HASH_END = HASH_START + 4194304

TABLES = (
    " 0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ+-./?",
    " 0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "0123456789",
    " ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    " 0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ/",
)

_SPECIAL = ("DE", "QRZ", "CQ")
_CALL_DIVISORS = (27, 27, 27, 10, 36, 37)
_CALL_TABLES = (4, 4, 4, 3, 2, 1)


class HashLookup(Protocol):
    def lookup(self, key: int) -> str: ...


def get_bits(bits: Sequence[int], offset: int, amount: int) -> int:
    """Read ``amount`` bits from ``offset`` as a big-endian unsigned integer."""
    chunk = bits[offset:offset + amount]
    if offset < 0 or len(chunk) != amount:
        raise IndexError(f"cannot read {amount} bits at offset {offset}")
    value = 0
    for bit in chunk:
        value = (value << 1) | (int(bit) & 1)
    return value


def charn(c: int, table_idx: int) -> str:
    """Character ``c`` of alphabet ``table_idx``; '?' for a bad table, '_' out of range."""
    if not 0 <= table_idx < len(TABLES):
        return "?"
    table = TABLES[table_idx]
    if 0 <= c < len(table):
        return table[c]
    return "_"


def number_2(number: int) -> str:
    """Signed two-digit signal report, e.g. ``+05`` or ``-12``."""
    sign = "+" if number >= 0 else "-"
    number = abs(number)
    if number > 100:
        return "-00"
    return sign + chr(ord("0") + number // 10) + chr(ord("0") + number % 10)


def number_3(number: int) -> str:
    """Three-digit zero-padded number as used in ``CQ nnn``."""
    if not 0 <= number <= 999:
        raise ValueError(f"not a three-digit number: {number}")
    return f"{number:03d}"


def cq_code(data: int, size: int) -> str:
    """Directed CQ of ``size`` letters; leading blanks collapse to one."""
    chars = []
    for _ in range(size):
        chars.append(charn(data % 27, 4))
        data //= 27
    text = "".join(reversed(chars))
    stripped = text.lstrip(" ")
    if len(stripped) < len(text):
        stripped = " " + stripped
    return "CQ_" + stripped


def is_cq_token(value: int) -> bool:
    """Whether a 28-bit token is plain or directed CQ."""
    return (
        value == 2
        or CQ_3DIGITS <= value <= CQ_3DIGITS_E
        or CQ_1LETTER <= value <= CQ_1LETTER_E
        or CQ_2LETTER <= value <= CQ_2LETTER_E
        or CQ_3LETTER <= value <= CQ_3LETTER_E
        or CQ_4LETTER <= value <= CQ_4LETTER_E
    )


def decode_grid(g15: int) -> str:
    """Four-character Maidenhead locator from a 15-bit value."""
    n = int(g15)
    d3 = chr(ord("0") + n % 10)
    n //= 10
    d2 = chr(ord("0") + n % 10)
    n //= 10
    d1 = chr(ord("A") + n % 18)
    n //= 18
    d0 = chr(ord("A") + n % 18)
    return d0 + d1 + d2 + d3


def decode_callsign(d28: int, hash_table: HashLookup | None = None) -> str:
    """Decode a 28-bit callsign field; returns "" where nothing valid is coded."""
    d28 = int(d28)
    if d28 < HASH_START:
        if d28 < 3:
            return _SPECIAL[d28]
        if d28 <= CQ_3DIGITS_E:
            return "CQ " + number_3(d28 - CQ_3DIGITS)
        if CQ_1LETTER <= d28 <= CQ_1LETTER_E:
            return "CQ" + charn(d28 - CQ_1LETTER, 4)
        if CQ_2LETTER <= d28 <= CQ_2LETTER_E:
            return cq_code(d28 - CQ_2LETTER, 2)
        if CQ_3LETTER <= d28 <= CQ_3LETTER_E:
            return cq_code(d28 - CQ_3LETTER, 3)
        if CQ_4LETTER <= d28 <= CQ_4LETTER_E:
            return cq_code(d28 - CQ_4LETTER, 4)
        return ""

    if d28 < HASH_END:
        if hash_table is None:
            return MISSING
        return hash_table.lookup((d28 - HASH_START) & 0xFFF)

    n = d28 - HASH_END
    chars = []
    for divisor, table in zip(_CALL_DIVISORS, _CALL_TABLES):
        chars.append(charn(n % divisor, table))
        n //= divisor
    return "".join(reversed(chars)).strip()