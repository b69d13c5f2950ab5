"""Unpacking 77-bit FT8 payloads into readable message text."""

from __future__ import annotations

from typing import NamedTuple, Protocol, Sequence

from .callsign import (
    TABLES,
    charn,
    decode_callsign,
    decode_grid,
    get_bits,
    number_2,
)
from .hashes import HashTable

_REPORT_WORDS = {1: "", 2: "RRR", 3: "RR73", 4: "73"}
_TYPE4_ENDINGS = {1: "RRR", 2: "RR73", 3: "73"}


class CallsignHashes(Protocol):
    def lookup(self, key: int) -> str: ...

    def add_hash(self, key: int, value: str) -> None: ...


class UnpackedMessage(NamedTuple):
    """Decoded message text and whether it is a CQ call."""

    text: str
    is_cq: bool = False


def pack_bits(bits: Sequence[int]) -> bytes:
    """Pack a sequence of bits into bytes, most significant bit first."""
    out = bytearray(max(1, (len(bits) + 7) // 8))
    for i, bit in enumerate(bits):
        if bit:
            out[i // 8] |= 0x80 >> (i % 8)
    return bytes(out)


class MessageUnpacker:
    """Turns CRC-checked payload bits into message text.

    Nonstandard callsigns seen in type 4 messages are remembered in the
    hash table so that later hashed references can be resolved.
    """

    def __init__(self, hash_table: CallsignHashes | None = None) -> None:
        self.hash_table = hash_table if hash_table is not None else HashTable()

    def unpack_message(self, bits: Sequence[int]) -> UnpackedMessage:
        """Decode a payload; the text is empty when nothing valid is coded."""
        i3 = get_bits(bits, 74, 3)
        if i3 == 0:
            return UnpackedMessage(self._type0(bits, get_bits(bits, 71, 3)))
        if i3 in (1, 2):
            return self._type1(bits, i3)
        if i3 == 3:
            return UnpackedMessage(self._type3(bits))
        if i3 == 4:
            return UnpackedMessage(self._type4(bits))
        if i3 == 5:
            return UnpackedMessage(self._type5(bits))
        return UnpackedMessage("")

    def _call(self, d28: int) -> str:
        return decode_callsign(d28, self.hash_table)

    def _type0(self, bits: Sequence[int], n3: int) -> str:
        if n3 == 0:
            return self._free_text(bits)
        if n3 == 1:
            return self._dxpedition(bits)
        if n3 == 3:
            return self._field_day(bits)
        if n3 == 4:
            return self._type3(bits)
        if n3 == 5:
            return self._telemetry(bits)
        return ""

    def _type1(self, bits: Sequence[int], i3: int) -> UnpackedMessage:
        c28a = get_bits(bits, 0, 28)
        r1 = get_bits(bits, 28, 1)
        c28b = get_bits(bits, 29, 28)
        r2 = get_bits(bits, 57, 1)
        big_r = get_bits(bits, 58, 1)
        g15 = get_bits(bits, 59, 15)
        suffix = "/R" if i3 == 1 else "/P"

        c1 = self._call(c28a)
        if c1 == "":
            return UnpackedMessage("")
        is_cq = c1.startswith("CQ")
        if r1:
            c1 += suffix

        c2 = self._call(c28b)
        if c2 == "":
            return UnpackedMessage("")
        if r2:
            c2 += suffix

        result = "type 1/2: " + c1 + " \t" + c2
        if g15 > 100:
            grid = decode_grid(g15)
            result += ("\t R " if big_r else "\t") + grid
        elif g15 in _REPORT_WORDS:
            result += "\t" + _REPORT_WORDS[g15]
        else:
            result += "\t" + ("R" if big_r else "") + number_2(g15 - 35)
        return UnpackedMessage(result, is_cq)

    def _type3(self, bits: Sequence[int]) -> str:
        c1 = self._call(get_bits(bits, 1, 28))
        if c1 == "":
            return ""
        c2 = self._call(get_bits(bits, 29, 28))
        if c2 == "":
            return ""
        serial = get_bits(bits, 62, 13)
        return "type 3: " + c1 + " \t" + c2 + "\t" + str(serial)

    def _type4(self, bits: Sequence[int]) -> str:
        h12 = get_bits(bits, 0, 12)
        c58 = get_bits(bits, 12, 58)
        h1 = get_bits(bits, 70, 1)
        r2 = get_bits(bits, 71, 2)
        cq = get_bits(bits, 73, 1)

        chars = []
        for _ in range(11):
            chars.append(charn(c58 % 38, 5))
            c58 //= 38
        plain_call = "".join(reversed(chars))
        self.hash_table.add_hash(h12, plain_call.strip())

        hashed_call = f"<{h12:x}>"
        first, second = (plain_call, hashed_call) if h1 else (hashed_call, plain_call)
        second = second.strip()

        if cq:
            return "type 4: CQ " + second
        result = ("type 4: " + first).strip() + " " + second
        if r2 in _TYPE4_ENDINGS:
            result += " " + _TYPE4_ENDINGS[r2]
        return result

    def _type5(self, bits: Sequence[int]) -> str:
        h12 = get_bits(bits, 0, 12)
        h22 = get_bits(bits, 12, 22)
        return f"type 5: {h12:x} {h22:x}"

    def _free_text(self, bits: Sequence[int]) -> str:
        packed = pack_bits([0, *bits[:71]])
        n = int.from_bytes(packed, "big")
        chars = []
        for _ in range(13):
            n, rem = divmod(n, 42)
            chars.append(charn(rem, 0))
        text = "".join(reversed(chars))
        return "type 0.0: " + text.strip()

    def _dxpedition(self, bits: Sequence[int]) -> str:
        res1 = self._call(get_bits(bits, 0, 28))
        res2 = self._call(get_bits(bits, 28, 28))
        hashed = self.hash_table.lookup(get_bits(bits, 58, 10))
        report = (get_bits(bits, 68, 5) - 8) * 2
        return f"type 0.1: {res1} \t{res2}\t{hashed}\t{report}"

    def _field_day(self, bits: Sequence[int]) -> str:
        res1 = self._call(get_bits(bits, 0, 28))
        res2 = self._call(get_bits(bits, 28, 28))
        big_r = "R" if get_bits(bits, 56, 1) else ""
        n4 = get_bits(bits, 57, 4)
        k3 = chr(ord("A") + get_bits(bits, 61, 3))
        s7 = get_bits(bits, 64, 7)
        return f"type 0.3: {res1} \t{res2} \t{big_r}{n4}\t{k3} {s7}"

    def _telemetry(self, bits: Sequence[int]) -> str:
        digits = TABLES[2]
        chars = [digits[get_bits(bits, 0, 3)]]
        for index in range(3, 72, 4):
            sym = get_bits(bits, index, 4)
            chars.append(digits[sym] if sym > 0 else "\x00")
        return "type 0.5: " + "".join(chars)