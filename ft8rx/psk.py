"""Reporting received stations to a spot collector as IPFIX-style UDP packets."""

from __future__ import annotations

import random
import socket
import threading
import time
from dataclasses import dataclass, field

DEFAULT_HOST = "report.pskreporter.info"
DEFAULT_PORT = 4739
PROGRAM_NAME = "ft8rx"

# Message header (version, length, time, sequence, random id) followed by
# the record templates for the receiver and the sender records.
HEADER = bytes([
    0x00, 0x0A, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x03, 0x00, 0x2C, 0x99, 0x92, 0x00, 0x04,
    0x00, 0x00,
    0x80, 0x02, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x04, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x08, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x09, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x00, 0x00,
    0x00, 0x02, 0x00, 0x34, 0x99, 0x93, 0x00, 0x06,
    0x80, 0x01, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x05, 0x00, 0x04, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x0A, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x0B, 0x00, 0x01, 0x00, 0x00, 0x76, 0x8F,
    0x80, 0x03, 0xFF, 0xFF, 0x00, 0x00, 0x76, 0x8F,
    0x00, 0x96, 0x00, 0x04,
])

RECEIVER_ID = 0x9992
SENDER_ID = 0x9993

_OFFSET_SIZE = 2
_OFFSET_TIME = 4
_OFFSET_SEQUENCE = 8
_OFFSET_RANDOM = 12


def _int1(value: int) -> bytes:
    return (int(value) & 0xFF).to_bytes(1, "big")


def _int2(value: int) -> bytes:
    return (int(value) & 0xFFFF).to_bytes(2, "big")


def _int4(value: int) -> bytes:
    return (int(value) & 0xFFFFFFFF).to_bytes(4, "big")


def _text(value: str) -> bytes:
    data = value.encode("latin-1", errors="replace")
    if len(data) > 255:
        raise ValueError(f"string too long for a record field: {value!r}")
    return bytes([len(data)]) + data


def _pad(buf: bytearray) -> None:
    buf.extend(bytes((4 - len(buf) % 4) % 4))


@dataclass
class PskMessage:
    """One heard station waiting to be reported."""

    call: str
    grid: str
    freq: int
    snr: int
    seconds: int = field(default_factory=lambda: int(time.time()))


class ReporterWriter:
    """Collects heard stations and sends them in one datagram per batch."""

    def __init__(self, home_call: str, home_grid: str, antenna: str = "",
                 host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        if not home_call or not home_grid:
            raise ValueError("home callsign and grid must both be set")
        self.home_call = home_call
        self.home_grid = home_grid
        self.antenna = antenna
        self.program_name = PROGRAM_NAME
        self.sequence = 1
        self._messages: list[PskMessage] = []
        self._lock = threading.Lock()

        address = socket.gethostbyname(host)
        self._address = (address, int(port))
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

        prefix = bytearray(HEADER)
        prefix[_OFFSET_RANDOM:_OFFSET_RANDOM + 4] = _int4(random.getrandbits(32))

        record = bytearray(_int2(RECEIVER_ID))
        record += b"\x00\x00"
        for value in (self.home_call, self.home_grid, self.program_name, self.antenna):
            record += _text(value)
        _pad(record)
        record[2:4] = _int2(len(record))
        self._prefix = bytes(prefix + record)

    def __enter__(self) -> "ReporterWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def pending(self) -> list[PskMessage]:
        """A copy of the messages waiting to be sent."""
        with self._lock:
            return list(self._messages)

    def add_message(self, call: str, grid: str, frequency: int, snr: int) -> None:
        """Queue a heard station for the next report."""
        with self._lock:
            self._messages.append(PskMessage(call, grid, int(frequency), int(snr)))

    def build_packet(self) -> bytes:
        """Assemble the datagram for the queued messages and current sequence."""
        with self._lock:
            messages = list(self._messages)

        buf = bytearray(self._prefix)
        start = len(buf)
        buf += _int2(SENDER_ID)
        buf += b"\x00\x00"
        for m in messages:
            buf += _text(m.call)
            buf += _int4(m.freq)
            buf += _text("FT8")
            buf += _int1(1)
            buf += _text(m.grid)
            buf += _int4(m.seconds)
        _pad(buf)
        buf[start + 2:start + 4] = _int2(len(buf) - start)

        buf[_OFFSET_SIZE:_OFFSET_SIZE + 2] = _int2(len(buf))
        buf[_OFFSET_TIME:_OFFSET_TIME + 4] = _int4(int(time.time()))
        buf[_OFFSET_SEQUENCE:_OFFSET_SEQUENCE + 4] = _int4(self.sequence)
        return bytes(buf)

    def send_messages(self) -> int:
        """Send all queued messages; returns how many were reported."""
        with self._lock:
            count = len(self._messages)
        if count == 0:
            return 0
        packet = self.build_packet()
        self.sequence += 1
        self._sock.sendto(packet, self._address)
        with self._lock:
            del self._messages[:count]
        return count

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()