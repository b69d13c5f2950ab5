# ft8rx

Building blocks for an FT8 receiver, written in plain Python with no
third-party dependencies. Given the 77 payload bits of a message that has
already been error-corrected and CRC-checked, the package turns them into
readable text, keeps track of hashed callsigns, suppresses repeated decodes
and reports heard stations to a spot-collecting server.

## Modules

- `ft8rx.unpack` — `MessageUnpacker.unpack_message(bits)` returns an
  `UnpackedMessage(text, is_cq)` for standard messages (types 1 and 2),
  free text (0.0), DXpedition (0.1), field day (0.3), RTTY contest (3 and
  0.4), non-standard calls (4), type 5 and telemetry (0.5). An empty text
  means nothing valid was coded. `pack_bits` packs bits into bytes,
  most significant bit first.
- `ft8rx.calls` — `CallExtractor.extract_call(bits)` returns `[call]` or
  `[call, grid]` for the second callsign of a type 1, 2 or 3 message, but
  only the first time that station is seen.
- `ft8rx.callsign` — field decoders: `get_bits`, `charn`,
  `decode_callsign`, `decode_grid`, `cq_code`, `is_cq_token`, `number_2`,
  `number_3`, and the token range constants.
- `ft8rx.hashes` — `HashTable`, hashed callsigns stored one `<KEY:value>`
  line per entry in a file (or kept in memory when the path is `None`);
  unknown keys look up as `"<....>"`.
- `ft8rx.psk` — `ReporterWriter` queues heard stations (`PskMessage`) and
  sends them as one IPFIX-style UDP datagram per call to `send_messages`;
  `build_packet` returns the datagram without sending it. The host name
  is resolved when the writer is created.
- `ft8rx.dlcache` — `DecodeCache`, a ring of 32 recent messages;
  `update` tells whether a message was already known.
- `ft8rx.results` — `ResultLog` keeps every decoded row, the 50 most
  recent lines, and optionally writes lines to a file.
- `ft8rx.tuner` — `Tuner`, VFO/offset/pass-band arithmetic, and
  `frequency_to_string`.
- `ft8rx.settings` — `Settings`, grouped values in an INI file;
  `full_path_for` and `default_ini_path` locate it.
- `ft8rx.identity` — `save_identity` stores the station's callsign, grid
  and antenna, raising `IncompleteIdentityError` if any is empty.
- `ft8rx.slots` — `Semaphore`, a counting semaphore with a timed
  `try_acquire`.

## Examples

Suppressing duplicate decodes:

```python
from ft8rx.dlcache import DecodeCache

cache = DecodeCache(32)
cache.update(12.0, 1500.0, "CQ PA0JAN JO21")   # False: first time seen
cache.update(14.0, 1500.0, "CQ PA0JAN JO21")   # True: already known
```

Decoding callsign tokens and using the hash table:

```python
from ft8rx.callsign import decode_callsign
from ft8rx.hashes import HashTable

decode_callsign(0)              # "DE"
decode_callsign(2)              # "CQ"

table = HashTable(None)         # in memory only
table.add_hash(0x123, "PA0JAN")
table.lookup(0x123)             # "PA0JAN"
table.lookup(0x456)             # "<....>"
```

Displaying a frequency:

```python
from ft8rx.tuner import frequency_to_string

frequency_to_string(14074000)   # "14074000"
```

## What the package does not do

It does not process radio samples: there is no spectrum search, no
synchronisation, no soft-bit extraction and no LDPC error correction, so
it cannot decode FT8 from audio or I/Q data on its own. It has no command
to run, no graphical interface and does not talk to any radio device.
The unpacking functions expect payload bits that were decoded and
checked elsewhere.

## Requirements

Python 3.10 or later.