# dmrgateway

Building blocks for a DMR (Digital Mobile Radio) network gateway, in plain Python
with no third-party dependencies.

## What is inside

- `dmrgateway.defines` – DMR frame sizes, sync patterns, CRC masks, data types,
  `VERSION`, and the `FLCO` enumeration (group call, user-to-user call, talker
  alias, GPS info).
- `dmrgateway.sync` – `add_dmr_data_sync(data, duplex)` and
  `add_dmr_audio_sync(data, duplex)` return a copy of a DMR frame with the
  base-station (`duplex=True`) or mobile-station sync pattern written at bytes
  13–19. A frame shorter than 20 bytes raises `ValueError`.
- `dmrgateway.utils` – hex dumps to the `logging` module (`dump`, `dump_bits`),
  the dump lines themselves (`hex_dump_lines`), and bit/byte conversions in both
  bit orders (`byte_to_bits_be`, `byte_to_bits_le`, `bits_to_byte_be`,
  `bits_to_byte_le`).
- `dmrgateway.timer` – `Timer`, a timeout counter advanced by explicit
  `clock(ticks)` calls.
- `dmrgateway.stopwatch` – `StopWatch`: `time()` gives wall-clock milliseconds,
  `start()` and `elapsed()` measure monotonic milliseconds.
- `dmrgateway.ringbuffer` – `RingBuffer`, a fixed-size FIFO that holds at most
  `length - 1` items. It raises `RingBufferOverflow` (after clearing itself) when
  data does not fit and `RingBufferUnderflow` when too many items are requested.
- `dmrgateway.sha256` – an incremental `SHA256` hasher (`process_bytes`,
  `process_block`, `finish`, `read`, `buffer`, `reset`) and `sha256_digest(data)`.
- `dmrgateway.udpsocket` – `UDPSocket` (bound only when a non-zero local port is
  given, non-blocking `read`, usable as a context manager), `lookup`, `match`
  with `IPMatchType`, and `is_none`. Addresses are `(family, sockaddr)` tuples.
- `dmrgateway.thread` – `Thread`, an abstract base class whose `entry()` runs on
  a background thread after `run()`; `wait()` joins it.

## Installation

```
pip install .
```

## Examples

Adding sync to a frame:

```python
from dmrgateway.sync import add_dmr_audio_sync

frame = add_dmr_audio_sync(bytes(33), duplex=True)
```

Counting down a timeout:

```python
from dmrgateway.timer import Timer

timer = Timer(1000)         # 1000 ticks per second
timer.start(2, 0)           # 2 second timeout
timer.clock(2000)
assert timer.has_expired()
```

Buffering samples:

```python
from dmrgateway.ringbuffer import RingBuffer

ring = RingBuffer(100, "network")
ring.add_data(b"\x01\x02\x03")
assert ring.get_data(3) == [1, 2, 3]
```

Hashing:

```python
from dmrgateway.sha256 import sha256_digest

digest = sha256_digest(b"abc")   # 32 bytes
```

Exchanging datagrams:

```python
from dmrgateway.udpsocket import UDPSocket, lookup

with UDPSocket("127.0.0.1", 62031) as sock:
    peer = lookup("127.0.0.1", 62032)
    sock.write(b"ping", peer)
    reply = sock.read(512)   # (data, sender) or None when nothing is waiting
```

Socket errors (failed lookups, bind or send failures) are raised as the
`socket` module's exceptions after being logged.

## What this package does not do

This is a library of parts, not a gateway. It has no command to run, reads no
configuration file, does not speak any DMR network protocol, does not route or
rewrite calls between networks, and does not encode or decode link control,
embedded signalling or voice data.

## Running the tests

```
pip install .[test]
pytest
```