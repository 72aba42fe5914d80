"""Hex dumps and bit/byte conversions."""

import logging
from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

_BYTES_PER_LINE = 16


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hex_dump_lines(data: bytes) -> Iterator[str]:
    """Yield hex dump lines of 16 bytes each, with offset and printable text."""
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset:offset + _BYTES_PER_LINE]
        hex_part = "".join(f"{b:02X} " for b in chunk)
        hex_part += "   " * (_BYTES_PER_LINE - len(chunk))
        text = "".join(_printable(b) for b in chunk)
        yield f"{offset:04X}:  {hex_part}   *{text}*"


def dump(title: str, data: bytes, level: int = logging.DEBUG) -> None:
    """Log a title followed by a hex dump of the data."""
    logger.log(level, "%s", title)
    for line in hex_dump_lines(data):
        logger.log(level, "%s", line)


def _pack_bits(bits: Sequence[bool]) -> bytes:
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = list(bits[start:start + 8])
        chunk.extend([False] * (8 - len(chunk)))
        out.append(bits_to_byte_be(chunk))
    return bytes(out)


def dump_bits(title: str, bits: Sequence[bool], level: int = logging.DEBUG) -> None:
    """Log a hex dump of bits packed most significant bit first."""
    dump(title, _pack_bits(bits), level)


def byte_to_bits_be(byte: int) -> list[bool]:
    """Unpack a byte into eight bits, most significant first."""
    return [bool(byte & (0x80 >> i)) for i in range(8)]


def byte_to_bits_le(byte: int) -> list[bool]:
    """Unpack a byte into eight bits, least significant first."""
    return [bool(byte & (0x01 << i)) for i in range(8)]


def _first_eight(bits: Iterable[bool]) -> list[bool]:
    head = list(bits)[:8]
    if len(head) < 8:
        raise ValueError(f"eight bits are needed, got {len(head)}")
    return head


def bits_to_byte_be(bits: Iterable[bool]) -> int:
    """Pack the first eight bits, most significant first, into a byte."""
    value = 0
    for bit in _first_eight(bits):
        value = (value << 1) | int(bool(bit))
    return value


def bits_to_byte_le(bits: Iterable[bool]) -> int:
    """Pack the first eight bits, least significant first, into a byte."""
    return sum(1 << i for i, bit in enumerate(_first_eight(bits)) if bit)