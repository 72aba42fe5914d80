"""Insertion of DMR sync patterns into a frame."""

from .defines import (
    BS_SOURCED_AUDIO_SYNC,
    BS_SOURCED_DATA_SYNC,
    MS_SOURCED_AUDIO_SYNC,
    MS_SOURCED_DATA_SYNC,
    SYNC_MASK,
)

_SYNC_OFFSET = 13


def _apply_sync(data: bytes, pattern: bytes) -> bytes:
    end = _SYNC_OFFSET + len(SYNC_MASK)
    if len(data) < end:
        raise ValueError(f"frame too short for sync: {len(data)} < {end} bytes")
    frame = bytearray(data)
    for offset, (mask, sync) in enumerate(zip(SYNC_MASK, pattern), _SYNC_OFFSET):
        frame[offset] = (frame[offset] & ~mask & 0xFF) | sync
    return bytes(frame)


def add_dmr_data_sync(data: bytes, duplex: bool) -> bytes:
    """Return a copy of the frame carrying the BS (duplex) or MS data sync."""
    return _apply_sync(data, BS_SOURCED_DATA_SYNC if duplex else MS_SOURCED_DATA_SYNC)


def add_dmr_audio_sync(data: bytes, duplex: bool) -> bytes:
    """Return a copy of the frame carrying the BS (duplex) or MS audio sync."""
    return _apply_sync(data, BS_SOURCED_AUDIO_SYNC if duplex else MS_SOURCED_AUDIO_SYNC)