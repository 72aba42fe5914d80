"""Incremental SHA-256 message digest."""

import struct

SHA256_DIGEST_SIZE = 256 // 8

_BLOCK = 64
_MASK = 0xFFFFFFFF

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


class SHA256:
    """SHA-256 context that accepts data in pieces."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return the context to its initial state."""
        self._state = list(_INITIAL_STATE)
        self._total = 0
        self._pending = bytearray()

    def _compress(self, block: bytes) -> None:
        w = list(struct.unpack(">16I", block))
        for t in range(16, 64):
            s0 = _rotr(w[t - 15], 7) ^ _rotr(w[t - 15], 18) ^ (w[t - 15] >> 3)
            s1 = _rotr(w[t - 2], 17) ^ _rotr(w[t - 2], 19) ^ (w[t - 2] >> 10)
            w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK)

        a, b, c, d, e, f, g, h = self._state
        for k, wt in zip(_K, w):
            big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
            choose = g ^ (e & (f ^ g))
            t1 = (h + big_s1 + choose + k + wt) & _MASK
            big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
            majority = (a & b) | (c & (a | b))
            t2 = (big_s0 + majority) & _MASK
            h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK

        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d, e, f, g, h))]

    def process_block(self, data: bytes) -> None:
        """Feed data whose length is a multiple of 64 bytes."""
        if len(data) % _BLOCK != 0:
            raise ValueError(f"block data must be a multiple of {_BLOCK} bytes, got {len(data)}")
        self._total += len(data)
        view = memoryview(bytes(data))
        for start in range(0, len(view), _BLOCK):
            self._compress(view[start:start + _BLOCK].tobytes())

    def process_bytes(self, data: bytes) -> None:
        """Feed data of any length."""
        self._pending.extend(data)
        whole = len(self._pending) - len(self._pending) % _BLOCK
        if whole:
            self.process_block(bytes(self._pending[:whole]))
            del self._pending[:whole]

    def read(self) -> bytes:
        """Return the current state as a 32-byte digest."""
        return struct.pack(">8I", *self._state)

    def _conclude(self) -> None:
        length = self._total + len(self._pending)
        tail = bytes(self._pending) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % _BLOCK)
        tail += struct.pack(">Q", (length << 3) & 0xFFFFFFFFFFFFFFFF)
        self._pending = bytearray()
        self.process_block(tail)

    def finish(self) -> bytes:
        """Pad the message, process what remains and return the digest."""
        self._conclude()
        return self.read()

    def buffer(self, data: bytes) -> bytes:
        """Reset, hash the whole of ``data`` and return the digest."""
        self.reset()
        self.process_bytes(data)
        return self.finish()


def sha256_digest(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256().buffer(data)