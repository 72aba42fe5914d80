import hashlib

import pytest

from dmrgateway.sha256 import SHA256, SHA256_DIGEST_SIZE, sha256_digest


def test_abc_known_digest():
    assert sha256_digest(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_empty_known_digest():
    assert sha256_digest(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("size", [0, 1, 55, 56, 63, 64, 65, 119, 120, 127, 128, 200, 1000])
def test_matches_standard_library(size):
    data = bytes(i % 251 for i in range(size))
    digest = sha256_digest(data)
    assert len(digest) == SHA256_DIGEST_SIZE
    assert digest == hashlib.sha256(data).digest()


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 3
    ctx = SHA256()
    for start in range(0, len(data), 37):
        ctx.process_bytes(data[start:start + 37])
    assert ctx.finish() == sha256_digest(data)


def test_process_block_then_bytes():
    data = bytes(range(128)) + b"tail"
    ctx = SHA256()
    ctx.process_block(data[:128])
    ctx.process_bytes(data[128:])
    assert ctx.finish() == hashlib.sha256(data).digest()


def test_process_block_rejects_partial_block():
    with pytest.raises(ValueError):
        SHA256().process_block(b"x" * 63)


def test_buffer_resets_context():
    ctx = SHA256()
    ctx.process_bytes(b"garbage")
    assert ctx.buffer(b"abc") == hashlib.sha256(b"abc").digest()


def test_read_after_finish_returns_same_digest():
    ctx = SHA256()
    ctx.process_bytes(b"hello world")
    digest = ctx.finish()
    assert ctx.read() == digest


def test_reset_returns_initial_state():
    ctx = SHA256()
    initial = ctx.read()
    ctx.process_block(bytes(64))
    assert ctx.read() != initial
    ctx.reset()
    assert ctx.read() == initial