"""Deterministic synthetic data helpers for benchmarks.

Kept inside `src/` so benchmarking/reporting does not depend on the test package.
"""

from __future__ import annotations

import random
import zlib


def deterministic_random_bytes(length: int, *, seed: int) -> bytes:
    rng = random.Random(seed)
    return rng.randbytes(int(length))


def zeros(length: int) -> bytes:
    return b"\x00" * int(length)


def repeat_byte(length: int, value: int) -> bytes:
    return bytes([int(value) & 0xFF]) * int(length)


def text_like(length: int, *, seed: int) -> bytes:
    """ASCII text built from a small vocabulary (typical low-entropy metadata)."""

    rng = random.Random(seed)
    words = [b"volume", b"inode", b"block", b"superblock", b"journal", b"bitmap", b"\n", b" "]
    out = bytearray()
    while len(out) < length:
        out += rng.choice(words)
    return bytes(out[: int(length)])


def compressed_like(length: int, *, seed: int) -> bytes:
    """zlib output of random-ish text; scores like ciphertext on entropy alone."""

    rng = random.Random(seed)
    out = bytearray()
    while len(out) < length:
        chunk = bytes(rng.getrandbits(7) for _ in range(4096))
        out += zlib.compress(chunk, 9)
    return bytes(out[: int(length)])
