# ==================================================
# keyed_hash_table/keyer.py
# ==================================================
from __future__ import annotations
import os, random, struct
from hashlib import blake2b
from typing import Callable

from .const import SECRET_SIZE, DIGEST_SIZE, DIGEST_FMT

RandomBytes = Callable[[int], bytes]

# -- random‑bytes providers ------------------------------------------------
def system_random_bytes(n: int) -> bytes:
    return os.urandom(n)

def seeded_random_bytes(seed: int) -> RandomBytes:
    """Deterministic provider; every table built from it gets the same
    sequence of secrets. Only meant for reproducible tests."""
    rng = random.Random(seed)
    return rng.randbytes

# --------------------------------------------------------------------------
class Keyer:
    """Keyed 64‑bit digest of text keys (BLAKE2b in MAC mode)."""
    __slots__ = ("_secret",)

    def __init__(self, random_bytes: RandomBytes | None = None):
        secret = (random_bytes or system_random_bytes)(SECRET_SIZE)
        if not isinstance(secret, (bytes, bytearray)):
            raise TypeError("random_bytes must return bytes")
        if len(secret) != SECRET_SIZE:
            raise ValueError(f"random_bytes returned {len(secret)} bytes, "
                             f"expected {SECRET_SIZE}")
        self._secret = bytes(secret)

    def digest(self, key: str) -> int:
        h = blake2b(key.encode("utf-8", "surrogatepass"), digest_size=DIGEST_SIZE,
                    key=self._secret).digest()
        return struct.unpack(DIGEST_FMT, h)[0]

    def __repr__(self):
        return "Keyer(<secret>)"
