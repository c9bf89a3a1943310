# keyed_hash_table/api.py   – function‑style surface over KeyedHashTable
from __future__ import annotations
import logging
from typing import Callable, Optional, TypeVar

from .keyer import RandomBytes
from .table import KeyedHashTable

log = logging.getLogger(__name__)

V = TypeVar("V")

# ── small utils ──────────────────────────────────────────────
def _usable(table) -> bool:
    if isinstance(table, KeyedHashTable) and table.is_valid:
        return True
    log.debug("call on invalid table handle %r ignored", table)
    return False

# ── lifecycle ────────────────────────────────────────────────
def create(random_bytes: RandomBytes | None = None, *,
           rehash_on_grow: bool | None = None,
           dispose: Callable[[V], object] | None = None) -> KeyedHashTable[V]:
    """Zero‑capacity table with a fresh secret; 8 buckets on first insert."""
    return KeyedHashTable(0, random_bytes, rehash_on_grow=rehash_on_grow,
                          dispose=dispose)

def create_with_capacity(bucket_count: int,
                         random_bytes: RandomBytes | None = None, *,
                         rehash_on_grow: bool | None = None,
                         dispose: Callable[[V], object] | None = None) -> KeyedHashTable[V]:
    return KeyedHashTable(bucket_count, random_bytes,
                          rehash_on_grow=rehash_on_grow, dispose=dispose)

def destroy(table: Optional[KeyedHashTable]) -> None:
    if isinstance(table, KeyedHashTable):
        table.destroy()

# ── queries ──────────────────────────────────────────────────
def size(table: Optional[KeyedHashTable]) -> int:
    return table.size() if _usable(table) else 0

def load_factor(table: Optional[KeyedHashTable]) -> float:
    return table.load_factor() if _usable(table) else 0.0

# ── key operations ───────────────────────────────────────────
def insert(table: Optional[KeyedHashTable[V]], key: str, value: V) -> Optional[V]:
    """Returns the replaced value (now owned by the caller) or None."""
    return table.insert(key, value) if _usable(table) else None

def get(table: Optional[KeyedHashTable[V]], key: str) -> Optional[V]:
    """Borrowed reference; the table keeps ownership."""
    return table.get(key) if _usable(table) else None

def remove(table: Optional[KeyedHashTable[V]], key: str) -> Optional[V]:
    """Hands ownership of the removed value to the caller."""
    return table.remove(key) if _usable(table) else None
