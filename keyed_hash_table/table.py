# ==================================================
# keyed_hash_table/table.py
# ==================================================
"""
Chained hash table keyed by text, hashed with a per‑table secret.

Not thread‑safe: there is no internal locking. Callers sharing one table
between threads must serialize every call (one lock per table).
"""
from __future__ import annotations
import logging
from typing import Callable, Generic, Optional, TypeVar

from . import config
from .const import INITIAL_BUCKETS, LOAD_NUM, LOAD_DEN
from .keyer import Keyer, RandomBytes

log = logging.getLogger(__name__)

V = TypeVar("V")


class _Entry:
    __slots__ = ("key", "value", "next")
    def __init__(self, key: str, value):
        self.key = key
        self.value = value
        self.next: Optional[_Entry] = None


class KeyedHashTable(Generic[V]):
    """Text key → owned value map. Chains are never rehashed on growth
    unless the table is built with ``rehash_on_grow=True``."""

    def __init__(self, bucket_count: int = 0,
                 random_bytes: RandomBytes | None = None, *,
                 rehash_on_grow: bool | None = None,
                 dispose: Callable[[V], object] | None = None):
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
            raise TypeError("bucket_count must be an int")
        if bucket_count < 0:
            raise ValueError("bucket_count must not be negative")

        self._keyer = Keyer(random_bytes)
        self._rehash_on_grow = (config.REHASH_ON_GROW if rehash_on_grow is None
                                else bool(rehash_on_grow))
        self._dispose = dispose
        self._count = 0
        self._bucket_count = 0
        self._failed_grow = 0          # last target size that could not be allocated
        self._buckets: list[Optional[_Entry]] | None = []

        if bucket_count:
            try:
                self._buckets = [None] * bucket_count
            except (MemoryError, OverflowError):
                log.warning("cannot allocate %d buckets, table unusable", bucket_count)
                self._buckets = None
            else:
                self._bucket_count = bucket_count

    # ------------------------------------------------------------------
    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def rehash_on_grow(self) -> bool:
        return self._rehash_on_grow

    @property
    def is_valid(self) -> bool:
        return self._buckets is not None

    def size(self) -> int:
        return self._count

    def __len__(self):
        return self._count

    def load_factor(self) -> float:
        if self._bucket_count == 0:
            return 0.0
        return self._count / self._bucket_count

    def chain_lengths(self) -> list[int]:
        lengths = []
        for head in self._buckets or ():
            n = 0
            while head is not None:
                n += 1
                head = head.next
            lengths.append(n)
        return lengths

    def __repr__(self):
        return (f"KeyedHashTable(size={self._count}, "
                f"buckets={self._bucket_count}, valid={self.is_valid})")

    # -- growth policy -------------------------------------------------
    def _grow_if_needed(self):
        if self._bucket_count == 0:
            self._grow(INITIAL_BUCKETS)
        elif self._count * LOAD_DEN >= self._bucket_count * LOAD_NUM:
            self._grow(self._bucket_count * 2)

    def _grow(self, new_buckets: int):
        old_buckets = self._bucket_count
        if old_buckets >= new_buckets:
            return
        try:
            self._buckets.extend([None] * (new_buckets - old_buckets))
        except (MemoryError, OverflowError):
            if new_buckets != self._failed_grow:
                log.warning("cannot grow from %d to %d buckets, keeping %d",
                            old_buckets, new_buckets, old_buckets)
                self._failed_grow = new_buckets
            return
        self._bucket_count = new_buckets
        log.debug("grew from %d to %d buckets at %d entries",
                  old_buckets, new_buckets, self._count)
        if self._rehash_on_grow and old_buckets:
            self._relink(old_buckets)

    def _relink(self, old_buckets: int):
        # move every node of the old slots to the chain its digest selects now
        nodes = []
        for i in range(old_buckets):
            node = self._buckets[i]
            self._buckets[i] = None
            while node is not None:
                nodes.append(node)
                node = node.next

        tails: dict[int, _Entry] = {}
        for node in nodes:
            node.next = None
            idx = self._bucket_of(node.key)
            tail = tails.get(idx)
            if tail is None:
                self._buckets[idx] = node
            else:
                tail.next = node
            tails[idx] = node

    # ------------------------------------------------------------------
    def _bucket_of(self, key: str) -> int:
        return self._keyer.digest(key) % self._bucket_count

    def _accepts(self, op: str, key) -> bool:
        if self._buckets is None:
            log.debug("%s(%r) on invalid table ignored", op, key)
            return False
        if not isinstance(key, str):
            log.debug("%s() with non-text key %r ignored", op, key)
            return False
        return True

    # ------------------------------------------------------------------
    def insert(self, key: str, value: V) -> Optional[V]:
        """
        Store ``value`` under ``key``; the table owns it from now on.
        • new key  → returns None
        • existing → value replaced in place, previous value returned
          (disposing of it is the caller's job)
        """
        if not self._accepts("insert", key):
            return None

        self._grow_if_needed()
        if self._bucket_count == 0:                       # growth failed
            return None

        idx = self._bucket_of(key)
        node = self._buckets[idx]
        if node is None:
            self._buckets[idx] = _Entry(key, value)
            self._count += 1
            return None

        while True:
            if node.key == key:
                old_value = node.value
                node.value = value
                return old_value
            if node.next is None:
                break
            node = node.next

        node.next = _Entry(key, value)
        self._count += 1
        return None

    def get(self, key: str) -> Optional[V]:
        if not self._accepts("get", key) or self._bucket_count == 0:
            return None

        node = self._buckets[self._bucket_of(key)]
        while node is not None:
            if node.key == key:
                return node.value
            node = node.next
        return None

    def remove(self, key: str) -> Optional[V]:
        """Unlink ``key`` and hand its value back to the caller."""
        if not self._accepts("remove", key) or self._bucket_count == 0:
            return None

        idx = self._bucket_of(key)
        prev = None
        node = self._buckets[idx]
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._buckets[idx] = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._count -= 1
                return node.value
            prev, node = node, node.next
        return None

    # -- lifecycle -----------------------------------------------------
    def destroy(self):
        """Release every entry; owned values go through ``dispose`` if set.
        The table is invalid afterwards. Safe to call twice."""
        buckets = self._buckets
        if buckets is None:
            return
        self._buckets = None
        self._bucket_count = 0
        self._count = 0

        dispose = self._dispose
        self._dispose = None
        pending = []
        for head in buckets:
            node = head
            while node is not None:
                nxt = node.next
                pending.append(node.value)
                node.key = node.value = node.next = None
                node = nxt
        buckets.clear()

        if dispose is None:
            return
        first_error = None
        for value in pending:
            try:
                dispose(value)
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
