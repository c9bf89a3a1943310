# ==================================================
# keyed_hash_table/stats.py
# ==================================================
from dataclasses import dataclass, field

import numpy as np

from .table import KeyedHashTable


@dataclass
class BucketStats:
    buckets: int = 0
    entries: int = 0
    empty: int = 0
    longest: int = 0
    mean: float = 0.0
    std: float = 0.0
    histogram: list = field(default_factory=list)   # histogram[n] = buckets holding n entries


def bucket_stats(table: KeyedHashTable) -> BucketStats:
    lengths = np.asarray(table.chain_lengths(), dtype=np.int64)
    if lengths.size == 0:
        return BucketStats()
    return BucketStats(
        buckets=int(lengths.size),
        entries=int(lengths.sum()),
        empty=int(np.count_nonzero(lengths == 0)),
        longest=int(lengths.max()),
        mean=float(lengths.mean()),
        std=float(lengths.std()),
        histogram=np.bincount(lengths).tolist(),
    )
