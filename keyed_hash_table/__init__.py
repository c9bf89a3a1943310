from .table import KeyedHashTable
from .keyer import Keyer, system_random_bytes, seeded_random_bytes
from .api import (create, create_with_capacity, size, load_factor,
                  insert, get, remove, destroy)
from .stats import BucketStats, bucket_stats

__all__ = [
    "KeyedHashTable",
    "Keyer",
    "system_random_bytes",
    "seeded_random_bytes",
    "create",
    "create_with_capacity",
    "size",
    "load_factor",
    "insert",
    "get",
    "remove",
    "destroy",
    "BucketStats",
    "bucket_stats",
]
