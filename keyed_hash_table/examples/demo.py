# ==================================================
# examples/demo.py
# ==================================================
import argparse, logging.config

from keyed_hash_table import (create, insert, get, remove, size, load_factor,
                              destroy, bucket_stats)
from keyed_hash_table.config import LOGGING


class Text:
    """Stand‑in for a heap string the caller must release."""
    released = 0

    def __init__(self, s: str):
        self.s = s

    def release(self):
        Text.released += 1

    def __str__(self):
        return self.s


def main(argv=None):
    p = argparse.ArgumentParser(description="exercise a keyed hash table")
    p.add_argument("--count", type=int, default=0,
                   help="extra generated keys to insert")
    p.add_argument("--rehash", action="store_true",
                   help="relink chains when the table grows")
    args = p.parse_args(argv)

    table = create(rehash_on_grow=args.rehash or None, dispose=Text.release)

    insert(table, "key1", Text("Hello, World!"))
    print(f"key1: {get(table, 'key1')}")

    old = insert(table, "key1", Text("hello world"))
    if old is not None:
        old.release()
    print(f"key1: {get(table, 'key1')}")

    insert(table, "key2", Text("value"))
    print(f"key2: {get(table, 'key2')}")

    removed = remove(table, "key1")
    if removed is not None:
        removed.release()

    for i in range(args.count):
        old = insert(table, f"key_{i}", Text(f"value_{i}"))
        if old is not None:
            old.release()

    if args.count:
        st = bucket_stats(table)
        print(f"size: {size(table)}  buckets: {st.buckets}  "
              f"load: {load_factor(table):.3f}  longest chain: {st.longest}")

    destroy(table)
    return 0

if __name__ == "__main__":
    logging.config.dictConfig(LOGGING)
    raise SystemExit(main())
