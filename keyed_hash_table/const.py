# ==================================================
# keyed_hash_table/const.py
# ==================================================
SECRET_SIZE = 16         # bytes of per‑table hashing key
DIGEST_SIZE = 8          # 64‑bit digest, read little‑endian
DIGEST_FMT = "<Q"
INITIAL_BUCKETS = 8      # first growth step of a zero‑capacity table
LOAD_NUM = 3             # grow when count * LOAD_DEN >= buckets * LOAD_NUM
LOAD_DEN = 4             #   (load factor 0.75)
