import pytest

from keyed_hash_table import create, create_with_capacity, seeded_random_bytes


@pytest.fixture
def rng():
    return seeded_random_bytes(1234)


@pytest.fixture
def table(rng):
    t = create(rng, rehash_on_grow=False)
    yield t
    t.destroy()


@pytest.fixture
def rehashing_table(rng):
    t = create(rng, rehash_on_grow=True)
    yield t
    t.destroy()


@pytest.fixture
def keys():
    return [f"key_{i}" for i in range(500)]


class NoRoomList(list):
    """Bucket storage that refuses to grow."""
    def extend(self, items):
        raise MemoryError


@pytest.fixture
def single_bucket_table(rng):
    t = create_with_capacity(1, rng)
    t._buckets = NoRoomList(t._buckets)
    yield t
    t.destroy()


@pytest.fixture
def no_room():
    return NoRoomList
