from unittest.mock import patch

from keyed_hash_table import create, create_with_capacity


def _bucket_counts_while_filling(t, keys):
    counts = []
    for i, k in enumerate(keys):
        t.insert(k, i)
        counts.append(t.bucket_count)
    return counts


def test_first_insert_allocates_eight_buckets(table):
    table.insert("k", 1)
    assert table.bucket_count == 8


def test_doubles_once_load_reaches_three_quarters(table, keys):
    counts = _bucket_counts_while_filling(table, keys[:25])
    # growth is checked before the insert: 6/8, 12/16 and 24/32 trip it
    assert counts[:6] == [8] * 6
    assert counts[6:12] == [16] * 6
    assert counts[12:24] == [32] * 12
    assert counts[24] == 64


def test_growth_schedule_does_not_depend_on_rehashing(table, rehashing_table, keys):
    assert (_bucket_counts_while_filling(table, keys)
            == _bucket_counts_while_filling(rehashing_table, keys))


def test_load_below_three_quarters_right_after_growth(table, keys):
    for k in keys:
        before = table.bucket_count
        count = table.size()
        table.insert(k, k)
        if table.bucket_count != before and before:
            assert count * 4 < table.bucket_count * 3
            assert count / table.bucket_count < 0.75


def test_bucket_count_never_shrinks(rehashing_table, keys):
    t = rehashing_table
    for k in keys[:100]:
        t.insert(k, k)
    grown = t.bucket_count
    for k in keys[:100]:
        assert t.remove(k) == k
    assert t.size() == 0
    assert t.bucket_count == grown


def test_explicit_capacity_follows_same_rule(rng):
    t = create_with_capacity(4, rng)
    for k in ("a", "b", "c"):
        t.insert(k, k)
    assert t.bucket_count == 4
    t.insert("d", "d")
    assert t.bucket_count == 8


def test_entries_inserted_before_growth_are_only_found_when_bucket_index_unchanged(table, keys):
    # Growth only appends empty slots. An entry stays in the slot chosen
    # under the old bucket count, while lookups use the new one.
    early = keys[:6]
    for k in early:
        table.insert(k, k)
    assert table.bucket_count == 8

    table.insert(keys[6], keys[6])
    assert table.bucket_count == 16

    for k in early:
        digest = table._keyer.digest(k)
        reachable = digest % 8 == digest % 16
        assert (table.get(k) == k) == reachable
        if not reachable:
            assert table.remove(k) is None
    assert table.size() == 7
    assert sum(table.chain_lengths()) == 7


def test_reinserting_stranded_key_adds_second_node(table, keys):
    early = keys[:6]
    for k in early:
        table.insert(k, "old")
    table.insert(keys[6], "x")

    # at most 11 entries here, so 16 buckets hold for the whole loop
    stranded = 0
    for k in early[:4]:
        digest = table._keyer.digest(k)
        lost = digest % 8 != digest % 16
        stranded += lost
        assert table.insert(k, "new") == (None if lost else "old")
        assert table.get(k) == "new"
    assert table.bucket_count == 16
    assert table.size() == 7 + stranded


def test_rehash_on_grow_keeps_every_key_reachable(rehashing_table, keys):
    t = rehashing_table
    for i, k in enumerate(keys):
        t.insert(k, i)
    assert t.bucket_count >= 512
    for i, k in enumerate(keys):
        assert t.get(k) == i
    assert sum(t.chain_lengths()) == len(keys)
    for i, k in enumerate(keys):
        assert t.remove(k) == i
    assert t.size() == 0


def test_rehash_places_each_node_by_current_modulus(rehashing_table, keys):
    t = rehashing_table
    for k in keys[:40]:
        t.insert(k, k)
    expected = [0] * t.bucket_count
    for k in keys[:40]:
        expected[t._keyer.digest(k) % t.bucket_count] += 1
    assert t.chain_lengths() == expected


def test_rehash_default_from_environment(rng):
    with patch("keyed_hash_table.config.REHASH_ON_GROW", True):
        assert create(rng).rehash_on_grow
    with patch("keyed_hash_table.config.REHASH_ON_GROW", False):
        assert not create(rng).rehash_on_grow
        assert create(rng, rehash_on_grow=True).rehash_on_grow


def test_first_allocation_failure_leaves_table_empty(rng, no_room):
    t = create(rng)
    t._buckets = no_room()
    with patch("keyed_hash_table.table.log") as mock_log:
        assert t.insert("k", 1) is None
    mock_log.warning.assert_called_once()
    assert t.bucket_count == 0
    assert t.size() == 0
    assert t.get("k") is None
    assert t.load_factor() == 0.0


def test_growth_failure_keeps_capacity_and_correctness(single_bucket_table, keys):
    t = single_bucket_table
    with patch("keyed_hash_table.table.log") as mock_log:
        for i, k in enumerate(keys[:50]):
            assert t.insert(k, i) is None
    assert mock_log.warning.called
    assert t.bucket_count == 1
    assert t.size() == 50
    assert t.load_factor() == 50.0
    assert t.chain_lengths() == [50]
    for i, k in enumerate(keys[:50]):
        assert t.get(k) == i


def test_repeated_growth_failure_warns_once(single_bucket_table, keys):
    with patch("keyed_hash_table.table.log") as mock_log:
        for i, k in enumerate(keys[:20]):
            single_bucket_table.insert(k, i)
    assert mock_log.warning.call_count == 1
    assert single_bucket_table.size() == 20
