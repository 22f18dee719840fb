import pytest

from seika.data_structures.hash_map import MIN_CAPACITY, HashMap, djb2_hash


def test_djb2_hash_of_empty_input_is_seed():
    assert djb2_hash(b"") == 5381


def test_djb2_hash_is_deterministic_and_order_sensitive():
    assert djb2_hash(b"ab") == djb2_hash(b"ab")
    assert djb2_hash(b"ab") != djb2_hash(b"ba")


def test_djb2_hash_stays_within_64_bits():
    value = djb2_hash(bytes(range(256)) * 4)
    assert 0 <= value < 2**64


def test_add_get_and_has():
    hash_map = HashMap()
    hash_map.add(1, "one")
    hash_map.add(2, "two")
    assert hash_map.get(1) == "one"
    assert hash_map.get(2) == "two"
    assert hash_map.has(1)
    assert not hash_map.has(3)
    assert len(hash_map) == 2


def test_get_missing_returns_default():
    hash_map = HashMap()
    assert hash_map.get(42) is None
    assert hash_map.get(42, "fallback") == "fallback"


def test_add_existing_key_updates_value_without_growing():
    hash_map = HashMap()
    hash_map.add(7, "first")
    hash_map.add(7, "second")
    assert hash_map.get(7) == "second"
    assert len(hash_map) == 1


def test_update_in_shared_bucket_targets_matching_key():
    hash_map = HashMap(capacity=MIN_CAPACITY)
    keys = list(range(MIN_CAPACITY - 1))
    for key in keys:
        hash_map.add(key, key)
    for key in keys:
        hash_map.add(key, -key)
    assert {key: hash_map.get(key) for key in keys} == {key: -key for key in keys}


def test_erase():
    hash_map = HashMap()
    hash_map.add(5, "five")
    assert hash_map.erase(5) is True
    assert hash_map.erase(5) is False
    assert not hash_map.has(5)
    assert len(hash_map) == 0


def test_grows_when_full():
    hash_map = HashMap(capacity=MIN_CAPACITY)
    for key in range(MIN_CAPACITY + 1):
        hash_map.add(key, key * 10)
    assert hash_map.capacity == MIN_CAPACITY * 2
    assert all(hash_map.get(key) == key * 10 for key in range(MIN_CAPACITY + 1))


def test_shrinks_after_erasing():
    hash_map = HashMap(capacity=MIN_CAPACITY)
    for key in range(MIN_CAPACITY + 1):
        hash_map.add(key, key)
    grown = hash_map.capacity
    for key in range(MIN_CAPACITY + 1):
        hash_map.erase(key)
        assert hash_map.capacity >= MIN_CAPACITY
    assert grown > MIN_CAPACITY
    assert hash_map.capacity == MIN_CAPACITY
    assert len(hash_map) == 0


def test_small_initial_capacity_still_holds_many_items():
    hash_map = HashMap(capacity=1)
    for key in range(50):
        hash_map.add(key, str(key))
    assert len(hash_map) == 50
    assert hash_map.capacity >= len(hash_map)
    assert all(hash_map.get(key) == str(key) for key in range(50))


def test_iteration_covers_every_key_once():
    hash_map = HashMap()
    for key in range(20):
        hash_map.add(key, key * key)
    keys = list(hash_map)
    assert sorted(keys) == list(range(20))
    assert dict(hash_map.items()) == {key: key * key for key in range(20)}
    assert keys == [key for key, _ in hash_map.items()]


def test_contains():
    hash_map = HashMap()
    hash_map.add(3, None)
    assert 3 in hash_map
    assert 4 not in hash_map
    assert 1.5 not in hash_map


def test_keys_compare_by_encoded_bytes():
    hash_map = HashMap(key_size=4)
    hash_map.add(-1, "all ones")
    assert hash_map.get(0xFFFFFFFF) == "all ones"
    assert hash_map.get(b"\xff\xff\xff\xff") == "all ones"


def test_bytes_keys_round_trip():
    hash_map = HashMap(key_size=2)
    hash_map.add(b"ab", 1)
    hash_map.add(bytearray(b"cd"), 2)
    assert hash_map.get(b"ab") == 1
    assert hash_map.get(b"cd") == 2


def test_wrong_length_bytes_key_raises():
    hash_map = HashMap(key_size=4)
    with pytest.raises(ValueError):
        hash_map.add(b"abc", 1)


def test_int_key_too_large_raises():
    hash_map = HashMap(key_size=1)
    with pytest.raises(ValueError):
        hash_map.add(300, 1)


def test_unsupported_key_type_raises():
    hash_map = HashMap()
    with pytest.raises(TypeError):
        hash_map.add(1.5, 1)


@pytest.mark.parametrize("capacity, key_size", [(0, 4), (8, 0)])
def test_invalid_construction(capacity, key_size):
    with pytest.raises(ValueError):
        HashMap(capacity=capacity, key_size=key_size)