import sys

import pytest

from hexcolony.stacked_lru import StackedLRU


def gen_value(key):
    return [key + 1]


def test_simple_insert():
    cache = StackedLRU(sys.maxsize)
    cached_value = cache.reference(0, gen_value)
    assert cached_value == [1]
    assert 0 in cache.promotion_layer
    assert len(cache.promotion_layer) == 1
    assert len(cache.basic_layer) == 0
    assert len(cache.demotion_layer) == 0
    cached_value_same = cache.reference(0, lambda key: [key + 1])
    assert cached_value is cached_value_same
    cached_value_2 = cache.reference(1, lambda key: [key + 1])
    assert cached_value_2 == [2]
    assert 0 in cache.promotion_layer
    assert 1 in cache.promotion_layer
    assert len(cache.promotion_layer) == 2
    assert len(cache.basic_layer) == 0
    assert len(cache.demotion_layer) == 0


def test_insert_pushdown():
    cache = StackedLRU(2)

    assert cache.reference(0, gen_value) == [1]
    assert 0 in cache
    assert 0 in cache.promotion_layer
    assert len(cache.promotion_layer) == 1
    assert len(cache.basic_layer) == 0
    assert len(cache.demotion_layer) == 0

    assert cache.reference(1, gen_value) == [2]
    assert 0 in cache
    assert 1 in cache
    assert 0 in cache.promotion_layer
    assert 1 in cache.promotion_layer
    assert len(cache.promotion_layer) == 2
    assert len(cache.basic_layer) == 0
    assert len(cache.demotion_layer) == 0

    assert cache.reference(2, gen_value) == [3]
    assert len(cache) == 2
    assert 2 in cache
    assert 0 not in cache or 1 not in cache
    assert 2 in cache.promotion_layer
    assert len(cache.promotion_layer) == 1
    assert len(cache.basic_layer) == 0
    assert 1 in cache.demotion_layer or 0 in cache.demotion_layer
    assert len(cache.demotion_layer) == 1

    assert cache.reference(3, gen_value) == [4]
    assert len(cache) == 2
    assert 3 in cache
    assert 0 not in cache and 1 not in cache
    assert 3 in cache.promotion_layer
    assert len(cache.promotion_layer) == 1
    assert 2 in cache.basic_layer
    assert len(cache.basic_layer) == 1
    assert len(cache.demotion_layer) == 0


def test_insert():
    cache = StackedLRU(4)
    originals = [cache.reference(i, gen_value) for i in range(4)]
    assert len(cache) == 4
    for i in range(4):
        assert i in cache
        assert i in cache.promotion_layer
    for i in range(4):
        cache.reference(i + 1, gen_value)
    assert len(cache) == 4
    counter = 0
    for i in range(4):
        if i in cache:
            same = cache.reference(i, gen_value)
            assert originals[i] is same
            counter += 1
    assert counter >= 2
    for i in range(4):
        cache.reference(i, gen_value)
    assert len(cache) == 4


def test_hit_in_basic_layer_moves_up():
    cache = StackedLRU(2)
    cache.reference(0, gen_value)
    cache.reference(1, gen_value)
    cache.reference(2, gen_value)
    cache.reference(3, gen_value)
    assert 2 in cache.basic_layer
    value = cache.reference(2, gen_value)
    assert value == [3]
    assert 2 in cache.promotion_layer
    assert 2 not in cache.basic_layer


def test_generator_not_called_on_hit():
    cache = StackedLRU(3)
    cache.reference("a", lambda key: key * 2)
    calls = []

    def tracking(key):
        calls.append(key)
        return key

    assert cache.reference("a", tracking) == "aa"
    assert calls == []


def test_len_never_exceeds_capacity():
    cache = StackedLRU(5)
    for i in range(100):
        cache.reference(i, gen_value)
        assert len(cache) <= cache.capacity


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        StackedLRU(capacity)