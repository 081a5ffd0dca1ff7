import math

import pytest

from algokit.hash_multi import MultiplicativeHash, is_prime


def test_is_prime():
    primes = [n for n in range(30) if is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("size", [1, 2, 7, 100, 1000, 65536])
def test_parameters(size):
    h = MultiplicativeHash(size)
    assert is_prime(h.r)
    assert h.r >= math.ceil(math.log2(size))
    assert h.table_size() == 2 ** h.r
    assert h.table_size() >= size
    assert h.A % 2 == 1


@pytest.mark.parametrize("size", [10, 1000])
def test_hash_in_range(size):
    h = MultiplicativeHash(size)
    assert all(0 <= h(k) < h.table_size() for k in range(5000))


def test_zero_key_hashes_to_zero():
    assert MultiplicativeHash(50)(0) == 0


def test_deterministic():
    h = MultiplicativeHash(300)
    assert [h(k) for k in range(50)] == [MultiplicativeHash(300)(k) for k in range(50)]


def test_invalid_size():
    with pytest.raises(ValueError):
        MultiplicativeHash(0)