import random

import pytest

from bigpoly.field import is_prime, pows, randelem
from bigpoly.shamir import genshares
from bigpoly.types import NotPrimeError, Point


Q = 2**61 - 1


def test_pows():
    assert list(pows(3, 4)) == [1, 3, 9, 27]
    assert list(pows(3, 4, 5)) == [1, 3, 4, 2]
    assert list(pows(7, 0)) == []


def test_is_prime():
    assert is_prime(Q)
    assert is_prime(2)
    assert not is_prime(2**61 + 1)
    assert not is_prime(15)
    assert not is_prime(1)
    assert not is_prime(0)
    assert not is_prime(-7)


def test_randelem_stays_in_field():
    rng = random.Random(0)
    for q in [2, 3, 251, 257, Q]:
        for _ in range(50):
            assert 0 <= randelem(q, rng) < q


def test_shares_lie_on_polynomial():
    shares, poly = genshares(5, 3, Q, random.Random(1))
    assert len(shares) == 5
    assert poly.degree == 2
    assert all(0 <= c < Q for c in poly)
    for x, y in shares:
        assert 0 <= x < Q
        assert poly.eval(x, Q) == y


def test_shares_use_random_coordinates():
    shares, _ = genshares(5, 3, Q, random.Random(2))
    assert [share.x for share in shares] != [1, 2, 3, 4, 5]
    assert len({share.x for share in shares}) == 5


def test_shares_are_reproducible_with_seed():
    assert genshares(4, 2, Q, random.Random(3)) == genshares(4, 2, Q, random.Random(3))


def test_threshold_of_one_gives_constant_polynomial():
    shares, poly = genshares(3, 1, Q, random.Random(4))
    assert poly.degree == 0
    assert {share.y for share in shares} == {poly[0]}


def test_shares_with_unseeded_generator():
    shares, poly = genshares(3, 2, 257)
    for share in shares:
        assert poly.eval(share.x, 257) == share.y


def test_non_prime_modulus_raises():
    with pytest.raises(NotPrimeError):
        genshares(5, 3, 15)
    with pytest.raises(NotPrimeError):
        genshares(5, 3, Q + 2)


def test_invalid_counts_raise():
    with pytest.raises(ValueError):
        genshares(0, 3, Q)
    with pytest.raises(ValueError):
        genshares(5, 0, Q)


def test_point_unpacks():
    x, y = Point(3, 4)
    assert (x, y) == (3, 4)
