import random

from .field import is_prime, randelem
from .poly import Poly
from .types import NotPrimeError, Point


def genshares(n: int, k: int, q: int, rng: random.Random | None = None) -> tuple[list[Point], Poly]:
    # Draws a random polynomial of degree k - 1 over GF(q), so that any k of its points determine it,
    # and samples n points on it at random x coordinates. The polynomial is returned alongside the
    # shares, which is only meant for constructing and testing sharings.
    if n < 1 or k < 1:
        raise ValueError("need at least one share and a threshold of at least one")
    if not is_prime(q):
        raise NotPrimeError("{} is not a prime".format(q))
    poly = Poly(*(randelem(q, rng) for _ in range(k)))
    shares = []
    for _ in range(n):
        x = randelem(q, rng)
        shares.append(Point(x, poly.eval(x, q)))
    return shares, poly
