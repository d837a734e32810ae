import random
from typing import Iterator

import gmpy2

from .types import Fld, Mod


def pows(a: int, n: int, p: Mod = None) -> Iterator[int]:
    r = 1
    for _ in range(n):
        yield r
        r = r * a if p is None else r * a % p


def modinv(a: int, p: int) -> int:
    return pow(a, -1, p)  # raises ValueError if gcd(a, p) != 1


def is_prime(q: int, reps: int = 100) -> bool:
    return q > 1 and bool(gmpy2.is_prime(q, reps))


def randelem(q: int, rng: random.Random | None = None) -> Fld:
    # draw one byte more than q needs, then reduce into [0, q)
    size = q.bit_length() // 8 + 1
    data = (rng or random).randbytes(size)
    return int.from_bytes(data, "big") % q
