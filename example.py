#!/usr/bin/env python3


import contextlib
import random
import time

from bigpoly.poly import Poly
from bigpoly.shamir import genshares


@contextlib.contextmanager
def timed(step):
    # prints the step, runs the block, then prints how long the block took
    print(step + "...", end=" ", flush=True)
    beg = time.perf_counter()
    yield
    print("{:.1f} ms".format((time.perf_counter() - beg) * 1000))


def main():
    P = 2**127 - 1
    rng = random.Random(0)
    with timed("Generating random polynomials"):
        g = Poly.random(64, 127, rng)
        a = Poly.random(128, 127, rng)
        b = Poly.random(96, 127, rng)
    with timed("Multiplying polynomials"):
        u = g.mul(a, P)
        v = g.mul(b, P)
    with timed("Dividing polynomials"):
        quo, rem = u.divmod(v, P)
    assert quo.mul(v, P).add(rem, P) == u
    with timed("Computing the GCD"):
        d = u.gcd(v, P)
    print("Degree of the GCD:", d.degree)
    with timed("Generating shares"):
        shares, poly = genshares(100, 10, P, rng)
    assert all(poly.eval(x, P) == y for x, y in shares)
    print("Secret:", poly[0])
    print("Share:", "({}, {})".format(*shares[0]))


if __name__ == "__main__":
    main()
