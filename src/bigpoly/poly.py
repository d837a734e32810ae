import operator
import random
from typing import Iterable, Iterator

from .field import modinv, pows
from .types import Coeffs, Fld, InexactDivisionError, Mod, NegativeShiftError


# Dense univariate polynomials over Z or Z/mZ. Coefficients are stored from low to high order, so
# 3x³ + 2x + 1 is kept as (1, 2, 0, 3). The leading coefficient is never 0 unless the polynomial is
# the constant 0, which is always (0,) and never empty. Every operation takes an optional modulus m;
# when it is given, all coefficients of the result are reduced into [0, m).


def trim(coeffs: Coeffs) -> Coeffs:
    n = len(coeffs)
    while n > 1 and coeffs[n - 1] == 0:  # the constant term is never removed
        n -= 1
    return coeffs[:n] if n else (0,)


class Poly:
    __slots__ = ("coeffs",)

    coeffs: Coeffs

    def __init__(self, *coeffs: int) -> None:
        object.__setattr__(self, "coeffs", trim(tuple(map(operator.index, coeffs))))

    def __setattr__(self, name, value):
        raise AttributeError("Poly is immutable")

    def __reduce__(self):
        return Poly, self.coeffs

    @classmethod
    def of(cls, coeffs: Iterable[int]) -> "Poly":
        return cls(*coeffs)

    @classmethod
    def random(cls, degree: int, bits: int, rng: random.Random | None = None) -> "Poly":
        # every coefficient is uniform in [0, 2^bits), so the actual degree may end up lower
        if degree < 0 or bits < 0:
            raise ValueError("degree and bits must be non-negative")
        rng = rng or random
        return cls(*(rng.getrandbits(bits) for _ in range(degree + 1)))

    # canonical form

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    @property
    def lead(self) -> int:
        return self.coeffs[-1]

    def is_zero(self) -> bool:
        return self.coeffs == (0,)

    def clone(self, shift: int = 0) -> "Poly":
        # P(x) * x^shift
        if shift < 0:
            raise NegativeShiftError("cannot shift a polynomial by {} places".format(shift))
        return Poly(*(0,) * shift, *self.coeffs)

    def reduce(self, m: Mod) -> "Poly":
        return self if m is None else Poly(*(c % m for c in self.coeffs))

    def _cmp(self, other: "Poly") -> int:
        # Orders by degree, then by coefficients from the highest order down. This only decides which
        # operand goes first in add and gcd; it says nothing about the size of the polynomial.
        if self.degree != other.degree:
            return 1 if self.degree > other.degree else -1
        for a, b in zip(reversed(self.coeffs), reversed(other.coeffs)):
            if a != b:
                return 1 if a > b else -1
        return 0

    # arithmetic

    def add(self, other: "Poly", m: Mod = None) -> "Poly":
        p, q = (self, other) if self._cmp(other) >= 0 else (other, self)
        r = list(p.coeffs)
        for i, c in enumerate(q.coeffs):
            r[i] += c
        return Poly(*r).reduce(m)

    def neg(self) -> "Poly":
        return Poly(*(-c for c in self.coeffs))

    def sub(self, other: "Poly", m: Mod = None) -> "Poly":
        return self.add(other.neg(), m)

    def scale(self, k: int, m: Mod = None) -> "Poly":
        return Poly(*(c * k for c in self.coeffs)).reduce(m)

    def mul(self, other: "Poly", m: Mod = None) -> "Poly":
        p = self.reduce(m)
        q = other.reduce(m)
        r = [0] * (len(p) + len(q) - 1)
        for i, a in enumerate(p.coeffs):
            for j, b in enumerate(q.coeffs):
                r[i + j] = r[i + j] + a * b if m is None else (r[i + j] + a * b) % m
        return Poly(*r)

    def divmod(self, other: "Poly", m: Mod = None) -> tuple["Poly", "Poly"]:
        # Long division, returns (quotient, remainder) with quotient * other + remainder == self (mod m)
        # and remainder either 0 or of lower degree than other. Dividing by a polynomial of higher degree
        # or by 0 gives quotient 0 and the (reduced) dividend as remainder. Without a modulus the leading
        # coefficient of every partial remainder has to be an exact multiple of the divisor's, otherwise
        # the quotient would leave the integers and InexactDivisionError is raised.
        p = self.reduce(m)
        q = other.reduce(m)
        if p.degree < q.degree or q.is_zero():
            return Poly(0), p
        if m is not None:
            try:
                inv = modinv(q.lead, m)
            except ValueError as e:
                raise InexactDivisionError("leading coefficient {} is not invertible modulo {}".format(q.lead, m)) from e
        quo = [0] * (p.degree - q.degree + 1)
        rem = p
        while not rem.is_zero() and rem.degree >= q.degree:
            offset = rem.degree - q.degree
            if m is None:
                r, s = divmod(rem.lead, q.lead)
                if s != 0:
                    raise InexactDivisionError("{} is not divisible by {} over the integers".format(rem.lead, q.lead))
            else:
                r = rem.lead * inv % m
            rem = rem.sub(q.scale(r, m).clone(offset), m)
            quo[offset] = r
        return Poly(*quo), rem

    def gcd(self, other: "Poly", m: Mod = None) -> "Poly":
        # Euclid's algorithm. The remainder's degree drops on every round, and a division that would
        # leave the integers raises instead of handing back the dividend, so the loop always ends.
        p = self.reduce(m)
        q = other.reduce(m)
        if p._cmp(q) < 0:
            p, q = q, p
        while not q.is_zero():
            p, q = q, p.divmod(q, m)[1]
        return p

    def eval(self, x: int, m: Mod = None) -> Fld:
        y = 0
        for c, t in zip(self.coeffs, pows(x, len(self.coeffs), m)):
            y = y + t * c if m is None else (y + t * c) % m
        return y

    # python protocol

    def __len__(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, i: int) -> int:
        return self.coeffs[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self.coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash(self.coeffs)

    def __neg__(self) -> "Poly":
        return self.neg()

    def __add__(self, other: object) -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        return self.mul(other)

    def __divmod__(self, other: object) -> tuple["Poly", "Poly"]:
        if not isinstance(other, Poly):
            return NotImplemented
        return self.divmod(other)

    def __floordiv__(self, other: object) -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        return self.divmod(other)[0]

    def __mod__(self, other: object) -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        return self.divmod(other)[1]

    def __call__(self, x: int) -> Fld:
        return self.eval(x)

    def __repr__(self) -> str:
        return "Poly({})".format(", ".join(map(str, self.coeffs)))

    def __str__(self) -> str:
        # highest order first, e.g. [3x^3 + 2x + 1], [-x^2 - 4], [0]
        s = ""
        top = self.degree
        for i in range(top, -1, -1):
            c = self.coeffs[i]
            if c == 0:
                continue
            if c < 0:
                s += "-" if i == top else " - "
            elif i < top:
                s += " + "
            if i == 0 or abs(c) != 1:
                s += str(abs(c))
            if i > 0:
                s += "x" if i == 1 else "x^{}".format(i)
        return "[{}]".format(s or "0")
