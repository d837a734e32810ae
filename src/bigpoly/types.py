from dataclasses import dataclass
from typing import Iterator


Fld = int
Coeffs = tuple[int, ...]
Mod = int | None


@dataclass(frozen=True)
class Point:
    # A share (x, y), meaning that the shared polynomial evaluates to y at x.

    x: Fld
    y: Fld

    def __iter__(self) -> Iterator[Fld]:
        return iter((self.x, self.y))


class InexactDivisionError(ArithmeticError):
    pass


class NotPrimeError(ValueError):
    pass


class NegativeShiftError(ValueError):
    pass
