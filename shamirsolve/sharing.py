"""Recover the constant term of a polynomial from points on its curve.

This is the reconstruction half of Shamir's secret sharing, computed over the
integers instead of a prime field.
https://en.wikipedia.org/wiki/Shamir%27s_Secret_Sharing
https://en.wikipedia.org/wiki/Lagrange_polynomial
"""

from dataclasses import dataclass
from math import gcd
from typing import Iterable, List, Sequence, Tuple

from shamirsolve.errors import (
    DegenerateInputError,
    InsufficientPointsError,
    NonIntegerResultError,
)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _product(vals: Iterable[int]) -> int:
    accum = 1
    for v in vals:
        accum *= v
    return accum


def _check_distinct(points: Sequence[Point]) -> None:
    seen = set()
    for point in points:
        if point.x in seen:
            raise DegenerateInputError(point.x)
        seen.add(point.x)


def lagrange_fraction(x: int, points: Sequence[Point]) -> Tuple[int, int]:
    """Value at `x` of the polynomial going through `points`, as an exact
    (numerator, denominator) pair reduced to lowest terms, denominator > 0.

    Every basis term is num_i / den_i. They are summed over the common
    denominator prod(den_i) so no division happens before the very end.
    """
    _check_distinct(points)
    nums: List[int] = []
    dens: List[int] = []
    for i, cur in enumerate(points):
        others = [o.x for j, o in enumerate(points) if j != i]
        nums.append(_product(x - o for o in others))
        dens.append(_product(cur.x - o for o in others))
    den = _product(dens)
    num = sum(nums[i] * points[i].y * (den // dens[i]) for i in range(len(points)))
    divisor = gcd(num, den)
    num, den = num // divisor, den // divisor
    if den < 0:
        num, den = -num, -den
    return num, den


def interpolate(x: int, points: Sequence[Point]) -> int:
    """Find the y-value for the given x, given k (x, y) points;
    k points will define a polynomial of up to (k-1)th degree.
    """
    num, den = lagrange_fraction(x, points)
    if den != 1:
        raise NonIntegerResultError(num, den)
    return num


def interpolate_at_zero(points: Sequence[Point], k: int) -> int:
    """Secret hidden at x=0, using the first `k` points in the given order."""
    if k < 1 or len(points) < k:
        raise InsufficientPointsError(len(points), k)
    return interpolate(0, points[:k])
