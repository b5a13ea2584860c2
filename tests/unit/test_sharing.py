from itertools import combinations

import pytest

from shamirsolve.errors import (
    DegenerateInputError,
    InsufficientPointsError,
    NonIntegerResultError,
)
from shamirsolve.sharing import (
    Point,
    interpolate,
    interpolate_at_zero,
    lagrange_fraction,
)


def _eval_at(poly, x):
    accum = 0
    for coeff in reversed(poly):
        accum *= x
        accum += coeff
    return accum


def _points(poly, xs):
    return [Point(x, _eval_at(poly, x)) for x in xs]


def test_line():
    points = [Point(1, 5), Point(2, 7), Point(3, 9)]
    assert interpolate_at_zero(points, 2) == 3
    assert interpolate_at_zero(points, 3) == 3


def test_first_sample():
    points = [Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)]
    assert interpolate_at_zero(points, 3) == 3


def test_constant():
    assert interpolate_at_zero([Point(4, 42)], 1) == 42


def test_uses_first_k_points_in_given_order():
    # Only the first two points lie on y = x + 1.
    points = [Point(1, 2), Point(2, 3), Point(3, 100)]
    assert interpolate_at_zero(points, 2) == 1
    assert interpolate_at_zero(points[::-1], 2) != 1


def test_every_subset_agrees():
    poly = [1234, 5, 7, 3]
    points = _points(poly, range(1, 8))
    for qty in range(len(poly), len(points) + 1):
        for subset in combinations(points, qty):
            assert interpolate_at_zero(list(subset), qty) == 1234


def test_negative_secret():
    poly = [-6290016743746469796, 3, 1]
    assert interpolate_at_zero(_points(poly, [2, 5, 9]), 3) == poly[0]


def test_large_values_stay_exact():
    poly = [2 ** 200 + 12345, 3 ** 90, 7 ** 60, 11 ** 50, 2 ** 127 - 1]
    points = _points(poly, [1, 3, 4, 8, 10])
    assert interpolate_at_zero(points, 5) == 2 ** 200 + 12345


def test_interpolate_elsewhere():
    poly = [3, 0, 2]
    points = _points(poly, [1, 2, 3])
    assert interpolate(5, points) == _eval_at(poly, 5)


def test_not_enough_points():
    with pytest.raises(InsufficientPointsError) as exc:
        interpolate_at_zero([Point(1, 5), Point(2, 7)], 3)
    assert exc.value.available == 2
    assert exc.value.required == 3


@pytest.mark.parametrize("k", [0, -1])
def test_k_must_be_positive(k):
    with pytest.raises(InsufficientPointsError):
        interpolate_at_zero([Point(1, 5)], k)


def test_duplicated_x():
    with pytest.raises(DegenerateInputError) as exc:
        interpolate_at_zero([Point(1, 5), Point(1, 7), Point(2, 9)], 3)
    assert exc.value.x == 1


def test_duplicate_outside_first_k_is_ignored():
    points = [Point(1, 5), Point(2, 7), Point(2, 9)]
    assert interpolate_at_zero(points, 2) == 3


def test_non_integer_result():
    # y = x/2 + 1/2
    with pytest.raises(NonIntegerResultError) as exc:
        interpolate_at_zero([Point(1, 1), Point(3, 2)], 2)
    assert (exc.value.numerator, exc.value.denominator) == (1, 2)


def test_lagrange_fraction_is_reduced():
    assert lagrange_fraction(0, [Point(1, 1), Point(3, 2)]) == (1, 2)
    assert lagrange_fraction(0, [Point(1, 0), Point(2, 0)]) == (0, 1)
    assert lagrange_fraction(0, [Point(1, -1), Point(3, -2)]) == (-1, 2)
