import math
from fractions import Fraction

import pytest

np = pytest.importorskip("numpy")

from conftest import brute_min_distance2
from geokernel.geometry import min_distance_squared


def test_eight_random_points_match_brute_force(rng):
    pts = [(rng.randint(-1000, 1000), rng.randint(-1000, 1000)) for _ in range(8)]
    assert min_distance_squared(pts) == brute_min_distance2(pts)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 7, 16, 33, 100, 257])
def test_matches_brute_force_int(rng, n):
    for _ in range(5):
        pts = [(rng.randint(-50, 50), rng.randint(-50, 50)) for _ in range(n)]
        assert min_distance_squared(pts) == brute_min_distance2(pts)


def test_matches_brute_force_float(rng):
    for _ in range(20):
        pts = [(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)) for _ in range(rng.randint(2, 80))]
        assert min_distance_squared(pts) == brute_min_distance2(pts)


def test_duplicates_give_zero(rng):
    pts = [(rng.randint(0, 1000), rng.randint(0, 1000)) for _ in range(40)]
    pts.append(pts[17])
    assert min_distance_squared(pts) == 0


def test_vertical_line_of_points():
    pts = [(0, 3 * k) for k in range(20)] + [(0, 31)]
    assert min_distance_squared(pts) == 1


def test_fewer_than_two_points():
    assert min_distance_squared([]) == math.inf
    assert min_distance_squared([(1, 2)]) == math.inf


def test_input_not_modified():
    pts = [(5, 5), (0, 0), (3, 4), (1, 9)]
    before = list(pts)
    min_distance_squared(pts)
    assert pts == before


def test_numpy_and_fraction_input():
    arr = np.array([[0, 0], [10, 10], [3, 4], [13, 14]], dtype=np.int64)
    assert min_distance_squared(arr) == 25
    pts = [(Fraction(1, 3), Fraction(0)), (Fraction(0), Fraction(0)), (Fraction(5), Fraction(5))]
    assert min_distance_squared(pts) == Fraction(1, 9)
