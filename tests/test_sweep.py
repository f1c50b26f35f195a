import itertools
from fractions import Fraction

import pytest

np = pytest.importorskip("numpy")

from geokernel.cli.batch_utils import touches_beyond_endpoints
from geokernel.geometry import (
    IntersectionType,
    do_intersect,
    find_intersecting_pair,
    find_intersecting_pair_by,
    relationship,
)

SQUARE_EDGES = [
    ((0.1, 0.0), (0.9, 0.0)),
    ((0.1, 1.0), (0.9, 1.0)),
    ((0.0, 0.1), (0.0, 0.9)),
    ((1.0, 0.1), (1.0, 0.9)),
]


def _brute_any(segments):
    return any(do_intersect(a, b) for a, b in itertools.combinations(segments, 2))


def test_two_crossing_diagonals():
    segments = [((0.0, 0.0), (1.0, 1.0)), ((0.0, 1.0), (1.0, 0.0))]
    assert set(find_intersecting_pair(segments)) == {0, 1}


def test_diagonals_inside_square_edges():
    segments = [((0.0, 0.0), (1.0, 1.0)), ((0.0, 1.0), (1.0, 0.0))] + SQUARE_EDGES
    assert set(find_intersecting_pair(segments)) == {0, 1}


def test_pair_touching_at_shared_endpoint():
    segments = SQUARE_EDGES + [((0.0, 0.0), (1.0, 1.0)), ((1.0, 1.0), (2.0, 2.0))]
    assert set(find_intersecting_pair(segments)) == {4, 5}


@pytest.mark.parametrize(
    "segments",
    [
        [((2.0, 5.0), (3.1, 5.0)), ((3.0, 10.0), (9.0, 1.0)), ((1.0, 1.0), (10.0, 10.0)), ((8.0, 5.0), (10.1, 5.0))],
        [((1.0, 4.0), (9.0, 0.0)), ((0.0, 2.0), (10.0, 2.0)), ((1.0, 0.0), (9.0, 4.0))],
    ],
)
def test_three_lines(segments):
    i, j = find_intersecting_pair(segments)
    assert i != j
    assert do_intersect(segments[i], segments[j])


def test_no_segments_or_single_segment():
    assert find_intersecting_pair([]) is None
    assert find_intersecting_pair([((0, 0), (1, 1))]) is None


def test_disjoint_bands_then_injected_crossing(rng):
    segments = []
    for k in range(50):
        x = rng.randint(0, 40)
        segments.append(((x, 3 * k), (x + rng.randint(1, 20), 3 * k + 1)))
    assert find_intersecting_pair(segments) is None

    segments.append(((100, 0), (110, 10)))
    segments.append(((110, 0), (100, 10)))
    i, j = find_intersecting_pair(segments)
    assert {i, j} == {50, 51}
    assert relationship(segments[i], segments[j]) is IntersectionType.PROPER


def test_vertical_segment_crossing_band():
    segments = [((0, 0), (10, 0)), ((0, 5), (10, 5)), ((4, -1), (4, 1))]
    assert set(find_intersecting_pair(segments)) == {0, 2}


def test_random_short_segments_agree_with_brute_force(rng):
    found = 0
    for _ in range(60):
        segments = []
        for _ in range(rng.randint(2, 25)):
            x, y = rng.random(), rng.random()
            segments.append(((x, y), (x + rng.uniform(-0.2, 0.2), y + rng.uniform(-0.2, 0.2))))
        result = find_intersecting_pair(segments)
        if result is None:
            assert not _brute_any(segments)
        else:
            found += 1
            i, j = result
            assert do_intersect(segments[i], segments[j])
    assert found > 0


def test_endpoint_touch_ignored_by_predicate():
    segments = [((0.0, 0.0), (1.0, 1.0)), ((1.0, 1.0), (2.0, 2.0))]
    assert find_intersecting_pair_by(segments, touches_beyond_endpoints) is None

    segments = [((0.0, 0.0), (1.0, 1.0)), ((0.0, 0.0), (1.0, 0.0))]
    assert find_intersecting_pair_by(segments, touches_beyond_endpoints) is None

    segments = [((0.0, 0.0), (2.0, 2.0)), ((1.0, 1.0), (1.0, 0.0))]
    assert set(find_intersecting_pair_by(segments, touches_beyond_endpoints)) == {0, 1}


def test_predicate_receives_input_endpoint_order():
    seen = []

    def record(a, b):
        seen.append((a, b))
        return False

    segments = [((5, 5), (0, 0)), ((9, 0), (3, 1))]
    assert find_intersecting_pair_by(segments, record) is None
    for a, b in seen:
        assert a in segments and b in segments


def test_numpy_segment_arrays():
    flat = np.array([[0, 0, 4, 4], [0, 4, 4, 0], [10, 10, 12, 12]])
    assert set(find_intersecting_pair(flat)) == {0, 1}
    assert set(find_intersecting_pair(flat.reshape(-1, 2, 2))) == {0, 1}
    with pytest.raises(ValueError):
        find_intersecting_pair(np.zeros((3, 3)))


def test_large_integer_heights_compared_exactly():
    big = 2**53
    segments = [((0, big + 1), (10, big + 1)), ((0, big), (10, big)), ((5, big - 5), (6, big))]
    assert set(find_intersecting_pair(segments)) == {1, 2}
    assert relationship(segments[1], segments[2]) is IntersectionType.ONE_SIDED

    segments = [((0, big + 1), (10, big + 1)), ((0, big), (10, big)), ((5, big - 5), (6, big - 1))]
    assert find_intersecting_pair(segments) is None


def test_fraction_coordinates():
    third = Fraction(1, 3)
    segments = [((0, 0), (3, 1)), ((1, third + Fraction(1, 10**12)), (2, 5))]
    assert find_intersecting_pair(segments) is None
    segments = [((0, 0), (3, 1)), ((1, third), (2, 5))]
    assert set(find_intersecting_pair(segments)) == {0, 1}


def test_zero_length_and_collinear_segments():
    assert set(find_intersecting_pair([((0, 0), (4, 4)), ((2, 2), (2, 2))])) == {0, 1}
    assert find_intersecting_pair([((0, 0), (4, 4)), ((2, 3), (2, 3))]) is None
    assert set(find_intersecting_pair([((3, 3), (3, 3)), ((3, 3), (3, 3))])) == {0, 1}
    assert set(find_intersecting_pair([((0, 0), (4, 0)), ((6, 0), (2, 0))])) == {0, 1}
    assert find_intersecting_pair([((0, 0), (4, 0)), ((5, 0), (8, 0))]) is None
    assert set(find_intersecting_pair([((1, 0), (1, 4)), ((1, 2), (1, 6))])) == {0, 1}


def test_all_segment_pairs_on_small_grid():
    coords = [(x, y) for x in range(3) for y in range(3)]
    segs = list(itertools.combinations_with_replacement(coords, 2))
    for a, b in itertools.product(segs, repeat=2):
        result = find_intersecting_pair([a, b])
        assert (result is not None) == do_intersect(a, b)


def test_random_integer_sets_agree_with_brute_force(rng):
    coords = [(x, y) for x in range(4) for y in range(4)]
    segs = list(itertools.combinations_with_replacement(coords, 2))
    found = 0
    for _ in range(3000):
        segments = [rng.choice(segs) for _ in range(rng.randint(2, 5))]
        result = find_intersecting_pair(segments)
        if result is None:
            assert not _brute_any(segments)
        else:
            found += 1
            i, j = result
            assert i != j
            assert do_intersect(segments[i], segments[j])
    assert 0 < found < 3000


def test_many_disjoint_segments_then_one_crossing():
    n = 3000
    segments = [((k, 2 * k), (4 * n - k, 2 * k)) for k in range(n)]
    assert find_intersecting_pair(segments) is None

    segments.append(((2 * n, -1), (2 * n, 3)))
    i, j = find_intersecting_pair(segments)
    assert n in (i, j)
    assert do_intersect(segments[i], segments[j])


def test_star_of_shared_endpoints_keeps_sweep_order():
    segments = [
        ((0, 0), (2, 2)),
        ((0, 4), (2, 2)),
        ((2, 2), (4, 0)),
        ((2, 2), (4, 4)),
        ((0, 10), (4, 10)),
    ]
    assert find_intersecting_pair_by(segments, touches_beyond_endpoints) is None
    assert find_intersecting_pair(segments) is not None

    segments.append(((1, 1), (1, 5)))
    i, j = find_intersecting_pair_by(segments, touches_beyond_endpoints)
    assert 5 in (i, j)
    assert touches_beyond_endpoints(segments[i], segments[j])
