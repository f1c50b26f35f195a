"""Sweep-line detection of an intersecting segment pair (Shamos-Hoey).

Events are processed left to right. The active segments are kept in a
``sortedcontainers.SortedList`` under the ``ActiveSegment`` ordering, so
insertion, removal and neighbour lookup are O(log n) and the whole sweep is
O(n log n). Only segments that become neighbours in that order are tested,
which is enough to find *an* intersecting pair whenever one exists (not
necessarily the left-most one).

Heights are compared by cross-multiplication, never by division, so integer
and ``Fraction`` coordinates are ordered exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from sortedcontainers import SortedList

from ._points import as_segment_pairs
from .segments import Segment, do_intersect

IntersectPredicate = Callable[[Segment, Segment], bool]


@dataclass(frozen=True)
class Event:
    """Sweep event: segment ``id`` starts or ends at ``x``."""

    x: Any
    is_start: bool
    id: int

    def sort_key(self) -> Tuple[Any, bool]:
        # start events before end events at the same x
        return (self.x, not self.is_start)


def _sign(value) -> int:
    return (value > 0) - (value < 0)


def height_at(seg: Segment, x: Any) -> Tuple[Any, Any]:
    """Height of the (canonical) segment at ``x`` as ``(numerator, denominator)``.

    The denominator is ``x2 - x1`` and always positive. Vertical and
    zero-length segments report the y of their first (lower) endpoint over 1.
    """
    (x1, y1), (x2, y2) = seg
    dx = x2 - x1
    if dx == 0:
        return y1, 1
    return y1 * dx + (x - x1) * (y2 - y1), dx


def _compare_height(a: Segment, b: Segment, x: Any) -> int:
    na, da = height_at(a, x)
    nb, db = height_at(b, x)
    return _sign(na * db - nb * da)


def _compare_slope(a: Segment, b: Segment) -> int:
    dxa, dya = a.q[0] - a.p[0], a.q[1] - a.p[1]
    dxb, dyb = b.q[0] - b.p[0], b.q[1] - b.p[1]
    if dxa == 0 or dxb == 0:
        # vertical counts as the steepest slope
        return (dxa == 0) - (dxb == 0)
    return _sign(dya * dxb - dyb * dxa)


def _compare_at_touch(a: Segment, b: Segment, x: Any) -> int:
    """Order two segments through the same point at ``x``.

    Segments ending at ``x`` come first, steepest first (their order just left
    of ``x``). All others follow by increasing slope (their order just right
    of ``x``), vertical last.
    """
    a_ends = a.p[0] != a.q[0] and a.q[0] == x
    b_ends = b.p[0] != b.q[0] and b.q[0] == x
    if a_ends != b_ends:
        return -1 if a_ends else 1
    if a_ends:
        return _compare_slope(b, a)
    return _compare_slope(a, b)


@dataclass(frozen=True)
class ActiveSegment:
    """Segment currently crossed by the sweep line.

    Two active segments are compared by their height at the later of their
    two start x-coordinates. Equal heights are ordered by slope (see
    ``_compare_at_touch``) and then by segment id. For segments that meet
    at most at endpoints of both, this agrees with their vertical order on
    the current sweep line.
    """

    segment: Segment  # canonical: p is the left endpoint
    id: int

    def __lt__(self, other: "ActiveSegment") -> bool:
        a, b = self.segment, other.segment
        x = max(a.p[0], b.p[0])
        c = _compare_height(a, b, x) or _compare_at_touch(a, b, x)
        if c != 0:
            return c < 0
        return self.id < other.id


def _build_events(segments: List[Segment]) -> List[Event]:
    events: List[Event] = []
    for i, seg in enumerate(segments):
        events.append(Event(seg.p[0], True, i))
        events.append(Event(seg.q[0], False, i))
    events.sort(key=Event.sort_key)
    return events


def _locate(active: SortedList, item: ActiveSegment) -> int:
    try:
        return active.index(item)
    except ValueError as exc:
        raise ValueError(
            f"Segment {item.id} is out of sweep order; the predicate rejected a pair "
            "that crosses or overlaps."
        ) from exc


def find_intersecting_pair_by(
    segments: Any,
    predicate: IntersectPredicate,
) -> Optional[Tuple[int, int]]:
    """Find a pair of segments accepted by ``predicate``.

    Parameters
    ----------
    segments : sequence of ((x1, y1), (x2, y2)) pairs, ``Segment``s, or an
        (N,2,2) / (N,4) array
    predicate : called with two segments (in input endpoint order); returns
        True when the pair should be reported. It may reject pairs that
        only share an endpoint of both (``IntersectionType.MUTUAL_ENDPOINT``);
        rejecting crossing or overlapping pairs breaks the sweep order.

    Returns
    -------
    (i, j) indices into ``segments``, the segment being processed first, or
    None when no neighbouring pair satisfies ``predicate``.

    Raises
    ------
    ValueError
        If a rejected crossing leaves an ending segment out of order.
    """
    raw = [Segment(p, q) for p, q in as_segment_pairs(segments)]
    canon = [s.canonical() for s in raw]

    active = SortedList()
    for event in _build_events(canon):
        item = ActiveSegment(canon[event.id], event.id)
        if event.is_start:
            pos = active.bisect_left(item)
            if pos < len(active):
                nxt = active[pos]
                if predicate(raw[event.id], raw[nxt.id]):
                    return event.id, nxt.id
            if pos > 0:
                prev = active[pos - 1]
                if predicate(raw[event.id], raw[prev.id]):
                    return event.id, prev.id
            active.add(item)
        else:
            pos = _locate(active, item)
            if 0 < pos < len(active) - 1:
                prev, nxt = active[pos - 1], active[pos + 1]
                if predicate(raw[nxt.id], raw[prev.id]):
                    return nxt.id, prev.id
            del active[pos]
    return None


def find_intersecting_pair(segments: Any) -> Optional[Tuple[int, int]]:
    """Find a pair of segments with at least one common point (see ``do_intersect``)."""
    return find_intersecting_pair_by(segments, do_intersect)
