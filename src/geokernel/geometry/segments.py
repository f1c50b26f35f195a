"""Segment relationship classification.

Both the full classifier (``relationship``) and the boolean fast path
(``do_intersect``) work on exact orientation signs, so integer input is
decided without rounding.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple

from ._points import Point
from .orientation import cross


class Segment(NamedTuple):
    """Closed segment between two points. Endpoint order carries no meaning."""

    p: Point
    q: Point

    def canonical(self) -> "Segment":
        """Same segment with the lexicographically smaller endpoint first."""
        if self.q < self.p:
            return Segment(self.q, self.p)
        return self

    def is_degenerate(self) -> bool:
        return self.p == self.q


class IntersectionType(Enum):
    NONE = "none"  # no common point
    PROPER = "proper"  # single crossing point interior to both
    COLLINEAR = "collinear"  # overlap of more than one point
    ONE_SIDED = "one_sided"  # an endpoint of one lies inside the other
    MUTUAL_ENDPOINT = "mutual_endpoint"  # they meet at an endpoint of both


def as_segment(seg: Any) -> Segment:
    if isinstance(seg, Segment):
        return seg
    a, b = seg
    return Segment((a[0], a[1]), (b[0], b[1]))


def is_in_rectangle(point: Point, diagonal: Any) -> bool:
    """True if ``point`` lies in the closed axis-parallel box spanned by ``diagonal``."""
    (x1, y1), (x2, y2) = diagonal
    return min(x1, x2) <= point[0] <= max(x1, x2) and min(y1, y2) <= point[1] <= max(y1, y2)


def _point_relationship(point: Point, seg: Segment) -> IntersectionType:
    if seg.is_degenerate():
        return IntersectionType.MUTUAL_ENDPOINT if point == seg.p else IntersectionType.NONE
    if cross(seg.p, seg.q, point) != 0 or not is_in_rectangle(point, seg):
        return IntersectionType.NONE
    if point == seg.p or point == seg.q:
        return IntersectionType.MUTUAL_ENDPOINT
    return IntersectionType.ONE_SIDED


def relationship(seg1: Any, seg2: Any) -> IntersectionType:
    """Classify how two closed segments meet.

    Returns
    -------
    IntersectionType
        PROPER when they cross at a single interior point, COLLINEAR when they
        overlap in more than one point, ONE_SIDED when an endpoint of one
        touches the interior of the other, MUTUAL_ENDPOINT when the only
        common point is an endpoint of both, NONE otherwise.

    Notes
    -----
    The result does not depend on argument order or on the endpoint order of
    either segment. A zero-length segment is classified as a point touching
    the other segment.
    """
    s1 = as_segment(seg1)
    s2 = as_segment(seg2)
    if s1.is_degenerate():
        return _point_relationship(s1.p, s2)
    if s2.is_degenerate():
        return _point_relationship(s2.p, s1)

    p1, q1 = s1
    p2, q2 = s2
    o1 = cross(p1, q1, p2)
    o2 = cross(p1, q1, q2)
    o3 = cross(p2, q2, p1)
    o4 = cross(p2, q2, q1)

    if o1 != 0 and o2 != 0 and o3 != 0 and o4 != 0:
        if (o1 > 0) == (o2 > 0) or (o3 > 0) == (o4 > 0):
            return IntersectionType.NONE
        return IntersectionType.PROPER

    if o1 == 0 and o2 == 0:
        first, second = sorted((s1.canonical(), s2.canonical()))
        if second.p < first.q:
            return IntersectionType.COLLINEAR
        if second.p == first.q:
            return IntersectionType.MUTUAL_ENDPOINT
        return IntersectionType.NONE

    # Not collinear: at most one common point, and it is the endpoint whose
    # orientation is zero.
    if o1 == 0 or o2 == 0:
        point, other = (p2 if o1 == 0 else q2), s1
    else:
        point, other = (q1 if o4 == 0 else p1), s2
    if not is_in_rectangle(point, other):
        return IntersectionType.NONE
    if point == other.p or point == other.q:
        return IntersectionType.MUTUAL_ENDPOINT
    return IntersectionType.ONE_SIDED


def do_intersect(seg1: Any, seg2: Any) -> bool:
    """True if the two closed segments share at least one point."""
    (p1, q1) = s1 = as_segment(seg1)
    (p2, q2) = s2 = as_segment(seg2)

    o1 = cross(p1, q1, p2)
    o2 = cross(p1, q1, q2)
    o3 = cross(p2, q2, p1)
    o4 = cross(p2, q2, q1)

    if ((o1 > 0 and o2 < 0) or (o1 < 0 and o2 > 0)) and ((o3 > 0 and o4 < 0) or (o3 < 0 and o4 > 0)):
        return True
    return (
        (o1 == 0 and is_in_rectangle(p2, s1))
        or (o2 == 0 and is_in_rectangle(q2, s1))
        or (o3 == 0 and is_in_rectangle(p1, s2))
        or (o4 == 0 and is_in_rectangle(q1, s2))
    )
