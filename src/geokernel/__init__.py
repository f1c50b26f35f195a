"""geokernel: exact 2D geometry primitives.

Convex hulls, rotating calipers, closest pair and sweep-line segment
intersection over int / float / Fraction coordinates. Runnable entrypoints
live in `scripts/` and `main.py`.
"""

from .geometry import (
    Direction,
    IntersectionType,
    Segment,
    antipodal_pairs,
    convex_hull,
    convex_hull_indices,
    cross,
    do_intersect,
    find_intersecting_pair,
    find_intersecting_pair_by,
    hull_diameter_squared,
    min_distance_squared,
    polygon_area,
    relationship,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "IntersectionType",
    "Segment",
    "antipodal_pairs",
    "convex_hull",
    "convex_hull_indices",
    "cross",
    "do_intersect",
    "find_intersecting_pair",
    "find_intersecting_pair_by",
    "hull_diameter_squared",
    "min_distance_squared",
    "polygon_area",
    "relationship",
]
