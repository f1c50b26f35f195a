"""2D computational-geometry kernel."""

from .closest_pair import min_distance_squared
from .direction import Direction, sort_by_angle
from .hull import (
    antipodal_pairs,
    convex_hull,
    convex_hull_indices,
    half_hull,
    hull_diameter_squared,
)
from .orientation import (
    TURN_PREDICATES,
    clockwise,
    clockwise_or_collinear,
    counterclockwise,
    counterclockwise_or_collinear,
    cross,
    get_turn_predicate,
)
from .polygon import point_in_convex_polygon, polygon_area, polygon_bounds
from .segments import IntersectionType, Segment, do_intersect, is_in_rectangle, relationship
from .sweep import ActiveSegment, Event, find_intersecting_pair, find_intersecting_pair_by

__all__ = [
    "ActiveSegment",
    "Direction",
    "Event",
    "IntersectionType",
    "Segment",
    "TURN_PREDICATES",
    "antipodal_pairs",
    "clockwise",
    "clockwise_or_collinear",
    "convex_hull",
    "convex_hull_indices",
    "counterclockwise",
    "counterclockwise_or_collinear",
    "cross",
    "do_intersect",
    "find_intersecting_pair",
    "find_intersecting_pair_by",
    "get_turn_predicate",
    "half_hull",
    "hull_diameter_squared",
    "is_in_rectangle",
    "min_distance_squared",
    "point_in_convex_polygon",
    "polygon_area",
    "polygon_bounds",
    "relationship",
    "sort_by_angle",
]
