"""Tabular I/O for point and segment sets."""

from .tables import (
    SEGMENT_COLUMNS,
    read_points_array,
    read_points_csv,
    read_segments_csv,
    write_points_csv,
)

__all__ = [
    "SEGMENT_COLUMNS",
    "read_points_array",
    "read_points_csv",
    "read_segments_csv",
    "write_points_csv",
]
