"""
Geographic utilities for the route energy model.

Distances use the haversine formula, vectorised over a whole route with
numpy. The earth radius is a parameter so the same helper serves miles
(default) and kilometres.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from ..config import EARTH_RADIUS_MILES

# A coordinate pair (latitude, longitude) in decimal degrees; either may be unknown
MaybeLatLon = Tuple[Optional[float], Optional[float]]


def has_coordinates(point: MaybeLatLon) -> bool:
    return point[0] is not None and point[1] is not None


def segment_distances(
    points: Sequence[MaybeLatLon],
    radius: float = EARTH_RADIUS_MILES,
) -> np.ndarray:
    """
    Great-circle distances between consecutive points of an ordered route.

    Segments with a missing coordinate at either end get a distance of 0.0
    rather than being dropped, so index ``i`` always refers to the leg
    ``points[i] -> points[i + 1]``.

    Args:
        points: (latitude, longitude) pairs in decimal degrees, in route order.
        radius: Sphere radius; distances are in the same unit.

    Returns:
        Array of length ``max(len(points) - 1, 0)``.
    """
    n_segments = max(len(points) - 1, 0)
    if n_segments == 0:
        return np.zeros(0)

    coords = np.array(
        [[np.nan if v is None else float(v) for v in point] for point in points],
        dtype=float,
    )
    lat = np.radians(coords[:, 0])
    lon = np.radians(coords[:, 1])

    dlat = lat[1:] - lat[:-1]
    dlon = lon[1:] - lon[:-1]
    a = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    distances = radius * c

    # NaN only comes from a missing coordinate
    return np.where(np.isnan(distances), 0.0, distances)
