"""geo – vectorised haversine distances along a route."""

from .geo_utils import MaybeLatLon, has_coordinates, segment_distances

__all__ = ["MaybeLatLon", "has_coordinates", "segment_distances"]
