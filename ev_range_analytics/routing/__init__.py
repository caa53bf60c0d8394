"""routing – route energy model, charging stop suggestions and route assessment."""

from .energy_model import (
    RouteWaypoint,
    RouteSegment,
    SuggestedChargingStop,
    RouteEnergyResult,
    model_route_energy,
    percent_per_mile,
    segment_warning_level,
)
from .planner import (
    ChargingTimeEstimate,
    RouteAssessment,
    assess_route,
    estimate_charging_time,
)

__all__ = [
    "RouteWaypoint", "RouteSegment", "SuggestedChargingStop", "RouteEnergyResult",
    "model_route_energy", "percent_per_mile", "segment_warning_level",
    "ChargingTimeEstimate", "RouteAssessment", "assess_route", "estimate_charging_time",
]
