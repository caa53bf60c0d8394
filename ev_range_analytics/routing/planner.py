"""
Route planning helpers built on the energy model.

assess_route() feeds the energy model's total distance into the range
confidence estimator; estimate_charging_time() sizes a suggested stop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..analytics.range_confidence import TripRangeAnalysis, estimate_range_confidence
from ..config import EnergyModelConfig, DEFAULT_ENERGY_CONFIG
from ..utils.numeric import round_to_int
from ..vehicle.state import VehicleState
from .energy_model import RouteEnergyResult, RouteWaypoint, model_route_energy


@dataclass(frozen=True)
class ChargingTimeEstimate:
    minutes: int
    display: str                       # "25min" or "1h 10min"


@dataclass(frozen=True)
class RouteAssessment:
    """Energy model output together with the trip confidence it implies"""
    energy: RouteEnergyResult
    confidence: TripRangeAnalysis
    charging_times: List[ChargingTimeEstimate]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "energy": self.energy.to_dict(),
            "confidence": self.confidence.to_dict(),
            "charging_minutes": [t.minutes for t in self.charging_times],
        }

    def summary(self) -> str:
        lines = [self.confidence.summary(), self.energy.summary()]
        for stop, eta in zip(self.energy.charging_stops, self.charging_times):
            lines.append(
                f"  Charge at #{stop.waypoint_sequence}: "
                f"{stop.arrival_percent:.0f}% -> {stop.target_charge_percent:.0f}% (~{eta.display})"
            )
        return "\n".join(lines)


def _format_minutes(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}min"
    return f"{minutes // 60}h {minutes % 60}min"


def estimate_charging_time(
    current_percent: float,
    target_percent: float,
    config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG,
) -> ChargingTimeEstimate:
    """
    Estimate supercharging time from ``current_percent`` to ``target_percent``.

    Charging tapers with the target level: full rate up to 50 %, 70 % of it
    up to 80 % and 40 % above that. Returns zero minutes when no charge is
    needed.
    """
    percent_to_add = target_percent - current_percent
    if percent_to_add <= 0 or config.supercharger_rate_mph <= 0:
        return ChargingTimeEstimate(minutes=0, display=_format_minutes(0))

    range_to_add = percent_to_add / 100 * config.epa_range_miles
    if target_percent <= 50:
        rate_per_min = config.supercharger_rate_mph / 60
    elif target_percent <= 80:
        rate_per_min = config.supercharger_rate_mph * 0.7 / 60
    else:
        rate_per_min = config.supercharger_rate_mph * 0.4 / 60

    minutes = round_to_int(range_to_add / rate_per_min)
    return ChargingTimeEstimate(minutes=minutes, display=_format_minutes(minutes))


def assess_route(
    state: VehicleState,
    waypoints: Sequence[RouteWaypoint],
    config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG,
) -> Optional[RouteAssessment]:
    """
    Model the route and score it against the vehicle's current range.

    Returns None when the route has fewer than two usable waypoints.
    """
    energy = model_route_energy(state, waypoints, config)
    if energy is None:
        return None

    confidence = estimate_range_confidence(state.range_miles, energy.total_distance)
    charging_times = [
        estimate_charging_time(stop.arrival_percent, stop.target_charge_percent, config)
        for stop in energy.charging_stops
    ]
    return RouteAssessment(energy=energy, confidence=confidence, charging_times=charging_times)
