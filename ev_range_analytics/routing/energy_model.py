"""
Route Energy Model
Walks an ordered route segment by segment, tracks battery percent and
proposes charging stops before the battery would fall below the safety margin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..config import EnergyModelConfig, DEFAULT_ENERGY_CONFIG
from ..geo.geo_utils import has_coordinates, segment_distances
from ..vehicle.state import VehicleState


@dataclass(frozen=True)
class RouteWaypoint:
    """
    One stop of a planned route.

    ``sequence`` is the caller's ordering index. Either coordinate may be
    None when geocoding failed; legs touching such a waypoint count as zero
    distance.
    """
    sequence: int
    latitude: Optional[float]
    longitude: Optional[float]
    name: str = ""
    is_charging_stop: bool = False

    @property
    def has_coordinates(self) -> bool:
        return has_coordinates((self.latitude, self.longitude))


@dataclass(frozen=True)
class RouteSegment:
    """Traversal between two consecutive waypoints"""
    index: int
    start_sequence: int
    end_sequence: int
    distance: float
    draw_percent: float                # Battery percent used on this leg
    departure_percent: float           # Battery percent when leaving the start waypoint
    arrival_percent: float             # Battery percent on reaching the end waypoint
    charged_before: bool = False       # A charging stop was planned at the start waypoint
    warning_level: str = "ok"          # segment_warning_level() of the arrival percent

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "start_sequence": self.start_sequence,
            "end_sequence": self.end_sequence,
            "distance": self.distance,
            "draw_percent": self.draw_percent,
            "departure_percent": self.departure_percent,
            "arrival_percent": self.arrival_percent,
            "charged_before": self.charged_before,
            "warning_level": self.warning_level,
        }


@dataclass(frozen=True)
class SuggestedChargingStop:
    """
    A modelled charging stop.

    after_segment_index counts the segments already driven when the stop
    happens (0 means "charge before leaving the origin"); waypoint_sequence
    is the sequence of the waypoint where the vehicle charges.
    """
    after_segment_index: int
    waypoint_sequence: int
    target_charge_percent: float
    arrival_percent: float             # Battery percent on arrival at the charger

    def to_dict(self) -> Dict[str, Any]:
        return {
            "after_segment_index": self.after_segment_index,
            "waypoint_sequence": self.waypoint_sequence,
            "target_charge_percent": self.target_charge_percent,
            "arrival_percent": self.arrival_percent,
        }


@dataclass(frozen=True)
class RouteEnergyResult:
    """Outcome of modelling a route's energy draw"""
    total_distance: float
    final_battery_percent: float       # At destination, with suggested stops applied
    unassisted_final_percent: float    # At destination without any stops (may be negative)
    segments: List[RouteSegment] = field(default_factory=list)
    charging_stops: List[SuggestedChargingStop] = field(default_factory=list)
    needs_charging: bool = False
    range_anxiety: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_distance": self.total_distance,
            "final_battery_percent": self.final_battery_percent,
            "unassisted_final_percent": self.unassisted_final_percent,
            "segments": [s.to_dict() for s in self.segments],
            "charging_stops": [s.to_dict() for s in self.charging_stops],
            "needs_charging": self.needs_charging,
            "range_anxiety": self.range_anxiety,
        }

    def summary(self) -> str:
        """Return a human-readable summary of the modelled route."""
        lines = [
            f"Route: {self.total_distance:.1f} mi over {len(self.segments)} segment(s)",
            f"  Arrival battery : {self.final_battery_percent:.1f}% "
            f"(without stops: {self.unassisted_final_percent:.1f}%)",
            f"  Charging stops  : {len(self.charging_stops)}",
            "",
        ]
        for seg in self.segments:
            marker = "  [charge]" if seg.charged_before else ""
            if seg.warning_level != "ok":
                marker += f"  [{seg.warning_level}]"
            lines.append(
                f"    #{seg.start_sequence:>3} -> #{seg.end_sequence:<3} "
                f"{seg.distance:7.1f} mi  | {seg.departure_percent:5.1f}% -> "
                f"{seg.arrival_percent:5.1f}%{marker}"
            )
        flags = []
        if self.needs_charging:
            flags.append("NEEDS CHARGING")
        if self.range_anxiety:
            flags.append("RANGE ANXIETY")
        if flags:
            lines.append("")
            lines.append(f"  Flags: {', '.join(flags)}")
        return "\n".join(lines)


def percent_per_mile(state: VehicleState, config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG) -> float:
    """Battery percent consumed per mile for this vehicle's current pack capacity."""
    pack_kwh = state.nominal_full_pack_energy
    if pack_kwh <= 0:
        pack_kwh = config.design_capacity_kwh
    return config.consumption_kwh_per_mile / pack_kwh * 100


def model_route_energy(
    state: VehicleState,
    waypoints: Sequence[RouteWaypoint],
    config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG,
) -> Optional[RouteEnergyResult]:
    """
    Model battery depletion along an ordered route.

    Each leg draws ``distance * percent_per_mile`` from the running battery.
    When a leg would leave less than ``config.safety_margin_percent``, a
    charging stop is suggested at the leg's starting waypoint and the battery
    is reset to ``config.charge_target_percent`` before driving the leg.
    A stop is only suggested when the charge target is above the current
    level.

    Args:
        state: Current vehicle state (battery percent and pack capacity).
        waypoints: Route in driving order.
        config: Consumption, charging policy and flag thresholds.

    Returns:
        RouteEnergyResult, or None when fewer than two waypoints have both
        coordinates (nothing to compute).
    """
    if sum(1 for wp in waypoints if wp.has_coordinates) < 2:
        return None

    rate = percent_per_mile(state, config)
    distances = segment_distances(
        [(wp.latitude, wp.longitude) for wp in waypoints],
        radius=config.earth_radius,
    )

    running = float(state.battery_percent)
    unassisted = float(state.battery_percent)
    segments: List[RouteSegment] = []
    stops: List[SuggestedChargingStop] = []

    for i, distance in enumerate(distances):
        start, end = waypoints[i], waypoints[i + 1]
        distance = float(distance)
        draw = distance * rate
        unassisted -= draw

        charged = False
        if running - draw < config.safety_margin_percent and config.charge_target_percent > running:
            stops.append(SuggestedChargingStop(
                after_segment_index=i,
                waypoint_sequence=start.sequence,
                target_charge_percent=config.charge_target_percent,
                arrival_percent=running,
            ))
            running = config.charge_target_percent
            charged = True

        departure = running
        running = max(0.0, running - draw)
        segments.append(RouteSegment(
            index=i,
            start_sequence=start.sequence,
            end_sequence=end.sequence,
            distance=distance,
            draw_percent=draw,
            departure_percent=departure,
            arrival_percent=running,
            charged_before=charged,
            warning_level=segment_warning_level(running, config),
        ))

    has_planned_stop = any(wp.is_charging_stop for wp in waypoints)

    return RouteEnergyResult(
        total_distance=float(sum(s.distance for s in segments)),
        final_battery_percent=running,
        unassisted_final_percent=unassisted,
        segments=segments,
        charging_stops=stops,
        needs_charging=unassisted < config.low_battery_percent and not has_planned_stop,
        range_anxiety=unassisted < config.caution_battery_percent,
    )


def segment_warning_level(arrival_percent: float, config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG) -> str:
    """'critical', 'low' or 'ok' for the battery percent left after a leg."""
    if arrival_percent < config.low_battery_percent:
        return "critical"
    if arrival_percent < config.caution_battery_percent:
        return "low"
    return "ok"
