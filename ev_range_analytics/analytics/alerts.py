"""
Service Alert Generator
Derives maintenance and safety alerts from a single vehicle snapshot.

Alerts are regenerated on every call and never persisted. A condition that
is not met simply produces no alert; nothing here raises for a well-formed
VehicleState.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import VehicleSpecConstants, DEFAULT_VEHICLE_SPEC
from ..data.recalls import RecallRecord
from ..utils.numeric import round_to_int
from ..vehicle.state import VehicleState


class AlertType(Enum):
    TIRE_PRESSURE = "tire_pressure"
    BATTERY = "battery"
    SOFTWARE = "software"
    SERVICE_DUE = "service_due"
    RECALL = "recall"


class AlertSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class VehicleServiceAlert:
    """Maintenance / safety alert record"""
    alert_id: str
    type: AlertType
    severity: AlertSeverity
    title: str
    description: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.alert_id,
            "type": self.type.value,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
        }


def _fmt(value: float) -> str:
    """Drop a trailing .0 from whole numbers (45.0 -> '45')."""
    return f"{value:g}"


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def tire_severity(diff: float, spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC) -> Optional[AlertSeverity]:
    """
    Severity for a tire deviating ``diff`` PSI from its target.

    Deviations inside the ignore band produce no alert, deviations up to the
    tolerance are warnings and anything beyond the tolerance is critical.
    """
    if diff <= spec.tire_ignore_band_psi:
        return None
    if diff <= spec.tire_tolerance_psi:
        return AlertSeverity.WARNING
    return AlertSeverity.CRITICAL


def check_tire_pressure(
    state: VehicleState,
    spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC,
) -> List[VehicleServiceAlert]:
    alerts = []
    for key, label, axle, psi in state.tire_pressure.items():
        target = spec.front_tire_psi if axle == "front" else spec.rear_tire_psi
        diff = abs(psi - target)
        severity = tire_severity(diff, spec)
        if severity is None:
            continue

        direction = "below" if psi < target else "above"
        description = f"{_fmt(diff)} PSI {direction} spec ({_fmt(target)} PSI)."
        if severity is AlertSeverity.CRITICAL:
            description += " Check immediately."

        alerts.append(VehicleServiceAlert(
            alert_id=f"tire-{key}",
            type=AlertType.TIRE_PRESSURE,
            severity=severity,
            title=f"{label} Tire: {_fmt(psi)} PSI",
            description=description,
            timestamp=state.timestamp,
        ))
    return alerts


def check_battery_health(
    state: VehicleState,
    spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC,
) -> List[VehicleServiceAlert]:
    health_percent = state.nominal_full_pack_energy / spec.design_capacity_kwh * 100
    if health_percent >= spec.battery_health_warning_percent:
        return []
    return [VehicleServiceAlert(
        alert_id="battery-health",
        type=AlertType.BATTERY,
        severity=AlertSeverity.WARNING,
        title=f"Battery Health: {round_to_int(health_percent)}%",
        description=(
            "Battery degradation is above typical levels. "
            "Consider a service appointment."
        ),
        timestamp=state.timestamp,
    )]


def parse_version(version: str) -> Optional[Tuple[int, ...]]:
    """'2024.38.25' -> (2024, 38, 25); None if any part is not numeric."""
    parts = version.strip().split(".")
    if not all(p.isdigit() for p in parts):
        return None
    return tuple(int(p) for p in parts)


def check_software(
    state: VehicleState,
    spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC,
) -> List[VehicleServiceAlert]:
    if spec.latest_software_version is None:
        return []
    installed = parse_version(state.software_version)
    latest = parse_version(spec.latest_software_version)
    if installed is None or latest is None or installed >= latest:
        return []
    return [VehicleServiceAlert(
        alert_id="software-update",
        type=AlertType.SOFTWARE,
        severity=AlertSeverity.INFO,
        title=f"Software Update Available: {spec.latest_software_version}",
        description=f"Installed version {state.software_version} is behind the latest release.",
        timestamp=state.timestamp,
    )]


def check_service_due(
    state: VehicleState,
    spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC,
) -> List[VehicleServiceAlert]:
    interval = spec.service_interval_miles
    miles_since_service = state.odometer % interval
    if miles_since_service <= interval * spec.service_due_fraction:
        return []
    remaining = interval - miles_since_service
    return [VehicleServiceAlert(
        alert_id="service-due",
        type=AlertType.SERVICE_DUE,
        severity=AlertSeverity.INFO,
        title="Service Approaching",
        description=f"{_fmt(remaining)} miles until next tire rotation / inspection.",
        timestamp=state.timestamp,
    )]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_alerts(
    state: VehicleState,
    spec: VehicleSpecConstants = DEFAULT_VEHICLE_SPEC,
) -> List[VehicleServiceAlert]:
    """
    Generate all service alerts for the current vehicle state.

    Order is fixed (tires FL/FR/RL/RR, battery, software, service) and every
    alert carries the state's timestamp, so identical input always yields an
    identical list.
    """
    return (
        check_tire_pressure(state, spec)
        + check_battery_health(state, spec)
        + check_software(state, spec)
        + check_service_due(state, spec)
    )


def recall_alerts(recalls: Iterable[RecallRecord], timestamp: datetime) -> List[VehicleServiceAlert]:
    """Turn recall registry records into alerts, preserving registry order."""
    return [
        VehicleServiceAlert(
            alert_id=f"recall-{recall.campaign_number}",
            type=AlertType.RECALL,
            severity=AlertSeverity.WARNING,
            title=f"Recall: {recall.component}",
            description=recall.summary,
            timestamp=timestamp,
        )
        for recall in recalls
    ]
