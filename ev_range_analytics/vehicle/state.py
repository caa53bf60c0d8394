"""
Vehicle State Module
Immutable snapshots of vehicle telemetry and battery health history.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple


class ChargeState(Enum):
    """Charging connection state reported by the vehicle."""
    CHARGING = "charging"
    DISCONNECTED = "disconnected"
    COMPLETE = "complete"
    STOPPED = "stopped"


class DataSource(Enum):
    """Where a vehicle reading came from."""
    MOCK = "mock"
    TESLA_API = "tesla_api"
    MANUAL = "manual"


class SnapshotTrigger(Enum):
    """Event that caused a health snapshot to be recorded."""
    FULL_CHARGE = "full_charge"
    TRIP_START = "trip_start"
    TRIP_END = "trip_end"
    MANUAL = "manual"


# Fixed tire order: (attribute, display label, axle)
TIRE_POSITIONS: Tuple[Tuple[str, str, str], ...] = (
    ("front_left", "Front Left", "front"),
    ("front_right", "Front Right", "front"),
    ("rear_left", "Rear Left", "rear"),
    ("rear_right", "Rear Right", "rear"),
)


@dataclass(frozen=True)
class TirePressure:
    """Tire pressures in PSI."""
    front_left: float
    front_right: float
    rear_left: float
    rear_right: float

    def items(self) -> Iterator[Tuple[str, str, str, float]]:
        """Yield (key, label, axle, psi) in a fixed FL, FR, RL, RR order."""
        for key, label, axle in TIRE_POSITIONS:
            yield key, label, axle, getattr(self, key)

    @classmethod
    def uniform(cls, psi: float) -> "TirePressure":
        return cls(psi, psi, psi, psi)


@dataclass(frozen=True)
class VehicleState:
    """
    Current vehicle snapshot ("now").

    nominal_full_pack_energy is the pack capacity estimate in kWh; it is the
    battery health proxy and shrinks as the pack ages.
    """
    battery_percent: float
    range_miles: float
    charge_state: ChargeState
    charge_limit_percent: float
    tire_pressure: TirePressure
    odometer: float
    software_version: str
    nominal_full_pack_energy: float
    timestamp: datetime
    data_source: DataSource = DataSource.MANUAL

    def __post_init__(self):
        # Telemetry can overshoot slightly; keep battery percent in its domain
        if not 0.0 <= self.battery_percent <= 100.0:
            object.__setattr__(
                self, "battery_percent", max(0.0, min(100.0, self.battery_percent))
            )

    @property
    def capacity_kwh(self) -> float:
        return self.nominal_full_pack_energy

    def to_dict(self) -> Dict[str, Any]:
        return {
            "battery_percent": self.battery_percent,
            "range_miles": self.range_miles,
            "charge_state": self.charge_state.value,
            "charge_limit_percent": self.charge_limit_percent,
            "tire_pressure": {key: psi for key, _, _, psi in self.tire_pressure.items()},
            "odometer": self.odometer,
            "software_version": self.software_version,
            "nominal_full_pack_energy": self.nominal_full_pack_energy,
            "timestamp": self.timestamp.isoformat(),
            "data_source": self.data_source.value,
        }


@dataclass(frozen=True)
class VehicleHealthSnapshot:
    """
    One entry of the append-only battery health history.

    Same telemetry as VehicleState plus the owning user and the trigger that
    recorded it. Histories are ordered by timestamp ascending.
    """
    user_id: str
    timestamp: datetime
    battery_percent: float
    range_miles: float
    nominal_full_pack_energy: float
    odometer: float
    tire_pressure: TirePressure
    software_version: str
    trigger: SnapshotTrigger
    charge_state: ChargeState = ChargeState.DISCONNECTED
    charge_limit_percent: float = 80.0
    snapshot_id: Optional[str] = None

    @property
    def capacity_kwh(self) -> float:
        return self.nominal_full_pack_energy

    @classmethod
    def from_state(
        cls,
        state: VehicleState,
        user_id: str,
        trigger: SnapshotTrigger = SnapshotTrigger.MANUAL,
        snapshot_id: Optional[str] = None,
    ) -> "VehicleHealthSnapshot":
        """Record the given vehicle state as a history entry."""
        return cls(
            user_id=user_id,
            timestamp=state.timestamp,
            battery_percent=state.battery_percent,
            range_miles=state.range_miles,
            nominal_full_pack_energy=state.nominal_full_pack_energy,
            odometer=state.odometer,
            tire_pressure=state.tire_pressure,
            software_version=state.software_version,
            trigger=trigger,
            charge_state=state.charge_state,
            charge_limit_percent=state.charge_limit_percent,
            snapshot_id=snapshot_id,
        )

    def to_state(self) -> VehicleState:
        """View this snapshot as a VehicleState (e.g. to generate alerts for it)."""
        return VehicleState(
            battery_percent=self.battery_percent,
            range_miles=self.range_miles,
            charge_state=self.charge_state,
            charge_limit_percent=self.charge_limit_percent,
            tire_pressure=self.tire_pressure,
            odometer=self.odometer,
            software_version=self.software_version,
            nominal_full_pack_energy=self.nominal_full_pack_energy,
            timestamp=self.timestamp,
        )

    def to_record(self) -> Dict[str, Any]:
        """Flatten into a single-level dict (one CSV / DataFrame row)."""
        record: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, TirePressure):
                for key, _, _, psi in value.items():
                    record[f"tire_{key}"] = psi
            elif isinstance(value, Enum):
                record[f.name] = value.value
            else:
                record[f.name] = value
        return record
