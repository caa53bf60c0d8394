"""vehicle – immutable vehicle state, tire pressures and health snapshots."""

from .state import (
    ChargeState,
    DataSource,
    SnapshotTrigger,
    TirePressure,
    VehicleState,
    VehicleHealthSnapshot,
    TIRE_POSITIONS,
)

__all__ = [
    "ChargeState", "DataSource", "SnapshotTrigger", "TirePressure",
    "VehicleState", "VehicleHealthSnapshot", "TIRE_POSITIONS",
]
