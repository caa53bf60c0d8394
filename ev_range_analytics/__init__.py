"""
EV Range Analytics
==================
Pure, synchronous analytics over already-fetched EV telemetry: battery
degradation trend, service alerts, trip range confidence and segment-by-segment
route energy modelling with charging stop suggestions.

Package layout
--------------
ev_range_analytics/
    config.py    – vehicle spec, trend and energy model configuration
    vehicle/     – vehicle state, tire pressures, health snapshots
    geo/         – haversine segment distances along a route
    analytics/   – degradation analyzer, alert generator, range confidence
    routing/     – route energy model, charging time, route assessment
    data/        – snapshot providers (in-memory, CSV), recall records
    utils/       – numeric helpers
"""

from .config import (
    VehicleSpecConstants,
    TrendConfig,
    EnergyModelConfig,
    DEFAULT_VEHICLE_SPEC,
    DEFAULT_TREND_CONFIG,
    DEFAULT_ENERGY_CONFIG,
)
from .vehicle import (
    ChargeState,
    DataSource,
    SnapshotTrigger,
    TirePressure,
    VehicleState,
    VehicleHealthSnapshot,
)
from .analytics import (
    analyze_degradation,
    generate_alerts,
    estimate_range_confidence,
)
from .routing import RouteWaypoint, model_route_energy, assess_route

__version__ = "0.1.0"

__all__ = [
    "VehicleSpecConstants", "TrendConfig", "EnergyModelConfig",
    "DEFAULT_VEHICLE_SPEC", "DEFAULT_TREND_CONFIG", "DEFAULT_ENERGY_CONFIG",
    "ChargeState", "DataSource", "SnapshotTrigger", "TirePressure",
    "VehicleState", "VehicleHealthSnapshot",
    "analyze_degradation", "generate_alerts", "estimate_range_confidence",
    "RouteWaypoint", "model_route_energy", "assess_route",
]
