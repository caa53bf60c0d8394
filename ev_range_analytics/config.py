"""
Engine Configuration
Centralized constants for vehicle spec, trend analysis and route energy modelling.

Every threshold the engine uses lives here rather than inside the analysis
functions, so callers can tune a vehicle profile without touching the math.
Defaults describe a Tesla Model Y Long Range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Earth radius used for great-circle distances
EARTH_RADIUS_MILES = 3959.0
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class VehicleSpecConstants:
    """Static per-model specification consumed by the alert generator."""
    # Tires (PSI)
    front_tire_psi: float = 45.0
    rear_tire_psi: float = 45.0
    tire_tolerance_psi: float = 4.0
    tire_ignore_band_psi: float = 1.0    # Deviations up to this are noise

    # Battery
    design_capacity_kwh: float = 75.0
    battery_health_warning_percent: float = 85.0

    # Maintenance
    service_interval_miles: float = 12500.0
    service_due_fraction: float = 0.88   # Alert once this share of the interval is used

    # Software (None disables the update check)
    latest_software_version: Optional[str] = None

    def __post_init__(self):
        if self.design_capacity_kwh <= 0:
            raise ValueError(
                f"design_capacity_kwh must be positive, got {self.design_capacity_kwh}"
            )
        if self.service_interval_miles <= 0:
            raise ValueError(
                f"service_interval_miles must be positive, got {self.service_interval_miles}"
            )
        if self.tire_tolerance_psi < self.tire_ignore_band_psi:
            raise ValueError(
                f"tire_tolerance_psi ({self.tire_tolerance_psi}) must not be smaller "
                f"than tire_ignore_band_psi ({self.tire_ignore_band_psi})"
            )
        if not 0.0 < self.service_due_fraction <= 1.0:
            raise ValueError(
                f"service_due_fraction must be in (0, 1], got {self.service_due_fraction}"
            )


@dataclass(frozen=True)
class TrendConfig:
    """Configuration for battery degradation trend classification"""
    design_capacity_kwh: float = 75.0
    min_trend_samples: int = 3           # Trend needs at least this many snapshots
    recent_window: int = 3               # Snapshots in the "recent" window
    degrading_factor: float = 2.0        # Recent drop vs overall average multiplier

    def __post_init__(self):
        if self.recent_window < 2:
            raise ValueError(f"recent_window must be at least 2, got {self.recent_window}")
        if self.min_trend_samples < self.recent_window:
            raise ValueError(
                f"min_trend_samples ({self.min_trend_samples}) must be >= "
                f"recent_window ({self.recent_window})"
            )


@dataclass(frozen=True)
class EnergyModelConfig:
    """Configuration for segment-by-segment route energy modelling"""
    # Vehicle
    design_capacity_kwh: float = 75.0
    consumption_kwh_per_mile: float = 0.25
    epa_range_miles: float = 330.0
    supercharger_rate_mph: float = 170.0  # Miles of range added per hour at peak

    # Charging stop policy (battery percent)
    safety_margin_percent: float = 20.0   # Never plan to drop below this
    charge_target_percent: float = 80.0   # Level reached after a modelled stop

    # Route flags (battery percent at destination)
    low_battery_percent: float = 10.0
    caution_battery_percent: float = 20.0

    # Geometry
    earth_radius: float = EARTH_RADIUS_MILES

    def __post_init__(self):
        if self.design_capacity_kwh <= 0:
            raise ValueError(
                f"design_capacity_kwh must be positive, got {self.design_capacity_kwh}"
            )
        if self.consumption_kwh_per_mile < 0:
            raise ValueError(
                f"consumption_kwh_per_mile must be non-negative, got {self.consumption_kwh_per_mile}"
            )
        if not 0.0 <= self.safety_margin_percent < self.charge_target_percent <= 100.0:
            raise ValueError(
                f"Expected 0 <= safety_margin_percent ({self.safety_margin_percent}) < "
                f"charge_target_percent ({self.charge_target_percent}) <= 100"
            )
        if self.low_battery_percent > self.caution_battery_percent:
            raise ValueError(
                f"low_battery_percent ({self.low_battery_percent}) must not exceed "
                f"caution_battery_percent ({self.caution_battery_percent})"
            )


DEFAULT_VEHICLE_SPEC = VehicleSpecConstants()
DEFAULT_TREND_CONFIG = TrendConfig()
DEFAULT_ENERGY_CONFIG = EnergyModelConfig()
