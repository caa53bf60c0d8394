"""
Battery Degradation Analyzer
Infers pack capacity loss and its trend from the health snapshot history.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence

import numpy as np

from ..config import TrendConfig, DEFAULT_TREND_CONFIG
from ..utils.numeric import round_half_up
from ..vehicle.state import VehicleHealthSnapshot


class TrendDirection(Enum):
    """Direction of battery capacity over recent snapshots."""
    IMPROVING = "improving"            # Capacity rose (e.g. BMS recalibration)
    STABLE = "stable"
    DEGRADING = "degrading"            # Recent losses outpace the long-run average
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class VehicleHealthTrend:
    """Derived degradation summary. Recomputed on demand, never persisted."""
    current_capacity: float
    baseline_capacity: float
    degradation_percent: float         # 3.2 means 3.2 % of baseline lost
    trend_direction: TrendDirection
    sample_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_capacity": self.current_capacity,
            "baseline_capacity": self.baseline_capacity,
            "degradation_percent": self.degradation_percent,
            "trend_direction": self.trend_direction.value,
            "sample_count": self.sample_count,
        }

    def summary(self) -> str:
        return (
            f"Battery: {self.current_capacity:.1f} kWh of {self.baseline_capacity:.1f} kWh baseline "
            f"({self.degradation_percent:.1f}% degraded, trend={self.trend_direction.value}, "
            f"n={self.sample_count})"
        )


def capacity_series(history: Sequence[VehicleHealthSnapshot]) -> np.ndarray:
    """Pack capacity (kWh) of each snapshot, oldest first."""
    return np.array([s.nominal_full_pack_energy for s in history], dtype=float)


def classify_trend(capacities: np.ndarray, config: TrendConfig = DEFAULT_TREND_CONFIG) -> TrendDirection:
    """
    Classify the capacity trend of an ordered capacity series.

    Compares the total drop across the last ``recent_window`` samples with
    the mean per-step drop over the whole series. Only an actual recent loss
    can count as degrading; a negative recent drop means capacity went up.
    """
    if len(capacities) < config.min_trend_samples:
        return TrendDirection.STABLE

    recent_drop = float(capacities[-config.recent_window] - capacities[-1])
    overall_drop = float(np.mean(-np.diff(capacities)))

    if recent_drop > 0 and recent_drop > overall_drop * config.degrading_factor:
        return TrendDirection.DEGRADING
    if recent_drop < 0:
        return TrendDirection.IMPROVING
    return TrendDirection.STABLE


def analyze_degradation(
    history: Sequence[VehicleHealthSnapshot],
    config: TrendConfig = DEFAULT_TREND_CONFIG,
) -> VehicleHealthTrend:
    """
    Derive the battery health trend from a time-ordered snapshot history.

    Args:
        history: Snapshots ordered by timestamp ascending (may be empty).
        config: Trend thresholds and the design capacity used when the
            history is empty.

    Returns:
        VehicleHealthTrend. With fewer than two snapshots the trend is
        INSUFFICIENT_DATA and degradation is 0.
    """
    if len(history) < 2:
        capacity = (
            float(history[0].nominal_full_pack_energy) if history else config.design_capacity_kwh
        )
        return VehicleHealthTrend(
            current_capacity=capacity,
            baseline_capacity=capacity,
            degradation_percent=0.0,
            trend_direction=TrendDirection.INSUFFICIENT_DATA,
            sample_count=len(history),
        )

    capacities = capacity_series(history)
    baseline = float(capacities[0])
    current = float(capacities[-1])

    if baseline > 0:
        degradation = round_half_up((baseline - current) / baseline * 100, 1)
    else:
        degradation = 0.0

    return VehicleHealthTrend(
        current_capacity=current,
        baseline_capacity=baseline,
        degradation_percent=degradation,
        trend_direction=classify_trend(capacities, config),
        sample_count=len(history),
    )
