"""analytics – degradation trend, service alerts and range confidence.

All functions are pure: they take already-loaded data and return new value
objects, so they are safe to call concurrently and repeatedly.
"""

from .degradation import (
    TrendDirection,
    VehicleHealthTrend,
    analyze_degradation,
    capacity_series,
    classify_trend,
)
from .alerts import (
    AlertType,
    AlertSeverity,
    VehicleServiceAlert,
    generate_alerts,
    recall_alerts,
    tire_severity,
)
from .range_confidence import (
    RiskTier,
    TripRangeAnalysis,
    classify_risk_tier,
    estimate_range_confidence,
)

__all__ = [
    "TrendDirection", "VehicleHealthTrend", "analyze_degradation",
    "capacity_series", "classify_trend",
    "AlertType", "AlertSeverity", "VehicleServiceAlert",
    "generate_alerts", "recall_alerts", "tire_severity",
    "RiskTier", "TripRangeAnalysis", "classify_risk_tier", "estimate_range_confidence",
]
