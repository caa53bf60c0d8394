"""
Range Confidence Estimator
Scores whether the available range covers a planned route.

The score is piecewise-linear in the range ratio (available / route):

    ratio >= 1.5        95 .. 100    comfortable
    1.2 <= ratio < 1.5  75 .. 95     comfortable
    1.0 <= ratio < 1.2  50 .. 75     tight
    0.8 <= ratio < 1.0  20 .. 50     risky
    ratio < 0.8          0 .. 20     insufficient

The breakpoints are a tunable calibration, kept stable because downstream
consumers compare scores across releases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from ..utils.numeric import clamp, round_to_int


class RiskTier(Enum):
    COMFORTABLE = "comfortable"
    TIGHT = "tight"
    RISKY = "risky"
    INSUFFICIENT = "insufficient"


@dataclass(frozen=True)
class TripRangeAnalysis:
    """Result of a trip feasibility check"""
    confidence_score: int              # 0-100
    can_complete_trip: bool
    buffer_distance: float             # available - route, may be negative
    route_distance: float
    available_range: float
    risk_tier: RiskTier

    @property
    def range_ratio(self) -> float:
        return self.available_range / max(self.route_distance, 1.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "confidence_score": self.confidence_score,
            "can_complete_trip": self.can_complete_trip,
            "buffer_distance": self.buffer_distance,
            "route_distance": self.route_distance,
            "available_range": self.available_range,
            "risk_tier": self.risk_tier.value,
        }

    def summary(self) -> str:
        verdict = "OK" if self.can_complete_trip else "NOT POSSIBLE without charging"
        return (
            f"Trip confidence {self.confidence_score}/100 [{self.risk_tier.value}]: "
            f"{self.available_range:.0f} mi available for {self.route_distance:.0f} mi "
            f"(buffer {self.buffer_distance:+.0f} mi) - {verdict}"
        )


def _score_and_tier(ratio: float) -> Tuple[float, RiskTier]:
    if ratio >= 1.5:
        return min(100.0, 95 + (ratio - 1.5) * 10), RiskTier.COMFORTABLE
    if ratio >= 1.2:
        return 75 + ((ratio - 1.2) / 0.3) * 20, RiskTier.COMFORTABLE
    if ratio >= 1.0:
        return 50 + ((ratio - 1.0) / 0.2) * 25, RiskTier.TIGHT
    if ratio >= 0.8:
        return 20 + ((ratio - 0.8) / 0.2) * 30, RiskTier.RISKY
    return max(0.0, ratio * 25), RiskTier.INSUFFICIENT


def classify_risk_tier(ratio: float) -> RiskTier:
    """Risk tier for a range ratio; defined for every real ratio."""
    return _score_and_tier(ratio)[1]


def estimate_range_confidence(available_range: float, route_distance: float) -> TripRangeAnalysis:
    """
    Score how confidently a vehicle with ``available_range`` can drive
    ``route_distance``.

    Negative inputs are treated as zero and the route distance is floored
    at 1 for the ratio, so every numeric input has a defined answer.
    """
    available_range = max(0.0, float(available_range))
    route_distance = max(0.0, float(route_distance))

    ratio = available_range / max(route_distance, 1.0)
    raw_score, tier = _score_and_tier(ratio)

    return TripRangeAnalysis(
        confidence_score=round_to_int(clamp(raw_score, 0.0, 100.0)),
        can_complete_trip=ratio >= 1.0,
        buffer_distance=available_range - route_distance,
        route_distance=route_distance,
        available_range=available_range,
        risk_tier=tier,
    )
