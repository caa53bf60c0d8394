"""
Shared pytest fixtures for the EV Range Analytics test suite.
"""

from datetime import datetime, timedelta, timezone

import pytest

from ev_range_analytics.vehicle import (
    ChargeState,
    SnapshotTrigger,
    TirePressure,
    VehicleHealthSnapshot,
    VehicleState,
)

T0 = datetime(2025, 3, 15, 8, 0, 0, tzinfo=timezone.utc)


def make_state(battery=73.0, range_miles=241.0, capacity=72.8, odometer=28450.0,
               tires=(45.0, 45.0, 45.0, 45.0), software="2024.38.25", ts=T0):
    return VehicleState(
        battery_percent=battery,
        range_miles=range_miles,
        charge_state=ChargeState.DISCONNECTED,
        charge_limit_percent=80.0,
        tire_pressure=TirePressure(*tires),
        odometer=odometer,
        software_version=software,
        nominal_full_pack_energy=capacity,
        timestamp=ts,
    )


def make_history(capacities, user_id="mock-user", start=T0):
    """One full-charge snapshot per capacity value, 30 days apart."""
    return [
        VehicleHealthSnapshot(
            user_id=user_id,
            timestamp=start + timedelta(days=30 * i),
            battery_percent=100.0,
            range_miles=330.0 * cap / 75.0,
            nominal_full_pack_energy=cap,
            odometer=1200.0 + 2400.0 * i,
            tire_pressure=TirePressure.uniform(45.0),
            software_version="2024.26.3",
            trigger=SnapshotTrigger.FULL_CHARGE,
        )
        for i, cap in enumerate(capacities)
    ]


@pytest.fixture
def nominal_state():
    """A healthy vehicle: 73% battery, tires on spec, no service due."""
    return make_state()


@pytest.fixture
def aging_history():
    """Twelve monthly snapshots of a pack losing ~3% over a year."""
    return make_history([75.2, 74.8, 74.5, 74.2, 74.0, 73.8,
                         73.6, 73.5, 73.3, 73.1, 73.0, 72.8])
