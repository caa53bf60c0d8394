"""
EV Range Analytics - Main Entry Point
Run this file to print a vehicle health and route range report.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from ev_range_analytics.config import EnergyModelConfig, VehicleSpecConstants
from ev_range_analytics.vehicle import ChargeState, TirePressure, VehicleState
from ev_range_analytics.analytics import (
    analyze_degradation,
    estimate_range_confidence,
    generate_alerts,
)
from ev_range_analytics.data import CsvSnapshotProvider
from ev_range_analytics.routing import RouteWaypoint, assess_route


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="EV battery health and trip range report",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Inputs
    parser.add_argument(
        "--history", type=str, default=None,
        help="CSV export of health snapshots"
    )
    parser.add_argument(
        "--user", type=str, default=None,
        help="Owner whose history to analyze (default: first owner in the CSV)"
    )
    parser.add_argument(
        "--route", type=str, default=None,
        help="JSON file with a list of waypoints {sequence, latitude, longitude, name}"
    )
    parser.add_argument(
        "--route-miles", type=float, default=None,
        help="Quick range check for a route of this length (no waypoints needed)"
    )

    # Current vehicle state
    parser.add_argument("--battery", type=float, default=73.0, help="Battery percent")
    parser.add_argument("--range", type=float, default=241.0, help="Available range in miles")
    parser.add_argument("--capacity", type=float, default=72.8, help="Nominal full pack energy (kWh)")
    parser.add_argument("--odometer", type=float, default=28450.0, help="Odometer (miles)")
    parser.add_argument(
        "--tires", type=float, nargs=4, default=[44.0, 45.0, 43.0, 45.0],
        metavar=("FL", "FR", "RL", "RR"), help="Tire pressures in PSI"
    )
    parser.add_argument("--software", type=str, default="2024.38.25", help="Installed software version")
    parser.add_argument(
        "--latest-software", type=str, default=None,
        help="Latest available software version (enables the update alert)"
    )

    # Energy model
    parser.add_argument("--safety-margin", type=float, default=20.0, help="Minimum battery percent")
    parser.add_argument("--charge-target", type=float, default=80.0, help="Charge level after a stop")
    parser.add_argument(
        "--consumption", type=float, default=0.25,
        help="Energy consumption in kWh per mile"
    )

    # Output
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")

    return parser.parse_args(argv)


def load_waypoints(path):
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [
        RouteWaypoint(
            sequence=int(item.get("sequence", i + 1)),
            latitude=item.get("latitude"),
            longitude=item.get("longitude"),
            name=item.get("name", ""),
            is_charging_stop=bool(item.get("is_charging_stop", False)),
        )
        for i, item in enumerate(raw)
    ]


def main(argv=None):
    """Main entry point for the range analytics report."""
    args = parse_args(argv)

    state = VehicleState(
        battery_percent=args.battery,
        range_miles=args.range,
        charge_state=ChargeState.DISCONNECTED,
        charge_limit_percent=80.0,
        tire_pressure=TirePressure(*args.tires),
        odometer=args.odometer,
        software_version=args.software,
        nominal_full_pack_energy=args.capacity,
        timestamp=datetime.now(timezone.utc),
    )
    spec = VehicleSpecConstants(latest_software_version=args.latest_software)
    energy_config = EnergyModelConfig(
        safety_margin_percent=args.safety_margin,
        charge_target_percent=args.charge_target,
        consumption_kwh_per_mile=args.consumption,
    )

    report = {}

    trend = None
    if args.history:
        provider = CsvSnapshotProvider(args.history)
        owners = provider.owners()
        user = args.user or (owners[0] if owners else "")
        trend = analyze_degradation(provider.load_history(user))
        report["trend"] = trend.to_dict()

    alerts = generate_alerts(state, spec)
    report["alerts"] = [a.to_dict() for a in alerts]

    assessment = None
    if args.route:
        assessment = assess_route(state, load_waypoints(Path(args.route)), energy_config)
        report["route"] = assessment.to_dict() if assessment else None

    quick = None
    if args.route_miles is not None:
        quick = estimate_range_confidence(state.range_miles, args.route_miles)
        report["quick_check"] = quick.to_dict()

    if args.json:
        print(json.dumps(report, indent=2))
        return 0

    print("=" * 70)
    print("EV RANGE ANALYTICS REPORT")
    print("=" * 70)
    print(f"Battery: {state.battery_percent:.0f}% | Range: {state.range_miles:.0f} mi "
          f"| Odometer: {state.odometer:.0f} mi")

    if trend is not None:
        print()
        print(trend.summary())

    print()
    if alerts:
        print(f"Service alerts ({len(alerts)}):")
        for alert in alerts:
            print(f"  [{alert.severity.value.upper():8s}] {alert.title} - {alert.description}")
    else:
        print("No service alerts.")

    if args.route:
        print()
        if assessment is None:
            print("Route has fewer than two usable waypoints; nothing to model.")
        else:
            print(assessment.summary())

    if quick is not None:
        print()
        print(quick.summary())

    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
