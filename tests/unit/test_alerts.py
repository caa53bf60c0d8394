"""
Unit tests for the service alert generator.

Covers:
- tire_severity(): ignore band, warning band, critical beyond tolerance
- tire alerts: per-tire ids, direction wording, rear-axle target
- battery health: threshold at 85 % of design capacity
- service due: odometer modulo interval vs 88 % threshold
- software update: dotted version comparison, disabled by default
- generate_alerts(): stable order, idempotence, empty for a healthy car
- recall_alerts(): registry records become recall alerts
"""

import pytest

from conftest import T0, make_state
from ev_range_analytics.analytics.alerts import (
    AlertSeverity,
    AlertType,
    generate_alerts,
    parse_version,
    recall_alerts,
    tire_severity,
)
from ev_range_analytics.config import VehicleSpecConstants
from ev_range_analytics.data.recalls import RecallRecord


def tire_alerts(alerts):
    return [a for a in alerts if a.type is AlertType.TIRE_PRESSURE]


# ---------------------------------------------------------------------------
# Tire pressure
# ---------------------------------------------------------------------------

class TestTireSeverity:
    @pytest.mark.parametrize("diff", [0.0, 0.5, 1.0])
    def test_within_one_psi_is_ignored(self, diff):
        assert tire_severity(diff) is None

    @pytest.mark.parametrize("diff", [1.5, 3.0, 4.0])
    def test_up_to_tolerance_is_warning(self, diff):
        assert tire_severity(diff) is AlertSeverity.WARNING

    @pytest.mark.parametrize("diff", [4.5, 5.0, 5.5, 12.0])
    def test_beyond_tolerance_is_critical(self, diff):
        assert tire_severity(diff) is AlertSeverity.CRITICAL


class TestTireAlerts:
    def test_five_psi_over_is_single_critical_alert(self):
        state = make_state(tires=(50.0, 45.0, 45.0, 45.0))
        alerts = tire_alerts(generate_alerts(state))
        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.alert_id == "tire-front_left"
        assert alert.severity is AlertSeverity.CRITICAL
        assert "Front Left" in alert.title
        assert "above" in alert.description

    def test_within_one_psi_no_alert(self):
        state = make_state(tires=(46.0, 44.0, 45.5, 45.0))
        assert tire_alerts(generate_alerts(state)) == []

    def test_underinflated_warning_says_below(self):
        state = make_state(tires=(45.0, 45.0, 42.0, 45.0))
        alerts = tire_alerts(generate_alerts(state))
        assert len(alerts) == 1
        assert alerts[0].alert_id == "tire-rear_left"
        assert alerts[0].severity is AlertSeverity.WARNING
        assert "3 PSI below spec (45 PSI)" in alerts[0].description

    def test_rear_axle_uses_rear_target(self):
        spec = VehicleSpecConstants(front_tire_psi=42.0, rear_tire_psi=48.0)
        state = make_state(tires=(42.0, 42.0, 48.0, 48.0))
        assert tire_alerts(generate_alerts(state, spec)) == []

    def test_every_tire_reported_in_fixed_order(self):
        state = make_state(tires=(40.0, 50.0, 38.0, 52.0))
        ids = [a.alert_id for a in tire_alerts(generate_alerts(state))]
        assert ids == ["tire-front_left", "tire-front_right", "tire-rear_left", "tire-rear_right"]


# ---------------------------------------------------------------------------
# Battery / service / software
# ---------------------------------------------------------------------------

class TestBatteryHealth:
    def test_healthy_pack_no_alert(self):
        alerts = generate_alerts(make_state(capacity=72.8))
        assert not [a for a in alerts if a.type is AlertType.BATTERY]

    def test_below_85_percent_warns(self):
        alerts = generate_alerts(make_state(capacity=63.0))  # 84 %
        battery = [a for a in alerts if a.type is AlertType.BATTERY]
        assert len(battery) == 1
        assert battery[0].severity is AlertSeverity.WARNING
        assert battery[0].title == "Battery Health: 84%"

    def test_just_above_85_percent_no_alert(self):
        alerts = generate_alerts(make_state(capacity=64.0))
        assert not [a for a in alerts if a.type is AlertType.BATTERY]


class TestServiceDue:
    def test_just_past_threshold_is_info(self):
        alerts = generate_alerts(make_state(odometer=11001.0))
        service = [a for a in alerts if a.type is AlertType.SERVICE_DUE]
        assert len(service) == 1
        assert service[0].severity is AlertSeverity.INFO
        assert "1499 miles" in service[0].description

    def test_at_threshold_no_alert(self):
        alerts = generate_alerts(make_state(odometer=11000.0))
        assert not [a for a in alerts if a.type is AlertType.SERVICE_DUE]

    def test_wraps_every_interval(self):
        alerts = generate_alerts(make_state(odometer=12500.0 * 2 + 12000.0))
        service = [a for a in alerts if a.type is AlertType.SERVICE_DUE]
        assert "500 miles" in service[0].description

    def test_fresh_interval_no_alert(self):
        alerts = generate_alerts(make_state(odometer=28450.0))
        assert not [a for a in alerts if a.type is AlertType.SERVICE_DUE]


class TestSoftware:
    def test_disabled_without_latest_version(self):
        alerts = generate_alerts(make_state(software="2020.1.1"))
        assert not [a for a in alerts if a.type is AlertType.SOFTWARE]

    def test_outdated_version_alerts(self):
        spec = VehicleSpecConstants(latest_software_version="2024.40.1")
        alerts = generate_alerts(make_state(software="2024.38.25"), spec)
        software = [a for a in alerts if a.type is AlertType.SOFTWARE]
        assert len(software) == 1
        assert software[0].severity is AlertSeverity.INFO

    def test_current_version_no_alert(self):
        spec = VehicleSpecConstants(latest_software_version="2024.38.25")
        assert not [a for a in generate_alerts(make_state(), spec) if a.type is AlertType.SOFTWARE]

    def test_unparsable_version_is_ignored(self):
        spec = VehicleSpecConstants(latest_software_version="2024.40.1")
        alerts = generate_alerts(make_state(software="develop"), spec)
        assert not [a for a in alerts if a.type is AlertType.SOFTWARE]

    def test_parse_version(self):
        assert parse_version("2024.38.25") == (2024, 38, 25)
        assert parse_version("v12") is None


# ---------------------------------------------------------------------------
# generate_alerts() as a whole
# ---------------------------------------------------------------------------

class TestGenerateAlerts:
    def test_healthy_vehicle_has_no_alerts(self, nominal_state):
        assert generate_alerts(nominal_state) == []

    def test_order_is_tires_battery_service(self):
        state = make_state(tires=(45.0, 45.0, 45.0, 41.0), capacity=60.0, odometer=12400.0)
        types = [a.type for a in generate_alerts(state)]
        assert types == [AlertType.TIRE_PRESSURE, AlertType.BATTERY, AlertType.SERVICE_DUE]

    def test_idempotent(self):
        state = make_state(tires=(50.0, 43.0, 45.0, 45.0), capacity=60.0, odometer=12400.0)
        first = generate_alerts(state)
        second = generate_alerts(state)
        assert first == second
        assert [a.to_dict() for a in first] == [a.to_dict() for a in second]

    def test_alerts_carry_state_timestamp(self):
        state = make_state(tires=(50.0, 45.0, 45.0, 45.0))
        assert all(a.timestamp == T0 for a in generate_alerts(state))

    def test_to_dict_wire_names(self):
        alert = generate_alerts(make_state(tires=(50.0, 45.0, 45.0, 45.0)))[0]
        data = alert.to_dict()
        assert data["id"] == "tire-front_left"
        assert data["type"] == "tire_pressure"
        assert data["severity"] == "critical"


class TestRecallAlerts:
    def test_records_become_recall_alerts(self):
        recalls = [
            RecallRecord(campaign_number="24V051000", component="ELECTRICAL SYSTEM",
                         summary="Warning lights may be too small."),
            RecallRecord.from_registry_payload({
                "NHTSACampaignNumber": "23V838000",
                "Component": "STEERING",
                "Summary": "Autosteer controls may be insufficient.",
            }),
        ]
        alerts = recall_alerts(recalls, T0)
        assert [a.alert_id for a in alerts] == ["recall-24V051000", "recall-23V838000"]
        assert all(a.type is AlertType.RECALL for a in alerts)
        assert alerts[1].title == "Recall: STEERING"

    def test_no_recalls_no_alerts(self):
        assert recall_alerts([], T0) == []
