"""Tests for mental-health alert rules."""
from datetime import date

import pytest

from healthtrack.models import MentalDailyMetrics
from healthtrack.schemas.enums import AlertSeverity, AlertType
from healthtrack.schemas.mental import MentalCheckIn
from healthtrack.services.mental_alerts import (
    evaluate_anxiety,
    evaluate_depression,
    evaluate_mania,
    evaluate_suicide_risk,
    generate_alerts,
)
from healthtrack.services.scoring_config import AlertConfig


class TestSuicideRisk:
    """Suicide risk yields at most one alert, highest band first."""

    @pytest.mark.parametrize("value,severity", [
        (10, AlertSeverity.CRITICAL),
        (7, AlertSeverity.CRITICAL),
        (6, AlertSeverity.HIGH),
        (5, AlertSeverity.HIGH),
        (4, AlertSeverity.MEDIUM),
        (3, AlertSeverity.MEDIUM),
    ])
    def test_bands(self, value, severity):
        alert = evaluate_suicide_risk(value)
        assert alert.type == AlertType.SUICIDE
        assert alert.severity == severity
        assert alert.value == value

    @pytest.mark.parametrize("value", [None, 0, 2])
    def test_below_threshold(self, value):
        assert evaluate_suicide_risk(value) is None

    def test_single_alert_for_critical(self):
        alerts = generate_alerts(MentalCheckIn(suicide_risk=7))
        assert len(alerts) == 1
        assert alerts[0].severity == AlertSeverity.CRITICAL
        assert "ALERTA CRÍTICO" in alerts[0].message


class TestMania:
    """Mania needs both app stress and energy strictly above threshold."""

    def test_triggered(self):
        alert = evaluate_mania(stress_score_app=81, energy_level=9)
        assert alert.type == AlertType.MANIA
        assert alert.severity == AlertSeverity.HIGH
        assert alert.value == 9

    @pytest.mark.parametrize("stress,energy", [
        (80, 9),
        (90, 8),
        (None, 10),
        (95, None),
    ])
    def test_not_triggered(self, stress, energy):
        assert evaluate_mania(stress, energy) is None


class TestDepressionAndAnxiety:

    def test_depression_threshold(self):
        assert evaluate_depression(7).severity == AlertSeverity.HIGH
        assert evaluate_depression(6) is None
        assert evaluate_depression(None) is None

    def test_anxiety_threshold(self):
        assert evaluate_anxiety(7).type == AlertType.ANXIETY
        assert evaluate_anxiety(6) is None

    def test_custom_threshold(self):
        config = AlertConfig(depression_high=5)
        assert evaluate_depression(5, config) is not None


class TestGenerateAlerts:

    def test_no_alerts_for_calm_day(self):
        checkin = MentalCheckIn(
            suicide_risk=0,
            depression_mood=2,
            anxiety=3,
            stress_score_app=40,
            energy_level=6,
        )
        assert generate_alerts(checkin) == []

    def test_rule_order(self):
        checkin = MentalCheckIn(
            suicide_risk=8,
            stress_score_app=85,
            energy_level=9,
            depression_mood=8,
            anxiety=9,
        )
        alerts = generate_alerts(checkin)
        assert [a.type for a in alerts] == [
            AlertType.SUICIDE,
            AlertType.MANIA,
            AlertType.DEPRESSION,
            AlertType.ANXIETY,
        ]

    def test_accepts_stored_rows(self):
        row = MentalDailyMetrics(patient_id="p1", date=date(2024, 3, 10), suicide_risk=6)
        alerts = generate_alerts(row)
        assert len(alerts) == 1
        assert alerts[0].severity == AlertSeverity.HIGH

    def test_deterministic(self):
        checkin = MentalCheckIn(suicide_risk=4, anxiety=8)
        assert generate_alerts(checkin) == generate_alerts(checkin)
