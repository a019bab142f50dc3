"""Tests for the Workload Trend Engine (ACWR, monotony, strain)."""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from healthtrack.models import TrainingSession
from healthtrack.schemas.enums import LoadZone
from healthtrack.services.scoring_config import LoadConfig
from healthtrack.services.workload import (
    ACWRMetrics,
    WorkloadMetrics,
    acwr,
    acwr_zone,
    daily_loads,
    is_in_injury_window,
    monotony,
    monotony_and_strain,
)


@dataclass
class Session:
    performed_at: datetime
    internal_load: Optional[float]


def _at(day: int, hour: int = 18) -> datetime:
    return datetime(2024, 3, day, hour, 0)


class TestACWR:
    """Tests for ATL/CTL/TSB/ACWR."""

    def test_empty(self):
        assert acwr([]) == ACWRMetrics(atl=0, ctl=0, tsb=0, acwr=0.0)

    def test_single_session(self):
        assert acwr([Session(_at(10), 100)]) == ACWRMetrics(atl=100, ctl=100, tsb=0, acwr=1.0)

    def test_two_sessions(self):
        # Seed 100, then older load 50:
        # ATL = 50*0.25 + 100*0.75 = 87.5, CTL = (100*41 + 50*2)/43 = 97.67
        metrics = acwr([Session(_at(10), 100), Session(_at(9), 50)])

        assert metrics.atl == 88
        assert metrics.ctl == 98
        assert metrics.tsb == 10
        assert metrics.acwr == 0.9

    def test_input_order_does_not_matter(self):
        newer = Session(_at(10), 100)
        older = Session(_at(9), 50)
        assert acwr([older, newer]) == acwr([newer, older])

    def test_missing_load_counts_as_zero(self):
        metrics = acwr([Session(_at(10), None), Session(_at(9), 100)])

        assert metrics.atl == 25
        assert metrics.ctl == 5

    def test_accepts_orm_rows(self):
        sessions = [
            TrainingSession(patient_id="p1", performed_at=_at(10), session_rpe=5, internal_load=300.0),
        ]
        assert acwr(sessions).atl == 300

    def test_custom_windows(self):
        config = LoadConfig(acute_window=1, chronic_window=1)
        # alpha = 1: both averages end on the oldest load
        metrics = acwr([Session(_at(10), 100), Session(_at(9), 40)], config=config)

        assert metrics.atl == 40
        assert metrics.ctl == 40


class TestMonotonyAndStrain:
    """Tests for weekly monotony and strain."""

    def test_empty(self):
        assert monotony_and_strain([]) == WorkloadMetrics()

    def test_constant_loads_have_zero_monotony(self):
        metrics = monotony_and_strain([100] * 7)

        assert metrics.weekly_load == 700
        assert metrics.monotony == 0
        assert metrics.strain == 0
        assert metrics.injury_risk is False

    def test_alternating_loads(self):
        # mean/std = sqrt(4/3) for four sessions out of seven days
        metrics = monotony_and_strain([100, 0, 100, 0, 100, 0, 100])

        assert metrics.weekly_load == 400
        assert metrics.monotony == 1.15
        assert metrics.strain == 462
        assert metrics.injury_risk is False

    def test_uniform_high_loads_flag_injury_risk(self):
        metrics = monotony_and_strain([100, 100, 100, 100, 100, 100, 90])

        assert metrics.monotony > 2
        assert metrics.injury_risk is True

    def test_monotony_of_exactly_two_is_not_risky(self):
        metrics = monotony_and_strain([3, 1])

        assert metrics.monotony == 2.0
        assert metrics.injury_risk is False

    def test_risk_uses_unrounded_monotony(self):
        # mean/std = 2.003, shown as 2.0
        metrics = monotony_and_strain([3003, 1003])

        assert metrics.monotony == 2.0
        assert metrics.injury_risk is True


class TestInjuryWindow:
    """Tests for the monotony + negative TSB window."""

    @pytest.mark.parametrize("monotony,tsb,expected", [
        (2.5, -11, True),
        (2.5, -10, False),
        (2.0, -20, False),
        (1.5, -20, False),
    ])
    def test_injury_window(self, monotony, tsb, expected):
        assert is_in_injury_window(monotony, tsb) is expected

    def test_agrees_with_injury_risk_just_above_threshold(self):
        loads = [3003, 1003]

        assert monotony_and_strain(loads).injury_risk is True
        assert is_in_injury_window(monotony(loads), -20) is True


class TestMonotony:

    def test_empty(self):
        assert monotony([]) == 0.0

    def test_flat_loads(self):
        assert monotony([250, 250, 250]) == 0.0

    def test_not_rounded(self):
        assert monotony([3003, 1003]) == pytest.approx(2.003)


class TestDailyLoads:
    """Tests for per-day load totals."""

    def test_zero_filled_oldest_first(self):
        sessions = [
            Session(_at(10, 8), 100),
            Session(_at(10, 18), 50),
            Session(_at(8), 80),
            Session(_at(1), 500),  # outside the window
        ]
        assert daily_loads(sessions, date(2024, 3, 10)) == [0, 0, 0, 0, 80, 0, 150]

    def test_custom_length(self):
        sessions = [Session(datetime(2024, 3, 10) - timedelta(days=2), 30)]
        assert daily_loads(sessions, date(2024, 3, 10), days=3) == [30, 0, 0]


class TestACWRZone:
    """Tests for load-zone classification."""

    @pytest.mark.parametrize("ratio,zone", [
        (0, LoadZone.NONE),
        (0.5, LoadZone.UNDERTRAINING),
        (0.8, LoadZone.OPTIMAL),
        (1.0, LoadZone.OPTIMAL),
        (1.3, LoadZone.OPTIMAL),
        (1.31, LoadZone.OVERREACHING),
    ])
    def test_zones(self, ratio, zone):
        assert acwr_zone(ratio) == zone
