"""
Workload Trend Engine - Acute/chronic load balance from training sessions.

ATL/CTL are exponentially weighted moving averages of session internal load
(7-day and 42-day windows), TSB = CTL - ATL, ACWR = ATL / CTL. Monotony and
strain summarise the day-to-day variation of a week of loads.
"""
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from statistics import fmean, pstdev
from typing import Optional

from healthtrack.schemas.enums import LoadZone
from healthtrack.services.rounding import round_half_up, round_half_up_int
from healthtrack.services.scoring_config import LoadConfig, get_scoring_config


@dataclass(frozen=True)
class ACWRMetrics:
    atl: int = 0  # Acute Training Load (7 days)
    ctl: int = 0  # Chronic Training Load (42 days)
    tsb: int = 0  # Training Stress Balance
    acwr: float = 0.0  # Acute:Chronic Workload Ratio


@dataclass(frozen=True)
class WorkloadMetrics:
    weekly_load: int = 0
    monotony: float = 0.0
    strain: int = 0
    injury_risk: bool = False


def _session_load(session) -> float:
    return session.internal_load or 0


def acwr(sessions: Iterable, config: Optional[LoadConfig] = None) -> ACWRMetrics:
    """
    Calculate ATL, CTL, TSB and ACWR from training sessions.

    Sessions only need `performed_at` and `internal_load`. They are walked from
    the most recent to the oldest; the most recent load seeds both averages.
    """
    if config is None:
        config = get_scoring_config().load

    ordered = sorted(sessions, key=lambda s: s.performed_at, reverse=True)
    if not ordered:
        return ACWRMetrics()

    alpha_acute = config.alpha_acute
    alpha_chronic = config.alpha_chronic

    atl = ctl = _session_load(ordered[0])
    for session in ordered[1:]:
        load = _session_load(session)
        atl = load * alpha_acute + atl * (1 - alpha_acute)
        ctl = load * alpha_chronic + ctl * (1 - alpha_chronic)

    tsb = ctl - atl
    ratio = 0 if ctl == 0 else atl / ctl

    return ACWRMetrics(
        atl=round_half_up_int(atl),
        ctl=round_half_up_int(ctl),
        tsb=round_half_up_int(tsb),
        acwr=round_half_up(ratio, 2),
    )


def monotony(daily_loads: Sequence[float]) -> float:
    """Mean daily load divided by its population standard deviation (0 when flat)."""
    if not daily_loads:
        return 0.0
    std_dev = pstdev(daily_loads)
    return 0.0 if std_dev == 0 else fmean(daily_loads) / std_dev


def monotony_and_strain(
    daily_loads: Sequence[float],
    config: Optional[LoadConfig] = None,
) -> WorkloadMetrics:
    """
    Monotony = mean daily load / population standard deviation.
    Strain = weekly load x monotony.
    """
    if config is None:
        config = get_scoring_config().load

    if not daily_loads:
        return WorkloadMetrics()

    weekly_load = sum(daily_loads)
    raw_monotony = monotony(daily_loads)
    strain = weekly_load * raw_monotony

    return WorkloadMetrics(
        weekly_load=round_half_up_int(weekly_load),
        monotony=round_half_up(raw_monotony, 2),
        strain=round_half_up_int(strain),
        injury_risk=raw_monotony > config.monotony_high,
    )


def is_in_injury_window(
    monotony: float,
    tsb: float,
    config: Optional[LoadConfig] = None,
) -> bool:
    """High monotony combined with a negative training stress balance.

    Pass the unrounded monotony so the result agrees with
    `WorkloadMetrics.injury_risk`.
    """
    if config is None:
        config = get_scoring_config().load

    return monotony > config.monotony_high and tsb < config.tsb_low


def daily_loads(sessions: Iterable, end_date: date, days: int = 7) -> list[float]:
    """
    Total internal load per calendar day for the `days` days ending on
    `end_date`, oldest first. Days without a session count as 0.
    """
    start_date = end_date - timedelta(days=days - 1)
    load_by_date: dict[date, float] = {}

    for session in sessions:
        d = session.performed_at.date()
        if start_date <= d <= end_date:
            load_by_date[d] = load_by_date.get(d, 0.0) + _session_load(session)

    return [load_by_date.get(start_date + timedelta(days=i), 0.0) for i in range(days)]


def acwr_zone(ratio: float, config: Optional[LoadConfig] = None) -> LoadZone:
    """Classify an ACWR value into a load zone."""
    if config is None:
        config = get_scoring_config().load

    if ratio == 0:
        return LoadZone.NONE
    if ratio < config.acwr_low:
        return LoadZone.UNDERTRAINING
    if ratio > config.acwr_high:
        return LoadZone.OVERREACHING
    return LoadZone.OPTIMAL
