"""
Physical Load Engine - Per-day and per-session physical metrics.

Sleep duration, internal training load, tonnage and the readiness index.
Every function is pure: it only reads its arguments (and the injected
configuration) and returns a new value.
"""
from collections.abc import Iterable
from datetime import time
from typing import Optional, Union

from healthtrack.schemas.physical import PhysicalCheckIn
from healthtrack.schemas.training import Exercise, TrainingSessionCreate
from healthtrack.services.rounding import round_half_up
from healthtrack.services.scoring_config import ReadinessConfig, get_scoring_config

ClockTime = Union[str, time]

SECONDS_PER_DAY = 24 * 60 * 60


def _seconds_since_midnight(value: ClockTime) -> int:
    if isinstance(value, str):
        value = time.fromisoformat(value)
    return value.hour * 3600 + value.minute * 60 + value.second


def sleep_hours(start: ClockTime, end: ClockTime) -> float:
    """
    Hours slept between two clock times ("HH:MM" or datetime.time).

    Overnight sleep wraps around midnight. An end equal to the start counts as
    a full 24h cycle, so the result is always in (0, 24].
    """
    start_s = _seconds_since_midnight(start)
    end_s = _seconds_since_midnight(end)

    if end_s <= start_s:
        end_s += SECONDS_PER_DAY

    return (end_s - start_s) / 3600


def internal_load(duration_minutes: float, rpe: float) -> float:
    """Session internal load (sRPE): duration in minutes x RPE."""
    return duration_minutes * rpe


def tonnage(exercises: Iterable[Exercise]) -> float:
    """Total tonnage: sum of sets x reps x load over the given exercises."""
    return sum(ex.sets * ex.reps * ex.load_kg for ex in exercises)


def named_exercises(exercises: Iterable[Exercise]) -> list[Exercise]:
    """Drop exercise rows left blank in the training log."""
    return [ex for ex in exercises if ex.name and ex.name.strip()]


def readiness_index(
    sleep_quality: Optional[float] = None,
    fatigue_physical: Optional[float] = None,
    stress_mental: Optional[float] = None,
    doms_pain: Optional[float] = None,
    mood_general: Optional[float] = None,
    readiness_to_train: Optional[float] = None,
    config: Optional[ReadinessConfig] = None,
) -> float:
    """
    Weighted readiness index on a 0-10 scale, rounded to 1 decimal.

    Fatigue, stress and pain are inverted (scale_max - value) so that higher
    is better for every term. Missing inputs take the configured default.
    """
    if config is None:
        config = get_scoring_config().readiness

    def value_or_default(value: Optional[float]) -> float:
        return config.default_value if value is None else value

    readiness = (
        value_or_default(sleep_quality) * config.sleep_quality_weight
        + (config.scale_max - value_or_default(fatigue_physical)) * config.fatigue_weight
        + (config.scale_max - value_or_default(stress_mental)) * config.stress_weight
        + (config.scale_max - value_or_default(doms_pain)) * config.pain_weight
        + value_or_default(mood_general) * config.mood_weight
        + value_or_default(readiness_to_train) * config.readiness_to_train_weight
    )

    return round_half_up(readiness, 1)


def derive_physical_fields(
    checkin: PhysicalCheckIn,
    config: Optional[ReadinessConfig] = None,
) -> dict[str, Optional[float]]:
    """Derived columns stored alongside a physical check-in."""
    hours = None
    if checkin.sleep_start is not None and checkin.sleep_end is not None:
        hours = sleep_hours(checkin.sleep_start, checkin.sleep_end)

    return {
        "sleep_hours": hours,
        "readiness_index": readiness_index(
            sleep_quality=checkin.sleep_quality,
            fatigue_physical=checkin.fatigue_physical,
            stress_mental=checkin.stress_mental,
            doms_pain=checkin.doms_pain,
            mood_general=checkin.mood_general,
            readiness_to_train=checkin.readiness_to_train,
            config=config,
        ),
    }


def derive_session_fields(session: TrainingSessionCreate) -> dict:
    """Derived columns stored alongside a training session.

    Blank exercise rows are dropped before tonnage is computed and are not
    persisted either.
    """
    exercises = named_exercises(session.exercises)
    return {
        "exercises": [ex.model_dump() for ex in exercises],
        "internal_load": internal_load(session.duration_minutes, session.session_rpe),
        "total_tonnage": tonnage(exercises),
    }