"""
Mental-Health Alerts - Deterministic threshold rules over a daily check-in.

Each rule looks at a single snapshot (no memory of previous days). Rules are
not mutually exclusive; the returned list follows rule order, not severity.
"""
from dataclasses import dataclass
from typing import Optional

from healthtrack.schemas.enums import AlertSeverity, AlertType
from healthtrack.services.scoring_config import AlertConfig, get_scoring_config


@dataclass(frozen=True)
class MentalHealthAlert:
    type: AlertType
    severity: AlertSeverity
    message: str
    value: Optional[float] = None


SUICIDE_MESSAGES: dict[AlertSeverity, str] = {
    AlertSeverity.CRITICAL: "ALERTA CRÍTICO: Risco de suicídio muito alto. Procure ajuda imediatamente.",
    AlertSeverity.HIGH: "Risco de suicídio elevado. Entre em contato com seu terapeuta.",
    AlertSeverity.MEDIUM: "Risco de suicídio moderado. Monitore seus pensamentos.",
}
MANIA_MESSAGE = "Possível episódio de mania detectado. Monitore seu humor e sono."
DEPRESSION_MESSAGE = "Humor depressivo elevado. Considere conversar com seu terapeuta."
ANXIETY_MESSAGE = "Nível de ansiedade elevado. Pratique técnicas de relaxamento."


def evaluate_suicide_risk(
    suicide_risk: Optional[int],
    config: Optional[AlertConfig] = None,
) -> Optional[MentalHealthAlert]:
    """
    Suicide risk, highest band first:
    >= critical → CRITICAL, >= high → HIGH, >= medium → MEDIUM, else none.
    """
    if config is None:
        config = get_scoring_config().alerts

    if suicide_risk is None:
        return None

    if suicide_risk >= config.suicide_critical:
        severity = AlertSeverity.CRITICAL
    elif suicide_risk >= config.suicide_high:
        severity = AlertSeverity.HIGH
    elif suicide_risk >= config.suicide_medium:
        severity = AlertSeverity.MEDIUM
    else:
        return None

    return MentalHealthAlert(
        type=AlertType.SUICIDE,
        severity=severity,
        message=SUICIDE_MESSAGES[severity],
        value=suicide_risk,
    )


def evaluate_mania(
    stress_score_app: Optional[int],
    energy_level: Optional[int],
    config: Optional[AlertConfig] = None,
) -> Optional[MentalHealthAlert]:
    """Mania: app stress score AND energy level both above threshold."""
    if config is None:
        config = get_scoring_config().alerts

    if stress_score_app is None or energy_level is None:
        return None

    if stress_score_app > config.mania_stress_app and energy_level > config.mania_energy:
        return MentalHealthAlert(
            type=AlertType.MANIA,
            severity=AlertSeverity.HIGH,
            message=MANIA_MESSAGE,
            value=energy_level,
        )
    return None


def evaluate_depression(
    depression_mood: Optional[int],
    config: Optional[AlertConfig] = None,
) -> Optional[MentalHealthAlert]:
    if config is None:
        config = get_scoring_config().alerts

    if depression_mood is not None and depression_mood >= config.depression_high:
        return MentalHealthAlert(
            type=AlertType.DEPRESSION,
            severity=AlertSeverity.HIGH,
            message=DEPRESSION_MESSAGE,
            value=depression_mood,
        )
    return None


def evaluate_anxiety(
    anxiety: Optional[int],
    config: Optional[AlertConfig] = None,
) -> Optional[MentalHealthAlert]:
    if config is None:
        config = get_scoring_config().alerts

    if anxiety is not None and anxiety >= config.anxiety_high:
        return MentalHealthAlert(
            type=AlertType.ANXIETY,
            severity=AlertSeverity.HIGH,
            message=ANXIETY_MESSAGE,
            value=anxiety,
        )
    return None


def generate_alerts(metrics, config: Optional[AlertConfig] = None) -> list[MentalHealthAlert]:
    """
    Evaluate all alert rules for one mental-health snapshot.

    `metrics` is a MentalCheckIn or any object with the same attributes
    (e.g. a stored MentalDailyMetrics row).
    """
    if config is None:
        config = get_scoring_config().alerts

    candidates = [
        evaluate_suicide_risk(metrics.suicide_risk, config),
        evaluate_mania(metrics.stress_score_app, metrics.energy_level, config),
        evaluate_depression(metrics.depression_mood, config),
        evaluate_anxiety(metrics.anxiety, config),
    ]
    return [alert for alert in candidates if alert is not None]
