"""
Triage - Per-patient summaries ranked by risk score for the clinical team.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from healthtrack.config import get_settings
from healthtrack.schemas.enums import (
    ALERT_SEVERITY_NUMERIC,
    RISK_BAND_LABELS,
    AlertSeverity,
    RiskBand,
)
from healthtrack.services.mental_alerts import MentalHealthAlert, generate_alerts
from healthtrack.services.risk_scorer import RiskBreakdown, calculate_risk_breakdown

logger = logging.getLogger(__name__)


@dataclass
class PatientSummary:
    patient_id: str
    risk_score: int
    risk_band: RiskBand
    alerts: list[MentalHealthAlert] = field(default_factory=list)
    breakdown: RiskBreakdown = field(default_factory=RiskBreakdown)
    latest_physical: Optional[Any] = None
    latest_mental: Optional[Any] = None

    @property
    def risk_label(self) -> str:
        return RISK_BAND_LABELS[self.risk_band]

    @property
    def highest_alert_severity(self) -> Optional[AlertSeverity]:
        if not self.alerts:
            return None
        return max((a.severity for a in self.alerts), key=lambda s: ALERT_SEVERITY_NUMERIC[s])


def classify_risk_band(score: float) -> RiskBand:
    """Map a risk score to its triage band."""
    settings = get_settings()
    if score >= settings.triage_high_min:
        return RiskBand.HIGH
    if score >= settings.triage_medium_min:
        return RiskBand.MEDIUM
    return RiskBand.LOW


def build_patient_summary(
    patient_id: str,
    latest_physical=None,
    latest_mental=None,
    assessments: Optional[Iterable] = None,
) -> PatientSummary:
    """Alerts, risk score and band for one patient from already-fetched records."""
    alerts = generate_alerts(latest_mental) if latest_mental is not None else []
    breakdown = calculate_risk_breakdown(latest_mental, assessments)
    band = classify_risk_band(breakdown.final_score)

    logger.debug(
        "Patient summary built",
        extra={
            "patient_id": patient_id,
            "risk_score": breakdown.final_score,
            "risk_band": band.value,
            "alert_count": len(alerts),
        }
    )

    return PatientSummary(
        patient_id=patient_id,
        risk_score=breakdown.final_score,
        risk_band=band,
        alerts=alerts,
        breakdown=breakdown,
        latest_physical=latest_physical,
        latest_mental=latest_mental,
    )


def rank_patients(summaries: Iterable[PatientSummary]) -> list[PatientSummary]:
    """Highest risk first; equal scores keep their input order."""
    return sorted(summaries, key=lambda s: s.risk_score, reverse=True)


def filter_by_band(
    summaries: Iterable[PatientSummary],
    band: Optional[RiskBand],
) -> list[PatientSummary]:
    if band is None:
        return list(summaries)
    return [s for s in summaries if s.risk_band == band]
