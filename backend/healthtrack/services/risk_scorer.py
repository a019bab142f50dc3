"""
Patient Risk Score - Additive, saturating triage score (0-100).

Not a probability: it is only used to order patients relative to each other.

    suicide_risk x 10 + depression_mood x 2 + anxiety x 2
    + latest PHQ-9 total + latest GAD-7 total

clamped to [0, 100]. Absent inputs contribute 0.
"""
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from healthtrack.schemas.enums import AssessmentType
from healthtrack.services.scoring_config import RiskScoreConfig, get_scoring_config


@dataclass
class RiskBreakdown:
    """Detailed breakdown of how the risk score was calculated."""
    suicide_contribution: float = 0.0
    depression_contribution: float = 0.0
    anxiety_contribution: float = 0.0
    phq9_contribution: float = 0.0
    gad7_contribution: float = 0.0
    raw_score: float = 0.0
    final_score: int = 0

    def to_dict(self) -> dict:
        return {
            "suicide": self.suicide_contribution,
            "depression": self.depression_contribution,
            "anxiety": self.anxiety_contribution,
            "phq9": self.phq9_contribution,
            "gad7": self.gad7_contribution,
            "raw_score": self.raw_score,
            "final_score": self.final_score,
        }


def latest_assessment(assessments: Iterable, assessment_type: AssessmentType):
    """
    Most recent assessment of the given type, or None.

    The list is sorted by date here (newest first, stable for equal dates), so
    callers may pass assessments in any order.
    """
    ordered = sorted(assessments, key=lambda a: a.date, reverse=True)
    for assessment in ordered:
        if assessment.type == assessment_type:
            return assessment
    return None


def calculate_risk_breakdown(
    mental_metrics=None,
    assessments: Optional[Iterable] = None,
    config: Optional[RiskScoreConfig] = None,
) -> RiskBreakdown:
    """Risk score with per-term contributions."""
    if config is None:
        config = get_scoring_config().risk

    breakdown = RiskBreakdown()

    if mental_metrics is not None:
        if mental_metrics.suicide_risk is not None:
            breakdown.suicide_contribution = mental_metrics.suicide_risk * config.suicide_weight
        if mental_metrics.depression_mood is not None:
            breakdown.depression_contribution = mental_metrics.depression_mood * config.depression_weight
        if mental_metrics.anxiety is not None:
            breakdown.anxiety_contribution = mental_metrics.anxiety * config.anxiety_weight

    assessments = list(assessments or [])
    if assessments:
        latest_phq9 = latest_assessment(assessments, AssessmentType.PHQ9)
        latest_gad7 = latest_assessment(assessments, AssessmentType.GAD7)

        if latest_phq9 is not None and latest_phq9.total_score is not None:
            breakdown.phq9_contribution = latest_phq9.total_score
        if latest_gad7 is not None and latest_gad7.total_score is not None:
            breakdown.gad7_contribution = latest_gad7.total_score

    breakdown.raw_score = (
        breakdown.suicide_contribution
        + breakdown.depression_contribution
        + breakdown.anxiety_contribution
        + breakdown.phq9_contribution
        + breakdown.gad7_contribution
    )
    breakdown.final_score = int(min(config.max_score, max(config.min_score, breakdown.raw_score)))
    return breakdown


def risk_score(
    mental_metrics=None,
    assessments: Optional[Iterable] = None,
    config: Optional[RiskScoreConfig] = None,
) -> int:
    """Patient risk score, clamped to [min_score, max_score]."""
    return calculate_risk_breakdown(mental_metrics, assessments, config).final_score
