"""
Cohort Statistics - Questionnaire band distributions and averages across all
patients, for the research view of the program.
"""
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from healthtrack.schemas.enums import GAD7_BANDS, PHQ9_BANDS, AssessmentType, SeverityBand
from healthtrack.services.clinical_scoring import interpret_gad7, interpret_phq9
from healthtrack.services.rounding import round_half_up
from healthtrack.services.scoring_config import QuestionnaireConfig, get_scoring_config


@dataclass
class BandCount:
    band: SeverityBand
    range: str
    count: int = 0


@dataclass
class CohortStatistics:
    phq9_distribution: list[BandCount] = field(default_factory=list)
    gad7_distribution: list[BandCount] = field(default_factory=list)
    average_phq9: float = 0.0
    average_gad7: float = 0.0
    average_suicide_risk: float = 0.0
    total_assessments: int = 0


def _band_ranges(lower_bounds: Sequence[int]) -> list[str]:
    # e.g. [0, 5, 10] -> ["0-4", "5-9", "10+"]
    ranges = [f"{lo}-{hi - 1}" for lo, hi in zip(lower_bounds, lower_bounds[1:])]
    ranges.append(f"{lower_bounds[-1]}+")
    return ranges


def _average(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return round_half_up(sum(values) / len(values), 1)


def phq9_distribution(
    scores: Iterable[int],
    config: Optional[QuestionnaireConfig] = None,
) -> list[BandCount]:
    """Count of PHQ-9 totals per severity band, every band listed."""
    if config is None:
        config = get_scoring_config().questionnaire

    ranges = _band_ranges([
        0, config.phq9_mild, config.phq9_moderate,
        config.phq9_moderately_severe, config.phq9_severe,
    ])
    counts = {band: BandCount(band, rng) for band, rng in zip(PHQ9_BANDS, ranges)}
    for score in scores:
        counts[interpret_phq9(score, config)].count += 1
    return list(counts.values())


def gad7_distribution(
    scores: Iterable[int],
    config: Optional[QuestionnaireConfig] = None,
) -> list[BandCount]:
    """Count of GAD-7 totals per severity band, every band listed."""
    if config is None:
        config = get_scoring_config().questionnaire

    ranges = _band_ranges([0, config.gad7_mild, config.gad7_moderate, config.gad7_severe])
    counts = {band: BandCount(band, rng) for band, rng in zip(GAD7_BANDS, ranges)}
    for score in scores:
        counts[interpret_gad7(score, config)].count += 1
    return list(counts.values())


def cohort_statistics(
    assessments: Iterable,
    suicide_risks: Iterable[Optional[int]],
    config: Optional[QuestionnaireConfig] = None,
) -> CohortStatistics:
    """
    Aggregate statistics over all stored assessments and mental check-ins.

    `assessments` expose `type` and `total_score`; missing suicide-risk
    values are ignored.
    """
    assessments = list(assessments)
    phq9_scores = [
        a.total_score for a in assessments
        if a.type == AssessmentType.PHQ9 and a.total_score is not None
    ]
    gad7_scores = [
        a.total_score for a in assessments
        if a.type == AssessmentType.GAD7 and a.total_score is not None
    ]
    risks = [r for r in suicide_risks if r is not None]

    return CohortStatistics(
        phq9_distribution=phq9_distribution(phq9_scores, config),
        gad7_distribution=gad7_distribution(gad7_scores, config),
        average_phq9=_average(phq9_scores),
        average_gad7=_average(gad7_scores),
        average_suicide_risk=_average(risks),
        total_assessments=len(assessments),
    )
