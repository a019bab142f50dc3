"""Tests for cohort-wide questionnaire statistics."""
from datetime import date

from healthtrack.models import ClinicalAssessment
from healthtrack.schemas.enums import SeverityBand
from healthtrack.services.cohort_stats import (
    cohort_statistics,
    gad7_distribution,
    phq9_distribution,
)


def _assessment(assessment_type: str, total: int | None) -> ClinicalAssessment:
    return ClinicalAssessment(
        patient_id="p1",
        type=assessment_type,
        date=date(2024, 3, 1),
        raw_scores={},
        total_score=total,
    )


class TestDistributions:

    def test_every_band_listed_in_order(self):
        phq9 = phq9_distribution([])
        gad7 = gad7_distribution([])

        assert [b.band for b in phq9] == [
            SeverityBand.MINIMAL,
            SeverityBand.MILD,
            SeverityBand.MODERATE,
            SeverityBand.MODERATELY_SEVERE,
            SeverityBand.SEVERE,
        ]
        assert [b.range for b in phq9] == ["0-4", "5-9", "10-14", "15-19", "20+"]
        assert [b.range for b in gad7] == ["0-4", "5-9", "10-14", "15+"]
        assert all(b.count == 0 for b in phq9 + gad7)

    def test_counts(self):
        assert [b.count for b in phq9_distribution([4, 5, 12, 27, 20])] == [1, 1, 1, 0, 2]
        assert [b.count for b in gad7_distribution([3, 15])] == [1, 0, 0, 1]


class TestCohortStatistics:

    def test_empty(self):
        stats = cohort_statistics([], [])

        assert stats.average_phq9 == 0.0
        assert stats.average_gad7 == 0.0
        assert stats.average_suicide_risk == 0.0
        assert stats.total_assessments == 0

    def test_aggregates(self):
        assessments = [
            _assessment("PHQ9", 4),
            _assessment("PHQ9", 5),
            _assessment("PHQ9", 12),
            _assessment("PHQ9", 27),
            _assessment("GAD7", 3),
            _assessment("GAD7", 15),
            _assessment("ASRM", None),
        ]
        stats = cohort_statistics(assessments, [1, None, 2, 2])

        assert [b.count for b in stats.phq9_distribution] == [1, 1, 1, 0, 1]
        assert [b.count for b in stats.gad7_distribution] == [1, 0, 0, 1]
        assert stats.average_phq9 == 12.0
        assert stats.average_gad7 == 9.0
        assert stats.average_suicide_risk == 1.7
        assert stats.total_assessments == 7

    def test_average_rounds_half_up(self):
        assessments = [_assessment("PHQ9", t) for t in (1, 1, 1, 2)]
        assert cohort_statistics(assessments, []).average_phq9 == 1.3
