"""Tests for the patient risk score."""
from datetime import date

from healthtrack.models import ClinicalAssessment
from healthtrack.schemas.assessment import AssessmentRecord
from healthtrack.schemas.enums import AssessmentType
from healthtrack.schemas.mental import MentalCheckIn
from healthtrack.services.risk_scorer import (
    calculate_risk_breakdown,
    latest_assessment,
    risk_score,
)
from healthtrack.services.scoring_config import RiskScoreConfig


def _record(assessment_type: AssessmentType, day: date, item: int) -> AssessmentRecord:
    n_items = 9 if assessment_type == AssessmentType.PHQ9 else 7
    return AssessmentRecord(
        type=assessment_type,
        date=day,
        raw_scores={f"q{i}": item for i in range(1, n_items + 1)},
    )


class TestRiskScore:

    def test_no_data(self):
        assert risk_score() == 0
        assert risk_score(None, []) == 0

    def test_max_suicide_risk_saturates(self):
        assert risk_score(MentalCheckIn(suicide_risk=10), []) == 100

    def test_mental_terms(self):
        checkin = MentalCheckIn(suicide_risk=2, depression_mood=3, anxiety=4)
        assert risk_score(checkin) == 20 + 6 + 8

    def test_assessment_terms(self):
        assessments = [
            _record(AssessmentType.PHQ9, date(2024, 3, 1), 1),  # 9
            _record(AssessmentType.GAD7, date(2024, 3, 1), 2),  # 14
        ]
        assert risk_score(None, assessments) == 23

    def test_clamped_to_100(self):
        checkin = MentalCheckIn(suicide_risk=5, depression_mood=7, anxiety=7)
        assessments = [
            _record(AssessmentType.PHQ9, date(2024, 3, 1), 3),
            _record(AssessmentType.GAD7, date(2024, 3, 1), 3),
        ]
        breakdown = calculate_risk_breakdown(checkin, assessments)

        assert breakdown.raw_score == 50 + 14 + 14 + 27 + 21
        assert breakdown.final_score == 100

    def test_custom_weights(self):
        config = RiskScoreConfig(suicide_weight=1)
        assert risk_score(MentalCheckIn(suicide_risk=10), config=config) == 10

    def test_deterministic(self):
        checkin = MentalCheckIn(suicide_risk=3, anxiety=5)
        assessments = [_record(AssessmentType.PHQ9, date(2024, 3, 1), 2)]
        assert risk_score(checkin, assessments) == risk_score(checkin, assessments)


class TestLatestAssessment:
    """The most recent assessment of each type is used whatever the input order."""

    def test_order_independent(self):
        older = _record(AssessmentType.PHQ9, date(2024, 1, 1), 3)  # 27
        newer = _record(AssessmentType.PHQ9, date(2024, 2, 1), 1)  # 9

        assert risk_score(None, [older, newer]) == 9
        assert risk_score(None, [newer, older]) == 9

    def test_per_type(self):
        phq9 = _record(AssessmentType.PHQ9, date(2024, 1, 1), 1)
        gad7 = _record(AssessmentType.GAD7, date(2024, 2, 1), 1)

        assert latest_assessment([phq9, gad7], AssessmentType.PHQ9) is phq9
        assert latest_assessment([phq9, gad7], AssessmentType.GAD7) is gad7
        assert latest_assessment([phq9, gad7], AssessmentType.ASRM) is None

    def test_accepts_stored_rows(self):
        rows = [
            ClinicalAssessment(patient_id="p1", type="PHQ9", date=date(2024, 3, 1), total_score=12),
            ClinicalAssessment(patient_id="p1", type="PHQ9", date=date(2024, 2, 1), total_score=20),
        ]
        assert risk_score(None, rows) == 12


class TestRiskBreakdown:

    def test_contributions(self):
        checkin = MentalCheckIn(suicide_risk=1, depression_mood=2, anxiety=3)
        breakdown = calculate_risk_breakdown(checkin, [])

        assert breakdown.suicide_contribution == 10
        assert breakdown.depression_contribution == 4
        assert breakdown.anxiety_contribution == 6
        assert breakdown.phq9_contribution == 0
        assert breakdown.final_score == 20

    def test_to_dict(self):
        data = calculate_risk_breakdown().to_dict()
        assert set(data) == {
            "suicide", "depression", "anxiety", "phq9", "gad7", "raw_score", "final_score",
        }
