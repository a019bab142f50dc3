from fastapi import APIRouter

from healthtrack.api.deps import DbSession
from healthtrack.models import ClinicalAssessment
from healthtrack.schemas.assessment import (
    AssessmentCreate,
    AssessmentListResponse,
    AssessmentResponse,
)
from healthtrack.services import metrics_store
from healthtrack.services.clinical_scoring import interpret, is_scored, score_questionnaire

router = APIRouter()


def _to_response(row: ClinicalAssessment) -> AssessmentResponse:
    response = AssessmentResponse.model_validate(row)
    return response.model_copy(
        update={"interpretation": interpret(response.type, response.total_score)}
    )


@router.put("/{patient_id}/assessments", response_model=AssessmentResponse)
async def upsert_assessment(
    patient_id: str,
    assessment_in: AssessmentCreate,
    db: DbSession,
) -> AssessmentResponse:
    """Score and store a questionnaire; one per patient, date and type."""
    total = score_questionnaire(assessment_in.raw_scores) if is_scored(assessment_in.type) else None

    row, _ = await metrics_store.upsert(
        db,
        ClinicalAssessment,
        key={
            "patient_id": patient_id,
            "date": assessment_in.date,
            "type": assessment_in.type.value,
        },
        values={"raw_scores": dict(assessment_in.raw_scores), "total_score": total},
    )
    return _to_response(row)


@router.get("/{patient_id}/assessments", response_model=AssessmentListResponse)
async def list_assessments(
    patient_id: str,
    db: DbSession,
) -> AssessmentListResponse:
    """List assessments with their severity band, newest first."""
    rows = await metrics_store.recent_assessments(db, patient_id)
    return AssessmentListResponse(
        assessments=[_to_response(row) for row in rows],
        total=len(rows),
    )
