from fastapi import APIRouter, HTTPException, status

from healthtrack.api.deps import DbSession
from healthtrack.schemas.assessment import AssessmentRecord
from healthtrack.schemas.patient import PatientSummaryResponse
from healthtrack.services import metrics_store
from healthtrack.services.triage import PatientSummary, build_patient_summary

router = APIRouter()


async def load_patient_summary(db: DbSession, patient_id: str) -> PatientSummary:
    """Fetch the latest records of a patient and summarise them."""
    return build_patient_summary(
        patient_id,
        latest_physical=await metrics_store.latest_physical(db, patient_id),
        latest_mental=await metrics_store.latest_mental(db, patient_id),
        assessments=[
            AssessmentRecord.model_validate(row)
            for row in await metrics_store.recent_assessments(db, patient_id)
        ],
    )


def summary_response(summary: PatientSummary) -> PatientSummaryResponse:
    response = PatientSummaryResponse.model_validate(summary)
    if response.latest_mental is not None:
        # Alerts of the latest check-in are already on the summary
        latest_mental = response.latest_mental.model_copy(update={"alerts": response.alerts})
        response = response.model_copy(update={"latest_mental": latest_mental})
    return response


@router.get("/{patient_id}/summary", response_model=PatientSummaryResponse)
async def get_patient_summary(
    patient_id: str,
    db: DbSession,
) -> PatientSummaryResponse:
    """Latest metrics, alerts and risk score of one patient."""
    if patient_id not in await metrics_store.known_patient_ids(db):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Patient not found",
        )

    summary = await load_patient_summary(db, patient_id)
    return summary_response(summary)
