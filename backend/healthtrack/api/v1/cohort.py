from fastapi import APIRouter, Query

from healthtrack.api.deps import DbSession
from healthtrack.api.v1.patients import load_patient_summary, summary_response
from healthtrack.schemas.enums import RiskBand
from healthtrack.schemas.patient import CohortStatisticsResponse, TriageResponse
from healthtrack.services import metrics_store
from healthtrack.services.cohort_stats import cohort_statistics
from healthtrack.services.triage import filter_by_band, rank_patients

router = APIRouter()


@router.get("/triage", response_model=TriageResponse)
async def get_triage(
    db: DbSession,
    band: RiskBand | None = Query(None, description="Only patients in this risk band"),
) -> TriageResponse:
    """All known patients, highest risk score first."""
    summaries = [
        await load_patient_summary(db, patient_id)
        for patient_id in await metrics_store.known_patient_ids(db)
    ]
    ranked = filter_by_band(rank_patients(summaries), band)
    return TriageResponse(
        patients=[summary_response(summary) for summary in ranked],
        total=len(ranked),
    )


@router.get("/statistics", response_model=CohortStatisticsResponse)
async def get_statistics(db: DbSession) -> CohortStatisticsResponse:
    """Questionnaire band distributions and averages across the cohort."""
    stats = cohort_statistics(
        await metrics_store.all_assessments(db),
        await metrics_store.all_suicide_risks(db),
    )
    return CohortStatisticsResponse.model_validate(stats)
