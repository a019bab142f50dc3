import logging
from datetime import date, timedelta

from fastapi import APIRouter, Query

from healthtrack.api.deps import DbSession
from healthtrack.models import MentalDailyMetrics
from healthtrack.schemas.mental import (
    AlertResponse,
    MentalCheckIn,
    MentalMetricsListResponse,
    MentalMetricsResponse,
)
from healthtrack.services import metrics_store
from healthtrack.services.mental_alerts import generate_alerts

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_alerts(row: MentalDailyMetrics) -> MentalMetricsResponse:
    response = MentalMetricsResponse.model_validate(row)
    alerts = [AlertResponse.model_validate(alert) for alert in generate_alerts(row)]
    return response.model_copy(update={"alerts": alerts})


@router.put("/{patient_id}/mental-metrics", response_model=MentalMetricsResponse)
async def upsert_mental_metrics(
    patient_id: str,
    checkin: MentalCheckIn,
    db: DbSession,
) -> MentalMetricsResponse:
    """Save the daily mental-health check-in and return the alerts it raises."""
    row, _ = await metrics_store.upsert(
        db,
        MentalDailyMetrics,
        key={"patient_id": patient_id, "date": checkin.date},
        values=checkin.model_dump(exclude={"date"}),
    )

    response = _with_alerts(row)
    if response.alerts:
        logger.info(
            "Mental health alerts generated",
            extra={
                "patient_id": patient_id,
                "date": checkin.date.isoformat(),
                "alert_types": [alert.type.value for alert in response.alerts],
            }
        )
    return response


@router.get("/{patient_id}/mental-metrics", response_model=MentalMetricsListResponse)
async def list_mental_metrics(
    patient_id: str,
    db: DbSession,
    days: int = Query(30, ge=1, le=365, description="Number of days to look back"),
) -> MentalMetricsListResponse:
    """List mental-health check-ins with their alerts, newest first."""
    start_date = date.today() - timedelta(days=days)
    rows = await metrics_store.mental_since(db, patient_id, start_date)
    return MentalMetricsListResponse(
        metrics=[_with_alerts(row) for row in rows],
        total=len(rows),
    )
