from datetime import date, timedelta

from fastapi import APIRouter, Query

from healthtrack.api.deps import DbSession
from healthtrack.models import PhysicalDailyMetrics
from healthtrack.schemas.physical import (
    PhysicalCheckIn,
    PhysicalMetricsListResponse,
    PhysicalMetricsResponse,
)
from healthtrack.services import metrics_store
from healthtrack.services.physical_load import derive_physical_fields

router = APIRouter()


@router.put("/{patient_id}/physical-metrics", response_model=PhysicalMetricsResponse)
async def upsert_physical_metrics(
    patient_id: str,
    checkin: PhysicalCheckIn,
    db: DbSession,
) -> PhysicalDailyMetrics:
    """Save the daily physical check-in; re-sending a date overwrites it."""
    values = checkin.model_dump(exclude={"date"})
    values.update(derive_physical_fields(checkin))

    row, _ = await metrics_store.upsert(
        db,
        PhysicalDailyMetrics,
        key={"patient_id": patient_id, "date": checkin.date},
        values=values,
    )
    return row


@router.get("/{patient_id}/physical-metrics", response_model=PhysicalMetricsListResponse)
async def list_physical_metrics(
    patient_id: str,
    db: DbSession,
    days: int = Query(30, ge=1, le=365, description="Number of days to look back"),
) -> PhysicalMetricsListResponse:
    """List physical check-ins, newest first."""
    start_date = date.today() - timedelta(days=days)
    metrics = await metrics_store.physical_since(db, patient_id, start_date)
    return PhysicalMetricsListResponse(metrics=metrics, total=len(metrics))
