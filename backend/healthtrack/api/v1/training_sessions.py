from datetime import datetime, timedelta

from fastapi import APIRouter, Query, status

from healthtrack.api.deps import DbSession
from healthtrack.models import TrainingSession
from healthtrack.schemas.training import (
    ACWRResponse,
    TrainingLoadResponse,
    TrainingSessionCreate,
    TrainingSessionListResponse,
    TrainingSessionResponse,
    WorkloadResponse,
)
from healthtrack.services import metrics_store
from healthtrack.services.physical_load import derive_session_fields
from healthtrack.services.workload import (
    acwr,
    acwr_zone,
    daily_loads,
    is_in_injury_window,
    monotony,
    monotony_and_strain,
)

router = APIRouter()


@router.post(
    "/{patient_id}/training-sessions",
    response_model=TrainingSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_training_session(
    patient_id: str,
    session_in: TrainingSessionCreate,
    db: DbSession,
) -> TrainingSession:
    """Log a training session with its internal load and tonnage."""
    session = TrainingSession(
        patient_id=patient_id,
        performed_at=session_in.performed_at,
        duration_minutes=session_in.duration_minutes,
        session_rpe=session_in.session_rpe,
        notes=session_in.notes,
        **derive_session_fields(session_in),
    )
    db.add(session)
    await db.commit()
    await db.refresh(session)
    return session


@router.get("/{patient_id}/training-sessions", response_model=TrainingSessionListResponse)
async def list_training_sessions(
    patient_id: str,
    db: DbSession,
    days: int = Query(30, ge=1, le=365, description="Number of days to look back"),
) -> TrainingSessionListResponse:
    """List training sessions, newest first."""
    since = datetime.utcnow() - timedelta(days=days)
    sessions = await metrics_store.sessions_since(db, patient_id, since)
    return TrainingSessionListResponse(sessions=sessions, total=len(sessions))


@router.get("/{patient_id}/training-load", response_model=TrainingLoadResponse)
async def get_training_load(
    patient_id: str,
    db: DbSession,
    days: int = Query(42, ge=1, le=365, description="Sessions considered for ATL/CTL"),
) -> TrainingLoadResponse:
    """ACWR over the look-back window and monotony/strain over the last 7 days."""
    now = datetime.utcnow()
    sessions = await metrics_store.sessions_since(db, patient_id, now - timedelta(days=days))

    balance = acwr(sessions)
    week = daily_loads(sessions, now.date())
    workload = monotony_and_strain(week)

    return TrainingLoadResponse(
        acwr=ACWRResponse.model_validate(balance),
        acwr_zone=acwr_zone(balance.acwr),
        workload=WorkloadResponse.model_validate(workload),
        daily_loads=week,
        in_injury_window=is_in_injury_window(monotony(week), balance.tsb),
        session_count=len(sessions),
    )
