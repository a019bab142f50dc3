import logging
from datetime import date, timedelta

from fastapi import APIRouter, Query, status

from healthtrack.api.deps import DbSession
from healthtrack.models import SpravatoSession
from healthtrack.schemas.spravato import (
    SpravatoSessionCreate,
    SpravatoSessionListResponse,
    SpravatoSessionResponse,
)
from healthtrack.services import metrics_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{patient_id}/spravato-sessions",
    response_model=SpravatoSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_spravato_session(
    patient_id: str,
    session_in: SpravatoSessionCreate,
    db: DbSession,
) -> SpravatoSession:
    """Log an esketamine treatment session."""
    session = SpravatoSession(patient_id=patient_id, **session_in.model_dump())
    db.add(session)
    await db.commit()
    await db.refresh(session)

    logger.info(
        "Spravato session logged",
        extra={"patient_id": patient_id, "date": session.date.isoformat()},
    )
    return session


@router.get("/{patient_id}/spravato-sessions", response_model=SpravatoSessionListResponse)
async def list_spravato_sessions(
    patient_id: str,
    db: DbSession,
    days: int = Query(90, ge=1, le=365, description="Number of days to look back"),
) -> SpravatoSessionListResponse:
    """List Spravato sessions, newest first."""
    start_date = date.today() - timedelta(days=days)
    sessions = await metrics_store.spravato_since(db, patient_id, start_date)
    return SpravatoSessionListResponse(sessions=sessions, total=len(sessions))
