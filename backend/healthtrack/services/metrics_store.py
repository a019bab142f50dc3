"""
Metrics Store - Natural-key upserts and the read queries the engines need.
"""
import logging
from datetime import date, datetime
from typing import Any, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.database import Base
from healthtrack.models import (
    ClinicalAssessment,
    MentalDailyMetrics,
    PhysicalDailyMetrics,
    SpravatoSession,
    TrainingSession,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def upsert(
    db: AsyncSession,
    model: type[ModelT],
    key: dict[str, Any],
    values: dict[str, Any],
) -> tuple[ModelT, bool]:
    """
    Insert a row, or overwrite the row with the same natural key.

    Returns (row, created). Sending identical data twice leaves one row with
    identical values.
    """
    result = await db.execute(
        select(model).filter_by(**key)
    )
    row = result.scalar_one_or_none()
    created = row is None

    if created:
        row = model(**key, **values)
        db.add(row)
    else:
        for field, value in values.items():
            setattr(row, field, value)

    await db.commit()
    await db.refresh(row)

    logger.info(
        "Metrics row created" if created else "Metrics row updated",
        extra={"table": model.__tablename__, **{k: str(v) for k, v in key.items()}},
    )
    return row, created


async def latest_physical(db: AsyncSession, patient_id: str) -> Optional[PhysicalDailyMetrics]:
    result = await db.execute(
        select(PhysicalDailyMetrics)
        .where(PhysicalDailyMetrics.patient_id == patient_id)
        .order_by(PhysicalDailyMetrics.date.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def latest_mental(db: AsyncSession, patient_id: str) -> Optional[MentalDailyMetrics]:
    result = await db.execute(
        select(MentalDailyMetrics)
        .where(MentalDailyMetrics.patient_id == patient_id)
        .order_by(MentalDailyMetrics.date.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def physical_since(
    db: AsyncSession, patient_id: str, start_date: date
) -> list[PhysicalDailyMetrics]:
    """Physical check-ins on or after start_date, newest first."""
    result = await db.execute(
        select(PhysicalDailyMetrics)
        .where(
            PhysicalDailyMetrics.patient_id == patient_id,
            PhysicalDailyMetrics.date >= start_date,
        )
        .order_by(PhysicalDailyMetrics.date.desc())
    )
    return list(result.scalars().all())


async def mental_since(
    db: AsyncSession, patient_id: str, start_date: date
) -> list[MentalDailyMetrics]:
    """Mental check-ins on or after start_date, newest first."""
    result = await db.execute(
        select(MentalDailyMetrics)
        .where(
            MentalDailyMetrics.patient_id == patient_id,
            MentalDailyMetrics.date >= start_date,
        )
        .order_by(MentalDailyMetrics.date.desc())
    )
    return list(result.scalars().all())


async def recent_assessments(
    db: AsyncSession, patient_id: str, limit: Optional[int] = None
) -> list[ClinicalAssessment]:
    """Assessments of one patient, newest first."""
    query = (
        select(ClinicalAssessment)
        .where(ClinicalAssessment.patient_id == patient_id)
        .order_by(ClinicalAssessment.date.desc(), ClinicalAssessment.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())


async def sessions_since(
    db: AsyncSession, patient_id: str, since: datetime
) -> list[TrainingSession]:
    """Training sessions performed at or after `since`, newest first."""
    result = await db.execute(
        select(TrainingSession)
        .where(
            TrainingSession.patient_id == patient_id,
            TrainingSession.performed_at >= since,
        )
        .order_by(TrainingSession.performed_at.desc())
    )
    return list(result.scalars().all())


async def spravato_since(
    db: AsyncSession, patient_id: str, start_date: date
) -> list[SpravatoSession]:
    """Spravato sessions on or after start_date, newest first."""
    result = await db.execute(
        select(SpravatoSession)
        .where(
            SpravatoSession.patient_id == patient_id,
            SpravatoSession.date >= start_date,
        )
        .order_by(SpravatoSession.date.desc(), SpravatoSession.id.desc())
    )
    return list(result.scalars().all())


async def known_patient_ids(db: AsyncSession) -> list[str]:
    """Every patient id with at least one stored record, sorted."""
    patient_ids: set[str] = set()
    for model in (
        PhysicalDailyMetrics, MentalDailyMetrics, TrainingSession, ClinicalAssessment, SpravatoSession,
    ):
        result = await db.execute(select(model.patient_id).distinct())
        patient_ids.update(result.scalars().all())
    return sorted(patient_ids)


async def all_assessments(db: AsyncSession) -> list[ClinicalAssessment]:
    result = await db.execute(select(ClinicalAssessment))
    return list(result.scalars().all())


async def all_suicide_risks(db: AsyncSession) -> list[Optional[int]]:
    result = await db.execute(select(MentalDailyMetrics.suicide_risk))
    return list(result.scalars().all())
