import datetime as dt

from sqlalchemy import Date, DateTime, Float, Integer, String, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class PhysicalDailyMetrics(Base):
    __tablename__ = "physical_daily_metrics"
    __table_args__ = (
        UniqueConstraint("patient_id", "date", name="uq_physical_patient_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    patient_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)

    # Subjective ratings, 0-10
    sleep_quality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fatigue_physical: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stress_mental: Mapped[int | None] = mapped_column(Integer, nullable=True)
    doms_pain: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mood_general: Mapped[int | None] = mapped_column(Integer, nullable=True)
    readiness_to_train: Mapped[int | None] = mapped_column(Integer, nullable=True)
    perception_recovery_prs: Mapped[int | None] = mapped_column(Integer, nullable=True)

    sleep_start: Mapped[dt.time | None] = mapped_column(Time, nullable=True)
    sleep_end: Mapped[dt.time | None] = mapped_column(Time, nullable=True)
    resting_hr: Mapped[int | None] = mapped_column(Integer, nullable=True)
    jump_test_result: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Derived on write
    sleep_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    readiness_index: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow)
