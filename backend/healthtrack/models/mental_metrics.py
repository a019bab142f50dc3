import datetime as dt

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class MentalDailyMetrics(Base):
    __tablename__ = "mental_daily_metrics"
    __table_args__ = (
        UniqueConstraint("patient_id", "date", name="uq_mental_patient_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    patient_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)

    # Wearable app values
    sleep_hours_log: Mapped[float | None] = mapped_column(Float, nullable=True)
    sleep_score_app: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100
    stress_score_app: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100

    # Self-reported, 0-10
    energy_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    depression_mood: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mania_euphoria: Mapped[int | None] = mapped_column(Integer, nullable=True)
    irritability: Mapped[int | None] = mapped_column(Integer, nullable=True)
    anxiety: Mapped[int | None] = mapped_column(Integer, nullable=True)
    obsessive_thoughts: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sensory_overload: Mapped[int | None] = mapped_column(Integer, nullable=True)
    social_masking: Mapped[int | None] = mapped_column(Integer, nullable=True)
    suicide_risk: Mapped[int | None] = mapped_column(Integer, nullable=True)

    medication_taken: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow)
