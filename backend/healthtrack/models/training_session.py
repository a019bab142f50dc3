from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class TrainingSession(Base):
    __tablename__ = "training_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    patient_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    performed_at: Mapped[datetime] = mapped_column(DateTime, index=True, nullable=False)

    duration_minutes: Mapped[int] = mapped_column(Integer, default=0)
    session_rpe: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-10

    # [{"name": "Squat", "sets": 3, "reps": 10, "load_kg": 60.0}, ...]
    exercises: Mapped[list] = mapped_column(JSON, default=list)

    # Derived on write
    internal_load: Mapped[float] = mapped_column(Float, default=0.0)  # duration x sRPE
    total_tonnage: Mapped[float] = mapped_column(Float, default=0.0)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
