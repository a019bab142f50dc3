import datetime as dt

from sqlalchemy import Date, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class SpravatoSession(Base):
    """An in-clinic esketamine (Spravato) administration."""
    __tablename__ = "spravato_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    patient_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)

    dose_mg: Mapped[float] = mapped_column(Float, nullable=False)

    # Effects, 0-10
    dissociation_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    nausea_physical: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mood_24h_after: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Blood pressure as "systolic/diastolic"
    bp_pre: Mapped[str | None] = mapped_column(String(15), nullable=True)
    bp_post: Mapped[str | None] = mapped_column(String(15), nullable=True)

    trip_quality: Mapped[str | None] = mapped_column(Text, nullable=True)
    insights: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow)
