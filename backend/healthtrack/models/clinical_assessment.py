import datetime as dt

from sqlalchemy import JSON, Date, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class ClinicalAssessment(Base):
    __tablename__ = "clinical_assessments"
    __table_args__ = (
        UniqueConstraint("patient_id", "date", "type", name="uq_assessment_patient_date_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    patient_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    type: Mapped[str] = mapped_column(String(10), index=True, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)

    # {"q1": 2, "q2": 1, ...}
    raw_scores: Mapped[dict] = mapped_column(JSON, default=dict)
    total_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
