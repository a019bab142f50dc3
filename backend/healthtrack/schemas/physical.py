import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class PhysicalCheckInBase(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    sleep_quality: int | None = Field(None, ge=0, le=10)
    sleep_start: dt.time | None = None
    sleep_end: dt.time | None = None
    fatigue_physical: int | None = Field(None, ge=0, le=10)
    stress_mental: int | None = Field(None, ge=0, le=10)
    doms_pain: int | None = Field(None, ge=0, le=10, description="Muscle soreness")
    mood_general: int | None = Field(None, ge=0, le=10)
    readiness_to_train: int | None = Field(None, ge=0, le=10)
    perception_recovery_prs: int | None = Field(None, ge=0, le=10, description="Perceived recovery")
    resting_hr: int | None = Field(None, ge=20, le=250)
    jump_test_result: float | None = Field(None, ge=0, description="Jump height in cm")


class PhysicalCheckIn(PhysicalCheckInBase):
    """Validated daily physical check-in. Immutable once built."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class PhysicalMetricsResponse(PhysicalCheckInBase):
    id: int
    patient_id: str
    sleep_hours: float | None = None
    readiness_index: float
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class PhysicalMetricsListResponse(BaseModel):
    metrics: list[PhysicalMetricsResponse]
    total: int
