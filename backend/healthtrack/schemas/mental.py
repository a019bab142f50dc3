import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from healthtrack.schemas.enums import AlertSeverity, AlertType


class MentalCheckInBase(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    sleep_hours_log: float | None = Field(None, ge=0, le=24)
    sleep_score_app: int | None = Field(None, ge=0, le=100)
    stress_score_app: int | None = Field(None, ge=0, le=100)
    energy_level: int | None = Field(None, ge=0, le=10)
    depression_mood: int | None = Field(None, ge=0, le=10)
    mania_euphoria: int | None = Field(None, ge=0, le=10)
    irritability: int | None = Field(None, ge=0, le=10)
    anxiety: int | None = Field(None, ge=0, le=10)
    obsessive_thoughts: int | None = Field(None, ge=0, le=10)
    sensory_overload: int | None = Field(None, ge=0, le=10)
    social_masking: int | None = Field(None, ge=0, le=10)
    suicide_risk: int | None = Field(None, ge=0, le=10)
    medication_taken: bool = False
    notes: str | None = None


class MentalCheckIn(MentalCheckInBase):
    """Validated daily mental-health check-in. Immutable once built."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class AlertResponse(BaseModel):
    type: AlertType
    severity: AlertSeverity
    message: str
    value: float | None = None

    class Config:
        from_attributes = True


class MentalMetricsResponse(MentalCheckInBase):
    id: int
    patient_id: str
    alerts: list[AlertResponse] = []
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class MentalMetricsListResponse(BaseModel):
    metrics: list[MentalMetricsResponse]
    total: int
