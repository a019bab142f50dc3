import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

BLOOD_PRESSURE_PATTERN = r"^\d{2,3}/\d{2,3}$"


class SpravatoSessionBase(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    dose_mg: float = Field(..., gt=0, description="Administered esketamine dose")
    dissociation_level: int | None = Field(None, ge=0, le=10)
    nausea_physical: int | None = Field(None, ge=0, le=10)
    bp_pre: str | None = Field(None, pattern=BLOOD_PRESSURE_PATTERN, description="e.g. 120/80")
    bp_post: str | None = Field(None, pattern=BLOOD_PRESSURE_PATTERN)
    trip_quality: str | None = None
    insights: str | None = None
    mood_24h_after: int | None = Field(None, ge=0, le=10)


class SpravatoSessionCreate(SpravatoSessionBase):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class SpravatoSessionResponse(SpravatoSessionBase):
    id: int
    patient_id: str
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class SpravatoSessionListResponse(BaseModel):
    sessions: list[SpravatoSessionResponse]
    total: int
