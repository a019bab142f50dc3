from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from healthtrack.schemas.enums import LoadZone


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = ""
    sets: int = Field(0, ge=0)
    reps: int = Field(0, ge=0)
    load_kg: float = Field(0, ge=0)


class TrainingSessionBase(BaseModel):
    performed_at: datetime
    duration_minutes: int = Field(..., ge=0)
    session_rpe: int = Field(..., ge=0, le=10, description="Session rate of perceived exertion")
    exercises: list[Exercise] = Field(default_factory=list)
    notes: str | None = None


class TrainingSessionCreate(TrainingSessionBase):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("performed_at")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # Stored and compared as naive UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class TrainingSessionResponse(TrainingSessionBase):
    id: int
    patient_id: str
    internal_load: float  # duration * RPE
    total_tonnage: float  # sum of sets * reps * load
    created_at: datetime

    class Config:
        from_attributes = True


class TrainingSessionListResponse(BaseModel):
    sessions: list[TrainingSessionResponse]
    total: int


class ACWRResponse(BaseModel):
    atl: int
    ctl: int
    tsb: int
    acwr: float

    class Config:
        from_attributes = True


class WorkloadResponse(BaseModel):
    weekly_load: int
    monotony: float
    strain: int
    injury_risk: bool

    class Config:
        from_attributes = True


class TrainingLoadResponse(BaseModel):
    acwr: ACWRResponse
    acwr_zone: LoadZone
    workload: WorkloadResponse
    daily_loads: list[float] = Field(..., description="Last 7 days, oldest first")
    in_injury_window: bool
    session_count: int
