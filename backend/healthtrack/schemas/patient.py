from pydantic import BaseModel, Field

from healthtrack.schemas.enums import AlertSeverity, RiskBand, SeverityBand
from healthtrack.schemas.mental import AlertResponse, MentalMetricsResponse
from healthtrack.schemas.physical import PhysicalMetricsResponse


class RiskBreakdownResponse(BaseModel):
    suicide_contribution: float
    depression_contribution: float
    anxiety_contribution: float
    phq9_contribution: float
    gad7_contribution: float
    raw_score: float
    final_score: int = Field(..., ge=0, le=100)

    class Config:
        from_attributes = True


class PatientSummaryResponse(BaseModel):
    patient_id: str
    risk_score: int = Field(..., ge=0, le=100)
    risk_band: RiskBand
    risk_label: str
    highest_alert_severity: AlertSeverity | None = None
    alerts: list[AlertResponse] = []
    breakdown: RiskBreakdownResponse
    latest_physical: PhysicalMetricsResponse | None = None
    latest_mental: MentalMetricsResponse | None = None

    class Config:
        from_attributes = True


class TriageResponse(BaseModel):
    patients: list[PatientSummaryResponse]
    total: int


class BandCountResponse(BaseModel):
    band: SeverityBand
    range: str
    count: int

    class Config:
        from_attributes = True


class CohortStatisticsResponse(BaseModel):
    phq9_distribution: list[BandCountResponse]
    gad7_distribution: list[BandCountResponse]
    average_phq9: float
    average_gad7: float
    average_suicide_risk: float
    total_assessments: int

    class Config:
        from_attributes = True
