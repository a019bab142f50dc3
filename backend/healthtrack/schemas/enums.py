from enum import Enum


class AssessmentType(str, Enum):
    PHQ9 = "PHQ9"  # Depression, 9 items
    GAD7 = "GAD7"  # Anxiety, 7 items
    ASRM = "ASRM"
    FAST = "FAST"
    YBOCS = "YBOCS"
    EQ5D = "EQ5D"
    TSQM = "TSQM"


class SeverityBand(str, Enum):
    MINIMAL = "Mínima"
    MILD = "Leve"
    MODERATE = "Moderada"
    MODERATELY_SEVERE = "Moderadamente Grave"
    SEVERE = "Grave"


class AlertType(str, Enum):
    MANIA = "mania"
    SUICIDE = "suicide"
    DEPRESSION = "depression"
    ANXIETY = "anxiety"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskBand(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LoadZone(str, Enum):
    NONE = "none"  # No chronic load yet
    UNDERTRAINING = "undertraining"
    OPTIMAL = "optimal"
    OVERREACHING = "overreaching"


# Questionnaires with a defined scoring rule
SCORED_ASSESSMENTS: frozenset[AssessmentType] = frozenset({
    AssessmentType.PHQ9,
    AssessmentType.GAD7,
})

# Band order (for distributions)
PHQ9_BANDS: list[SeverityBand] = [
    SeverityBand.MINIMAL,
    SeverityBand.MILD,
    SeverityBand.MODERATE,
    SeverityBand.MODERATELY_SEVERE,
    SeverityBand.SEVERE,
]

GAD7_BANDS: list[SeverityBand] = [
    SeverityBand.MINIMAL,
    SeverityBand.MILD,
    SeverityBand.MODERATE,
    SeverityBand.SEVERE,
]

# Risk band display labels used by the clinical team
RISK_BAND_LABELS: dict[RiskBand, str] = {
    RiskBand.HIGH: "Alto Risco",
    RiskBand.MEDIUM: "Risco Moderado",
    RiskBand.LOW: "Baixo Risco",
}

# Alert severity to numeric mapping (for sorting)
ALERT_SEVERITY_NUMERIC: dict[AlertSeverity, int] = {
    AlertSeverity.LOW: 1,
    AlertSeverity.MEDIUM: 2,
    AlertSeverity.HIGH: 3,
    AlertSeverity.CRITICAL: 4,
}
