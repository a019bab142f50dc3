# SQLAlchemy Models
from healthtrack.models.physical_metrics import PhysicalDailyMetrics
from healthtrack.models.mental_metrics import MentalDailyMetrics
from healthtrack.models.training_session import TrainingSession
from healthtrack.models.clinical_assessment import ClinicalAssessment
from healthtrack.models.spravato_session import SpravatoSession

__all__ = [
    "PhysicalDailyMetrics",
    "MentalDailyMetrics",
    "TrainingSession",
    "ClinicalAssessment",
    "SpravatoSession",
]
