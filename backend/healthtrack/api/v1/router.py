from fastapi import APIRouter

from healthtrack.api.v1 import (
    assessments,
    cohort,
    mental_metrics,
    patients,
    physical_metrics,
    spravato_sessions,
    training_sessions,
)

api_router = APIRouter()

api_router.include_router(physical_metrics.router, prefix="/patients", tags=["physical-metrics"])
api_router.include_router(mental_metrics.router, prefix="/patients", tags=["mental-metrics"])
api_router.include_router(training_sessions.router, prefix="/patients", tags=["training"])
api_router.include_router(assessments.router, prefix="/patients", tags=["assessments"])
api_router.include_router(spravato_sessions.router, prefix="/patients", tags=["spravato"])
api_router.include_router(patients.router, prefix="/patients", tags=["patients"])
api_router.include_router(cohort.router, tags=["cohort"])
