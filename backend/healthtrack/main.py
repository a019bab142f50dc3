import logging
import math
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from healthtrack import models  # noqa: F401
from healthtrack.api.v1.router import api_router
from healthtrack.config import get_settings
from healthtrack.database import Base, engine
from healthtrack.services.scoring_config import load_scoring_config_from_yaml

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load tuned thresholds, then make sure every metrics table exists."""
    if settings.scoring_config_path:
        load_scoring_config_from_yaml(settings.scoring_config_path)
        logger.info(
            "Scoring config loaded",
            extra={"path": settings.scoring_config_path},
        )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(
    title="HealthTrack API",
    description="Derived health metrics, clinical scoring and risk alerts for patient monitoring",
    version="0.1.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router, prefix="/api/v1")


def _finite_or_text(value: float):
    return value if math.isfinite(value) else str(value)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 with the rejected inputs echoed back; Infinity and NaN come back as text."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(), custom_encoder={float: _finite_or_text})},
    )


app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "environment": settings.environment}
