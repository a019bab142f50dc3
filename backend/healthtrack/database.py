from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from healthtrack.config import get_settings


def engine_options(database_url: str, echo: bool = False) -> dict:
    """Keyword arguments for create_async_engine for the given backend."""
    options: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
    return options


settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    **engine_options(settings.database_url, echo=settings.debug),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass
