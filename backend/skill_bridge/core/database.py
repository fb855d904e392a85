from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from skill_bridge.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url),
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()
