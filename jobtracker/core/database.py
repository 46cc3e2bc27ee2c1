import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


def build_engine(database_url: str, pool_size: int = 10, max_overflow: int = 20, pool_timeout: int = 30) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    SQLite (used for local runs and tests) gets a single shared connection;
    everything else gets a bounded connection pool so a saturated database
    surfaces as a timeout error instead of a hang.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine, create_tables: bool = True) -> None:
    """
    Register models and optionally create missing tables.
    """
    from jobtracker.models import job, user  # noqa: F401  Import models to register them

    if create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
