import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobtracker.api.endpoints import auth, health, jobs
from jobtracker.api.error_handlers import register_error_handlers
from jobtracker.core.config import Settings, get_settings
from jobtracker.core.database import build_engine, build_session_factory, init_db
from jobtracker.core.logging_config import setup_logging
from jobtracker.core.middleware import SecurityHeadersMiddleware
from jobtracker.core.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and its long-lived collaborators.

    The engine, password hasher and token service are created once here and
    shared read-only through app.state for the life of the process.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    engine = build_engine(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        logger.info(f"Starting up {settings.PROJECT_NAME}...")
        init_db(engine, create_tables=settings.AUTO_CREATE_TABLES)

        yield

        logger.info(f"Shutting down {settings.PROJECT_NAME}...")
        engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Track job applications per user",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_service = TokenService(
        settings.JWT_SECRET.get_secret_value(),
        expire_days=settings.TOKEN_EXPIRE_DAYS,
        algorithm=settings.JWT_ALGORITHM,
    )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router, prefix=settings.API_V1_STR)
    app.include_router(jobs.router, prefix=settings.API_V1_STR)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
