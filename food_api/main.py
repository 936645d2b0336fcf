"""
FastAPI app entry point
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .db import Base, create_db_engine, create_session_factory, get_db
from .errors import register_error_handlers

# Import models so the tables are registered on Base.metadata
from . import models  # noqa: F401

# Import routes
from .routes import food_route

logger = logging.getLogger(__name__)


def run_alembic_migrations(database_url: str) -> bool:
    """
    Run Alembic migrations programmatically
    This is safer than Base.metadata.create_all() in production
    """
    from pathlib import Path

    from alembic import command
    from alembic.config import Config

    alembic_ini_path = Path(__file__).resolve().parent.parent / "alembic.ini"
    if not alembic_ini_path.exists():
        logger.warning("alembic.ini not found, skipping migrations")
        return False

    logger.info("Running Alembic migrations...")
    alembic_cfg = Config(str(alembic_ini_path))
    alembic_cfg.attributes["configure_logger"] = False
    # configparser treats % as interpolation
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    command.upgrade(alembic_cfg, "head")
    logger.info("Migrations completed successfully")
    return True


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own engine and session factory."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for warning in settings.validate_settings():
        logger.warning(warning)

    engine = create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("=" * 60)
        logger.info(f"Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode...")
        logger.info("=" * 60)

        if settings.RUN_MIGRATIONS:
            run_alembic_migrations(settings.database_url)

        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created/verified")

        yield

        # Shutdown
        logger.info("Shutting down...")
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "message": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
            "docs": "/docs" if not settings.is_production else None,
        }

    @app.get("/health")
    def health_check(db: Session = Depends(get_db)):
        """Health check endpoint with database status"""
        try:
            db.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as e:
            logger.error(f"Health check database probe failed: {e}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "ok" else "degraded",
            "environment": settings.ENVIRONMENT,
            "database": database,
        }

    # Register routers
    app.include_router(food_route.router)

    return app


def run():
    import uvicorn
    settings = get_settings()
    uvicorn.run("food_api.main:create_app", factory=True,
                host=settings.HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    run()
