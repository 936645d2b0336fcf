# food_api\db.py
"""
Database engine, session factory and session dependency
"""
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """Hosted PostgreSQL still hands out the old `postgres://` scheme."""
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def create_db_engine(database_url: str) -> Engine:
    """Create the engine for `database_url` with pool settings per backend."""
    database_url = normalize_database_url(database_url)

    engine_kwargs = {
        "pool_pre_ping": True,
    }

    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases live and die with their single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update({
            "pool_recycle": 3600,
            "pool_size": 5,
            "max_overflow": 10,
            "pool_timeout": 30,
            "connect_args": {"connect_timeout": 30},
        })

    logger.info(f"Creating database engine for {database_url.split('@')[-1][:50]}")
    return create_engine(database_url, **engine_kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Database session dependency"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
