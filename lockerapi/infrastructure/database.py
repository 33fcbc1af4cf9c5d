from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    SQLite URLs get a single shared connection so an in-memory database survives across sessions.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url)


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    # Register the mapped tables on Base.metadata
    import lockerapi.infrastructure.models.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Users and lockers tables created or already exist.")
