# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from linkportal.shared.config import DatabaseConfig
from linkportal.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _create_engine(config: DatabaseConfig) -> Engine:
    if config.is_sqlite():
        return create_engine(
            config.url,
            echo=False,
            connect_args={
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            },
        )
    return create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
    )


class Database:
    """Engine and session factory owned by one application instance."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = _create_engine(config)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    def init_db(self) -> None:
        # Import registers the mapped tables on Base.metadata.
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.debug("db.engine: disposed")
