# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasktracker.shared.config import DatabaseConfig
from tasktracker.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _sqlite_pragmas(config: DatabaseConfig):
    busy_timeout_ms = int(config.pool_timeout * 1000)

    def _set_sqlite_pragmas(dbapi_conn, _):
        cur = dbapi_conn.cursor()
        try:
            if not config.is_sqlite_memory():
                cur.execute("PRAGMA journal_mode=WAL;")
                cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute(f"PRAGMA busy_timeout={busy_timeout_ms};")
        finally:
            cur.close()

    return _set_sqlite_pragmas


def build_engine(config: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    engine_kwargs: dict[str, object] = {"echo": False, "pool_pre_ping": True}

    if config.is_sqlite():
        connect_args = {"check_same_thread": False, "timeout": config.pool_timeout}
    elif config.url.startswith("postgresql"):
        connect_args = {"options": f"-c statement_timeout={config.statement_timeout_ms}"}

    if config.is_sqlite_memory():
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )

    engine = create_engine(config.url, connect_args=connect_args, **engine_kwargs)
    if config.is_sqlite():
        event.listen(engine, "connect", _sqlite_pragmas(config))
    return engine


class Database:
    """Process-wide engine and session factory, built once from configuration."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = build_engine(config)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def init_schema(self) -> None:
        from tasktracker.infrastructure.db import models  # noqa: F401 (registers tables)

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
