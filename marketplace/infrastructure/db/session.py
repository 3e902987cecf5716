# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database engine and session helpers."""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from marketplace.shared.config import load_config
from marketplace.shared.logging import logger

_config = load_config()
_IS_SQLITE = _config.database.url.startswith("sqlite")


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def _engine_options() -> dict[str, Any]:
    if _IS_SQLITE:
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(_config.database.pool_timeout),
            }
        }
    return {
        "pool_pre_ping": True,
        "pool_size": _config.database.pool_size,
        "max_overflow": _config.database.max_overflow,
        "pool_timeout": _config.database.pool_timeout,
    }


ENGINE: Engine = create_engine(_config.database.url, echo=False, **_engine_options())


@event.listens_for(ENGINE, "connect")
def _set_sqlite_pragmas(dbapi_conn, _):
    """Apply safety PRAGMAs when using SQLite."""

    if not _IS_SQLITE:
        return
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db() -> None:
    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
