# =============================================================================
# File: mrgcar/db.py
# Purpose: SQLAlchemy engine + session factory (PostgreSQL in prod, SQLite in dev/tests).
# =============================================================================
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .config import get_settings


def normalize_database_url(url: str) -> str:
    """SQLAlchemy refuses the ``postgres://`` scheme handed out by hosted Postgres."""
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def make_engine(url: str) -> Engine:
    url = normalize_database_url(url)
    options = {"echo": False, "future": True}
    if url.startswith("postgresql"):
        options["pool_pre_ping"] = True
    return create_engine(url, **options)


engine = make_engine(get_settings().database_url)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass


SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_engine(url: str) -> Engine:
    """Point the module engine and SessionLocal at another database."""
    global engine
    engine.dispose()
    engine = make_engine(url)
    SessionLocal.configure(bind=engine)
    return engine


def init_db() -> None:
    """Create all tables if they don't exist."""
    # Import models so metadata sees them before create_all
    from . import models  # noqa: F401
    Base.metadata.create_all(engine)
