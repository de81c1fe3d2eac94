"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns.

Three providers are supported (postgresql, mysql, sqlserver). The provider is
chosen per request with the X-DB-Provider header; engines are created lazily
and cached per provider.
"""

import os
from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from fastapi import Header
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from shared.config.constants import DB_PROVIDER_HEADER, DbProviders
from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.utils.exceptions import ValidationError

logger = get_logger(__name__)


def _calculate_pool_size() -> int:
    """Pool size based on CPU cores: (2 * cores) + 1, capped at 20."""
    cores = os.cpu_count() or 4
    return min(cores * 2 + 1, 20)


def _url_for_provider(provider: str) -> str:
    urls = {
        DbProviders.POSTGRESQL: settings.database_url,
        DbProviders.MYSQL: settings.mysql_database_url,
        DbProviders.SQLSERVER: settings.sqlserver_database_url,
    }
    return urls[provider]


def resolve_provider(provider: str | None) -> str:
    """
    Normalize a provider name, falling back to the configured default.

    Raises:
        ValidationError: If the provider is not supported.
    """
    name = (provider or settings.default_db_provider).strip().lower()
    if name not in DbProviders.ALL:
        raise ValidationError(
            f"Proveedor de base de datos no soportado: '{name}'. "
            f"Valores permitidos: {', '.join(DbProviders.ALL)}",
            provider=name,
        )
    return name


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str) -> Engine:
    """
    Create an engine for the given URL with pool and timeout settings.

    SQLite URLs (used in local runs) skip pooling options and get
    foreign key enforcement turned on so ON DELETE CASCADE applies.
    """
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.db_echo,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    if url.startswith("mssql"):
        connect_args = {"timeout": 10}
    else:
        connect_args = {"connect_timeout": 10}

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=_calculate_pool_size(),
        max_overflow=15,
        pool_timeout=30,
        pool_recycle=1800,
        connect_args=connect_args,
        echo=settings.db_echo,
    )


@lru_cache
def _engine_for(name: str) -> Engine:
    logger.info("Creating database engine", provider=name)
    return build_engine(_url_for_provider(name))


@lru_cache
def _sessionmaker_for(name: str) -> sessionmaker[Session]:
    return sessionmaker(bind=_engine_for(name), autoflush=False, autocommit=False)


def get_engine(provider: str | None = None) -> Engine:
    """Engine for a provider, one per normalized provider name."""
    return _engine_for(resolve_provider(provider))


def get_sessionmaker(provider: str | None = None) -> sessionmaker[Session]:
    """Session factory bound to the provider's engine."""
    return _sessionmaker_for(resolve_provider(provider))


def get_db(
    x_db_provider: str | None = Header(default=None, alias=DB_PROVIDER_HEADER),
) -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/roles")
        def list_roles(db: Session = Depends(get_db)):
            ...

    The provider comes from the X-DB-Provider header; the session is
    closed after the request completes.
    """
    provider = resolve_provider(x_db_provider)
    db = get_sessionmaker(provider)()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context(provider: str | None = None) -> Generator[Session, None, None]:
    """
    Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            seed(db)
    """
    db = get_sessionmaker(resolve_provider(provider))()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    Raises the original exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
