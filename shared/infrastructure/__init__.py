"""
Infrastructure module: database sessions and request correlation.

Provides:
- Per-provider engines and sessions (db.py)
- Correlation ID middleware and logging filter (correlation.py)
"""

from shared.infrastructure.db import (
    get_engine,
    get_sessionmaker,
    get_db,
    get_db_context,
    resolve_provider,
    safe_commit,
)
from shared.infrastructure.correlation import (
    CorrelationIdMiddleware,
    CorrelationIdFilter,
    get_request_id,
)

__all__ = [
    # db
    "get_engine",
    "get_sessionmaker",
    "get_db",
    "get_db_context",
    "resolve_provider",
    "safe_commit",
    # correlation
    "CorrelationIdMiddleware",
    "CorrelationIdFilter",
    "get_request_id",
]
