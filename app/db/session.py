# app/db/session.py
import re
from typing import AsyncContextManager, Optional

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

_ADO_DATA_SOURCE = re.compile(r"^\s*data\s+source\s*=\s*(?P<path>[^;]+?)\s*;?\s*$", re.IGNORECASE)


def _normalise_url(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = value.strip().strip('"').strip("'")
    return value or None


def _to_async_driver(url: str) -> str:
    """
    Ensure the SQLAlchemy URL uses the async SQLite driver.
    - Data Source=tvshows.db  -> sqlite+aiosqlite:///tvshows.db
    - sqlite://...            -> sqlite+aiosqlite://...
    - sqlite+aiosqlite://...  -> (as is)
    """
    if url.startswith("sqlite+aiosqlite://"):
        return url
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url.split("sqlite://", 1)[1]
    m = _ADO_DATA_SOURCE.match(url)
    if m:
        return "sqlite+aiosqlite:///" + m.group("path")
    # Fallback: do nothing
    return url


def resolve_database_url(value: Optional[str]) -> str:
    url = _normalise_url(value)
    if not url:
        raise RuntimeError(
            "No DATABASE_URL found. "
            "Set DATABASE_URL like 'sqlite+aiosqlite:///./tvshows.db' or 'Data Source=tvshows.db'."
        )
    return _to_async_driver(url)


def build_engine(database_url: Optional[str]) -> AsyncEngine:
    return create_async_engine(resolve_database_url(database_url), future=True, pool_pre_ping=True)


class DbConnectionFactory:
    """Hands out one scoped connection per operation."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def connect(self) -> AsyncContextManager[AsyncConnection]:
        # begin(): commit on clean exit, rollback on error, connection returned to the pool either way
        return self._engine.begin()
