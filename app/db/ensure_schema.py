# app/db/ensure_schema.py
from __future__ import annotations

import logging

from sqlalchemy import text

from app.db.session import DbConnectionFactory

log = logging.getLogger(__name__)

CREATE_TVSHOWS = text("""
    CREATE TABLE IF NOT EXISTS TvShows(
        Id INTEGER PRIMARY KEY,
        Title TEXT NOT NULL,
        ReleaseDate TEXT NOT NULL,
        Genre TEXT,
        Showtype TEXT,
        Actors TEXT,
        Favourite INTEGER
    )
""")


async def ensure_schema(connections: DbConnectionFactory) -> None:
    """Idempotent: creates the TvShows table if it is missing.
    Errors propagate so the app refuses to start against a broken store.
    """
    async with connections.connect() as conn:
        await conn.execute(CREATE_TVSHOWS)
    log.info("ensure_schema: TvShows table verified.")
