# app/services/tvshow_service.py
"""
Data access for the TvShows table.

Every method opens its own connection (one per statement) through the
connection factory and releases it before returning. All user-supplied values
travel as bound parameters; LIKE wildcards are concatenated in SQL around the
bound value, never into the statement text.

The existence check in create()/update() runs on a separate connection from
the write, so two concurrent creates for the same Id can both pass the check.
The primary key still rejects the second insert; that surfaces as an
IntegrityError instead of the friendly duplicate result.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text

from app.db.session import DbConnectionFactory
from app.schemas import TvShow

log = logging.getLogger(__name__)

__all__ = ["TvShowService"]

# --- SQL -------------------------------------------------------------------

_COLUMNS = "Id, Title, ReleaseDate, Genre, Showtype, Actors, Favourite"

SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM TvShows WHERE Id = :id LIMIT 1")
SELECT_ALL = text(f"SELECT {_COLUMNS} FROM TvShows")
SELECT_BY_GENRE = text(f"SELECT {_COLUMNS} FROM TvShows WHERE Genre = :genre")
SELECT_BY_SHOWTYPE = text(f"SELECT {_COLUMNS} FROM TvShows WHERE Showtype = :showtype")
SELECT_FAVOURITES = text(f"SELECT {_COLUMNS} FROM TvShows WHERE Favourite = 1")
SEARCH_BY_TITLE = text(f"SELECT {_COLUMNS} FROM TvShows WHERE Title LIKE '%' || :title || '%'")
SEARCH_ACTORS_BY_TITLE = text("SELECT Actors FROM TvShows WHERE Title LIKE '%' || :title || '%' LIMIT 1")

INSERT_TVSHOW = text("""
    INSERT INTO TvShows (Id, Title, ReleaseDate, Genre, Showtype, Actors, Favourite)
    VALUES (:id, :title, :release_date, :genre, :showtype, :actors, :favourite)
""")

UPDATE_TVSHOW = text("""
    UPDATE TvShows
    SET Title = :title, ReleaseDate = :release_date, Genre = :genre,
        Showtype = :showtype, Actors = :actors, Favourite = :favourite
    WHERE Id = :id
""")

DELETE_TVSHOW = text("DELETE FROM TvShows WHERE Id = :id")


# --- helpers ---------------------------------------------------------------

def _to_params(show: TvShow) -> Dict[str, Any]:
    return {
        "id": show.id,
        "title": show.title,
        "release_date": show.release_date.isoformat() if show.release_date else None,
        "genre": show.genre,
        "showtype": show.showtype,
        "actors": show.actors,
        "favourite": show.favourite,
    }


def _from_row(row: Mapping[str, Any]) -> TvShow:
    return TvShow(
        id=row["Id"],
        title=row["Title"],
        release_date=row["ReleaseDate"],
        genre=row["Genre"],
        showtype=row["Showtype"],
        actors=row["Actors"],
        favourite=row["Favourite"] if row["Favourite"] is not None else 0,
    )


class TvShowService:
    def __init__(self, connections: DbConnectionFactory) -> None:
        self._connections = connections

    async def _fetch_all(self, stmt, params: Optional[Dict[str, Any]] = None) -> List[TvShow]:
        async with self._connections.connect() as conn:
            rows = (await conn.execute(stmt, params or {})).mappings().all()
        return [_from_row(r) for r in rows]

    # ---------- writes ----------

    async def create(self, show: TvShow) -> bool:
        if await self.get_by_id(show.id) is not None:
            log.warning("create: tvshow %s already exists", show.id)
            return False

        async with self._connections.connect() as conn:
            result = await conn.execute(INSERT_TVSHOW, _to_params(show))
            created = result.rowcount == 1
        if created:
            log.info("create: tvshow %s inserted", show.id)
        return created

    async def update(self, show: TvShow) -> bool:
        if await self.get_by_id(show.id) is None:
            log.warning("update: tvshow %s not found", show.id)
            return False

        async with self._connections.connect() as conn:
            result = await conn.execute(UPDATE_TVSHOW, _to_params(show))
            updated = result.rowcount == 1
        if updated:
            log.info("update: tvshow %s updated (favourite=%s)", show.id, show.favourite)
        return updated

    async def delete(self, id: int) -> bool:
        async with self._connections.connect() as conn:
            result = await conn.execute(DELETE_TVSHOW, {"id": id})
            deleted = result.rowcount == 1
        if deleted:
            log.info("delete: tvshow %s deleted", id)
        else:
            log.warning("delete: tvshow %s not found", id)
        return deleted

    # ---------- reads ----------

    async def get_by_id(self, id: int) -> Optional[TvShow]:
        async with self._connections.connect() as conn:
            row = (await conn.execute(SELECT_BY_ID, {"id": id})).mappings().first()
        return _from_row(row) if row is not None else None

    async def get_all(self) -> List[TvShow]:
        return await self._fetch_all(SELECT_ALL)

    async def get_by_genre(self, genre: str) -> List[TvShow]:
        return await self._fetch_all(SELECT_BY_GENRE, {"genre": genre})

    async def get_by_show_type(self, show_type: str) -> List[TvShow]:
        return await self._fetch_all(SELECT_BY_SHOWTYPE, {"showtype": show_type})

    async def get_by_favourite(self) -> List[TvShow]:
        return await self._fetch_all(SELECT_FAVOURITES)

    async def search_by_title(self, title: str) -> List[TvShow]:
        return await self._fetch_all(SEARCH_BY_TITLE, {"title": title})

    async def search_actors_by_title(self, title: str) -> List[Optional[str]]:
        # LIMIT 1: only the first matching show's actors are returned
        async with self._connections.connect() as conn:
            rows = (await conn.execute(SEARCH_ACTORS_BY_TITLE, {"title": title})).scalars().all()
        return list(rows)
