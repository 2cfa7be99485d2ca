# app/context.py
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from app.core.settings import Settings
from app.db.session import DbConnectionFactory, build_engine
from app.services.tvshow_service import TvShowService


@dataclass
class AppContext:
    """Everything a request handler needs, built once per process in the lifespan."""
    connections: DbConnectionFactory
    tvshows: TvShowService

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        connections = DbConnectionFactory(build_engine(settings.database_url))
        return cls(connections=connections, tvshows=TvShowService(connections))

    async def close(self) -> None:
        await self.connections.engine.dispose()


# FastAPI dependencies
def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_tvshow_service(request: Request) -> TvShowService:
    return get_context(request).tvshows
