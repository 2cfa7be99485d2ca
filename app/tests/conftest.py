# app/tests/conftest.py
from datetime import datetime, timedelta

import httpx
import pytest

from app.core.settings import Settings
from app.db.ensure_schema import ensure_schema
from app.db.session import DbConnectionFactory, build_engine
from app.main import create_app
from app.schemas import TvShow
from app.services.tvshow_service import TvShowService


@pytest.fixture
def settings(tmp_path):
    """A throwaway SQLite file per test."""
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'tvshows.db'}")


@pytest.fixture
async def connections(settings):
    engine = build_engine(settings.database_url)
    factory = DbConnectionFactory(engine)
    await ensure_schema(factory)
    try:
        yield factory
    finally:
        await engine.dispose()


@pytest.fixture
def service(connections):
    return TvShowService(connections)


@pytest.fixture
async def app(settings):
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


def make_show(
    id: int = 42,
    title: str = "There and Back Again",
    genre: str = "Comedy",
    showtype: str = "Documentary",
    favourite: int = 0,
) -> TvShow:
    return TvShow(
        id=id,
        title=title,
        release_date=datetime.now().replace(microsecond=0) + timedelta(days=365),
        genre=genre,
        showtype=showtype,
        actors="Keanu, Andre, Estevao",
        favourite=favourite,
    )


def show_json(show: TvShow) -> dict:
    return show.model_dump(mode="json", by_alias=True)
