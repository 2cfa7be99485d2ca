from dataclasses import fields

import pytest

from app.context import AppContext
from app.db.ensure_schema import ensure_schema


@pytest.mark.asyncio
async def test_context_wires_service_to_connections(settings):
    ctx = AppContext.from_settings(settings)
    try:
        assert [f.name for f in fields(ctx)] == ["connections", "tvshows"]
        await ensure_schema(ctx.connections)
        assert await ctx.tvshows.get_all() == []
    finally:
        await ctx.close()
