# app/main.py — app factory, lifespan (schema init), CORS and storage-fault handling

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.context import AppContext
from app.core.settings import Settings, settings as default_settings
from app.db.ensure_schema import ensure_schema
from app.routes import health, tvshows

log = logging.getLogger("startup")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = AppContext.from_settings(settings)
        try:
            await ensure_schema(ctx.connections)
            app.state.context = ctx
            log.info("TvShow API ready (db=%s)", ctx.connections.engine.url.render_as_string(hide_password=True))
            yield
        finally:
            await ctx.close()

    app = FastAPI(
        title="TvShow API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ───────────────── CORS ─────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ───────────────── Storage faults ─────────────────
    @app.exception_handler(SQLAlchemyError)
    async def storage_fault(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        log.exception("Storage fault on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    # ───────────────── Routes (static registration) ─────────────────
    app.include_router(health.router)
    app.include_router(tvshows.router)

    return app


app = create_app()
