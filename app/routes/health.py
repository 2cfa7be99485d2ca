# app/routes/health.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.context import AppContext, get_context

log = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# --- simple DB ping ---------------------------------------------------------
async def ping_db(ctx: AppContext) -> bool:
    try:
        async with ctx.connections.connect() as conn:
            res = await conn.execute(text("SELECT 1"))
            return res.scalar() == 1
    except (SQLAlchemyError, OSError) as e:
        log.warning("health: db ping failed: %s", e)
        return False

@router.get("/health", summary="Liveness")
async def health(ctx: AppContext = Depends(get_context)):
    return {"ok": True, "db": await ping_db(ctx)}
