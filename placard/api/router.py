"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from placard.api import health, placeholder

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(placeholder.router)
