"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from placard.config import settings
from placard.engine.errors import PlacardError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.placard_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _placard_error_handler(request: Request, exc: PlacardError) -> JSONResponse:
    logger.debug("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=400, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Placard",
        description="Placeholder image scene synthesis — colors, gradients, masks and text fitting",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PlacardError, _placard_error_handler)

    from placard.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
