"""POST /api/placeholder — resolve a placeholder spec into a Scene summary."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from placard.engine.pipeline import create_pipeline, spec_from_request
from placard.models.requests import PlaceholderRequest
from placard.models.responses import PlaceholderResponse
from placard.svg.serializer import scene_to_svg

router = APIRouter()


@router.post("/placeholder", response_model=PlaceholderResponse)
async def placeholder(req: PlaceholderRequest, include_svg: bool = False) -> PlaceholderResponse:
    scene = create_pipeline().run(spec_from_request(req))
    svg = scene_to_svg(scene) if include_svg else None
    return PlaceholderResponse.from_scene(scene, svg=svg)


@router.post("/placeholder/svg")
async def placeholder_svg(req: PlaceholderRequest) -> Response:
    scene = create_pipeline().run(spec_from_request(req))
    return Response(content=scene_to_svg(scene), media_type="image/svg+xml")
