"""Placard scene synthesis engine."""

from placard.engine.errors import PlacardError
from placard.engine.pipeline import ScenePipeline, build_scene, create_pipeline
from placard.engine.scene import PlaceholderSpec, Scene

__all__ = [
    "PlacardError",
    "ScenePipeline",
    "build_scene",
    "create_pipeline",
    "PlaceholderSpec",
    "Scene",
]
