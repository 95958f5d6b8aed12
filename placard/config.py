"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    placard_env: str = "development"
    placard_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Placeholder defaults applied when a request leaves them unset
    default_padding: int = 24
    default_font_family: str = "sans-serif"
    default_font_weight: str = "normal"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
