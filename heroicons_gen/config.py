"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Formatter run on every generated file; empty disables it
    formatter: list[str] = ["ruff", "format"]
    formatter_timeout: float = 30.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HEROICONS_GEN_"}


settings = Settings()
