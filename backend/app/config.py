"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    thalia_env: str = "development"
    thalia_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Request size guards for the HTTP layer; the engine itself is unbounded
    max_rows: int = 200
    max_nodes: int = 5000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
