"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    polysym_env: str = "development"
    polysym_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Symmetry verification
    symmetry_abs_tol: float = 1e-9
    symmetry_rel_tol: float = 1e-9
    require_simple_polygon: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
