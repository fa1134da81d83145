"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vd2svg_env: str = "development"
    vd2svg_log_level: str = "info"
    # CLI logs warnings and errors only by default
    vd2svg_cli_log_level: str = "warning"

    # Output text
    vd2svg_indent: int = 4
    vd2svg_xml_declaration: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
