"""Service settings loaded from the environment."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Renderer service settings, read from ``CHAT_MARKDOWN_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_MARKDOWN_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Chat Markdown Renderer"
    environment: Literal["development", "production"] = "development"
    debug: bool = False
    api_prefix: str = "/api"

    # uvicorn bind address for ``python -m chat_markdown``
    host: str = "127.0.0.1"
    port: int = 8000

    # Chat front ends allowed to call the API; JSON list in the environment
    cors_origins: list[str] = ["http://localhost:3000"]

    max_request_size_kb: int = 1024
    max_message_length: int = 10_000

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"


settings = Settings()
