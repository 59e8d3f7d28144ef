"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Page Translator"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS - the page editor calls the API from arbitrary preview origins
    cors_origins: list[str] = ["*"]

    # AI gateway (OpenAI-compatible chat completions endpoint)
    ai_gateway_api_key: Optional[str] = None
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1"
    request_timeout: float = 120.0

    # Translation settings
    default_model: str = "google/gemini-2.5-flash"
    available_models: list[str] = [
        "google/gemini-2.5-flash",
        "openai/gpt-5",
    ]
    translation_batch_size: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
