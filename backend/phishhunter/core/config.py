"""
Application configuration module.

Provides centralized, environment-safe configuration management
with sensible defaults for the analysis client and local heuristics.
"""

import logging
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables prefixed
    with PHISHHUNTER_. The API key is also read from the conventional
    OPENAI_API_KEY variable.

    Attributes:
        openai_api_key: Bearer credential for the completion service.
        api_base_url: Base URL of an OpenAI-compatible API.
        model: Model identifier sent with every request.
        temperature: Sampling temperature.
        request_timeout_seconds: Deadline for a single analysis call.
        min_message_length: Minimum trimmed message length.
        max_message_length: Maximum trimmed message length.
        system_prompt_path: Optional override for the bundled prompt file.
        report_url: Where users are told to report suspicious messages.
        log_level: Logging level.
        log_format: "console" or "json".
    """

    app_name: str = Field(default="PhishHunter Lite")
    app_version: str = Field(default="1.0.0")

    # Completion service
    openai_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "PHISHHUNTER_OPENAI_API_KEY"),
    )
    api_base_url: str = Field(default="https://api.openai.com/v1")
    model: str = Field(default="gpt-4o-mini")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Input limits
    min_message_length: int = Field(default=10, ge=1)
    max_message_length: int = Field(default=2000, ge=1)

    # Assets
    system_prompt_path: Optional[str] = Field(default=None)
    report_url: str = Field(default="https://www.kisa.or.kr")

    # Logging configuration
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")

    model_config = SettingsConfigDict(
        env_prefix="PHISHHUNTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.strip())

    @property
    def completions_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/chat/completions"


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Settings loaded: model={_settings.model}, api_key_set={_settings.has_api_key}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
