"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Name of the environment variable holding each vendor's API key
API_KEY_ENV_NAMES = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields from .env files
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # Load .env first, then .env.local (so .env.local overrides)
    )

    # Application settings
    app_name: str = "Chat Proxy"
    environment: str = "local"
    api_prefix: str = ""

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = False

    # Which upstream this deployment talks to
    chat_vendor: Literal["openai", "gemini"] = "gemini"

    # OpenAI-compatible settings
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"

    # Gemini settings
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash"

    # Request defaults
    default_temperature: float = 0.7
    default_system_prompt: Optional[str] = None

    # Seconds; None leaves the upstream call without a client timeout
    upstream_timeout: Optional[float] = None

    @field_validator("chat_vendor", mode="before")
    @classmethod
    def _normalize_vendor(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def api_key_env(self) -> str:
        """Environment variable name of the configured vendor's key."""
        return API_KEY_ENV_NAMES[self.chat_vendor]

    @property
    def chat_api_key(self) -> str:
        """API key for the configured vendor ("" when unset)."""
        if self.chat_vendor == "openai":
            return self.openai_api_key
        return self.gemini_api_key

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
