"""
Configuration management.

Loads settings from environment variables and .env file.
Prefix: SIDEBYSIDE_
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIDEBYSIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Provider credentials
    openai_api_key: str = Field(default="", description="OpenAI API key")
    google_api_key: str = Field(default="", description="Google AI (Gemini) API key")
    anthropic_api_key: str = Field(default="", description="Claude API key")
    openrouter_api_key: str = Field(default="", description="OpenRouter API key")
    local_llm_url: str = Field(
        default="http://localhost:1234/v1",
        description="Local LLM endpoint (OpenAI-compatible)",
    )

    # Provider registry
    providers_file: Path | None = Field(
        default=None, description="YAML provider list (defaults to the packaged one)"
    )

    # Limits
    max_tokens: int = Field(default=1000, description="Max output tokens per provider call")
    provider_timeout: float | None = Field(
        default=None, description="Per-provider deadline in seconds (unbounded if unset)"
    )

    # Logging
    data_dir: Path = Field(default=Path("data"), description="Data directory for log output")
    log_file_name: str = Field(default="sidebyside.log", description="Log file name")

    @property
    def log_path(self) -> Path:
        return self.data_dir / self.log_file_name


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
