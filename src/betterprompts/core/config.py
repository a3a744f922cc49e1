"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, List
from functools import lru_cache


class EnhancementSettings(BaseSettings):
    """Enhancement module configuration."""

    mode: str = Field("auto", alias="BP_ENHANCEMENT_MODE")

    model_config = {"env_prefix": "", "extra": "ignore"}


class ProviderSettings(BaseSettings):
    """AI backend configuration."""

    manual_provider: str = Field("ollama", alias="BP_MANUAL_PROVIDER")
    api_key: Optional[str] = Field(None, alias="BP_API_KEY")
    ollama_endpoint: str = Field("http://localhost:11434", alias="BP_OLLAMA_ENDPOINT")
    ollama_model: str = Field("llama3.2", alias="BP_OLLAMA_MODEL")
    timeout: float = Field(30.0, alias="BP_PROVIDER_TIMEOUT")
    probe_timeout: float = Field(2.0, alias="BP_PROBE_TIMEOUT")
    availability_ttl: float = Field(60.0, alias="BP_AVAILABILITY_TTL")

    model_config = {"env_prefix": "", "extra": "ignore"}


class APISettings(BaseSettings):
    """API server configuration."""

    host: str = Field("127.0.0.1", alias="BP_API_HOST")
    port: int = Field(8000, alias="BP_API_PORT")
    debug: bool = Field(False, alias="BP_DEBUG")
    cors_origins: List[str] = Field(["*"], alias="BP_CORS_ORIGINS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", alias="BP_LOG_LEVEL")
    format: str = Field("text", alias="BP_LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Root configuration aggregating all settings."""

    enhancement: EnhancementSettings = Field(default_factory=EnhancementSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
