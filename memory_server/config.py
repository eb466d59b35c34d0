"""Server configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.game import DEFAULT_SYMBOLS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="MEMORY_")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Game defaults
    default_symbols: list[str] = Field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    revert_delay_seconds: float = 1.0


settings = Settings()
