"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "Pathwise"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENV: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./pathwise.db"
    DATABASE_ECHO: bool = False

    # Generation provider (OpenAI-compatible, Perplexity by default)
    GENERATION_API_KEY: str | None = None
    GENERATION_BASE_URL: str = "https://api.perplexity.ai"
    GENERATION_MODEL: str = "sonar"
    GENERATION_TEMPERATURE: float = 0.7
    GENERATION_MAX_TOKENS: int = 4000
    # None means the call may block indefinitely
    GENERATION_TIMEOUT: float | None = None
    GENERATION_MAX_RETRIES: int = 0

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
