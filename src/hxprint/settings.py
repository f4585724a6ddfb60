"""Application settings using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from hxprint.models.output import Theme


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="HXPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Substitute a fixed Host header so golden output stays deterministic
    test_mode: bool = False
    theme: Theme = Theme.AUTO
    timeout: float = 10.0
    debug: bool = False


# Global settings instance
settings = Settings()
