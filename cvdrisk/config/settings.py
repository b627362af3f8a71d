"""
Environment-based configuration for the risk engine.

Values are read from CVDRISK_* environment variables or a local .env file.
"""
from typing import Optional
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CVDRISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    coefficient_dir: Optional[str] = Field(
        default=None,
        description="Directory of <prevent_type>_<horizon>.csv PREVENT coefficient sheets",
    )
    impute_missing_sdi_for_female_ascvd: bool = Field(
        default=True,
        description="Treat a missing SDI as decile 1 for women in the PREVENT ASCVD model",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
