"""
Configuration module for mrtgdf.
Uses pydantic-settings for environment variable management.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MRTGDF_",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Cache location: ${HOME}/.mrtgdf unless overridden
    home: Path = Field(default_factory=lambda: Path.home(), validation_alias="HOME")
    cache_dir_name: str = ".mrtgdf"
    cache_dir: Optional[Path] = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def cache_directory(self) -> Path:
        """Return the directory holding the cache records."""
        if self.cache_dir is not None:
            return self.cache_dir
        return self.home / self.cache_dir_name


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class CacheConfig:
    """Cache store configuration, injected into CacheStore."""

    directory: Path
    dir_mode: int = 0o777
    file_mode: int = 0o666

    @classmethod
    def from_settings(
        cls, settings: Settings, directory: Optional[Path] = None
    ) -> "CacheConfig":
        """Create config from settings, with an optional directory override."""
        return cls(directory=Path(directory) if directory else settings.cache_directory)
