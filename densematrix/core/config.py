"""
Library configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """densematrix settings"""

    model_config = SettingsConfigDict(
        env_prefix="DENSEMATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Storage
    DEFAULT_DTYPE: str = "float64"

    # Equality
    TOLERANCE: float = 1e-9
    TOLERANCE_MODE: str = "relative"  # relative or absolute
    ZERO_LEVEL: float = 1e-14
    ZERO_LEVEL_TOL: float = 1e-12

    # Elimination (0.0 means exact zero test)
    PIVOT_TOLERANCE: float = 0.0

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
