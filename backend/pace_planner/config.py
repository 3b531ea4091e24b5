"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from pace_planner.shared.constants import RaceDistance


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Planner defaults (initial form state) ===
    default_distance: RaceDistance = Field(
        default=RaceDistance.FIVE_K,
        description="Distance used when a request omits it"
    )
    default_hours: int = Field(default=0, ge=0)
    default_minutes: int = Field(default=30, ge=0)
    default_seconds: int = Field(default=0, ge=0)

    @property
    def default_target_seconds(self) -> int:
        """Default target time in seconds."""
        return self.default_hours * 3600 + self.default_minutes * 60 + self.default_seconds

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', etc."""
        return v.upper()

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
