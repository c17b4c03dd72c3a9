"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from the environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Personality Diagnosis Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Reliability calibration (tuned to the 1-7 Likert scale)
    REVERSE_CONSISTENCY_HIGH_MEAN: float = Field(default=4.5, ge=4.0, le=7.0)
    REVERSE_CONSISTENCY_LOW_MEAN: float = Field(default=3.5, ge=1.0, le=4.0)

    @model_validator(mode="after")
    def validate_consistency_thresholds(self):
        """Low threshold must sit strictly below the high threshold."""
        if self.REVERSE_CONSISTENCY_LOW_MEAN >= self.REVERSE_CONSISTENCY_HIGH_MEAN:
            raise ValueError(
                "REVERSE_CONSISTENCY_LOW_MEAN must be < REVERSE_CONSISTENCY_HIGH_MEAN, "
                f"got {self.REVERSE_CONSISTENCY_LOW_MEAN} >= {self.REVERSE_CONSISTENCY_HIGH_MEAN}"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
