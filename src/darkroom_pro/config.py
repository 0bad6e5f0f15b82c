"""
Configuration management for the DarkroomPro development calculator.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with DARKROOM_ prefix.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class CalculationSettings(BaseSettings):
    """Accepted request bounds for development calculations.

    Temperatures are in Celsius, volumes in milliliters and push/pull
    in whole stops. All bounds are inclusive.
    """

    model_config = SettingsConfigDict(env_prefix="DARKROOM_CALC_")

    min_temperature_c: Decimal = Field(default=Decimal("15"))
    max_temperature_c: Decimal = Field(default=Decimal("30"))

    min_push_pull: int = Field(default=-2, ge=-5, le=0)
    max_push_pull: int = Field(default=3, ge=0, le=5)

    min_volume_ml: int = Field(default=100, ge=1)
    max_volume_ml: int = Field(default=2000, ge=1)

    # Temperature at which dataset times are published
    standard_temperature_c: Decimal = Field(default=Decimal("20"))

    @model_validator(mode="after")
    def check_ranges(self) -> "CalculationSettings":
        """Reject inverted bounds."""
        if self.min_temperature_c > self.max_temperature_c:
            raise ValueError("min_temperature_c must not exceed max_temperature_c")
        if self.min_volume_ml > self.max_volume_ml:
            raise ValueError("min_volume_ml must not exceed max_volume_ml")
        return self


class DatasetSettings(BaseSettings):
    """Settings for locating the reference dataset."""

    model_config = SettingsConfigDict(env_prefix="DARKROOM_DATASET_")

    # Explicit dataset file; the bundled sample is used when unset
    path: Optional[Path] = Field(default=None)
    use_bundled: bool = Field(default=True)


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="DARKROOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    app_name: str = Field(default="DarkroomPro")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Subsettings
    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    dataset: DatasetSettings = Field(default_factory=DatasetSettings)


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
