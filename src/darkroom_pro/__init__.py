"""
DarkroomPro - film development time and dilution calculator.

This package provides:

- Reference dataset models for films, developers and temperature compensation
- Dataset loading from JSON with structural validation
- A thread-safe dataset store with atomic reloads
- The development calculator: developer key resolution, push/pull,
  temperature compensation, dilution and volume split
"""

__version__ = "0.3.0"

# Core models
from darkroom_pro.core.models import (
    BlackWhiteProcess,
    CalculationRequest,
    ColorNegativeProcess,
    Dataset,
    DatasetMetadata,
    Developer,
    Film,
    SlideProcess,
)
from darkroom_pro.core.types import FilmType

# Exceptions
from darkroom_pro.core.exceptions import (
    CalculationError,
    CombinationNotSupportedError,
    DatasetError,
    DatasetNotLoadedError,
    DeveloperNotFoundError,
    FilmNotFoundError,
    InvalidPushPullError,
    InvalidTemperatureError,
    InvalidVolumeError,
)

# Configuration
from darkroom_pro.config import Settings, configure, get_settings

# Data
from darkroom_pro.data import DatasetLoader, DatasetStats, DatasetStore

# Calculator
from darkroom_pro.chemistry import CalculationResult, DevelopmentCalculator

__all__ = [
    "__version__",
    # Models
    "BlackWhiteProcess",
    "CalculationRequest",
    "ColorNegativeProcess",
    "Dataset",
    "DatasetMetadata",
    "Developer",
    "Film",
    "FilmType",
    "SlideProcess",
    # Exceptions
    "CalculationError",
    "CombinationNotSupportedError",
    "DatasetError",
    "DatasetNotLoadedError",
    "DeveloperNotFoundError",
    "FilmNotFoundError",
    "InvalidPushPullError",
    "InvalidTemperatureError",
    "InvalidVolumeError",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    # Data
    "DatasetLoader",
    "DatasetStats",
    "DatasetStore",
    # Calculator
    "CalculationResult",
    "DevelopmentCalculator",
]
