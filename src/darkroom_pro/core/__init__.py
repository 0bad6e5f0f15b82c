"""
Core data models, types and exceptions for DarkroomPro.
"""

from darkroom_pro.core.exceptions import (
    CalculationError,
    CombinationNotSupportedError,
    DatasetError,
    DatasetFileNotFoundError,
    DatasetNotLoadedError,
    DatasetParseError,
    DeveloperNotFoundError,
    FilmNotFoundError,
    InvalidDatasetError,
    InvalidPushPullError,
    InvalidTemperatureError,
    InvalidVolumeError,
)
from darkroom_pro.core.models import (
    BlackWhiteProcess,
    CalculationRequest,
    ColorNegativeProcess,
    Dataset,
    DatasetMetadata,
    Developer,
    Film,
    ProcessData,
    SlideProcess,
)
from darkroom_pro.core.types import FilmType, PushPullDirection

__all__ = [
    # Models
    "BlackWhiteProcess",
    "CalculationRequest",
    "ColorNegativeProcess",
    "Dataset",
    "DatasetMetadata",
    "Developer",
    "Film",
    "ProcessData",
    "SlideProcess",
    # Types
    "FilmType",
    "PushPullDirection",
    # Exceptions
    "CalculationError",
    "CombinationNotSupportedError",
    "DatasetError",
    "DatasetFileNotFoundError",
    "DatasetNotLoadedError",
    "DatasetParseError",
    "DeveloperNotFoundError",
    "FilmNotFoundError",
    "InvalidDatasetError",
    "InvalidPushPullError",
    "InvalidTemperatureError",
    "InvalidVolumeError",
]
