"""
Development chemistry calculations for film processing.

Provides the development calculator plus the building blocks it uses:
- Base time selection and push/pull adjustment per process family
- Temperature compensation lookup and interpolation
- Dilution parsing and working solution volume split
"""

from darkroom_pro.chemistry.calculator import (
    CalculationResult,
    DevelopmentCalculator,
    find_developer,
    find_process_data,
)
from darkroom_pro.chemistry.development import (
    BLACK_WHITE_PUSH_PULL_FACTORS,
    COLOR_NEGATIVE_PUSH_PULL_MINUTES,
    FALLBACK_TIMES_MINUTES,
    SLIDE_PUSH_PULL_MINUTES,
    apply_push_pull,
    calculate_development_time,
    format_time,
    get_base_time,
)
from darkroom_pro.chemistry.dilution import (
    READY_TO_USE_LABEL,
    STOCK_LABEL,
    DilutionRatio,
    VolumeSplit,
    split_volume,
)
from darkroom_pro.chemistry.temperature import (
    get_temperature_compensation,
    round_to_half_degree,
)

__all__ = [
    # Calculator
    "CalculationResult",
    "DevelopmentCalculator",
    "find_developer",
    "find_process_data",
    # Development time
    "BLACK_WHITE_PUSH_PULL_FACTORS",
    "COLOR_NEGATIVE_PUSH_PULL_MINUTES",
    "FALLBACK_TIMES_MINUTES",
    "SLIDE_PUSH_PULL_MINUTES",
    "apply_push_pull",
    "calculate_development_time",
    "format_time",
    "get_base_time",
    # Dilution
    "READY_TO_USE_LABEL",
    "STOCK_LABEL",
    "DilutionRatio",
    "VolumeSplit",
    "split_volume",
    # Temperature
    "get_temperature_compensation",
    "round_to_half_degree",
]
