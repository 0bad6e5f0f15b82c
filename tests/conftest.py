"""
Shared fixtures for DarkroomPro tests.
"""

from decimal import Decimal

import pytest

from darkroom_pro.chemistry.calculator import DevelopmentCalculator
from darkroom_pro.config import CalculationSettings
from darkroom_pro.core.models import Dataset
from darkroom_pro.data.loader import DatasetLoader


@pytest.fixture
def dataset_dict():
    """Raw dataset as it would be decoded from JSON."""
    return {
        "films": {
            "tri-x-400": {
                "name": "Kodak Tri-X 400",
                "manufacturer": "Kodak",
                "iso": 400,
                "type": "black_white",
                "developers": {
                    "d76": {"dilution": "1:1", "time_minutes": Decimal("9.0")},
                    "hc110": {
                        "dilution": "1:31",
                        "time_minutes": Decimal("6.5"),
                        "push_1_stop_minutes": Decimal("8.5"),
                    },
                    "xtol_stock": {"dilution": "stock", "time": Decimal("7.0")},
                    "rodinal": {"dilution": "1:50"},
                },
            },
            "portra-400": {
                "name": "Kodak Portra 400",
                "manufacturer": "Kodak",
                "iso": 400,
                "type": "color_negative",
                "developers": {
                    "c41_kit": {
                        "dilution": "1:1",
                        "developer_time_minutes": Decimal("3.25"),
                    },
                },
            },
            "ektachrome-e100": {
                "name": "Kodak Ektachrome E100",
                "manufacturer": "Kodak",
                "iso": 100,
                "type": "slide",
                "developers": {
                    "e6_kit": {
                        "dilution": "ready",
                        "first_dev_time_minutes": Decimal("6.5"),
                        "push_1_stop_first_dev_time": Decimal("8.75"),
                    },
                },
            },
        },
        "developers": {
            "d76": {"name": "Kodak D-76", "dilutions": ["stock", "1:1"]},
            "hc110": {
                "name": "Kodak HC-110",
                "dilutions": ["1:31"],
                "safety_notes": "Wear gloves",
            },
            "xtol": {"name": "Kodak Xtol"},
            "rodinal": {"name": "Rodinal"},
            "c41": {"name": "C-41 Kit"},
            "e6": {"name": "E-6 Kit"},
            "tetenal_colortec": {"name": "Tetenal Colortec"},
        },
        "temperature_compensation": {
            "18": Decimal("1.2"),
            "20": Decimal("1.0"),
            "21": Decimal("1.1"),
            "22.5": Decimal("0.85"),
            "24": Decimal("0.75"),
        },
        "metadata": {"version": "test-1", "last_updated": "2024-01-01"},
    }


@pytest.fixture
def dataset(dataset_dict):
    """Validated test dataset."""
    return Dataset.model_validate(dataset_dict)


@pytest.fixture
def calculation_settings():
    """Default request bounds, independent of the environment."""
    return CalculationSettings(
        min_temperature_c=Decimal("15"),
        max_temperature_c=Decimal("30"),
        min_push_pull=-2,
        max_push_pull=3,
        min_volume_ml=100,
        max_volume_ml=2000,
        standard_temperature_c=Decimal("20"),
    )


@pytest.fixture
def calculator(dataset, calculation_settings):
    """Calculator with the test dataset installed."""
    return DevelopmentCalculator(dataset=dataset, settings=calculation_settings)


@pytest.fixture
def empty_calculator(calculation_settings):
    """Calculator with no dataset installed."""
    return DevelopmentCalculator(settings=calculation_settings)


@pytest.fixture
def bundled_dataset():
    """Sample dataset shipped with the package."""
    return DatasetLoader().load_bundled()
