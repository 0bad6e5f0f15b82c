"""
Temperature compensation for development times.

Datasets publish times at 20C together with a sparse table of multiplicative
factors keyed by temperature. Lookups work on the temperature rounded to the
nearest half degree.
"""

from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Decimal
from typing import Mapping

from darkroom_pro.core.models import temperature_key

NO_COMPENSATION = Decimal("1")


def round_to_half_degree(temperature: Decimal) -> Decimal:
    """Round to the nearest 0.5 degree (ties to even half-steps)."""
    doubled = (temperature * 2).quantize(Decimal("1"), rounding=ROUND_HALF_EVEN)
    return doubled / 2


def get_temperature_compensation(
    table: Mapping[str, Decimal],
    temperature: Decimal,
) -> Decimal:
    """Find the compensation factor for a processing temperature.

    Lookup order:
        1. exact half-degree key ("20.5")
        2. interpolation between the whole degrees either side, when the
           rounded temperature falls between them and both are present
        3. the whole degree below ("20")
        4. no compensation (1)

    Args:
        table: Factors keyed by canonical temperature strings.
        temperature: Requested temperature in Celsius.

    Returns:
        Dimensionless multiplier for the development time.
    """
    rounded = round_to_half_degree(temperature)

    exact = table.get(temperature_key(rounded))
    if exact is not None:
        return exact

    lower = rounded.to_integral_value(rounding=ROUND_FLOOR)
    upper = lower + 1
    lower_factor = table.get(temperature_key(lower))
    upper_factor = table.get(temperature_key(upper))

    fraction = rounded - lower
    if fraction and lower_factor is not None and upper_factor is not None:
        return lower_factor + (upper_factor - lower_factor) * fraction

    if lower_factor is not None:
        return lower_factor

    return NO_COMPENSATION
