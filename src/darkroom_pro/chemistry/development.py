"""
Base development time selection and push/pull adjustment.

Each process family publishes its time under different fields and reacts to
push/pull differently:

- Black & white: unknown push/pull times are scaled from the base time.
- C-41 and E-6: unknown push/pull times come from fixed kit defaults, and
  stop values outside the kit table leave the base time unchanged.
"""

from decimal import ROUND_HALF_EVEN, Decimal

from darkroom_pro.core.models import (
    BlackWhiteProcess,
    ColorNegativeProcess,
    SlideProcess,
)
from darkroom_pro.core.types import FilmType

# Minutes used when a combination publishes no base time
FALLBACK_TIMES_MINUTES = {
    FilmType.BLACK_WHITE: Decimal("8"),
    FilmType.COLOR_NEGATIVE: Decimal("3.25"),
    FilmType.SLIDE: Decimal("6"),
}

# Black & white: multiplier applied to the base time per stop
BLACK_WHITE_PUSH_PULL_FACTORS = {
    1: Decimal("1.4"),
    2: Decimal("2.0"),
    3: Decimal("2.8"),
    -1: Decimal("0.7"),
    -2: Decimal("0.5"),
}

# C-41 developer stage: replacement time per stop
COLOR_NEGATIVE_PUSH_PULL_MINUTES = {
    1: Decimal("4.5"),
    2: Decimal("6.5"),
    -1: Decimal("2.5"),
}

# E-6 first developer: replacement time per stop
SLIDE_PUSH_PULL_MINUTES = {
    1: Decimal("8"),
    2: Decimal("10"),
    -1: Decimal("4.5"),
}

ProcessVariant = BlackWhiteProcess | ColorNegativeProcess | SlideProcess


def get_base_time(process: ProcessVariant) -> Decimal:
    """Published time for the process family, or the family fallback."""
    published = process.published_time
    if published is not None:
        return published
    return FALLBACK_TIMES_MINUTES[FilmType(process.family)]


def apply_push_pull(process: ProcessVariant, base_time: Decimal, push_pull: int) -> Decimal:
    """Replace the base time with the push/pull time for ``push_pull`` stops.

    An explicit per-stop time in the process data always wins. Otherwise
    black & white scales the base time, while C-41 and E-6 use kit defaults.

    Args:
        process: Process data for the film/developer combination.
        base_time: Time from get_base_time, in minutes.
        push_pull: Signed stop count.

    Returns:
        Development time in minutes before temperature compensation.
    """
    if push_pull == 0:
        return base_time

    override = process.stop_overrides().get(push_pull)
    if override is not None:
        return override

    film_type = FilmType(process.family)
    if film_type == FilmType.BLACK_WHITE:
        factor = BLACK_WHITE_PUSH_PULL_FACTORS.get(push_pull)
        return base_time * factor if factor is not None else base_time

    if film_type == FilmType.COLOR_NEGATIVE:
        return COLOR_NEGATIVE_PUSH_PULL_MINUTES.get(push_pull, base_time)

    return SLIDE_PUSH_PULL_MINUTES.get(push_pull, base_time)


def calculate_development_time(process: ProcessVariant, push_pull: int) -> Decimal:
    """Base time for the family with push/pull applied."""
    return apply_push_pull(process, get_base_time(process), push_pull)


def format_time(time_minutes: Decimal) -> str:
    """Format minutes as ``M:SS``, rounded to the nearest second.

    >>> format_time(Decimal("7.5"))
    '7:30'
    """
    total_seconds = int((time_minutes * 60).quantize(Decimal("1"), rounding=ROUND_HALF_EVEN))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
