"""
Domain-specific types and enumerations for film development.
"""

from enum import Enum


class FilmType(str, Enum):
    """Process families a film can belong to."""

    BLACK_WHITE = "black_white"
    COLOR_NEGATIVE = "color_negative"  # C-41
    SLIDE = "slide"  # E-6 reversal


class PushPullDirection(str, Enum):
    """Direction of an intentional development adjustment."""

    PUSH = "Push"
    PULL = "Pull"
