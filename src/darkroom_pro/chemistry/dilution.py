"""
Dilution parsing and working-solution volume split.

Monochrome developers are usually diluted from a stock concentrate using a
``developer:water`` notation ("1:1", "1:31"). C-41 and E-6 chemistry is mixed
from kits and used as supplied, so the whole volume is developer.
"""

from dataclasses import dataclass

from darkroom_pro.core.types import FilmType

# Notations meaning the concentrate is used undiluted
STOCK_NOTATIONS = ("stock", "1:0")

STOCK_LABEL = "Stock"
READY_TO_USE_LABEL = "Ready to use"


def _parse_parts(text: str, default: int) -> int:
    """Parse an unsigned integer segment, returning ``default`` otherwise."""
    digits = text[1:] if text.startswith("+") else text
    if digits.isascii() and digits.isdigit():
        return int(digits)
    return default


@dataclass(frozen=True)
class DilutionRatio:
    """Parts of developer concentrate to parts of water."""

    developer: int
    water: int

    @property
    def total_parts(self) -> int:
        return self.developer + self.water

    @classmethod
    def parse(cls, notation: str) -> "DilutionRatio":
        """Parse ``developer:water``.

        Parsing never fails: a notation without exactly one colon is read
        as stock (1:0), and a segment that is not a whole number falls back
        to 1 part developer or 0 parts water.
        """
        parts = notation.split(":")
        if len(parts) != 2:
            return cls(developer=1, water=0)
        return cls(
            developer=_parse_parts(parts[0], default=1),
            water=_parse_parts(parts[1], default=0),
        )


@dataclass(frozen=True)
class VolumeSplit:
    """Working solution recipe for a target volume (ml)."""

    dilution: str
    developer_ml: int
    water_ml: int

    @property
    def total_ml(self) -> int:
        return self.developer_ml + self.water_ml


def split_volume(notation: str, volume_ml: int, film_type: FilmType) -> VolumeSplit:
    """Split ``volume_ml`` into developer and water amounts.

    Developer volume is truncated to a whole ml and water takes the rest,
    so both always add up to ``volume_ml`` exactly.

    Args:
        notation: Dilution notation from the process data.
        volume_ml: Total working solution volume.
        film_type: Process family of the film being developed.

    Returns:
        VolumeSplit with the label to display and both amounts.
    """
    if film_type in (FilmType.COLOR_NEGATIVE, FilmType.SLIDE):
        return VolumeSplit(READY_TO_USE_LABEL, volume_ml, 0)

    if notation in STOCK_NOTATIONS:
        return VolumeSplit(STOCK_LABEL, volume_ml, 0)

    ratio = DilutionRatio.parse(notation)
    if ratio.total_parts == 0:
        # "0:0" and friends carry no usable ratio
        return VolumeSplit(notation, volume_ml, 0)

    developer_ml = (volume_ml * ratio.developer) // ratio.total_parts
    return VolumeSplit(notation, developer_ml, volume_ml - developer_ml)
