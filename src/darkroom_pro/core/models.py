"""
Core data models for DarkroomPro.

All models use Pydantic for validation and serialization. Numeric values
are Decimal so that times, factors and volumes never pick up binary
floating point drift.
"""

from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_validator,
)

from darkroom_pro.core.types import FilmType


def temperature_key(value: Decimal) -> str:
    """Canonical compensation table key for a temperature.

    ``Decimal("20.0")`` and ``Decimal("20")`` both map to ``"20"``;
    ``Decimal("20.50")`` maps to ``"20.5"``.
    """
    return format(value.normalize(), "f")


def read_only(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only view over a private copy of ``mapping``."""
    return MappingProxyType(dict(mapping))


class ProcessData(BaseModel):
    """Process parameters shared by every film/developer combination.

    Agitation values are informational and not used by the calculator.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    dilution: str = Field(default="stock", description="Notation such as '1:1' or 'stock'")
    temperature_c: Decimal = Field(default=Decimal("20"))
    agitation_initial_seconds: int = Field(default=30, ge=0)
    agitation_interval_seconds: int = Field(default=10, ge=0)
    agitation_frequency_minutes: int = Field(default=1, ge=0)
    dilution_ratio: Optional[str] = Field(default=None)


class BlackWhiteProcess(ProcessData):
    """Monochrome silver development data."""

    family: Literal["black_white"] = "black_white"

    time_minutes: Optional[Decimal] = Field(default=None, gt=0)
    time: Optional[Decimal] = Field(default=None, gt=0)

    push_1_stop_minutes: Optional[Decimal] = Field(default=None, gt=0)
    push_2_stop_minutes: Optional[Decimal] = Field(default=None, gt=0)
    push_3_stop_minutes: Optional[Decimal] = Field(default=None, gt=0)
    pull_1_stop_minutes: Optional[Decimal] = Field(default=None, gt=0)
    pull_2_stop_minutes: Optional[Decimal] = Field(default=None, gt=0)

    @property
    def published_time(self) -> Optional[Decimal]:
        """Development time as published, preferring ``time_minutes``."""
        if self.time_minutes is not None:
            return self.time_minutes
        return self.time

    def stop_overrides(self) -> dict[int, Optional[Decimal]]:
        return {
            1: self.push_1_stop_minutes,
            2: self.push_2_stop_minutes,
            3: self.push_3_stop_minutes,
            -1: self.pull_1_stop_minutes,
            -2: self.pull_2_stop_minutes,
        }


class ColorNegativeProcess(ProcessData):
    """C-41 developer stage data."""

    family: Literal["color_negative"] = "color_negative"

    developer_time_minutes: Optional[Decimal] = Field(default=None, gt=0)
    push_1_stop_dev_time: Optional[Decimal] = Field(default=None, gt=0)
    push_2_stop_dev_time: Optional[Decimal] = Field(default=None, gt=0)
    pull_1_stop_dev_time: Optional[Decimal] = Field(default=None, gt=0)

    @property
    def published_time(self) -> Optional[Decimal]:
        return self.developer_time_minutes

    def stop_overrides(self) -> dict[int, Optional[Decimal]]:
        return {
            1: self.push_1_stop_dev_time,
            2: self.push_2_stop_dev_time,
            -1: self.pull_1_stop_dev_time,
        }


class SlideProcess(ProcessData):
    """E-6 first developer data."""

    family: Literal["slide"] = "slide"

    first_dev_time_minutes: Optional[Decimal] = Field(default=None, gt=0)
    push_1_stop_first_dev_time: Optional[Decimal] = Field(default=None, gt=0)
    push_2_stop_first_dev_time: Optional[Decimal] = Field(default=None, gt=0)
    pull_1_stop_first_dev_time: Optional[Decimal] = Field(default=None, gt=0)

    @property
    def published_time(self) -> Optional[Decimal]:
        return self.first_dev_time_minutes

    def stop_overrides(self) -> dict[int, Optional[Decimal]]:
        return {
            1: self.push_1_stop_first_dev_time,
            2: self.push_2_stop_first_dev_time,
            -1: self.pull_1_stop_first_dev_time,
        }


ProcessDataVariant = Annotated[
    Union[BlackWhiteProcess, ColorNegativeProcess, SlideProcess],
    Field(discriminator="family"),
]


class Film(BaseModel):
    """A film stock and every developer combination known for it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    manufacturer: str = Field(default="")
    iso: int = Field(..., gt=0)
    film_type: FilmType = Field(..., alias="type")
    process: str = Field(default="", description="Process name, e.g. 'C-41'")
    year_released: Optional[int] = Field(default=None)
    current_production: bool = Field(default=True)
    price_35mm_usd: Optional[Decimal] = Field(default=None, ge=0)
    alternative_names: tuple[str, ...] = Field(default_factory=tuple)
    description: str = Field(default="")
    grain: str = Field(default="")
    contrast: str = Field(default="")
    best_uses: tuple[str, ...] = Field(default_factory=tuple)

    developers: Mapping[str, ProcessDataVariant] = Field(
        ..., description="Process data keyed by developer key"
    )

    @model_validator(mode="before")
    @classmethod
    def tag_process_entries(cls, data: Any) -> Any:
        """Tag untagged process entries with the film's own process family."""
        if not isinstance(data, dict):
            return data

        film_type = data.get("type", data.get("film_type"))
        if isinstance(film_type, FilmType):
            film_type = film_type.value
        developers = data.get("developers")
        if not isinstance(film_type, str) or not isinstance(developers, Mapping):
            return data

        tagged = {
            key: {"family": film_type, **entry} if isinstance(entry, dict) else entry
            for key, entry in developers.items()
        }
        return {**data, "developers": tagged}

    @field_validator("developers")
    @classmethod
    def freeze_developers(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return read_only(v)

    @field_serializer("developers", mode="wrap")
    def serialize_developers(
        self, v: Mapping[str, Any], handler: SerializerFunctionWrapHandler
    ) -> Any:
        return handler(dict(v))

    @model_validator(mode="after")
    def validate_developers(self) -> "Film":
        """Every film needs process data, all of its own family."""
        if not self.developers:
            raise ValueError(f"Film '{self.name}' has no developer data")
        for key, entry in self.developers.items():
            if entry.family != self.film_type.value:
                raise ValueError(
                    f"Film '{self.name}' is {self.film_type.value} but developer "
                    f"'{key}' carries {entry.family} process data"
                )
        return self


class Developer(BaseModel):
    """A developer chemistry, independent of any film."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    manufacturer: str = Field(default="")
    developer_type: str = Field(default="", alias="type")
    year_introduced: Optional[int] = Field(default=None)
    price_per_liter_usd: Optional[Decimal] = Field(default=None, ge=0)
    capacity_rolls_per_liter: Optional[int] = Field(default=None, ge=0)
    description: str = Field(default="")
    characteristics: str = Field(default="")
    dilutions: tuple[str, ...] = Field(default_factory=tuple)
    stock_life_months: Optional[int] = Field(default=None, ge=0)
    working_life_hours: Optional[int] = Field(default=None, ge=0)
    safety_notes: Optional[str] = Field(default=None)


class DatasetMetadata(BaseModel):
    """Descriptive metadata published with a dataset."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="unknown")
    last_updated: str = Field(default="")
    film_count: int = Field(default=0, ge=0)
    developer_count: int = Field(default=0, ge=0)
    total_combinations: int = Field(default=0, ge=0)


class Dataset(BaseModel):
    """The complete reference dataset.

    Instances are immutable; a reload builds a new Dataset and replaces
    the old one wholesale.
    """

    model_config = ConfigDict(frozen=True)

    films: Mapping[str, Film]
    developers: Mapping[str, Developer]
    temperature_compensation: Mapping[str, Decimal] = Field(
        ..., description="Compensation factor keyed by temperature in Celsius"
    )
    metadata: DatasetMetadata = Field(default_factory=DatasetMetadata)

    @field_validator("temperature_compensation", mode="before")
    @classmethod
    def normalize_temperature_keys(cls, v: Any) -> Any:
        """Rewrite keys such as '20.0' to their canonical form '20'."""
        if not isinstance(v, Mapping):
            return v
        normalized = {}
        for key, factor in v.items():
            try:
                normalized[temperature_key(Decimal(str(key).strip()))] = factor
            except InvalidOperation:
                raise ValueError(f"Invalid temperature key: {key!r}") from None
        return normalized

    @field_validator("films", "developers", "temperature_compensation")
    @classmethod
    def freeze_mappings(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Expose every table as a read-only view."""
        return read_only(v)

    @field_serializer("films", "developers", "temperature_compensation", mode="wrap")
    def serialize_mappings(
        self, v: Mapping[str, Any], handler: SerializerFunctionWrapHandler
    ) -> Any:
        return handler(dict(v))

    @model_validator(mode="after")
    def validate_structure(self) -> "Dataset":
        if not self.films:
            raise ValueError("No films found in database")
        if not self.developers:
            raise ValueError("No developers found in database")
        if not self.temperature_compensation:
            raise ValueError("No temperature compensation data found")
        return self

    @property
    def total_combinations(self) -> int:
        """Number of film/developer combinations across all films."""
        return sum(len(film.developers) for film in self.films.values())


class CalculationRequest(BaseModel):
    """A single development calculation request.

    Bounds are checked by the calculator, which raises a dedicated
    error per field.
    """

    model_config = ConfigDict(frozen=True)

    film_key: str = Field(..., description="Film key, e.g. 'tri-x-400'")
    developer_key: str = Field(..., description="Developer key, e.g. 'd76'")
    temperature: Decimal = Field(default=Decimal("20"), description="Processing temperature (C)")
    push_pull: int = Field(default=0, description="Push (+) or pull (-) in whole stops")
    volume: int = Field(default=500, description="Working solution volume (ml)")
