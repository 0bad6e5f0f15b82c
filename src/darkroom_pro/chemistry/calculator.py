"""
Film development calculator.

Turns a film/developer choice, push/pull, temperature and tank volume into a
development time and working solution recipe, using the reference dataset
installed in a DatasetStore.

Calculation steps:
1. Check request bounds
2. Resolve film, developer and the film/developer process data
3. Base time for the film's process family, then push/pull
4. Temperature compensation
5. Dilution and volume split
6. Time formatting and advisory notes
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional

from darkroom_pro.chemistry.development import calculate_development_time, format_time
from darkroom_pro.chemistry.dilution import split_volume
from darkroom_pro.chemistry.temperature import get_temperature_compensation
from darkroom_pro.config import CalculationSettings, get_settings
from darkroom_pro.core.exceptions import (
    CombinationNotSupportedError,
    DatasetNotLoadedError,
    DeveloperNotFoundError,
    FilmNotFoundError,
    InvalidPushPullError,
    InvalidTemperatureError,
    InvalidVolumeError,
)
from darkroom_pro.core.logging import LogContext, get_logger, log_operation
from darkroom_pro.core.models import (
    CalculationRequest,
    Dataset,
    Developer,
    Film,
    ProcessDataVariant,
)
from darkroom_pro.core.types import FilmType, PushPullDirection
from darkroom_pro.data.loader import DatasetLoader, DatasetStats
from darkroom_pro.data.store import DatasetStore

logger = get_logger(__name__)

# Process labels shown first in the notes
FILM_TYPE_NOTES = {
    FilmType.COLOR_NEGATIVE: "C-41 Developer",
    FilmType.SLIDE: "E-6 First Developer",
}

# Variant suffixes found on developer keys across datasets
DEVELOPER_KEY_SUFFIXES = ("_stock", "_kit")


@dataclass
class CalculationResult:
    """Fully resolved development parameters."""

    time_minutes: Decimal
    time_formatted: str
    dilution: str
    developer_amount: int  # ml
    water_amount: int  # ml
    temperature: Decimal
    push_pull: int
    film_type: FilmType
    film_name: str
    developer_name: str
    notes: list[str] = field(default_factory=list)

    @property
    def total_volume(self) -> int:
        return self.developer_amount + self.water_amount

    def format_summary(self) -> str:
        """Format result as human-readable text."""
        lines = [
            "=" * 60,
            "FILM DEVELOPMENT",
            "=" * 60,
            "",
            f"Film: {self.film_name}",
            f"Process: {self.film_type.value.replace('_', ' ').title()}",
            f"Developer: {self.developer_name}",
            "",
            "-" * 60,
            "WORKING SOLUTION",
            "-" * 60,
            f"Dilution: {self.dilution}",
            f"Developer: {self.developer_amount} ml",
            f"Water: {self.water_amount} ml",
            f"Total: {self.total_volume} ml",
            "",
            "-" * 60,
            "DEVELOPMENT",
            "-" * 60,
            f"Temperature: {self.temperature}C",
            f"Push/Pull: {self.push_pull:+d}" if self.push_pull else "Push/Pull: none",
            f"Time: {self.time_formatted}",
        ]

        if self.notes:
            lines.extend(
                [
                    "",
                    "-" * 60,
                    "NOTES",
                    "-" * 60,
                ]
            )
            for note in self.notes:
                lines.append(f"* {note}")

        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "time_minutes": str(self.time_minutes),
            "time_formatted": self.time_formatted,
            "dilution": self.dilution,
            "developer_amount": self.developer_amount,
            "water_amount": self.water_amount,
            "temperature": str(self.temperature),
            "push_pull": self.push_pull,
            "film_type": self.film_type.value,
            "film_name": self.film_name,
            "developer_name": self.developer_name,
            "notes": list(self.notes),
        }


def find_developer(developers: Mapping[str, Developer], developer_key: str) -> Developer:
    """Resolve a developer key against the dataset's developers.

    Tries, in order: the key itself; the key with ``_stock`` and ``_kit``
    removed; the first two underscore-separated segments of the key.

    Raises:
        DeveloperNotFoundError: If no tier matches.
    """
    developer = developers.get(developer_key)
    if developer is not None:
        return developer

    base_key = developer_key
    for suffix in DEVELOPER_KEY_SUFFIXES:
        base_key = base_key.replace(suffix, "")
    developer = developers.get(base_key)
    if developer is not None:
        return developer

    parts = developer_key.split("_")
    if len(parts) >= 2:
        developer = developers.get(f"{parts[0]}_{parts[1]}")
        if developer is not None:
            return developer

    raise DeveloperNotFoundError(developer_key)


def find_process_data(film: Film, developer_key: str) -> ProcessDataVariant:
    """Resolve the film's process data for a developer key.

    Tries the key itself, then the key with ``_stock`` removed.

    Raises:
        CombinationNotSupportedError: If the film lists neither key.
    """
    data = film.developers.get(developer_key)
    if data is not None:
        return data

    data = film.developers.get(developer_key.replace("_stock", ""))
    if data is not None:
        return data

    raise CombinationNotSupportedError(film.name, developer_key)


class DevelopmentCalculator:
    """Calculator for film development times and working solutions.

    The dataset lives in a DatasetStore; every operation works on a single
    snapshot of it, so installing a new dataset never affects a calculation
    already in progress.
    """

    def __init__(
        self,
        dataset: Optional[Dataset] = None,
        settings: Optional[CalculationSettings] = None,
        store: Optional[DatasetStore] = None,
    ):
        """Initialize calculator.

        Args:
            dataset: Dataset to install right away.
            settings: Request bounds. If None, uses global settings.
            store: Shared store. A private store is created if None.
        """
        self.settings = settings or get_settings().calculation
        self.store = store or DatasetStore()
        if dataset is not None:
            self.store.install(dataset)

    def load_dataset(self, dataset: Dataset) -> None:
        """Install ``dataset``, replacing any previously loaded one."""
        self.store.install(dataset)

    @property
    def is_loaded(self) -> bool:
        return self.store.is_loaded

    def get_dataset(self) -> Dataset:
        """Return the current dataset snapshot.

        Raises:
            DatasetNotLoadedError: If nothing is installed.
        """
        dataset = self.store.snapshot()
        if dataset is None:
            raise DatasetNotLoadedError()
        return dataset

    def validate_request(self, request: CalculationRequest) -> None:
        """Check request bounds before any lookup.

        Raises:
            InvalidTemperatureError: Temperature outside the accepted range.
            InvalidPushPullError: Push/pull outside the accepted range.
            InvalidVolumeError: Volume outside the accepted range.
        """
        s = self.settings
        if not (s.min_temperature_c <= request.temperature <= s.max_temperature_c):
            raise InvalidTemperatureError(
                request.temperature, s.min_temperature_c, s.max_temperature_c
            )
        if not (s.min_push_pull <= request.push_pull <= s.max_push_pull):
            raise InvalidPushPullError(request.push_pull, s.min_push_pull, s.max_push_pull)
        if not (s.min_volume_ml <= request.volume <= s.max_volume_ml):
            raise InvalidVolumeError(request.volume, s.min_volume_ml, s.max_volume_ml)

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """Calculate development time and working solution for a request.

        Args:
            request: Film, developer, temperature, push/pull and volume.

        Returns:
            CalculationResult with time, dilution, volumes and notes.

        Raises:
            CalculationError: One of its subclasses, describing the single
                reason the request could not be calculated.
        """
        with LogContext(film_key=request.film_key, developer_key=request.developer_key):
            with log_operation(logger, "calculate_development", level=logging.DEBUG):
                self.validate_request(request)
                dataset = self.get_dataset()
                return self._calculate(dataset, request)

    def calculate_for(
        self,
        film_key: str,
        developer_key: str,
        temperature: Decimal | float | int | str = Decimal("20"),
        push_pull: int = 0,
        volume: int = 500,
    ) -> CalculationResult:
        """Build a CalculationRequest from arguments and calculate it."""
        request = CalculationRequest(
            film_key=film_key,
            developer_key=developer_key,
            temperature=Decimal(str(temperature)),
            push_pull=push_pull,
            volume=volume,
        )
        return self.calculate(request)

    def _calculate(self, dataset: Dataset, request: CalculationRequest) -> CalculationResult:
        film = dataset.films.get(request.film_key)
        if film is None:
            raise FilmNotFoundError(request.film_key)

        developer = find_developer(dataset.developers, request.developer_key)
        process = find_process_data(film, request.developer_key)

        base_time = calculate_development_time(process, request.push_pull)
        compensation = get_temperature_compensation(
            dataset.temperature_compensation, request.temperature
        )
        adjusted_time = base_time * compensation

        split = split_volume(process.dilution, request.volume, film.film_type)

        logger.debug(
            f"{film.name} in {developer.name}: base={base_time} "
            f"compensation={compensation} adjusted={adjusted_time}"
        )

        return CalculationResult(
            time_minutes=adjusted_time,
            time_formatted=format_time(adjusted_time),
            dilution=split.dilution,
            developer_amount=split.developer_ml,
            water_amount=split.water_ml,
            temperature=request.temperature,
            push_pull=request.push_pull,
            film_type=film.film_type,
            film_name=film.name,
            developer_name=developer.name,
            notes=self._generate_notes(film, developer, request.temperature, request.push_pull),
        )

    def _generate_notes(
        self,
        film: Film,
        developer: Developer,
        temperature: Decimal,
        push_pull: int,
    ) -> list[str]:
        """Generate advisory notes for the result."""
        notes = []

        process_note = FILM_TYPE_NOTES.get(film.film_type)
        if process_note:
            notes.append(process_note)

        if temperature != self.settings.standard_temperature_c:
            notes.append(f"Temperature adjusted for {temperature}°C")

        if push_pull != 0:
            direction = PushPullDirection.PUSH if push_pull > 0 else PushPullDirection.PULL
            stops = abs(push_pull)
            notes.append(f"{direction.value} {stops} stop{'' if stops == 1 else 's'}")

        if developer.safety_notes:
            notes.append(f"Safety: {developer.safety_notes}")

        return notes

    # --- Browsing ---

    def get_available_films(self) -> list[Film]:
        """All films in the dataset."""
        return list(self.get_dataset().films.values())

    def get_available_film_keys(self) -> list[str]:
        """Keys of all films in the dataset."""
        return list(self.get_dataset().films.keys())

    def get_available_developers_for_film(self, film_key: str) -> list[str]:
        """Developer keys the film has process data for.

        Raises:
            FilmNotFoundError: If the film is not in the dataset.
        """
        return list(self.get_film_info(film_key).developers.keys())

    def get_film_info(self, film_key: str) -> Film:
        """Full film record.

        Raises:
            FilmNotFoundError: If the film is not in the dataset.
        """
        film = self.get_dataset().films.get(film_key)
        if film is None:
            raise FilmNotFoundError(film_key)
        return film

    def get_developer_info(self, developer_key: str) -> Developer:
        """Full developer record, resolved with the same fallbacks as calculate."""
        return find_developer(self.get_dataset().developers, developer_key)

    def get_dataset_stats(self) -> DatasetStats:
        """Counts and version of the installed dataset."""
        return DatasetLoader.get_stats(self.get_dataset())
