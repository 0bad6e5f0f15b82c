"""
Exceptions for DarkroomPro calculations and dataset handling.

Provides two hierarchies:
- CalculationError (base for everything a calculation or lookup can raise)
  - DatasetNotLoadedError
  - FilmNotFoundError
  - DeveloperNotFoundError
  - CombinationNotSupportedError
  - InvalidTemperatureError
  - InvalidPushPullError
  - InvalidVolumeError
- DatasetError (base for dataset loading failures)
  - DatasetFileNotFoundError
  - DatasetParseError
  - InvalidDatasetError

Messages are written to be shown to an end user as-is. The offending
values are also kept as attributes and in ``details``.
"""

from decimal import Decimal
from typing import Any


class CalculationError(Exception):
    """Base exception for development calculation errors.

    Attributes:
        details: Offending values keyed by name.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a request-handling layer."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": {k: str(v) if isinstance(v, Decimal) else v for k, v in self.details.items()},
        }


class DatasetNotLoadedError(CalculationError):
    """No dataset has been installed in the calculator yet."""

    def __init__(self, message: str = "Database not loaded"):
        super().__init__(message)


class FilmNotFoundError(CalculationError):
    """Film key is not present in the dataset."""

    def __init__(self, film_key: str):
        super().__init__(f"Film not found: {film_key}", details={"film_key": film_key})
        self.film_key = film_key


class DeveloperNotFoundError(CalculationError):
    """Developer key did not resolve through any lookup tier."""

    def __init__(self, developer_key: str):
        super().__init__(
            f"Developer not found: {developer_key}",
            details={"developer_key": developer_key},
        )
        self.developer_key = developer_key


class CombinationNotSupportedError(CalculationError):
    """The film has no process data for the requested developer."""

    def __init__(self, film_name: str, developer_key: str):
        super().__init__(
            f"Film/developer combination not supported: {film_name} with {developer_key}",
            details={"film": film_name, "developer_key": developer_key},
        )
        self.film_name = film_name
        self.developer_key = developer_key


class InvalidTemperatureError(CalculationError):
    """Requested processing temperature is outside the accepted range."""

    def __init__(
        self,
        temperature: Decimal,
        minimum: Decimal = Decimal("15"),
        maximum: Decimal = Decimal("30"),
    ):
        super().__init__(
            f"Invalid temperature: {temperature}°C (must be between {minimum}-{maximum}°C)",
            details={"temperature": temperature},
        )
        self.temperature = temperature


class InvalidPushPullError(CalculationError):
    """Requested push/pull is outside the accepted range."""

    def __init__(self, push_pull: int, minimum: int = -2, maximum: int = 3):
        super().__init__(
            f"Invalid push/pull value: {push_pull} (must be between {minimum} and {maximum:+d})",
            details={"push_pull": push_pull},
        )
        self.push_pull = push_pull


class InvalidVolumeError(CalculationError):
    """Requested solution volume is outside the accepted range."""

    def __init__(self, volume: int, minimum: int = 100, maximum: int = 2000):
        super().__init__(
            f"Invalid volume: {volume}ml (must be between {minimum}-{maximum}ml)",
            details={"volume": volume},
        )
        self.volume = volume


class DatasetError(Exception):
    """Base exception for dataset loading errors.

    Attributes:
        source: File path or description of the data that failed to load.
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        return " | ".join(parts)


class DatasetFileNotFoundError(DatasetError):
    """Dataset file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Database file not found at path: {path}", source=path)


class DatasetParseError(DatasetError):
    """Dataset content could not be read or is not valid JSON."""


class InvalidDatasetError(DatasetError):
    """Dataset parsed but violates the structural rules.

    Attributes:
        errors: One message per violated rule or field.
    """

    def __init__(self, message: str, errors: list[str] | None = None, source: str | None = None):
        super().__init__(message, source=source)
        self.errors = errors or []
