"""
Dataset loading from JSON files, strings and dictionaries.

Loaded content is validated through the Dataset model; structural problems
surface as InvalidDatasetError with one message per failing field.

Usage:
    from darkroom_pro.data.loader import DatasetLoader

    loader = DatasetLoader()
    dataset = loader.load_from_file("complete_database.json")
    print(loader.get_stats(dataset))
"""

import json
from dataclasses import asdict, dataclass
from decimal import Decimal
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from darkroom_pro.config import DatasetSettings, get_settings
from darkroom_pro.core.exceptions import (
    DatasetFileNotFoundError,
    DatasetParseError,
    InvalidDatasetError,
)
from darkroom_pro.core.logging import get_logger
from darkroom_pro.core.models import Dataset

logger = get_logger(__name__)

BUNDLED_DATASET = "sample_dataset.json"


@dataclass(frozen=True)
class DatasetStats:
    """Counts computed from a dataset's contents."""

    film_count: int
    developer_count: int
    total_combinations: int
    version: str
    last_updated: str

    def to_dict(self) -> dict:
        return asdict(self)


class DatasetLoader:
    """Reads and validates reference datasets."""

    def load_from_file(self, path: str | Path) -> Dataset:
        """Load a dataset from a JSON file.

        Raises:
            DatasetFileNotFoundError: If the file does not exist.
            DatasetParseError: If the file cannot be read or parsed.
            InvalidDatasetError: If the content is structurally invalid.
        """
        path = Path(path)
        if not path.exists():
            raise DatasetFileNotFoundError(str(path))

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetParseError(f"Failed to read database file: {e}", source=str(path)) from e

        return self.load_from_json(content, source=str(path))

    def load_from_json(self, content: str, source: str = "<string>") -> Dataset:
        """Load a dataset from JSON text.

        Floats are parsed straight into Decimal.
        """
        try:
            data = json.loads(content, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise DatasetParseError(f"Failed to parse database JSON: {e}", source=source) from e

        return self.load_from_dict(data, source=source)

    def load_from_dict(self, data: Any, source: str = "<dict>") -> Dataset:
        """Validate an already decoded dataset."""
        try:
            dataset = Dataset.model_validate(data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc']) or 'dataset'}: {err['msg']}"
                for err in e.errors()
            ]
            logger.warning(
                f"Dataset validation failed for {source}: {len(errors)} error(s)",
                extra={"error": errors[0]},
            )
            raise InvalidDatasetError(
                f"Invalid database structure: {errors[0]}", errors=errors, source=source
            ) from e

        logger.info(
            f"Loaded dataset {dataset.metadata.version} from {source}",
            extra={
                "film_count": len(dataset.films),
                "developer_count": len(dataset.developers),
            },
        )
        return dataset

    def load_bundled(self) -> Dataset:
        """Load the sample dataset shipped with the package."""
        content = (
            resources.files("darkroom_pro.data").joinpath(BUNDLED_DATASET).read_text(encoding="utf-8")
        )
        return self.load_from_json(content, source=f"bundled:{BUNDLED_DATASET}")

    def load_configured(self, settings: Optional[DatasetSettings] = None) -> Dataset:
        """Load the dataset named by settings, falling back to the bundled one.

        Raises:
            DatasetFileNotFoundError: If no path is configured and the
                bundled dataset is disabled.
        """
        settings = settings or get_settings().dataset
        if settings.path is not None:
            return self.load_from_file(settings.path)
        if settings.use_bundled:
            return self.load_bundled()
        raise DatasetFileNotFoundError("<not configured>")

    @staticmethod
    def get_stats(dataset: Dataset) -> DatasetStats:
        """Compute counts from the dataset itself rather than its metadata."""
        return DatasetStats(
            film_count=len(dataset.films),
            developer_count=len(dataset.developers),
            total_combinations=dataset.total_combinations,
            version=dataset.metadata.version,
            last_updated=dataset.metadata.last_updated,
        )
