"""
Holder for the currently installed reference dataset.

Datasets are immutable, so the store only guards the reference to the
current one. Readers take a snapshot once per operation and keep working on
it even if a reload swaps in a new dataset meanwhile.
"""

import threading
from typing import Callable, Optional

from darkroom_pro.core.logging import get_logger
from darkroom_pro.core.models import Dataset

logger = get_logger(__name__)


class DatasetStore:
    """Thread-safe owner of the installed Dataset."""

    def __init__(self, dataset: Optional[Dataset] = None):
        self._lock = threading.RLock()
        self._dataset: Optional[Dataset] = None
        self._generation = 0
        if dataset is not None:
            self.install(dataset)

    @property
    def generation(self) -> int:
        """Number of datasets installed so far."""
        with self._lock:
            return self._generation

    @property
    def is_loaded(self) -> bool:
        return self.snapshot() is not None

    def snapshot(self) -> Optional[Dataset]:
        """Return the current dataset, or None when nothing is installed."""
        with self._lock:
            return self._dataset

    def install(self, dataset: Dataset) -> None:
        """Replace the current dataset with ``dataset``.

        Raises:
            TypeError: If ``dataset`` is not a Dataset.
        """
        if not isinstance(dataset, Dataset):
            raise TypeError(f"Expected Dataset, got {type(dataset).__name__}")

        with self._lock:
            self._dataset = dataset
            self._generation += 1
            generation = self._generation

        logger.info(
            f"Dataset installed: version={dataset.metadata.version}, generation={generation}",
            extra={
                "film_count": len(dataset.films),
                "developer_count": len(dataset.developers),
            },
        )

    def reload(self, build: Callable[[], Dataset]) -> Dataset:
        """Build a new dataset and install it.

        ``build`` runs outside the lock. If it raises, the previous dataset
        stays installed and the error propagates.
        """
        dataset = build()
        self.install(dataset)
        return dataset

    def clear(self) -> None:
        """Uninstall the current dataset."""
        with self._lock:
            self._dataset = None
        logger.info("Dataset cleared")
