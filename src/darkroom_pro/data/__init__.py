"""
Reference dataset loading and storage.
"""

from darkroom_pro.data.loader import BUNDLED_DATASET, DatasetLoader, DatasetStats
from darkroom_pro.data.store import DatasetStore

__all__ = [
    "BUNDLED_DATASET",
    "DatasetLoader",
    "DatasetStats",
    "DatasetStore",
]
