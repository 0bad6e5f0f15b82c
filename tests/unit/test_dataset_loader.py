"""
Unit tests for dataset loading.
"""

import json
from decimal import Decimal

import pytest

from darkroom_pro.chemistry.calculator import find_developer
from darkroom_pro.config import DatasetSettings
from darkroom_pro.core.exceptions import (
    DatasetError,
    DatasetFileNotFoundError,
    DatasetParseError,
    InvalidDatasetError,
)
from darkroom_pro.core.types import FilmType
from darkroom_pro.data.loader import DatasetLoader


def _to_json(data):
    return json.dumps(data, default=str)


@pytest.fixture
def loader():
    return DatasetLoader()


@pytest.fixture
def dataset_file(tmp_path, dataset_dict):
    path = tmp_path / "complete_database.json"
    path.write_text(_to_json(dataset_dict), encoding="utf-8")
    return path


class TestLoadFromFile:
    def test_load(self, loader, dataset_file):
        dataset = loader.load_from_file(dataset_file)
        assert "tri-x-400" in dataset.films
        assert dataset.metadata.version == "test-1"

    def test_accepts_string_path(self, loader, dataset_file):
        assert loader.load_from_file(str(dataset_file)).films

    def test_missing_file(self, loader, tmp_path):
        missing = tmp_path / "missing.json"
        with pytest.raises(DatasetFileNotFoundError, match="Database file not found"):
            loader.load_from_file(missing)

    def test_invalid_json(self, loader, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(DatasetParseError, match="Failed to parse database JSON") as exc_info:
            loader.load_from_file(path)
        assert exc_info.value.source == str(path)

    def test_undecodable_bytes(self, loader, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"films": "\xff\xfe"}')
        with pytest.raises(DatasetParseError, match="Failed to read database file") as exc_info:
            loader.load_from_file(path)
        assert isinstance(exc_info.value, DatasetError)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestLoadFromJson:
    def test_floats_become_decimals(self, loader):
        content = json.dumps(
            {
                "films": {
                    "x": {
                        "name": "X",
                        "iso": 100,
                        "type": "black_white",
                        "developers": {"d": {"time_minutes": 8.1}},
                    }
                },
                "developers": {"d": {"name": "D"}},
                "temperature_compensation": {"20": 1.0, "21": 0.9},
            }
        )
        dataset = loader.load_from_json(content)

        assert dataset.films["x"].developers["d"].time_minutes == Decimal("8.1")
        assert dataset.temperature_compensation["21"] == Decimal("0.9")

    def test_structure_errors_collected(self, loader, dataset_dict):
        dataset_dict["films"]["tri-x-400"]["developers"] = {}
        dataset_dict["developers"] = {}

        with pytest.raises(InvalidDatasetError) as exc_info:
            loader.load_from_json(_to_json(dataset_dict))

        assert str(exc_info.value).startswith("Invalid database structure")
        assert len(exc_info.value.errors) >= 1

    def test_errors_share_base(self, loader):
        with pytest.raises(DatasetError):
            loader.load_from_json("[]")


class TestBundledDataset:
    def test_load_bundled(self, bundled_dataset):
        assert bundled_dataset.films["tri-x-400"].film_type == FilmType.BLACK_WHITE
        assert bundled_dataset.films["portra-400"].film_type == FilmType.COLOR_NEGATIVE
        assert bundled_dataset.films["ektachrome-e100"].film_type == FilmType.SLIDE

    def test_metadata_matches_contents(self, bundled_dataset):
        stats = DatasetLoader.get_stats(bundled_dataset)
        assert stats.film_count == bundled_dataset.metadata.film_count
        assert stats.developer_count == bundled_dataset.metadata.developer_count
        assert stats.total_combinations == bundled_dataset.metadata.total_combinations

    def test_every_film_developer_resolves(self, bundled_dataset):
        for film in bundled_dataset.films.values():
            for developer_key in film.developers:
                assert find_developer(bundled_dataset.developers, developer_key)


class TestLoadConfigured:
    def test_explicit_path(self, loader, dataset_file):
        dataset = loader.load_configured(DatasetSettings(path=dataset_file))
        assert dataset.metadata.version == "test-1"

    def test_bundled_fallback(self, loader):
        dataset = loader.load_configured(DatasetSettings(path=None, use_bundled=True))
        assert "tri-x-400" in dataset.films

    def test_nothing_configured(self, loader):
        with pytest.raises(DatasetFileNotFoundError):
            loader.load_configured(DatasetSettings(path=None, use_bundled=False))


class TestDatasetStats:
    def test_stats(self, dataset):
        stats = DatasetLoader.get_stats(dataset)
        assert stats.to_dict() == {
            "film_count": 3,
            "developer_count": 7,
            "total_combinations": 6,
            "version": "test-1",
            "last_updated": "2024-01-01",
        }
