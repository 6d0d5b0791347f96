import pytest
import logging
from datetime import timedelta
from unittest.mock import MagicMock
from campus_occupancy.common.exceptions import CacheStorageError
from campus_occupancy.prediction.application import PredictionCache, predict_day
from campus_occupancy.prediction.domain import OccupancyLevel


@pytest.fixture
def cache(cache_repository, clock):
    return PredictionCache(cache_repository, clock=clock)


@pytest.fixture
def predictions(make_observation):
    return predict_day([make_observation(level="low")], "L1", 1)


def test_put_then_get_round_trip(cache, predictions):
    cache.put("L1", 1, predictions, source_observation_count=1)
    assert cache.get("L1", 1) == predictions


def test_miss_for_unknown_key(cache, predictions):
    cache.put("L1", 1, predictions)
    assert cache.get("L1", 2) is None
    assert cache.get("L2", 1) is None


def test_entry_is_stored_under_composite_key(cache, cache_repository, clock, predictions):
    cache.put("L1", 1, predictions, source_observation_count=7)
    entry = cache_repository.get("L1_1")
    assert entry.location_id == "L1"
    assert entry.day_of_week == 1
    assert entry.computed_at == clock.now
    assert entry.source_observation_count == 7


def test_fresh_until_ttl(cache, clock, predictions):
    cache.put("L1", 1, predictions)
    clock.advance(hours=5, minutes=59)
    assert cache.get("L1", 1) == predictions


def test_stale_after_ttl_but_kept_in_storage(cache, cache_repository, clock, predictions):
    cache.put("L1", 1, predictions)
    clock.advance(hours=6)
    assert cache.get("L1", 1) is None
    assert cache_repository.get("L1_1") is not None


def test_custom_ttl(cache_repository, clock, predictions):
    cache = PredictionCache(cache_repository, ttl=timedelta(minutes=15), clock=clock)
    cache.put("L1", 1, predictions)
    clock.advance(minutes=16)
    assert cache.get("L1", 1) is None


def test_put_overwrites_previous_entry(cache, clock, predictions):
    cache.put("L1", 1, predictions)
    clock.advance(hours=7)
    newer = predict_day([], "L1", 1)
    cache.put("L1", 1, newer)
    result = cache.get("L1", 1)
    assert result == newer
    assert result[24].predicted_occupancy == OccupancyLevel.MEDIUM


def test_read_failure_is_a_miss(clock):
    repository = MagicMock()
    repository.get.side_effect = CacheStorageError("unavailable")
    cache = PredictionCache(repository, clock=clock)
    assert cache.get("L1", 1) is None


def test_write_failure_is_swallowed(clock, predictions):
    repository = MagicMock()
    repository.put.side_effect = CacheStorageError("read-only")
    cache = PredictionCache(repository, clock=clock)
    cache.put("L1", 1, predictions)
    repository.put.assert_called_once()


def test_write_failure_is_logged_as_warning(clock, predictions, caplog):
    repository = MagicMock()
    repository.put.side_effect = CacheStorageError("read-only")
    with caplog.at_level(logging.WARNING, logger="campus_occupancy.prediction.application.cache"):
        PredictionCache(repository, clock=clock).put("L1", 1, predictions)
    assert "Cache write failed for L1_1: read-only" in caplog.text
