import pytest
from datetime import datetime, timedelta
from campus_occupancy.prediction.domain import Observation, OccupancyLevel
from campus_occupancy.prediction.infrastructure import (
    InMemoryObservationRepository,
    InMemoryPredictionCacheRepository,
)

# Wednesday
NOW = datetime(2024, 1, 10, 12, 0)


class FakeClock:
    """Manually advanced clock."""
    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_observation():
    def _make(location_id="L1", day=1, interval=24, level="high", observed_at=NOW, **kwargs):
        return Observation(
            location_id=location_id,
            observed_at=observed_at,
            occupancy_level=OccupancyLevel.coerce(level) or level,
            day_of_week=day,
            time_interval=interval,
            **kwargs
        )
    return _make


@pytest.fixture
def observation_repository():
    return InMemoryObservationRepository()


@pytest.fixture
def cache_repository():
    return InMemoryPredictionCacheRepository()
