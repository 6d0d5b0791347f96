from datetime import datetime, timedelta
from typing import Callable, Optional

from ..domain import CacheEntry, DayPrediction, PredictionCacheRepository, cache_key
from ...common.exceptions import CacheStorageError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

DEFAULT_TTL = timedelta(hours=6)


class PredictionCache:
    """
    Time-boxed memoization of day vectors per (location, day-of-week).

    Stale entries are not evicted, only ignored until the next put overwrites
    them. Storage failures never surface: a failed read is a miss and a failed
    write is logged and dropped.
    """

    def __init__(
        self,
        repository: PredictionCacheRepository,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repository = repository
        self.ttl = ttl
        self.clock = clock

    def get(self, location_id: str, day_of_week: int) -> Optional[DayPrediction]:
        key = cache_key(location_id, day_of_week)
        try:
            entry = self.repository.get(key)
        except CacheStorageError as e:
            logger.warning(f"Cache read failed for {key}, recomputing: {e}")
            return None

        if entry is None:
            return None

        if self.clock() - entry.computed_at < self.ttl:
            return entry.predictions

        logger.debug(f"Cache entry {key} is stale (computed at {entry.computed_at})")
        return None

    def put(
        self,
        location_id: str,
        day_of_week: int,
        predictions: DayPrediction,
        source_observation_count: int = 0,
    ) -> None:
        key = cache_key(location_id, day_of_week)
        entry = CacheEntry(
            location_id=location_id,
            day_of_week=day_of_week,
            predictions=list(predictions),
            computed_at=self.clock(),
            source_observation_count=source_observation_count,
        )
        try:
            self.repository.put(key, entry)
        except CacheStorageError as e:
            logger.warning(f"Cache write failed for {key}: {e}")
