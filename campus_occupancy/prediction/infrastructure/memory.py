"""
In-memory repositories, used for development and tests.
"""
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

from ..domain import Observation, CacheEntry, ObservationRepository, PredictionCacheRepository


class InMemoryObservationRepository(ObservationRepository):
    def __init__(self, observations: Optional[List[Observation]] = None):
        self._observations: List[Observation] = list(observations or [])

    def query(
        self,
        location_id: Optional[str] = None,
        day_of_week: Optional[int] = None,
        time_interval: Optional[int] = None,
        observed_after: Optional[datetime] = None,
    ) -> List[Observation]:
        result = [
            o for o in self._observations
            if (location_id is None or o.location_id == location_id)
            and (day_of_week is None or o.day_of_week == day_of_week)
            and (time_interval is None or o.time_interval == time_interval)
            and (observed_after is None or o.observed_at >= observed_after)
        ]
        return sorted(result, key=lambda o: o.observed_at, reverse=True)

    def add(self, observation: Observation) -> str:
        if observation.id is None:
            observation = replace(observation, id=str(uuid.uuid4()))
        self._observations.append(observation)
        return observation.id

    def __len__(self) -> int:
        return len(self._observations)


class InMemoryPredictionCacheRepository(PredictionCacheRepository):
    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        return replace(entry, predictions=list(entry.predictions))

    def put(self, key: str, entry: CacheEntry) -> None:
        self._entries[key] = replace(entry, predictions=list(entry.predictions))
