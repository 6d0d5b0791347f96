"""
Domain repositories for the Occupancy Prediction module.
"""
from datetime import datetime
from typing import List, Optional, Protocol
from .entities import Observation, CacheEntry

class ObservationRepository(Protocol):
    """
    Append-only store of occupancy observations.
    """
    def query(
        self,
        location_id: Optional[str] = None,
        day_of_week: Optional[int] = None,
        time_interval: Optional[int] = None,
        observed_after: Optional[datetime] = None,
    ) -> List[Observation]:
        """Equality filters plus an observed_at lower bound, newest first."""
        ...

    def add(self, observation: Observation) -> str:
        ...

class PredictionCacheRepository(Protocol):
    """
    Keyed backing storage for cached day vectors.
    """
    def get(self, key: str) -> Optional[CacheEntry]:
        ...

    def put(self, key: str, entry: CacheEntry) -> None:
        ...
