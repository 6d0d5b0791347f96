"""
SQLAlchemy-backed repositories.
"""
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..domain import (
    Observation,
    OccupancyLevel,
    CacheEntry,
    TimeSlotPrediction,
    ObservationRepository,
    PredictionCacheRepository,
)
from ...common.database import ObservationDB, PredictionCacheDB
from ...common.exceptions import ObservationFetchError, ObservationStoreError, CacheStorageError


def _to_observation(row: ObservationDB) -> Observation:
    # Unknown levels are passed through untouched and ignored by the predictor
    level = OccupancyLevel.coerce(row.occupancy_level) or row.occupancy_level
    return Observation(
        id=row.observation_id,
        location_id=row.location_id,
        location_name=row.location_name,
        observed_at=row.observed_at,
        occupancy_level=level,
        day_of_week=row.day_of_week,
        time_interval=row.time_interval,
        wait_time=row.wait_time,
        user_id=row.user_id,
    )


class SqlObservationRepository(ObservationRepository):
    """
    Stores observations in the occupancy_observations table.
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def query(
        self,
        location_id: Optional[str] = None,
        day_of_week: Optional[int] = None,
        time_interval: Optional[int] = None,
        observed_after: Optional[datetime] = None,
    ) -> List[Observation]:
        try:
            with self.session_factory() as session:
                q = session.query(ObservationDB)
                if location_id is not None:
                    q = q.filter(ObservationDB.location_id == location_id)
                if day_of_week is not None:
                    q = q.filter(ObservationDB.day_of_week == day_of_week)
                if time_interval is not None:
                    q = q.filter(ObservationDB.time_interval == time_interval)
                if observed_after is not None:
                    q = q.filter(ObservationDB.observed_at >= observed_after)
                rows = q.order_by(ObservationDB.observed_at.desc()).all()
                return [_to_observation(row) for row in rows]
        except SQLAlchemyError as e:
            raise ObservationFetchError(f"Failed to fetch historical data: {e}") from e

    def add(self, observation: Observation) -> str:
        observation_id = observation.id or str(uuid.uuid4())
        level = observation.occupancy_level
        row = ObservationDB(
            observation_id=observation_id,
            location_id=observation.location_id,
            location_name=observation.location_name,
            observed_at=observation.observed_at,
            occupancy_level=level.value if isinstance(level, OccupancyLevel) else level,
            wait_time=observation.wait_time,
            day_of_week=observation.day_of_week,
            time_interval=observation.time_interval,
            user_id=observation.user_id,
        )
        try:
            with self.session_factory() as session:
                session.add(row)
                session.commit()
        except SQLAlchemyError as e:
            raise ObservationStoreError(f"Failed to store occupancy data: {e}") from e
        return observation_id


class SqlPredictionCacheRepository(PredictionCacheRepository):
    """
    Stores cached day vectors in the prediction_cache table, predictions as JSON.
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[CacheEntry]:
        try:
            with self.session_factory() as session:
                row = session.get(PredictionCacheDB, key)
                if row is None:
                    return None
                return CacheEntry(
                    location_id=row.location_id,
                    day_of_week=row.day_of_week,
                    predictions=[TimeSlotPrediction.from_dict(p) for p in row.predictions],
                    computed_at=row.computed_at,
                    source_observation_count=row.source_observation_count,
                )
        except SQLAlchemyError as e:
            raise CacheStorageError(f"Failed to read prediction cache {key}: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise CacheStorageError(f"Corrupted prediction cache entry {key}: {e}") from e

    def put(self, key: str, entry: CacheEntry) -> None:
        row = PredictionCacheDB(
            cache_key=key,
            location_id=entry.location_id,
            day_of_week=entry.day_of_week,
            predictions=[p.to_dict() for p in entry.predictions],
            computed_at=entry.computed_at,
            source_observation_count=entry.source_observation_count,
        )
        try:
            with self.session_factory() as session:
                session.merge(row)
                session.commit()
        except SQLAlchemyError as e:
            raise CacheStorageError(f"Failed to store prediction cache {key}: {e}") from e
