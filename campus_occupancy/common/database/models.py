from sqlalchemy import Column, Integer, String, Float, DateTime, JSON, Index
from .database import Base

class ObservationDB(Base):
    __tablename__ = "occupancy_observations"

    observation_id = Column(String, primary_key=True, index=True)
    location_id = Column(String, nullable=False, index=True)
    location_name = Column(String, nullable=True)
    observed_at = Column(DateTime, nullable=False, index=True)
    occupancy_level = Column(String, nullable=False)
    wait_time = Column(Float, nullable=True)  # minutes
    day_of_week = Column(Integer, nullable=True)  # 0 = Sunday
    time_interval = Column(Integer, nullable=True)  # 0-47
    user_id = Column(String, nullable=True)

    __table_args__ = (
        Index("ix_observations_location_observed", "location_id", "observed_at"),
    )

class PredictionCacheDB(Base):
    __tablename__ = "prediction_cache"

    cache_key = Column(String, primary_key=True)  # "{location_id}_{day_of_week}"
    location_id = Column(String, nullable=False)
    day_of_week = Column(Integer, nullable=False)
    predictions = Column(JSON, nullable=False)
    computed_at = Column(DateTime, nullable=False)
    source_observation_count = Column(Integer, nullable=False, default=0)
