"""
Domain entities for the Occupancy Prediction module.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

class OccupancyLevel(str, Enum):
    """
    Crowdedness reported for a location.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def coerce(cls, value) -> Optional["OccupancyLevel"]:
        """Returns the matching level, or None for values outside the enumeration."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

@dataclass(frozen=True)
class Observation:
    """
    One recorded occupancy reading.
    day_of_week and time_interval are taken as stored; malformed values are kept.
    """
    location_id: str
    observed_at: datetime
    occupancy_level: OccupancyLevel
    day_of_week: int  # 0 = Sunday
    time_interval: int  # 0-47, 30-minute buckets
    location_name: Optional[str] = None
    wait_time: Optional[float] = None  # minutes
    user_id: Optional[str] = None
    id: Optional[str] = None

@dataclass(frozen=True)
class CellPrediction:
    """
    Prediction for a single (location, day, interval) cell.
    """
    occupancy: OccupancyLevel
    confidence: float  # 0.0 to 1.0

@dataclass(frozen=True)
class TimeSlotPrediction:
    """
    One entry of a day vector.
    """
    time_interval: int
    time_slot: str  # e.g. "12:00-12:30"
    predicted_occupancy: OccupancyLevel
    confidence: float
    color: str  # rendering hint only

    def to_dict(self) -> dict:
        return {
            'time_interval': self.time_interval,
            'time_slot': self.time_slot,
            'predicted_occupancy': self.predicted_occupancy.value,
            'confidence': self.confidence,
            'color': self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TimeSlotPrediction":
        return cls(
            time_interval=int(data['time_interval']),
            time_slot=data['time_slot'],
            predicted_occupancy=OccupancyLevel(data['predicted_occupancy']),
            confidence=float(data['confidence']),
            color=data['color'],
        )

DayPrediction = List[TimeSlotPrediction]

@dataclass
class CacheEntry:
    """
    Cached day vector for a (location, day-of-week) key.
    """
    location_id: str
    day_of_week: int
    predictions: DayPrediction = field(default_factory=list)
    computed_at: datetime = field(default_factory=datetime.now)
    source_observation_count: int = 0

def cache_key(location_id: str, day_of_week: int) -> str:
    return f"{location_id}_{day_of_week}"
