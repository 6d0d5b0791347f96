"""
Domain module initialization.
"""
from .entities import (
    OccupancyLevel,
    Observation,
    CellPrediction,
    TimeSlotPrediction,
    DayPrediction,
    CacheEntry,
    cache_key,
)
from .calendar import (
    TIME_INTERVAL_MINUTES,
    INTERVALS_PER_DAY,
    DAYS_PER_WEEK,
    time_interval_of,
    day_of_week_of,
    current_time_interval,
    current_day_of_week,
    time_slot_label,
)
from .repositories import ObservationRepository, PredictionCacheRepository
