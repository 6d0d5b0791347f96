"""
Helpers for reading a day vector: busy and quiet stretches, and the slot
covering the current time.
"""
from datetime import datetime
from typing import List, Optional

from ..domain import (
    OccupancyLevel,
    DayPrediction,
    TimeSlotPrediction,
    current_time_interval,
    time_slot_label,
)

DEFAULT_MIN_CONFIDENCE = 0.6


def _periods(predictions: DayPrediction, level: OccupancyLevel, min_confidence: float) -> List[TimeSlotPrediction]:
    return [
        p for p in predictions
        if p.predicted_occupancy == level and p.confidence > min_confidence
    ]


def busy_periods(predictions: DayPrediction, min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> List[TimeSlotPrediction]:
    return _periods(predictions, OccupancyLevel.HIGH, min_confidence)


def quiet_periods(predictions: DayPrediction, min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> List[TimeSlotPrediction]:
    return _periods(predictions, OccupancyLevel.LOW, min_confidence)


def current_prediction(predictions: DayPrediction, now: Optional[datetime] = None) -> Optional[TimeSlotPrediction]:
    label = time_slot_label(current_time_interval(now))
    return next((p for p in predictions if p.time_slot == label), None)
