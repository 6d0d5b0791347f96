"""
Frequency-count occupancy predictor.

A cell is scored from the observations matching its (location, day, interval)
key exactly. The most reported level wins, and the confidence blends how
strongly the reports agree with how many of them there are.
"""
from collections import Counter, defaultdict
from typing import Dict, Hashable, Iterable, List, Tuple

from ..domain import (
    OccupancyLevel,
    Observation,
    CellPrediction,
    TimeSlotPrediction,
    DayPrediction,
    INTERVALS_PER_DAY,
    time_slot_label,
)

NO_DATA_PREDICTION = CellPrediction(occupancy=OccupancyLevel.MEDIUM, confidence=0.1)

CONSISTENCY_WEIGHT = 0.7
SAMPLE_SIZE_WEIGHT = 0.3
SAMPLE_SIZE_SATURATION = 10
MIN_COLOR_ALPHA = 0.3

OCCUPANCY_RGB = {
    OccupancyLevel.LOW: (76, 175, 80),  # green
    OccupancyLevel.MEDIUM: (255, 152, 0),  # orange
    OccupancyLevel.HIGH: (244, 67, 54),  # red
}
UNKNOWN_RGB = (158, 158, 158)

CellKey = Tuple[Hashable, Hashable, Hashable]


class OccupancyPredictor:
    """
    Predictor bound to one working set of observations.
    Build a new one with train() for every request; instances are never reused.
    """

    def __init__(self, cells: Dict[CellKey, Counter], totals: Dict[CellKey, int]):
        self._cells = cells
        self._totals = totals

    @classmethod
    def train(cls, observations: Iterable[Observation]) -> "OccupancyPredictor":
        cells: Dict[CellKey, Counter] = defaultdict(Counter)
        totals: Dict[CellKey, int] = defaultdict(int)
        for obs in observations:
            if isinstance(obs.day_of_week, bool) or isinstance(obs.time_interval, bool):
                # bool compares equal to 0/1 but is never a day or interval
                continue
            key = (obs.location_id, obs.day_of_week, obs.time_interval)
            try:
                hash(key)
            except TypeError:
                # Unhashable day/interval values can never match a query
                continue
            totals[key] += 1
            level = OccupancyLevel.coerce(obs.occupancy_level)
            if level is not None:
                cells[key][level] += 1
        return cls(dict(cells), dict(totals))

    @property
    def observation_count(self) -> int:
        return sum(self._totals.values())

    def location_ids(self) -> List[str]:
        """Locations present in the working set, in first-seen order."""
        seen = {}
        for location_id, _, _ in self._totals:
            seen.setdefault(location_id, None)
        return list(seen)

    def predict_cell(self, location_id: str, day_of_week: int, time_interval: int) -> CellPrediction:
        key = (location_id, day_of_week, time_interval)
        total = self._totals.get(key, 0)
        if total == 0:
            return NO_DATA_PREDICTION

        counts = self._cells.get(key, Counter())
        low = counts[OccupancyLevel.LOW]
        medium = counts[OccupancyLevel.MEDIUM]
        high = counts[OccupancyLevel.HIGH]
        max_count = max(low, medium, high)

        # Ties go to high, then low; medium takes whatever is left.
        if high == max_count:
            occupancy = OccupancyLevel.HIGH
        elif low == max_count:
            occupancy = OccupancyLevel.LOW
        else:
            occupancy = OccupancyLevel.MEDIUM

        consistency = max_count / total
        data_amount = min(total / SAMPLE_SIZE_SATURATION, 1)
        confidence = consistency * CONSISTENCY_WEIGHT + data_amount * SAMPLE_SIZE_WEIGHT

        return CellPrediction(occupancy=occupancy, confidence=confidence)

    def predict_day(self, location_id: str, day_of_week: int) -> DayPrediction:
        predictions = []
        for interval in range(INTERVALS_PER_DAY):
            cell = self.predict_cell(location_id, day_of_week, interval)
            predictions.append(
                TimeSlotPrediction(
                    time_interval=interval,
                    time_slot=time_slot_label(interval),
                    predicted_occupancy=cell.occupancy,
                    confidence=cell.confidence,
                    color=occupancy_color(cell.occupancy, cell.confidence),
                )
            )
        return predictions


def occupancy_color(occupancy: OccupancyLevel, confidence: float) -> str:
    alpha = max(MIN_COLOR_ALPHA, confidence)
    r, g, b = OCCUPANCY_RGB.get(occupancy, UNKNOWN_RGB)
    return f"rgba({r}, {g}, {b}, {alpha})"


def predict_cell(
    observations: Iterable[Observation],
    location_id: str,
    day_of_week: int,
    time_interval: int,
) -> CellPrediction:
    return OccupancyPredictor.train(observations).predict_cell(location_id, day_of_week, time_interval)


def predict_day(observations: Iterable[Observation], location_id: str, day_of_week: int) -> DayPrediction:
    return OccupancyPredictor.train(observations).predict_day(location_id, day_of_week)
