import uuid
from datetime import datetime
from typing import Callable, Dict, Optional

from ..domain import (
    Observation,
    OccupancyLevel,
    DayPrediction,
    ObservationRepository,
    time_interval_of,
    day_of_week_of,
)
from .cache import PredictionCache
from .history import ObservationHistory
from .predictor import OccupancyPredictor
from ...common.logging import setup_logger, log_execution_time
from ...common.schemas import ObservationSubmission

logger = setup_logger(__name__)


class PredictionService:
    """
    Orchestrates cache lookup, history fetch, training and prediction.

    Concurrent requests for the same key may both recompute and both write the
    cache; the last write wins.
    """

    def __init__(
        self,
        observations: ObservationRepository,
        history: ObservationHistory,
        cache: PredictionCache,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.observations = observations
        self.history = history
        self.cache = cache
        self.clock = clock

    @log_execution_time(logger)
    def get_predictions(self, location_id: str, day_of_week: int) -> DayPrediction:
        """
        Day vector for a location: 48 cells, or ObservationFetchError.
        """
        cached = self.cache.get(location_id, day_of_week)
        if cached is not None:
            logger.debug(f"Serving cached predictions for {location_id} day {day_of_week}")
            return cached

        observations = self.history.fetch(location_id)
        predictor = OccupancyPredictor.train(observations)
        predictions = predictor.predict_day(location_id, day_of_week)
        logger.info(
            f"Computed predictions for {location_id} day {day_of_week} "
            f"from {predictor.observation_count} observations"
        )

        self.cache.put(location_id, day_of_week, predictions, predictor.observation_count)
        return predictions

    @log_execution_time(logger)
    def get_all_predictions(self, day_of_week: int) -> Dict[str, DayPrediction]:
        """
        Day vectors for every location with observations in the lookback window.
        """
        observations = self.history.fetch()
        predictor = OccupancyPredictor.train(observations)
        return {
            location_id: predictor.predict_day(location_id, day_of_week)
            for location_id in predictor.location_ids()
        }

    def record_observation(self, submission: ObservationSubmission) -> Observation:
        observed_at = submission.observed_at or self.clock()
        observation = Observation(
            id=str(uuid.uuid4()),
            location_id=submission.location_id,
            location_name=submission.location_name,
            observed_at=observed_at,
            occupancy_level=OccupancyLevel(submission.occupancy_level),
            day_of_week=day_of_week_of(observed_at),
            time_interval=time_interval_of(observed_at),
            wait_time=submission.wait_time,
            user_id=submission.user_id,
        )
        self.observations.add(observation)
        logger.info(
            f"Stored {observation.occupancy_level.value} observation for {observation.location_id} "
            f"(day {observation.day_of_week}, interval {observation.time_interval})"
        )
        return observation
