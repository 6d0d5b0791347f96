from .predictor import (
    OccupancyPredictor,
    NO_DATA_PREDICTION,
    occupancy_color,
    predict_cell,
    predict_day,
)
from .cache import PredictionCache, DEFAULT_TTL
from .history import ObservationHistory, DEFAULT_LOOKBACK_DAYS
from .insights import busy_periods, quiet_periods, current_prediction
from .service import PredictionService
from .builder import PredictionApplicationBuilder
