from .observation import (
    ObservationSubmission,
    TimeSlotPredictionSchema,
    DayPredictionResponse,
    PredictionInsights,
)

__all__ = [
    "ObservationSubmission",
    "TimeSlotPredictionSchema",
    "DayPredictionResponse",
    "PredictionInsights",
]
