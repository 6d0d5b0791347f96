import pytest
from datetime import datetime, timezone, timedelta
from pydantic import ValidationError
from campus_occupancy.common.schemas import (
    ObservationSubmission,
    TimeSlotPredictionSchema,
    DayPredictionResponse,
)

# --- ObservationSubmission Tests ---
def test_submission_valid():
    sub = ObservationSubmission(location_id="main-canteen", occupancy_level="medium", wait_time=4)
    assert sub.occupancy_level == "medium"
    assert sub.observed_at is None

def test_submission_invalid_level():
    with pytest.raises(ValidationError):
        ObservationSubmission(location_id="main-canteen", occupancy_level="packed")

def test_submission_negative_wait_time():
    with pytest.raises(ValidationError):
        ObservationSubmission(location_id="main-canteen", occupancy_level="low", wait_time=-1)

def test_submission_empty_location():
    with pytest.raises(ValidationError):
        ObservationSubmission(location_id="", occupancy_level="low")

def test_submission_aware_timestamp_becomes_local_naive():
    aware = datetime(2024, 1, 8, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    sub = ObservationSubmission(location_id="L1", occupancy_level="low", observed_at=aware)
    assert sub.observed_at.tzinfo is None
    assert sub.observed_at == aware.astimezone().replace(tzinfo=None)

# --- Prediction Tests ---
def _cell(interval=0, confidence=0.1):
    return TimeSlotPredictionSchema(
        time_interval=interval, time_slot="00:00-00:30", predicted_occupancy="medium",
        confidence=confidence, color="rgba(255, 152, 0, 0.3)"
    )

def test_cell_invalid_confidence():
    with pytest.raises(ValidationError):
        _cell(confidence=1.5)

def test_cell_invalid_interval():
    with pytest.raises(ValidationError):
        _cell(interval=48)

def test_day_response_requires_48_cells():
    with pytest.raises(ValidationError):
        DayPredictionResponse(location_id="L1", day_of_week=1, predictions=[_cell()])
    day = DayPredictionResponse(location_id="L1", day_of_week=1, predictions=[_cell(i) for i in range(48)])
    assert len(day.predictions) == 48

def test_day_response_invalid_day():
    with pytest.raises(ValidationError):
        DayPredictionResponse(location_id="L1", day_of_week=7, predictions=[_cell(i) for i in range(48)])
