from datetime import datetime
from campus_occupancy.prediction.application import (
    busy_periods,
    quiet_periods,
    current_prediction,
    predict_day,
)
from campus_occupancy.prediction.domain import OccupancyLevel


def _strong(make_observation, level, interval, count=10):
    return [make_observation(level=level, interval=interval) for _ in range(count)]


def test_busy_and_quiet_periods(make_observation):
    observations = (
        _strong(make_observation, "high", 24)
        + _strong(make_observation, "low", 16)
        # one unanimous report still clears the default threshold
        + _strong(make_observation, "high", 30, count=1)
    )
    predictions = predict_day(observations, "L1", 1)

    busy = busy_periods(predictions)
    quiet = quiet_periods(predictions)

    assert [p.time_slot for p in busy] == ["12:00-12:30", "15:00-15:30"]
    assert [p.time_slot for p in quiet] == ["08:00-08:30"]
    assert all(p.predicted_occupancy == OccupancyLevel.HIGH for p in busy)


def test_confidence_threshold_is_strict(make_observation):
    predictions = predict_day(_strong(make_observation, "high", 24), "L1", 1)
    assert busy_periods(predictions, min_confidence=1.0) == []
    assert len(busy_periods(predictions, min_confidence=0.99)) == 1


def test_no_periods_without_data():
    predictions = predict_day([], "L1", 1)
    assert busy_periods(predictions) == []
    assert quiet_periods(predictions) == []


def test_current_prediction_matches_slot():
    predictions = predict_day([], "L1", 1)
    cell = current_prediction(predictions, now=datetime(2024, 1, 8, 12, 40))
    assert cell.time_slot == "12:30-13:00"
    assert cell.time_interval == 25


def test_current_prediction_missing():
    assert current_prediction([], now=datetime(2024, 1, 8, 12, 40)) is None
