"""
HTTP API for occupancy predictions.
"""
from typing import Dict, List, Optional
from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..application import (
    PredictionService,
    busy_periods,
    quiet_periods,
    current_prediction,
)
from ..application.insights import DEFAULT_MIN_CONFIDENCE
from ..domain import (
    DayPrediction,
    current_day_of_week,
    current_time_interval,
    time_slot_label,
)
from ...common.exceptions import ObservationFetchError, ObservationStoreError
from ...common.schemas import (
    ObservationSubmission,
    TimeSlotPredictionSchema,
    DayPredictionResponse,
    PredictionInsights,
)

app = FastAPI(title="Campus Occupancy Prediction API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Singleton
_service: Optional[PredictionService] = None
_min_insight_confidence: float = DEFAULT_MIN_CONFIDENCE

def init_service(service: PredictionService, min_insight_confidence: float = DEFAULT_MIN_CONFIDENCE):
    global _service, _min_insight_confidence
    _service = service
    _min_insight_confidence = min_insight_confidence

def get_service() -> PredictionService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Prediction service not initialized")
    return _service

def _schemas(predictions: DayPrediction) -> List[TimeSlotPredictionSchema]:
    return [TimeSlotPredictionSchema(**p.to_dict()) for p in predictions]

def _load(service: PredictionService, location_id: str, day_of_week: int) -> DayPrediction:
    try:
        return service.get_predictions(location_id, day_of_week)
    except ObservationFetchError as e:
        raise HTTPException(status_code=502, detail="Failed to get predictions") from e

@app.get("/health")
def health() -> Dict:
    return {"status": "ok", "service_ready": _service is not None}

@app.get("/time/current")
def current_time() -> Dict:
    interval = current_time_interval()
    return {
        "day_of_week": current_day_of_week(),
        "time_interval": interval,
        "time_slot": time_slot_label(interval),
    }

@app.get("/locations/{location_id}/predictions", response_model=DayPredictionResponse)
def get_location_predictions(
    location_id: str,
    day_of_week: Optional[int] = Query(None, ge=0, le=6),
    service: PredictionService = Depends(get_service),
):
    """Day vector for a location; defaults to today."""
    day = current_day_of_week() if day_of_week is None else day_of_week
    predictions = _load(service, location_id, day)
    return DayPredictionResponse(location_id=location_id, day_of_week=day, predictions=_schemas(predictions))

@app.get("/locations/{location_id}/predictions/current", response_model=TimeSlotPredictionSchema)
def get_current_prediction(location_id: str, service: PredictionService = Depends(get_service)):
    predictions = _load(service, location_id, current_day_of_week())
    cell = current_prediction(predictions)
    if cell is None:
        raise HTTPException(status_code=404, detail="No prediction for the current time slot")
    return TimeSlotPredictionSchema(**cell.to_dict())

@app.get("/locations/{location_id}/predictions/insights", response_model=PredictionInsights)
def get_prediction_insights(
    location_id: str,
    day_of_week: Optional[int] = Query(None, ge=0, le=6),
    service: PredictionService = Depends(get_service),
):
    day = current_day_of_week() if day_of_week is None else day_of_week
    predictions = _load(service, location_id, day)
    return PredictionInsights(
        location_id=location_id,
        day_of_week=day,
        busy_periods=_schemas(busy_periods(predictions, _min_insight_confidence)),
        quiet_periods=_schemas(quiet_periods(predictions, _min_insight_confidence)),
    )

@app.get("/predictions", response_model=List[DayPredictionResponse])
def get_all_predictions(
    day_of_week: Optional[int] = Query(None, ge=0, le=6),
    service: PredictionService = Depends(get_service),
):
    """Day vectors for every location with recent observations."""
    day = current_day_of_week() if day_of_week is None else day_of_week
    try:
        all_predictions = service.get_all_predictions(day)
    except ObservationFetchError as e:
        raise HTTPException(status_code=502, detail="Failed to get all predictions") from e
    return [
        DayPredictionResponse(location_id=location_id, day_of_week=day, predictions=_schemas(predictions))
        for location_id, predictions in all_predictions.items()
    ]

@app.post("/observations", status_code=201)
def submit_observation(submission: ObservationSubmission, service: PredictionService = Depends(get_service)):
    """Records an occupancy report."""
    try:
        observation = service.record_observation(submission)
    except ObservationStoreError as e:
        raise HTTPException(status_code=502, detail="Failed to store occupancy data") from e
    return {
        "id": observation.id,
        "location_id": observation.location_id,
        "day_of_week": observation.day_of_week,
        "time_interval": observation.time_interval,
    }
