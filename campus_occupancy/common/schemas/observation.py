from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

OccupancyLiteral = Literal['low', 'medium', 'high']

class ObservationSubmission(BaseModel):
    """
    Occupancy report submitted by a student.
    Day of week and time interval are derived from observed_at when stored.
    """
    location_id: str = Field(..., min_length=1, description="Identifier of the observed location")
    location_name: Optional[str] = Field(None, description="Display name of the location")
    occupancy_level: OccupancyLiteral = Field(..., description="Reported crowdedness")
    wait_time: Optional[float] = Field(None, ge=0, description="Wait time in minutes")
    user_id: Optional[str] = Field(None, description="Reporter identifier")
    observed_at: Optional[datetime] = Field(None, description="Capture time, defaults to now")

    @field_validator('observed_at')
    def to_local_naive(cls, v):
        # Intervals are computed on local wall-clock time
        if v is not None and v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

class TimeSlotPredictionSchema(BaseModel):
    """
    One half-hour cell of a day vector.
    """
    time_interval: int = Field(..., ge=0, le=47, description="Half-hour bucket index")
    time_slot: str = Field(..., description="Label such as 12:00-12:30")
    predicted_occupancy: OccupancyLiteral = Field(..., description="Predicted crowdedness")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Heuristic confidence (0.0 - 1.0)")
    color: str = Field(..., description="RGBA rendering hint")

class DayPredictionResponse(BaseModel):
    """
    Full day vector for one location.
    """
    location_id: str = Field(..., description="Identifier of the location")
    day_of_week: int = Field(..., ge=0, le=6, description="Day of the week (0=Sunday, 6=Saturday)")
    predictions: List[TimeSlotPredictionSchema] = Field(..., min_length=48, max_length=48)

class PredictionInsights(BaseModel):
    """
    Notable periods of a day vector.
    """
    location_id: str
    day_of_week: int = Field(..., ge=0, le=6)
    busy_periods: List[TimeSlotPredictionSchema] = Field(default_factory=list)
    quiet_periods: List[TimeSlotPredictionSchema] = Field(default_factory=list)
