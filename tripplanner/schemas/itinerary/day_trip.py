from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from tripplanner.schemas.common import UtcDateTime


class DayTripCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_location: str = Field(..., min_length=1)
    end_location: str = Field(..., min_length=1)
    start_time: UtcDateTime
    end_time: UtcDateTime
    stops: List[str] = []
    notes: Optional[str] = None


class DayTripUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_location: Optional[str] = Field(None, min_length=1)
    end_location: Optional[str] = Field(None, min_length=1)
    start_time: Optional[UtcDateTime] = None
    end_time: Optional[UtcDateTime] = None
    stops: Optional[List[str]] = None
    notes: Optional[str] = None


class DayTripResponse(BaseModel):
    id: int
    trip_id: int
    name: str
    description: Optional[str] = None
    start_location: str
    end_location: str
    start_time: UtcDateTime
    end_time: UtcDateTime
    stops: List[str] = []
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
