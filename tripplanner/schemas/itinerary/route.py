from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional, List, Annotated
from datetime import date as date_type, datetime
from tripplanner.schemas.common import TimeStr

Distance = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class PointOfInterestCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    name_he: Optional[str] = None
    description: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    poi_type: str = Field("attraction", max_length=50)
    place_id: Optional[str] = None
    sort_order: int = 0


class PointOfInterestResponse(BaseModel):
    id: int
    route_id: int
    name: str
    name_he: Optional[str] = None
    description: Optional[str] = None
    latitude: float
    longitude: float
    poi_type: str
    place_id: Optional[str] = None
    sort_order: int

    class Config:
        from_attributes = True


class RouteCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    name_he: Optional[str] = None
    description: Optional[str] = None
    description_he: Optional[str] = None
    date: date_type
    time: TimeStr = None
    distance_km: Optional[Distance] = None
    estimated_duration: Optional[int] = Field(None, ge=0)
    road_type: Optional[str] = Field(None, max_length=100)
    map_data: Optional[str] = None


class RouteUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    name_he: Optional[str] = None
    description: Optional[str] = None
    description_he: Optional[str] = None
    date: Optional[date_type] = None
    time: TimeStr = None
    distance_km: Optional[Distance] = None
    estimated_duration: Optional[int] = Field(None, ge=0)
    road_type: Optional[str] = Field(None, max_length=100)
    map_data: Optional[str] = None


class RouteResponse(BaseModel):
    id: int
    trip_id: int
    name: str
    name_he: Optional[str] = None
    description: Optional[str] = None
    description_he: Optional[str] = None
    date: date_type
    time: Optional[str] = None
    distance_km: Optional[float] = None
    estimated_duration: Optional[int] = None
    road_type: Optional[str] = None
    map_data: Optional[str] = None
    points: List[PointOfInterestResponse] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
