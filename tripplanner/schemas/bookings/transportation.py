from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from tripplanner.models.bookings.transportation import TransportType
from tripplanner.schemas.common import TimeStr
from tripplanner.schemas.bookings.base import PricedFields, PricedFieldsUpdate, PricedFieldsOut


class TransportationFields(BaseModel):
    type: TransportType
    flight_number: Optional[str] = Field(None, max_length=50)
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    departure_date: date
    departure_time: TimeStr = None
    arrival_date: Optional[date] = None
    arrival_time: TimeStr = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    website: Optional[str] = Field(None, max_length=500)
    company: Optional[str] = Field(None, max_length=255)
    car_model: Optional[str] = Field(None, max_length=255)
    pickup_location: Optional[str] = None
    return_location: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None


class TransportationCreate(TransportationFields, PricedFields):
    pass


class TransportationUpdate(PricedFieldsUpdate):
    type: Optional[TransportType] = None
    flight_number: Optional[str] = Field(None, max_length=50)
    origin: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    departure_date: Optional[date] = None
    departure_time: TimeStr = None
    arrival_date: Optional[date] = None
    arrival_time: TimeStr = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    website: Optional[str] = Field(None, max_length=500)
    company: Optional[str] = Field(None, max_length=255)
    car_model: Optional[str] = Field(None, max_length=255)
    pickup_location: Optional[str] = None
    return_location: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None


class TransportationResponse(TransportationFields, PricedFieldsOut):

    class Config:
        from_attributes = True
