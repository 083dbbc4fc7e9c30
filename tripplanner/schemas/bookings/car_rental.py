from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from tripplanner.schemas.common import TimeStr
from tripplanner.schemas.bookings.base import PricedFields, PricedFieldsUpdate, PricedFieldsOut


class CarRentalFields(BaseModel):
    company: str = Field(..., min_length=1, max_length=255)
    car_model: Optional[str] = Field(None, max_length=255)
    pickup_date: date
    pickup_time: TimeStr = None
    return_date: date
    return_time: TimeStr = None
    pickup_location: Optional[str] = None
    return_location: Optional[str] = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class CarRentalCreate(CarRentalFields, PricedFields):
    pass


class CarRentalUpdate(PricedFieldsUpdate):
    company: Optional[str] = Field(None, min_length=1, max_length=255)
    car_model: Optional[str] = Field(None, max_length=255)
    pickup_date: Optional[date] = None
    pickup_time: TimeStr = None
    return_date: Optional[date] = None
    return_time: TimeStr = None
    pickup_location: Optional[str] = None
    return_location: Optional[str] = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class CarRentalResponse(CarRentalFields, PricedFieldsOut):

    class Config:
        from_attributes = True
