from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from tripplanner.schemas.common import TimeStr
from tripplanner.schemas.bookings.base import PricedFields, PricedFieldsUpdate, PricedFieldsOut


class RestaurantFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    cuisine_type: Optional[str] = Field(None, max_length=100)
    reservation_date: Optional[date] = None
    reservation_time: TimeStr = None
    number_of_diners: Optional[int] = Field(None, ge=1)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class RestaurantCreate(RestaurantFields, PricedFields):
    pass


class RestaurantUpdate(PricedFieldsUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    cuisine_type: Optional[str] = Field(None, max_length=100)
    reservation_date: Optional[date] = None
    reservation_time: TimeStr = None
    number_of_diners: Optional[int] = Field(None, ge=1)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class RestaurantResponse(RestaurantFields, PricedFieldsOut):

    class Config:
        from_attributes = True
