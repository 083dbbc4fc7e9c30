from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from tripplanner.schemas.common import TimeStr
from tripplanner.schemas.bookings.base import PricedFields, PricedFieldsUpdate, PricedFieldsOut


class HotelFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    check_in_date: date
    check_in_time: TimeStr = None
    check_out_date: date
    check_out_time: TimeStr = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, max_length=50)
    cover_image: Optional[str] = None
    parking_image: Optional[str] = None
    notes: Optional[str] = None


class HotelCreate(HotelFields, PricedFields):
    pass


class HotelUpdate(PricedFieldsUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    check_in_date: Optional[date] = None
    check_in_time: TimeStr = None
    check_out_date: Optional[date] = None
    check_out_time: TimeStr = None
    confirmation_number: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, max_length=50)
    cover_image: Optional[str] = None
    parking_image: Optional[str] = None
    notes: Optional[str] = None


class HotelResponse(HotelFields, PricedFieldsOut):

    class Config:
        from_attributes = True
