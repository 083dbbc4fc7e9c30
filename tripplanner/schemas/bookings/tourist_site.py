from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from tripplanner.schemas.common import TimeStr
from tripplanner.schemas.bookings.base import PricedFields, PricedFieldsUpdate, PricedFieldsOut


class TouristSiteFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    description: Optional[str] = None
    opening_hours: Optional[str] = None
    planned_visit_date: Optional[date] = None
    planned_visit_time: TimeStr = None
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class TouristSiteCreate(TouristSiteFields, PricedFields):
    pass


class TouristSiteUpdate(PricedFieldsUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    description: Optional[str] = None
    opening_hours: Optional[str] = None
    planned_visit_date: Optional[date] = None
    planned_visit_time: TimeStr = None
    website: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class TouristSiteResponse(TouristSiteFields, PricedFieldsOut):

    class Config:
        from_attributes = True
