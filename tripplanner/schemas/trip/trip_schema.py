from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import date, datetime


class TripBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    destination: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    description: Optional[str] = None
    cover_image: Optional[str] = None


class TripCreate(TripBase):

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class TripUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    destination: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None


class TripResponse(TripBase):
    id: int
    user_id: int
    share_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TripDetailResponse(TripResponse):
    # "owner", "can_edit" or "view_only" for the caller
    access: str


class SharedTripResponse(TripBase):
    """Public view of a shared trip; owner and token are left out."""
    id: int

    class Config:
        from_attributes = True


class ShareLinkResponse(BaseModel):
    share_token: str
