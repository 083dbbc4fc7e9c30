from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class TravelerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    identifier: str = Field(..., min_length=1, max_length=50)
    sort_order: int = 0


class TravelerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    identifier: Optional[str] = Field(None, min_length=1, max_length=50)
    sort_order: Optional[int] = None


class TravelerResponse(BaseModel):
    id: int
    trip_id: int
    name: str
    identifier: str
    sort_order: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
