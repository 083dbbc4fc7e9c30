from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class DemoInitResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user_id: int
    trip_id: int
    demo_expiry_date: datetime


class DemoStatus(BaseModel):
    is_demo_user: bool
    expired: bool
    days_remaining: Optional[int] = None
    max_trips: Optional[int] = None
    trip_count: int
