from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from tripplanner.schemas.common import UserBrief


class ActivityLogResponse(BaseModel):
    id: int
    trip_id: int
    user_id: int
    action: str
    entity_type: str
    entity_id: Optional[int] = None
    entity_name: Optional[str] = None
    created_at: datetime
    user: Optional[UserBrief] = None

    class Config:
        from_attributes = True
