from pydantic import BaseModel, EmailStr, model_validator
from typing import Optional
from datetime import datetime
from tripplanner.models.trips.collaborator import CollaboratorPermission
from tripplanner.schemas.common import UserBrief


class CollaboratorAdd(BaseModel):
    user_email: Optional[EmailStr] = None
    user_id: Optional[int] = None
    permission: CollaboratorPermission = CollaboratorPermission.can_edit

    @model_validator(mode="after")
    def check_target(self):
        if self.user_email is None and self.user_id is None:
            raise ValueError("Either user_email or user_id is required")
        return self


class PermissionUpdate(BaseModel):
    permission: CollaboratorPermission


class JoinTripRequest(BaseModel):
    share_token: str


class CollaboratorResponse(BaseModel):
    id: int
    trip_id: int
    user_id: int
    permission: CollaboratorPermission
    invited_by: int
    created_at: Optional[datetime] = None
    last_seen: Optional[datetime] = None
    visit_count: int = 0
    user: Optional[UserBrief] = None

    class Config:
        from_attributes = True


class JoinTripResponse(BaseModel):
    trip_id: int
    permission: str
    already_member: bool
