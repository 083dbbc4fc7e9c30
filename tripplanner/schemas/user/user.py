from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal
from datetime import datetime


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=8)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


class LogoutRequest(BaseModel):
    refresh_token: Optional[str] = None
    all_sessions: bool = False


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserOut(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    role: str
    auth_type: str
    preferred_language: str
    is_demo_user: bool
    demo_expiry_date: Optional[datetime] = None
    max_trips: Optional[int] = None

    class Config:
        from_attributes = True


class LanguageUpdate(BaseModel):
    language: Literal["en", "he"]


class UserSearchResult(BaseModel):
    """Search hits expose only id and name, never the email."""
    id: int
    name: Optional[str] = None

    class Config:
        from_attributes = True
