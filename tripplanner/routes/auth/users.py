from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.models.user.user import User
from tripplanner.schemas.user.user import UserSearchResult
from tripplanner.services.auth.profile_service import ProfileService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/search", response_model=List[UserSearchResult])
async def search_users(
    term: str = Query(..., min_length=1, max_length=100),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Find people to invite by name. Emails are never returned."""
    return await ProfileService.search_users(term, db)
