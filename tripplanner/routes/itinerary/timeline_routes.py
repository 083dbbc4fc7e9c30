from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from tripplanner.core.database import get_db
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader
from tripplanner.schemas.itinerary.timeline import DailyViewResponse, TimelineResponse
from tripplanner.services.itinerary.timeline_service import get_daily_view, get_timeline, resolve_language

router = APIRouter(prefix="/trips", tags=["Itinerary Views"])


@router.get("/{trip_id}/timeline", response_model=TimelineResponse)
async def trip_timeline(
    lang: Optional[str] = Query(None, description="en or he; defaults to the user's language"),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await get_timeline(db, access.trip, resolve_language(lang, access.user))


@router.get("/{trip_id}/days/{day}", response_model=DailyViewResponse)
async def trip_day(
    day: date,
    lang: Optional[str] = Query(None),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await get_daily_view(db, access.trip, day, resolve_language(lang, access.user))
