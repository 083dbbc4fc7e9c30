from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader
from tripplanner.schemas.trip.activity_log import ActivityLogResponse
from tripplanner.services.trips.activity_log_service import get_trip_activity

router = APIRouter(prefix="/trips", tags=["Activity Log"])


@router.get("/{trip_id}/activity", response_model=List[ActivityLogResponse])
async def list_trip_activity(
    limit: int = Query(50, ge=1, le=500),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    """Who changed what in this trip, newest first."""
    return await get_trip_activity(db, access.trip.id, limit)
