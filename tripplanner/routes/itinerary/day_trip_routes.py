from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.user.user import User
from tripplanner.schemas.itinerary.day_trip import DayTripCreate, DayTripResponse, DayTripUpdate
from tripplanner.services.itinerary.day_trip_service import create_day_trip, day_trip_service, update_day_trip

router = APIRouter(tags=["Day Trips"])


@router.get("/trips/{trip_id}/day-trips", response_model=List[DayTripResponse])
async def list_day_trips(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await day_trip_service.list_for_trip(db, access.trip.id)


@router.post("/trips/{trip_id}/day-trips", response_model=DayTripResponse, status_code=status.HTTP_201_CREATED)
async def add_day_trip(
    data: DayTripCreate,
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db)
):
    return await create_day_trip(db, access, data)


@router.put("/day-trips/{day_trip_id}", response_model=DayTripResponse)
async def edit_day_trip(
    data: DayTripUpdate,
    day_trip_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await update_day_trip(db, current_user, day_trip_id, data)


@router.delete("/day-trips/{day_trip_id}")
async def delete_day_trip(
    day_trip_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await day_trip_service.delete(db, current_user, day_trip_id)
