from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.traveler import TravelerCreate, TravelerUpdate, TravelerResponse
from tripplanner.services.trips.traveler_service import create_traveler, traveler_service, update_traveler

router = APIRouter(tags=["Travelers"])


@router.get("/trips/{trip_id}/travelers", response_model=List[TravelerResponse])
async def list_travelers(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await traveler_service.list_for_trip(db, access.trip.id)


@router.post("/trips/{trip_id}/travelers", response_model=TravelerResponse, status_code=status.HTTP_201_CREATED)
async def add_traveler(
    data: TravelerCreate,
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db)
):
    return await create_traveler(db, access, data)


@router.put("/travelers/{traveler_id}", response_model=TravelerResponse)
async def edit_traveler(
    data: TravelerUpdate,
    traveler_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await update_traveler(db, current_user, traveler_id, data)


@router.delete("/travelers/{traveler_id}")
async def delete_traveler(
    traveler_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await traveler_service.delete(db, current_user, traveler_id)
