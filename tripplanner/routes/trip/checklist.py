from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.core.logger import logger
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.checklist import (
    ChecklistCreate, ChecklistUpdate, ChecklistResponse, ChecklistProgress
)
from tripplanner.services.trips.checklist_service import checklist_service, get_checklist_progress

router = APIRouter(tags=["Trip Checklist"])


@router.post("/trips/{trip_id}/checklist", response_model=ChecklistResponse, status_code=status.HTTP_201_CREATED)
async def create_checklist_task(
    checklist_data: ChecklistCreate,
    access: TripAccess = Depends(get_trip_writer),
    session: AsyncSession = Depends(get_db)
):
    """Create a new checklist item for a trip."""
    return await checklist_service.create(session, access, checklist_data)


@router.get("/trips/{trip_id}/checklist", response_model=List[ChecklistResponse])
async def get_trip_checklist_items(
    access: TripAccess = Depends(get_trip_reader),
    session: AsyncSession = Depends(get_db)
):
    return await checklist_service.list_for_trip(session, access.trip.id)


# Progress Tracking
@router.get("/trips/{trip_id}/checklist/progress", response_model=ChecklistProgress)
async def get_trip_checklist_progress(
    access: TripAccess = Depends(get_trip_reader),
    session: AsyncSession = Depends(get_db)
):
    """Get overall progress statistics for a trip's checklist."""
    try:
        return await get_checklist_progress(session, access.trip.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Checklist progress failed for trip {access.trip.id}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch progress: {str(e)}")


@router.put("/checklist/{item_id}", response_model=ChecklistResponse)
async def update_checklist_task(
    update_data: ChecklistUpdate,
    item_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a checklist item. Toggling ``completed`` goes through here too."""
    return await checklist_service.update(session, current_user, item_id, update_data)


@router.delete("/checklist/{item_id}")
async def delete_checklist_task(
    item_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await checklist_service.delete(session, current_user, item_id)
