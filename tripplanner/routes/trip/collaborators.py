from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.collaborator import (
    CollaboratorAdd, CollaboratorResponse, JoinTripRequest, JoinTripResponse, PermissionUpdate,
)
from tripplanner.services.trips import trip_member_service

router = APIRouter(prefix="/trips", tags=["Trip Collaborators"])


@router.get("/{trip_id}/collaborators", response_model=List[CollaboratorResponse])
async def list_collaborators(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await trip_member_service.list_collaborators(db, access.trip.id)


@router.post("/{trip_id}/collaborators", response_model=CollaboratorResponse, status_code=status.HTTP_201_CREATED)
async def add_collaborator(
    data: CollaboratorAdd,
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await trip_member_service.add_collaborator(db, access, data)


@router.put("/{trip_id}/collaborators/{collaborator_id}", response_model=CollaboratorResponse)
async def update_collaborator_permission(
    data: PermissionUpdate,
    collaborator_id: int = Path(..., gt=0),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await trip_member_service.update_permission(db, access, collaborator_id, data.permission)


@router.delete("/{trip_id}/collaborators/{collaborator_id}")
async def remove_collaborator(
    collaborator_id: int = Path(..., gt=0),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await trip_member_service.remove_collaborator(db, access, collaborator_id)


@router.post("/join", response_model=JoinTripResponse)
async def join_trip(
    data: JoinTripRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Join a trip as a view-only collaborator using its share token."""
    return await trip_member_service.join_by_share_token(db, current_user, data.share_token)
