"""Trip access resolution shared by every trip-scoped endpoint.

The owner has full control. A ``can_edit`` collaborator may read and write
the trip's records but cannot delete the trip, manage collaborators or
share links. A ``view_only`` collaborator may only read. Everyone else gets
the same 404 as for a trip that does not exist.
"""
from dataclasses import dataclass
from fastapi import Depends, HTTPException, Path, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from tripplanner.core.database import get_db
from tripplanner.core.logger import logger
from tripplanner.dependencies.auth import get_current_user
from tripplanner.models.trips.collaborator import TripCollaborator, CollaboratorPermission
from tripplanner.models.trips.trip_model import Trip
from tripplanner.models.user.user import User

TRIP_NOT_FOUND = "Trip not found or access denied"

OWNER = "owner"


@dataclass
class TripAccess:
    trip: Trip
    user: User
    role: str  # "owner", "can_edit" or "view_only"
    collaborator: TripCollaborator = None

    @property
    def is_owner(self) -> bool:
        return self.role == OWNER

    @property
    def can_write(self) -> bool:
        return self.role in (OWNER, CollaboratorPermission.can_edit.value)


async def resolve_trip_access(db: AsyncSession, trip_id: int, user: User) -> TripAccess:
    trip = await db.get(Trip, trip_id)
    if trip is None:
        logger.warning(f"Trip {trip_id} not found (user {user.id})")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TRIP_NOT_FOUND)

    if trip.user_id == user.id:
        return TripAccess(trip=trip, user=user, role=OWNER)

    collaborator = await db.scalar(
        select(TripCollaborator).where(
            TripCollaborator.trip_id == trip_id,
            TripCollaborator.user_id == user.id,
        )
    )
    if collaborator is None:
        logger.warning(f"Access denied to trip {trip_id} for user {user.id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TRIP_NOT_FOUND)

    return TripAccess(
        trip=trip,
        user=user,
        role=CollaboratorPermission(collaborator.permission).value,
        collaborator=collaborator,
    )


def ensure_can_write(access: TripAccess) -> TripAccess:
    if not access.can_write:
        logger.warning(f"View-only user {access.user.id} tried to modify trip {access.trip.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You have view-only access to this trip"
        )
    return access


def ensure_owner(access: TripAccess) -> TripAccess:
    if not access.is_owner:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the trip owner can perform this action"
        )
    return access


async def get_trip_reader(
    trip_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TripAccess:
    return await resolve_trip_access(db, trip_id, current_user)


async def get_trip_writer(access: TripAccess = Depends(get_trip_reader)) -> TripAccess:
    return ensure_can_write(access)


async def get_trip_owner(access: TripAccess = Depends(get_trip_reader)) -> TripAccess:
    return ensure_owner(access)
