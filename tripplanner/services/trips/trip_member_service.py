from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from fastapi import HTTPException, status
from typing import List

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import TripAccess, ensure_owner
from tripplanner.models.trips.collaborator import TripCollaborator, CollaboratorPermission
from tripplanner.models.trips.trip_model import Trip
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.collaborator import CollaboratorAdd


async def get_collaborator(db: AsyncSession, trip_id: int, user_id: int):
    return await db.scalar(
        select(TripCollaborator).where(
            TripCollaborator.trip_id == trip_id,
            TripCollaborator.user_id == user_id,
        )
    )


async def _load(db: AsyncSession, collaborator_id: int) -> TripCollaborator:
    return await db.scalar(
        select(TripCollaborator)
        .options(selectinload(TripCollaborator.user))
        .where(TripCollaborator.id == collaborator_id)
        .execution_options(populate_existing=True)
    )


async def list_collaborators(db: AsyncSession, trip_id: int) -> List[TripCollaborator]:
    result = await db.execute(
        select(TripCollaborator)
        .options(selectinload(TripCollaborator.user))
        .where(TripCollaborator.trip_id == trip_id)
        .order_by(TripCollaborator.created_at.desc(), TripCollaborator.id.desc())
    )
    return result.scalars().all()


async def add_collaborator(db: AsyncSession, access: TripAccess, data: CollaboratorAdd) -> TripCollaborator:
    ensure_owner(access)

    if data.user_id is not None:
        user = await db.get(User, data.user_id)
    else:
        user = await db.scalar(select(User).where(User.email == data.user_email))
    if user is None:
        raise HTTPException(status_code=400, detail="User not found. They need to sign in at least once.")

    if user.id == access.trip.user_id:
        raise HTTPException(status_code=400, detail="The trip owner cannot be added as a collaborator")

    if await get_collaborator(db, access.trip.id, user.id):
        raise HTTPException(status_code=400, detail="User is already a collaborator on this trip")

    collaborator = TripCollaborator(
        trip_id=access.trip.id,
        user_id=user.id,
        permission=data.permission,
        invited_by=access.user.id,
    )
    db.add(collaborator)
    await db.commit()

    logger.info(f"User {user.id} added to trip {access.trip.id} as {data.permission.value}")
    return await _load(db, collaborator.id)


async def _get_in_trip(db: AsyncSession, trip_id: int, collaborator_id: int) -> TripCollaborator:
    collaborator = await db.get(TripCollaborator, collaborator_id)
    if collaborator is None or collaborator.trip_id != trip_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Collaborator not found")
    return collaborator


async def update_permission(
    db: AsyncSession, access: TripAccess, collaborator_id: int, permission: CollaboratorPermission
) -> TripCollaborator:
    ensure_owner(access)
    collaborator = await _get_in_trip(db, access.trip.id, collaborator_id)
    collaborator.permission = permission
    await db.commit()
    logger.info(f"Collaborator {collaborator_id} on trip {access.trip.id} set to {permission.value}")
    return await _load(db, collaborator.id)


async def remove_collaborator(db: AsyncSession, access: TripAccess, collaborator_id: int) -> dict:
    """The owner may remove anyone; a collaborator may only remove themselves."""
    collaborator = await _get_in_trip(db, access.trip.id, collaborator_id)
    if not access.is_owner and collaborator.user_id != access.user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the trip owner can remove other collaborators"
        )
    await db.delete(collaborator)
    await db.commit()
    logger.info(f"Collaborator {collaborator_id} removed from trip {access.trip.id}")
    return {"success": True}


async def join_by_share_token(db: AsyncSession, user: User, token: str) -> dict:
    trip = await db.scalar(select(Trip).where(Trip.share_token == token)) if token else None
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid or expired invite link")

    if trip.user_id == user.id:
        return {"trip_id": trip.id, "permission": "owner", "already_member": True}

    existing = await get_collaborator(db, trip.id, user.id)
    if existing:
        return {
            "trip_id": trip.id,
            "permission": CollaboratorPermission(existing.permission).value,
            "already_member": True,
        }

    db.add(TripCollaborator(
        trip_id=trip.id,
        user_id=user.id,
        permission=CollaboratorPermission.view_only,
        invited_by=trip.user_id,
    ))
    await db.commit()
    logger.info(f"User {user.id} joined trip {trip.id} through invite link")
    return {"trip_id": trip.id, "permission": CollaboratorPermission.view_only.value, "already_member": False}
