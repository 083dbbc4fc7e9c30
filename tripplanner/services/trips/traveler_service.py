import re
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.dependencies.trip_access import TripAccess
from tripplanner.models.trips.traveler import Traveler
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.traveler import TravelerCreate, TravelerUpdate
from tripplanner.services.trips.trip_child_service import TripChildService

IDENTIFIER_RE = re.compile(r"^[a-z0-9_]+$")

traveler_service = TripChildService(
    Traveler, "traveler", "Traveler",
    order_by=(Traveler.sort_order, Traveler.id),
)


async def _check_identifier(db: AsyncSession, trip_id: int, identifier: str, exclude_id: int = None) -> None:
    if not IDENTIFIER_RE.match(identifier):
        raise HTTPException(
            status_code=400,
            detail="Identifier may only contain lowercase letters, digits and underscores"
        )
    query = select(Traveler.id).where(Traveler.trip_id == trip_id, Traveler.identifier == identifier)
    if exclude_id is not None:
        query = query.where(Traveler.id != exclude_id)
    if await db.scalar(query):
        raise HTTPException(status_code=400, detail=f"Identifier '{identifier}' is already used in this trip")


async def create_traveler(db: AsyncSession, access: TripAccess, data: TravelerCreate) -> Traveler:
    await _check_identifier(db, access.trip.id, data.identifier)
    return await traveler_service.create(db, access, data)


async def update_traveler(db: AsyncSession, user: User, traveler_id: int, data: TravelerUpdate) -> Traveler:
    async def check(session, traveler, changes):
        if "identifier" in changes:
            await _check_identifier(session, traveler.trip_id, changes["identifier"], exclude_id=traveler.id)

    return await traveler_service.update(db, user, traveler_id, data, before_apply=check)
