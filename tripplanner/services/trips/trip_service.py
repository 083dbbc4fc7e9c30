import secrets
import string
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import TripAccess, ensure_owner, ensure_can_write
from tripplanner.models import (
    ActivityLog, CarRental, ChecklistItem, DayTrip, Document, Hotel, Payment,
    Restaurant, Route, RoutePointOfInterest, TouristSite, Transportation,
    Traveler, Trip, TripCollaborator, User,
)
from tripplanner.schemas.trip.trip_schema import TripCreate, TripUpdate
from tripplanner.services.demo.demo_service import is_demo_expired
from tripplanner.utils.storage import ALLOWED_IMAGE_TYPES, StorageError, random_suffix, read_upload
from tripplanner.utils.time_format import utc_now

SHARE_TOKEN_LENGTH = 16
_SHARE_ALPHABET = string.ascii_letters + string.digits

# Deleted before the trip row itself, children first
TRIP_CHILD_MODELS = (
    ActivityLog, Payment, Hotel, Transportation, CarRental, Restaurant,
    TouristSite, Document, ChecklistItem, Traveler, DayTrip, TripCollaborator,
)


def generate_share_token(length: int = SHARE_TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(_SHARE_ALPHABET) for _ in range(length))


class TripService:

    async def list_user_trips(self, db: AsyncSession, user: User) -> List[Trip]:
        """Trips the user owns plus trips shared with them, newest start date first."""
        collaborated = select(TripCollaborator.trip_id).where(TripCollaborator.user_id == user.id)
        result = await db.execute(
            select(Trip)
            .where((Trip.user_id == user.id) | (Trip.id.in_(collaborated)))
            .order_by(Trip.start_date.desc(), Trip.id.desc())
        )
        trips = result.scalars().unique().all()
        logger.info(f"Retrieved {len(trips)} trips for user {user.id}")
        return trips

    async def record_visit(self, db: AsyncSession, access: TripAccess) -> None:
        """Collaborators opening a trip update their last_seen and visit count."""
        if access.collaborator is None:
            return
        access.collaborator.last_seen = utc_now()
        access.collaborator.visit_count = (access.collaborator.visit_count or 0) + 1
        await db.commit()
        await db.refresh(access.trip)

    async def _check_trip_quota(self, db: AsyncSession, user: User) -> None:
        if not user.is_demo_user:
            return
        if is_demo_expired(user):
            raise HTTPException(status_code=400, detail="Demo period has expired")
        if user.max_trips is None:
            return
        trip_count = await db.scalar(select(func.count(Trip.id)).where(Trip.user_id == user.id))
        if trip_count >= user.max_trips:
            logger.warning(f"Demo user {user.id} reached trip limit ({user.max_trips})")
            raise HTTPException(
                status_code=400,
                detail=f"Demo users can create only {user.max_trips - 1} additional trip"
            )

    async def create_trip(self, db: AsyncSession, trip_data: TripCreate, user: User) -> Trip:
        await self._check_trip_quota(db, user)

        new_trip = Trip(**trip_data.model_dump(), user_id=user.id)
        db.add(new_trip)
        await db.commit()
        await db.refresh(new_trip)

        logger.info(f"Trip {new_trip.id} created by user {user.id}")
        return new_trip

    async def update_trip(self, db: AsyncSession, access: TripAccess, trip_data: TripUpdate) -> Trip:
        ensure_can_write(access)
        trip = access.trip

        update_data = {k: v for k, v in trip_data.model_dump(exclude_unset=True).items()
                       if v is not None or k in ("description", "cover_image")}
        start = update_data.get("start_date", trip.start_date)
        end = update_data.get("end_date", trip.end_date)
        if end < start:
            raise HTTPException(status_code=400, detail="end_date must be on or after start_date")

        for key, value in update_data.items():
            setattr(trip, key, value)

        await db.commit()
        await db.refresh(trip)

        logger.info(f"Trip {trip.id} updated by user {access.user.id}")
        return trip

    async def delete_trip(self, db: AsyncSession, access: TripAccess) -> dict:
        ensure_owner(access)
        trip_id = access.trip.id

        route_ids = select(Route.id).where(Route.trip_id == trip_id)
        await db.execute(delete(RoutePointOfInterest).where(RoutePointOfInterest.route_id.in_(route_ids)))
        await db.execute(delete(Route).where(Route.trip_id == trip_id))
        for model in TRIP_CHILD_MODELS:
            await db.execute(delete(model).where(model.trip_id == trip_id))

        await db.execute(delete(Trip).where(Trip.id == trip_id))
        await db.commit()

        logger.info(f"Trip {trip_id} deleted by user {access.user.id}")
        return {"success": True}

    async def generate_share_link(self, db: AsyncSession, access: TripAccess) -> str:
        ensure_owner(access)
        access.trip.share_token = generate_share_token()
        await db.commit()
        logger.info(f"Share link generated for trip {access.trip.id}")
        return access.trip.share_token

    async def revoke_share_link(self, db: AsyncSession, access: TripAccess) -> dict:
        ensure_owner(access)
        access.trip.share_token = None
        await db.commit()
        logger.info(f"Share link revoked for trip {access.trip.id}")
        return {"success": True}

    async def get_trip_by_share_token(self, db: AsyncSession, token: str) -> Optional[Trip]:
        if not token:
            return None
        return await db.scalar(select(Trip).where(Trip.share_token == token))

    async def upload_cover_image(self, db: AsyncSession, access: TripAccess, file: UploadFile, storage) -> Trip:
        ensure_can_write(access)
        data, content_type = await read_upload(file, ALLOWED_IMAGE_TYPES)
        extension = content_type.split("/")[-1].replace("jpeg", "jpg")
        key = f"trip-covers/{access.user.id}/{access.trip.id}-{random_suffix()}.{extension}"

        try:
            url = await storage.put(key, data, content_type)
        except StorageError as e:
            logger.error(f"Cover upload failed for trip {access.trip.id}: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to store image")

        access.trip.cover_image = url
        await db.commit()
        await db.refresh(access.trip)
        return access.trip
