from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.dependencies.trip_access import TripAccess
from tripplanner.models.itinerary.day_trip import DayTrip
from tripplanner.models.user.user import User
from tripplanner.schemas.itinerary.day_trip import DayTripCreate, DayTripUpdate
from tripplanner.services.trips.trip_child_service import TripChildService

day_trip_service = TripChildService(
    DayTrip, "day_trip", "Day trip",
    order_by=(DayTrip.start_time.desc(), DayTrip.id.desc()),
)


def _check_order(start, end) -> None:
    if end < start:
        raise HTTPException(status_code=400, detail="end_time must be on or after start_time")


async def create_day_trip(db: AsyncSession, access: TripAccess, data: DayTripCreate) -> DayTrip:
    _check_order(data.start_time, data.end_time)
    return await day_trip_service.create(db, access, data)


async def update_day_trip(db: AsyncSession, user: User, day_trip_id: int, data: DayTripUpdate) -> DayTrip:
    async def check(session, day_trip, changes):
        _check_order(changes.get("start_time", day_trip.start_time), changes.get("end_time", day_trip.end_time))

    return await day_trip_service.update(db, user, day_trip_id, data, before_apply=check)
