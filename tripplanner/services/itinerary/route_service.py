from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from fastapi import HTTPException, status
from typing import List

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import resolve_trip_access, ensure_can_write
from tripplanner.models.itinerary.route_model import Route, RoutePointOfInterest
from tripplanner.models.user.user import User
from tripplanner.schemas.itinerary.route import PointOfInterestCreate
from tripplanner.services.trips.activity_log_service import record_activity
from tripplanner.services.trips.trip_child_service import TripChildService

route_service = TripChildService(
    Route, "route", "Route",
    order_by=(Route.date, Route.time, Route.id),
    query_options=(selectinload(Route.points),),
)


async def add_point(db: AsyncSession, user: User, route_id: int, data: PointOfInterestCreate) -> RoutePointOfInterest:
    route, access = await route_service.get_with_access(db, user, route_id, write=True)

    point = RoutePointOfInterest(route_id=route.id, **data.model_dump())
    db.add(point)
    record_activity(db, route.trip_id, user.id, "updated", "route", route.id, route.name)
    await db.commit()
    await db.refresh(point)

    logger.info(f"Point of interest {point.id} added to route {route.id}")
    return point


async def delete_point(db: AsyncSession, user: User, point_id: int) -> dict:
    point = await db.get(RoutePointOfInterest, point_id)
    if point is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Point of interest not found")

    route = await db.get(Route, point.route_id)
    ensure_can_write(await resolve_trip_access(db, route.trip_id, user))

    await db.delete(point)
    await db.commit()
    logger.info(f"Point of interest {point_id} deleted by user {user.id}")
    return {"success": True}


async def list_trip_points(db: AsyncSession, trip_id: int) -> List[RoutePointOfInterest]:
    result = await db.execute(
        select(RoutePointOfInterest)
        .join(Route, Route.id == RoutePointOfInterest.route_id)
        .where(Route.trip_id == trip_id)
        .order_by(Route.date, Route.id, RoutePointOfInterest.sort_order, RoutePointOfInterest.id)
    )
    return result.scalars().all()
