from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.user.user import User
from tripplanner.schemas.itinerary.route import (
    PointOfInterestCreate, PointOfInterestResponse, RouteCreate, RouteResponse, RouteUpdate,
)
from tripplanner.services.itinerary import route_service as routes

router = APIRouter(tags=["Routes"])


@router.get("/trips/{trip_id}/routes", response_model=List[RouteResponse])
async def list_routes(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await routes.route_service.list_for_trip(db, access.trip.id)


@router.post("/trips/{trip_id}/routes", response_model=RouteResponse, status_code=status.HTTP_201_CREATED)
async def create_route(
    data: RouteCreate,
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db)
):
    return await routes.route_service.create(db, access, data)


@router.put("/routes/{route_id}", response_model=RouteResponse)
async def update_route(
    data: RouteUpdate,
    route_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await routes.route_service.update(db, current_user, route_id, data)


@router.delete("/routes/{route_id}")
async def delete_route(
    route_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await routes.route_service.delete(db, current_user, route_id)


@router.post("/routes/{route_id}/points", response_model=PointOfInterestResponse, status_code=status.HTTP_201_CREATED)
async def add_point_of_interest(
    data: PointOfInterestCreate,
    route_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await routes.add_point(db, current_user, route_id, data)


@router.delete("/route-points/{point_id}")
async def delete_point_of_interest(
    point_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await routes.delete_point(db, current_user, point_id)


@router.get("/trips/{trip_id}/points-of-interest", response_model=List[PointOfInterestResponse])
async def list_points_of_interest(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await routes.list_trip_points(db, access.trip.id)
