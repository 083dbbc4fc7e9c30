"""
Routers for the priced bookings of a trip.

Hotels, transportation, car rentals, restaurants and tourist sites expose the
same four operations, so the routers are built from one template:

    GET    /trips/{trip_id}/<path>    list (readers)
    POST   /trips/{trip_id}/<path>    create (writers)
    PUT    /<path>/{item_id}          partial update (writers)
    DELETE /<path>/{item_id}          delete (writers)
"""
from fastapi import APIRouter, Depends, File, Path, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.user.user import User
from tripplanner.schemas.bookings.car_rental import CarRentalCreate, CarRentalResponse, CarRentalUpdate
from tripplanner.schemas.bookings.hotel import HotelCreate, HotelResponse, HotelUpdate
from tripplanner.schemas.bookings.restaurant import RestaurantCreate, RestaurantResponse, RestaurantUpdate
from tripplanner.schemas.bookings.tourist_site import TouristSiteCreate, TouristSiteResponse, TouristSiteUpdate
from tripplanner.schemas.bookings.transportation import (
    TransportationCreate, TransportationResponse, TransportationUpdate,
)
from tripplanner.services.bookings.booking_services import (
    car_rental_service, hotel_service, restaurant_service, tourist_site_service,
    transportation_service, upload_parking_image,
)
from tripplanner.utils.storage import get_storage


def build_booking_router(path: str, tag: str, service, create_schema, update_schema, response_schema) -> APIRouter:
    router = APIRouter(tags=[tag])

    @router.get(f"/trips/{{trip_id}}/{path}", response_model=List[response_schema])
    async def list_items(
        access: TripAccess = Depends(get_trip_reader),
        db: AsyncSession = Depends(get_db)
    ):
        return await service.list_for_trip(db, access.trip.id)

    @router.post(f"/trips/{{trip_id}}/{path}", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        data: create_schema,
        access: TripAccess = Depends(get_trip_writer),
        db: AsyncSession = Depends(get_db)
    ):
        return await service.create(db, access, data)

    @router.put(f"/{path}/{{item_id}}", response_model=response_schema)
    async def update_item(
        data: update_schema,
        item_id: int = Path(..., gt=0),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
    ):
        return await service.update(db, current_user, item_id, data)

    @router.delete(f"/{path}/{{item_id}}")
    async def delete_item(
        item_id: int = Path(..., gt=0),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
    ):
        return await service.delete(db, current_user, item_id)

    return router


hotels_router = build_booking_router(
    "hotels", "Hotels", hotel_service, HotelCreate, HotelUpdate, HotelResponse
)
transportation_router = build_booking_router(
    "transportation", "Transportation", transportation_service,
    TransportationCreate, TransportationUpdate, TransportationResponse
)
car_rentals_router = build_booking_router(
    "car-rentals", "Car Rentals", car_rental_service, CarRentalCreate, CarRentalUpdate, CarRentalResponse
)
restaurants_router = build_booking_router(
    "restaurants", "Restaurants", restaurant_service, RestaurantCreate, RestaurantUpdate, RestaurantResponse
)
tourist_sites_router = build_booking_router(
    "tourist-sites", "Tourist Sites", tourist_site_service,
    TouristSiteCreate, TouristSiteUpdate, TouristSiteResponse
)


@hotels_router.post("/hotels/{hotel_id}/parking-image", response_model=HotelResponse)
async def upload_hotel_parking_image(
    hotel_id: int = Path(..., gt=0),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage=Depends(get_storage)
):
    return await upload_parking_image(db, current_user, hotel_id, file, storage)
