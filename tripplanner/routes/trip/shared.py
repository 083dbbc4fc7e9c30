"""Read-only public views of a trip, addressed by its share token."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.schemas.bookings.car_rental import CarRentalResponse
from tripplanner.schemas.bookings.hotel import HotelResponse
from tripplanner.schemas.bookings.restaurant import RestaurantResponse
from tripplanner.schemas.bookings.tourist_site import TouristSiteResponse
from tripplanner.schemas.bookings.transportation import TransportationResponse
from tripplanner.schemas.trip.trip_schema import SharedTripResponse
from tripplanner.services.bookings.booking_services import (
    car_rental_service, hotel_service, restaurant_service, tourist_site_service, transportation_service,
)
from tripplanner.services.trips.trip_service import TripService

router = APIRouter(prefix="/shared", tags=["Shared Trips"])

trip_service = TripService()


@router.get("/{token}", response_model=SharedTripResponse)
async def get_shared_trip(token: str, db: AsyncSession = Depends(get_db)):
    trip = await trip_service.get_trip_by_share_token(db, token)
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shared trip not found")
    return trip


def _add_list_route(path: str, service, response_model):
    async def list_shared(token: str, db: AsyncSession = Depends(get_db)):
        trip = await trip_service.get_trip_by_share_token(db, token)
        if trip is None:
            return []
        return await service.list_for_trip(db, trip.id)

    list_shared.__name__ = f"list_shared_{service.entity_type}"
    router.add_api_route(f"/{{token}}/{path}", list_shared, methods=["GET"], response_model=List[response_model])


_add_list_route("hotels", hotel_service, HotelResponse)
_add_list_route("transportation", transportation_service, TransportationResponse)
_add_list_route("car-rentals", car_rental_service, CarRentalResponse)
_add_list_route("restaurants", restaurant_service, RestaurantResponse)
_add_list_route("tourist-sites", tourist_site_service, TouristSiteResponse)
