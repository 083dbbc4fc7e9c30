from fastapi import HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.core.logger import logger
from tripplanner.models.bookings.car_rental import CarRental
from tripplanner.models.bookings.hotel import Hotel
from tripplanner.models.bookings.restaurant import Restaurant
from tripplanner.models.bookings.tourist_site import TouristSite
from tripplanner.models.bookings.transportation import Transportation
from tripplanner.models.payments.payment import ActivityType
from tripplanner.models.user.user import User
from tripplanner.services.trips.trip_child_service import TripChildService
from tripplanner.utils.storage import ALLOWED_IMAGE_TYPES, StorageError, random_suffix, read_upload


def _transport_name(item: Transportation) -> str:
    return f"{item.origin} → {item.destination}"


hotel_service = TripChildService(
    Hotel, "hotel", "Hotel",
    order_by=(Hotel.check_in_date, Hotel.check_in_time, Hotel.id),
    payment_activity=ActivityType.hotel,
)

transportation_service = TripChildService(
    Transportation, "transportation", "Transportation",
    order_by=(Transportation.departure_date, Transportation.departure_time, Transportation.id),
    name_attr=_transport_name,
    payment_activity=ActivityType.transportation,
)

car_rental_service = TripChildService(
    CarRental, "car_rental", "Car rental",
    order_by=(CarRental.pickup_date, CarRental.pickup_time, CarRental.id),
    name_attr="company",
    payment_activity=ActivityType.car_rental,
)

# Undated rows go last
restaurant_service = TripChildService(
    Restaurant, "restaurant", "Restaurant",
    order_by=(
        Restaurant.reservation_date.is_(None),
        Restaurant.reservation_date,
        Restaurant.reservation_time,
        Restaurant.id,
    ),
    payment_activity=ActivityType.restaurant,
)

tourist_site_service = TripChildService(
    TouristSite, "tourist_site", "Tourist site",
    order_by=(
        TouristSite.planned_visit_date.is_(None),
        TouristSite.planned_visit_date,
        TouristSite.planned_visit_time,
        TouristSite.id,
    ),
    payment_activity=ActivityType.tourist_site,
)

# Keyed by payment activity type
PRICED_SERVICES = {
    ActivityType.hotel: hotel_service,
    ActivityType.transportation: transportation_service,
    ActivityType.car_rental: car_rental_service,
    ActivityType.restaurant: restaurant_service,
    ActivityType.tourist_site: tourist_site_service,
}


async def upload_parking_image(db: AsyncSession, user: User, hotel_id: int, file: UploadFile, storage) -> Hotel:
    hotel, access = await hotel_service.get_with_access(db, user, hotel_id, write=True)
    data, content_type = await read_upload(file, ALLOWED_IMAGE_TYPES)
    extension = content_type.split("/")[-1].replace("jpeg", "jpg")
    key = f"hotel-parking/{user.id}/{hotel.id}-{random_suffix()}.{extension}"
    try:
        hotel.parking_image = await storage.put(key, data, content_type)
    except StorageError as e:
        logger.error(f"Parking image upload failed for hotel {hotel.id}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to store image")
    await db.commit()
    await db.refresh(hotel)
    return hotel
