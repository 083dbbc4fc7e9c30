"""
Timeline and daily views.

Both views are built from the same flat event list: every dated record of a
trip becomes one or two events (a hotel has a check-in and a check-out, a car
rental a pickup and a return). Events are ordered by date plus ``HH:MM``
time; an event without a time sorts at the start of its day.
"""
from datetime import date
from itertools import groupby
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.models import (
    CarRental, Document, Hotel, Restaurant, Route, TouristSite, Transportation, Trip,
)
from tripplanner.schemas.itinerary.timeline import (
    DailyViewResponse, LinkedDocument, TimelineDay, TimelineEvent, TimelineResponse,
)
from tripplanner.utils.i18n import SUPPORTED_LANGUAGES, t
from tripplanner.utils.time_format import (
    DAY_COLORS, combine_date_time, day_color_index, day_number, format_time_24,
)


async def _rows(db: AsyncSession, model, trip_id: int) -> list:
    result = await db.execute(select(model).where(model.trip_id == trip_id).order_by(model.id))
    return result.scalars().all()


def _price(row) -> Optional[float]:
    return float(row.price) if getattr(row, "price", None) is not None else None


def _event(prefix: str, event_type: str, row, day: date, clock: Optional[str], title: str,
           subtitle: Optional[str], documents: Dict[int, Document]) -> TimelineEvent:
    linked = documents.get(getattr(row, "linked_document_id", None))
    return TimelineEvent(
        id=f"{prefix}-{row.id}",
        type=event_type,
        entity_id=row.id,
        date=day,
        time=format_time_24(clock) or None,
        title=title,
        subtitle=subtitle or None,
        price=_price(row),
        currency=getattr(row, "currency", None),
        linked_document=LinkedDocument(id=linked.id, name=linked.name, file_url=linked.file_url) if linked else None,
    )


def build_events(
    language: str,
    sites: list = (),
    hotels: list = (),
    transports: list = (),
    car_rentals: list = (),
    restaurants: list = (),
    routes: list = (),
    documents: Optional[Dict[int, Document]] = None,
) -> List[TimelineEvent]:
    """Merge the trip's records into one list of events sorted by date and time."""
    documents = documents or {}
    events = []

    for site in sites:
        if site.planned_visit_date:
            events.append(_event("site", "site", site, site.planned_visit_date, site.planned_visit_time,
                                 site.name, site.address, documents))

    for hotel in hotels:
        events.append(_event("hotel-in", "hotel_checkin", hotel, hotel.check_in_date, hotel.check_in_time,
                             f"{t('check_in', language)}: {hotel.name}", hotel.address, documents))
        events.append(_event("hotel-out", "hotel_checkout", hotel, hotel.check_out_date, hotel.check_out_time,
                             f"{t('check_out', language)}: {hotel.name}", hotel.address, documents))

    for transport in transports:
        transport_type = getattr(transport.type, "value", transport.type)
        subtitle = f"#{transport.confirmation_number}" if transport.confirmation_number else None
        events.append(_event("transport", "transport", transport, transport.departure_date,
                             transport.departure_time,
                             f"{t(transport_type, language)}: {transport.origin} → {transport.destination}",
                             subtitle, documents))

    for rental in car_rentals:
        events.append(_event("car-pickup", "car_pickup", rental, rental.pickup_date, rental.pickup_time,
                             f"{t('car_pickup', language)}: {rental.company}", rental.pickup_location, documents))
        events.append(_event("car-return", "car_return", rental, rental.return_date, rental.return_time,
                             f"{t('car_return', language)}: {rental.company}", rental.return_location, documents))

    for restaurant in restaurants:
        if restaurant.reservation_date:
            events.append(_event("restaurant", "restaurant", restaurant, restaurant.reservation_date,
                                 restaurant.reservation_time, restaurant.name, restaurant.cuisine_type, documents))

    for route in routes:
        title = route.name_he if language == "he" and route.name_he else route.name
        events.append(_event("route", "route", route, route.date, route.time,
                             title, t("driving_route", language), documents))

    # sorted() is stable, so same-minute events keep their insertion order
    return sorted(events, key=lambda e: combine_date_time(e.date, e.time))


async def load_trip_events(db: AsyncSession, trip: Trip, language: str) -> List[TimelineEvent]:
    documents = {doc.id: doc for doc in await _rows(db, Document, trip.id)}
    return build_events(
        language,
        sites=await _rows(db, TouristSite, trip.id),
        hotels=await _rows(db, Hotel, trip.id),
        transports=await _rows(db, Transportation, trip.id),
        car_rentals=await _rows(db, CarRental, trip.id),
        restaurants=await _rows(db, Restaurant, trip.id),
        routes=await _rows(db, Route, trip.id),
        documents=documents,
    )


def resolve_language(requested: Optional[str], user) -> str:
    if requested in SUPPORTED_LANGUAGES:
        return requested
    preferred = getattr(user, "preferred_language", None)
    preferred = getattr(preferred, "value", preferred)
    return preferred if preferred in SUPPORTED_LANGUAGES else "en"


async def get_timeline(db: AsyncSession, trip: Trip, language: str) -> TimelineResponse:
    events = await load_trip_events(db, trip, language)
    days = [
        TimelineDay(
            date=day,
            day_number=day_number(trip.start_date, day),
            color_index=day_color_index(trip.start_date, day),
            events=list(day_events),
        )
        for day, day_events in groupby(events, key=lambda e: e.date)
    ]
    return TimelineResponse(trip_id=trip.id, language=language, days=days)


async def get_daily_view(db: AsyncSession, trip: Trip, day: date, language: str) -> DailyViewResponse:
    events = [e for e in await load_trip_events(db, trip, language) if e.date == day]
    color_index = day_color_index(trip.start_date, day)
    return DailyViewResponse(
        trip_id=trip.id,
        date=day,
        day_number=day_number(trip.start_date, day),
        color_index=color_index,
        color=DAY_COLORS[color_index],
        language=language,
        events=events,
    )
